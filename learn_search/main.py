"""
learn-search - recommend documentation modules for topics of interest.

Reads weighted keywords grouped into topics, scans every unit of every
module under the corpus root, and prints the top modules per topic.

Usage:
    learn-search -f keywords.csv
    learn-search -f keywords.csv -t functions -v
    python -m learn_search -f keywords.csv

The corpus root and other settings come from the environment (see
learn_search.config).
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_env_files, load_settings
from .corpus.builder import load_corpus
from .errors import FatalInputError
from .logging_config import setup_logging
from .report import render_report
from .search.keywords import load_keyword_file
from .search.ranker import rank_topics
from .search.scanner import scan

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="learn-search",
        description="Rank documentation modules by weighted keyword relevance per topic",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print unit-level search results.",
    )
    parser.add_argument(
        "-f", "--file",
        required=True,
        help="The .csv file to process.",
    )
    parser.add_argument(
        "-t", "--topic",
        default=None,
        help="Process only this topic.",
    )
    return parser


def run(keyword_file: str, topic_filter: Optional[str] = None, verbose: bool = False) -> int:
    """
    Execute one search run and print the report.

    Raises:
        FatalInputError: Keyword file or corpus root unusable, bad settings
    """
    settings = load_settings()
    setup_logging(log_file=settings.log_file, console_level=settings.console_level)

    keywords = load_keyword_file(keyword_file)
    corpus = load_corpus(settings.repo_root, settings.unit_extension)

    summary = scan(corpus, keywords.topics, topic_filter=topic_filter, workers=settings.workers)
    rankings = rank_topics(keywords.topics, topic_filter=topic_filter)

    render_report(rankings, keywords.topics, verbose=verbose, base_url=settings.base_url)

    logger.info(
        f"Run complete: {len(rankings)} topics, {summary.units_scanned} units, "
        f"{len(keywords.errors)} rejected rows, {len(summary.skipped)} skipped units"
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    load_env_files()

    try:
        return run(args.file, topic_filter=args.topic, verbose=args.verbose)
    except FatalInputError as e:
        if not logging.getLogger().handlers:
            setup_logging()
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
