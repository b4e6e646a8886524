"""
Console report of ranked modules per topic.

    functions
      Option 1:
        title: Create serverless logic with Azure Functions
        score: 12.5
        url:   https://docs.microsoft.com/learn/modules/create-serverless-logic-with-azure-functions/
        path:  /repo/learn-pr/azure/create-serverless-logic-with-azure-functions

With verbose output the unit-level hits of each keyword follow:

      Raw hits:
        Keyword 'Azure Functions' (weight=1):
          https://.../create-serverless-logic-with-azure-functions/2-decide/ (4 occurrences)
"""

import sys
from typing import Dict, Optional, TextIO

from .corpus.models import DEFAULT_BASE_URL
from .search.entries import Topics
from .search.ranker import TopicRanking, raw_hits


def indent(level: int) -> str:
    """Two spaces per level"""
    return "  " * level


def format_number(value: float) -> str:
    """Integral values without a decimal point, others rounded to 6 places"""
    if float(value).is_integer():
        return str(int(value))
    return str(round(value, 6))


def render_topic(
    ranking: TopicRanking,
    topics: Topics,
    verbose: bool = False,
    base_url: str = DEFAULT_BASE_URL,
    stream: Optional[TextIO] = None,
):
    """Write the report block of one topic"""
    stream = stream or sys.stdout
    print(ranking.topic, file=stream)

    if not ranking.has_hits:
        print(f"{indent(1)}No hits", file=stream)
        print(file=stream)
        return

    for position, item in enumerate(ranking.ranked, start=1):
        module = item.module
        print(f"{indent(1)}Option {position}:", file=stream)
        print(f"{indent(2)}title: {module.get_title()}", file=stream)
        print(f"{indent(2)}score: {format_number(item.score)}", file=stream)
        print(f"{indent(2)}url:   {module.canonical_url(base_url)}", file=stream)
        print(f"{indent(2)}path:  {module.path}", file=stream)

    if verbose:
        print(file=stream)
        print(f"{indent(1)}Raw hits:", file=stream)
        for keyword in raw_hits(ranking, topics.get(ranking.topic, [])):
            entry = keyword.entry
            print(f"{indent(2)}Keyword '{entry.source}' (weight={format_number(entry.weight)}):", file=stream)
            for unit, hits in keyword.units:
                print(f"{indent(3)}{unit.canonical_url(base_url)} ({hits} occurrences)", file=stream)

    print(file=stream)


def render_report(
    rankings: Dict[str, TopicRanking],
    topics: Topics,
    verbose: bool = False,
    base_url: str = DEFAULT_BASE_URL,
    stream: Optional[TextIO] = None,
):
    """Write the report of every ranked topic, in topic order"""
    stream = stream or sys.stdout
    for ranking in rankings.values():
        render_topic(ranking, topics, verbose=verbose, base_url=base_url, stream=stream)
