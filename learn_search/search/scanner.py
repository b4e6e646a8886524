"""
Scan engine - walks every unit line by line and counts keyword hits.

For every module, every unit (stored order), every line, every topic that
passes the filter, and every entry of that topic, matches are counted and
added to the entry's results for both the unit and its module.

Each unit is read once. Its counts are collected locally and committed to
the entries only after the whole file was read, so an unreadable unit adds
nothing and the scan moves on. With workers > 1 units are read in a thread
pool; commits still happen on the calling thread in corpus order, giving
exactly the same results as the sequential scan.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..corpus.models import Module, Unit
from ..errors import UnreadableUnitError
from .entries import SearchEntry, Topics
from .matcher import count_matches

logger = logging.getLogger(__name__)

# Per-unit partial result: entry position in the active list -> hit count
UnitCounts = Dict[int, int]


@dataclass
class ScanSummary:
    """Completion report of a scan"""
    units_scanned: int = 0
    topics_scanned: List[str] = field(default_factory=list)
    skipped: List[UnreadableUnitError] = field(default_factory=list)


def active_entries(topics: Topics, topic_filter: Optional[str] = None) -> List[SearchEntry]:
    """Entries of all topics passing the filter, in topic order"""
    entries: List[SearchEntry] = []
    for topic, topic_entries in topics.items():
        if topic_filter is not None and topic != topic_filter:
            continue
        entries.extend(topic_entries)
    return entries


def scan_unit(unit: Unit, entries: Sequence[SearchEntry]) -> UnitCounts:
    """
    Count hits of every entry in one unit file.

    Raises:
        UnreadableUnitError: If the file is missing, unreadable or not UTF-8
    """
    counts: UnitCounts = {}
    try:
        with open(unit.path, "r", encoding="utf-8-sig") as f:
            for raw in f:
                line = raw.rstrip("\n")
                for index, entry in enumerate(entries):
                    hits = count_matches(entry.pattern, line)
                    if hits > 0:
                        counts[index] = counts.get(index, 0) + hits
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableUnitError(unit.path, str(e)) from e
    return counts


def _commit(module: Module, unit: Unit, entries: Sequence[SearchEntry], counts: UnitCounts):
    for index, hits in counts.items():
        entries[index].results.add(module, unit, hits)


def _read_unit(unit: Unit, entries: Sequence[SearchEntry]) -> Tuple[Optional[UnitCounts], Optional[UnreadableUnitError]]:
    try:
        return scan_unit(unit, entries), None
    except UnreadableUnitError as e:
        return None, e


def scan(
    corpus: Sequence[Module],
    topics: Topics,
    topic_filter: Optional[str] = None,
    workers: int = 1,
) -> ScanSummary:
    """
    Scan the corpus and accumulate hits into each entry's results.

    Args:
        corpus: Modules to scan (units are scanned in stored order)
        topics: Topic name -> search entries
        topic_filter: If set, only this topic is scanned
        workers: Number of threads reading units (1 = sequential)

    Returns:
        ScanSummary with scanned/skipped unit counts
    """
    entries = active_entries(topics, topic_filter)
    summary = ScanSummary(
        topics_scanned=[t for t in topics if topic_filter is None or t == topic_filter]
    )

    if topic_filter is not None and topic_filter not in topics:
        logger.warning(f"Topic filter '{topic_filter}' matches no topic in the keyword file")

    work = [(module, unit) for module in corpus for unit in module.units]
    logger.info(f"Scanning {len(work)} units with {len(entries)} keywords ({workers} worker(s))")

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(lambda item: _read_unit(item[1], entries), work))
    else:
        outcomes = (_read_unit(unit, entries) for _, unit in work)

    for (module, unit), (counts, error) in zip(work, outcomes):
        if error is not None:
            logger.warning(f"Skipping unit: {error}")
            summary.skipped.append(error)
            continue
        _commit(module, unit, entries, counts)
        summary.units_scanned += 1

    logger.info(f"Scan complete: {summary.units_scanned} units scanned, {len(summary.skipped)} skipped")
    return summary
