"""
Weighted aggregation and ranking of modules per topic.

For topic T with entries K1..Kn, the weighted score of module M is:

    score(M) = Σ hits(Ki, M) × weight(Ki)

Only modules with at least one hit are scored. Modules are sorted by score
(descending), ties are broken by module path (ascending), and the top
TOP_N are kept.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from ..corpus.models import Module, Unit
from .entries import SearchEntry, Topics

logger = logging.getLogger(__name__)

TOP_N = 3


class RankStatus(str, Enum):
    """Outcome of ranking one topic"""
    HITS = "hits"
    NO_HITS = "no_hits"


@dataclass(frozen=True)
class RankedModule:
    """A module and its weighted score for one topic"""
    module: Module
    score: float


@dataclass
class TopicRanking:
    """Top modules of a topic, or an explicit no-hits outcome"""
    topic: str
    status: RankStatus
    ranked: List[RankedModule] = field(default_factory=list)

    @property
    def has_hits(self) -> bool:
        return self.status is RankStatus.HITS

    @property
    def modules(self) -> List[Module]:
        return [r.module for r in self.ranked]


@dataclass
class KeywordHits:
    """Per-unit hits of one keyword within the ranked modules"""
    entry: SearchEntry
    units: List[Tuple[Unit, int]] = field(default_factory=list)


def weighted_scores(entries: Sequence[SearchEntry]) -> Dict[Module, float]:
    """Sum of hits × weight per module, over all entries of a topic"""
    scores: Dict[Module, float] = {}
    for entry in entries:
        for module, hits in entry.results.module_hits.items():
            scores[module] = scores.get(module, 0.0) + hits * entry.weight
    return scores


def rank(topic: str, entries: Sequence[SearchEntry]) -> TopicRanking:
    """
    Rank the modules of one topic.

    Returns:
        TopicRanking with status NO_HITS if no module has a hit, otherwise
        up to TOP_N RankedModule items, best first
    """
    scores = weighted_scores(entries)
    if not scores:
        logger.debug(f"Topic '{topic}': no hits")
        return TopicRanking(topic=topic, status=RankStatus.NO_HITS)

    ordered = sorted(scores.items(), key=lambda item: (-item[1], str(item[0].path)))
    ranked = [RankedModule(module=m, score=s) for m, s in ordered[:TOP_N]]

    logger.debug(f"Topic '{topic}': {len(scores)} modules scored, top score {ranked[0].score}")
    return TopicRanking(topic=topic, status=RankStatus.HITS, ranked=ranked)


def rank_topics(topics: Topics, topic_filter: Optional[str] = None) -> Dict[str, TopicRanking]:
    """Rank every topic passing the filter; other topics are absent"""
    return {
        topic: rank(topic, entries)
        for topic, entries in topics.items()
        if topic_filter is None or topic == topic_filter
    }


def raw_hits(ranking: TopicRanking, entries: Sequence[SearchEntry]) -> List[KeywordHits]:
    """
    Unit-level hit counts behind a ranking.

    For each entry (topic order) and each ranked module (rank order), the
    units of that module that the entry hit, in scan order.
    """
    details: List[KeywordHits] = []
    for entry in entries:
        keyword = KeywordHits(entry=entry)
        for module in ranking.modules:
            keyword.units.extend(
                (unit, hits)
                for unit, hits in entry.results.unit_hits.items()
                if module.owns(unit)
            )
        details.append(keyword)
    return details
