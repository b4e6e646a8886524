"""Search entries and their accumulated results"""

import re
from typing import Dict, List

from ..corpus.models import Module, Unit


class SearchResults:
    """
    Hit counts for one search entry.

    Invariant: module_hits[M] equals the sum of unit_hits[U] over the units
    of M recorded here. Counts only grow during a scan.
    """

    def __init__(self):
        self.module_hits: Dict[Module, int] = {}
        self.unit_hits: Dict[Unit, int] = {}

    def add(self, module: Module, unit: Unit, count: int):
        """Record count hits for unit (and its module)"""
        self.unit_hits[unit] = self.unit_hits.get(unit, 0) + count
        self.module_hits[module] = self.module_hits.get(module, 0) + count

    def __bool__(self) -> bool:
        return bool(self.module_hits)


class SearchEntry:
    """One weighted keyword of a topic"""

    def __init__(self, topic: str, weight: float, pattern: re.Pattern, row: int = 0):
        self.topic = topic
        self._weight = weight
        self._pattern = pattern
        self.row = row  # 1-based row in the keyword file
        self.results = SearchResults()

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def pattern(self) -> re.Pattern:
        return self._pattern

    @property
    def source(self) -> str:
        """Pattern text as written in the keyword file"""
        return self._pattern.pattern

    def __repr__(self) -> str:
        return f"SearchEntry(topic={self.topic!r}, weight={self._weight}, pattern={self.source!r})"


# Topic name -> entries, in order of first appearance
Topics = Dict[str, List[SearchEntry]]
