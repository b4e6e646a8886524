"""
Weighted keyword search over the documentation corpus.

Components:
- matcher: compiled regex keywords, line-scoped match counting
- entries: SearchEntry (weight + pattern) and its SearchResults
- keywords: keyword file loader (topic,weight,pattern rows)
- scanner: line-by-line scan of every unit, hit accumulation
- ranker: per-topic weighted scores, top-N ranking, raw unit hits

Pipeline:
    topics = load_keyword_file(path).topics
    scan(corpus, topics)
    rankings = rank_topics(topics)
"""

from .matcher import compile_pattern, count_matches
from .entries import SearchEntry, SearchResults, Topics
from .keywords import KeywordFile, KeywordRow, load_keyword_file, parse_keyword_rows
from .scanner import ScanSummary, scan
from .ranker import (
    TOP_N,
    KeywordHits,
    RankedModule,
    RankStatus,
    TopicRanking,
    rank,
    rank_topics,
    raw_hits,
    weighted_scores,
)

__all__ = [
    "compile_pattern",
    "count_matches",
    "SearchEntry",
    "SearchResults",
    "Topics",
    "KeywordFile",
    "KeywordRow",
    "load_keyword_file",
    "parse_keyword_rows",
    "ScanSummary",
    "scan",
    "TOP_N",
    "KeywordHits",
    "RankedModule",
    "RankStatus",
    "TopicRanking",
    "rank",
    "rank_topics",
    "raw_hits",
    "weighted_scores",
]
