"""
Keyword file loader.

Format: one entry per row, `topicName,weight,patternSource`

    functions,1.0,Azure Functions
    functions,2.5,\\bserverless\\b
    containers,1,Kubernetes|AKS

Rows are split on the first two commas only, so the pattern keeps any
further commas. Malformed rows are dropped with a warning naming the topic
and the 1-based row number; loading continues with the next row.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Union

from pydantic import BaseModel, Field, ValidationError

from ..errors import FatalInputError, InvalidPatternError, MalformedEntryError
from .entries import SearchEntry, Topics
from .matcher import compile_pattern

logger = logging.getLogger(__name__)


class KeywordRow(BaseModel):
    """One validated row of the keyword file"""
    topic: str
    weight: float = Field(..., ge=0, allow_inf_nan=False, description="Relevance multiplier")
    pattern: str


@dataclass
class KeywordFile:
    """Loaded topics plus the rows that were rejected"""
    topics: Topics = field(default_factory=dict)
    errors: List[MalformedEntryError] = field(default_factory=list)

    @property
    def entry_count(self) -> int:
        return sum(len(entries) for entries in self.topics.values())


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg', 'invalid value')}"


def parse_entry(line: str, row: int) -> SearchEntry:
    """
    Turn one keyword row into a SearchEntry.

    Raises:
        MalformedEntryError: Missing field or invalid weight
        InvalidPatternError: Pattern does not compile
    """
    values = line.split(",", 2)
    topic = values[0]
    if len(values) < 3:
        raise MalformedEntryError(topic, row, "expected 'topic,weight,pattern'")

    try:
        parsed = KeywordRow(topic=topic, weight=values[1].strip(), pattern=values[2])
    except ValidationError as e:
        raise MalformedEntryError(topic, row, _describe(e)) from e

    try:
        pattern = compile_pattern(parsed.pattern)
    except InvalidPatternError as e:
        raise InvalidPatternError(e.source, e.detail, topic=topic, row=row) from e

    return SearchEntry(topic=parsed.topic, weight=parsed.weight, pattern=pattern, row=row)


def parse_keyword_rows(lines: Iterable[str]) -> KeywordFile:
    """
    Parse keyword rows into topics.

    A topic is registered by the first row that names it, even when that row
    is rejected, so the topic is still reported (with no hits).
    """
    result = KeywordFile()

    for row, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        topic = line.split(",", 1)[0]
        entries = result.topics.setdefault(topic, [])

        try:
            entries.append(parse_entry(line, row))
        except MalformedEntryError as e:
            logger.warning(str(e))
            result.errors.append(e)

    logger.info(
        f"Loaded {result.entry_count} keywords in {len(result.topics)} topics "
        f"({len(result.errors)} rows rejected)"
    )
    return result


def load_keyword_file(path: Union[str, Path]) -> KeywordFile:
    """
    Load topics from a keyword file.

    Raises:
        FatalInputError: If the file is missing or unreadable
    """
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise FatalInputError(f"Cannot read keyword file '{path}': {e}") from e

    return parse_keyword_rows(lines)
