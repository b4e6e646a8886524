"""
Error taxonomy for learn-search.

Recovered locally (logged, processing continues):
- MalformedEntryError: bad weight or pattern in a keyword row
- InvalidPatternError: keyword pattern is not a valid regular expression
- UnreadableUnitError: unit file missing/unreadable at scan time
- MissingModuleMetadataError: module descriptor unreadable when reading the title

Fatal (propagates to the CLI, no report is produced):
- FatalInputError: keyword file or corpus root missing, invalid settings
"""

from pathlib import Path
from typing import Union


class LearnSearchError(Exception):
    """Base class for all learn-search errors"""


class MalformedEntryError(LearnSearchError):
    """Keyword row could not be turned into a search entry"""

    def __init__(self, topic: str, row: int, reason: str):
        self.topic = topic
        self.row = row
        self.reason = reason
        if row:
            message = f"Error processing topic '{topic}', line {row}: {reason}"
        else:
            # Raised outside the keyword file (e.g. compile_pattern on its own)
            message = reason[:1].upper() + reason[1:]
        super().__init__(message)


class InvalidPatternError(MalformedEntryError):
    """Keyword pattern failed to compile"""

    def __init__(self, source: str, reason: str, topic: str = "", row: int = 0):
        self.source = source
        self.detail = reason
        super().__init__(topic, row, f"invalid pattern '{source}' ({reason})")


class UnreadableUnitError(LearnSearchError):
    """Unit file could not be read during the scan"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read unit '{path}': {reason}")


class MissingModuleMetadataError(LearnSearchError):
    """Module descriptor could not be read"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read module metadata '{path}': {reason}")


class FatalInputError(LearnSearchError):
    """Unrecoverable input problem; the run is aborted"""
