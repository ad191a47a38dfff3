from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from .records import ConfigurationRecord

_RECORDS_ADAPTER = TypeAdapter(List[ConfigurationRecord])


@dataclass(frozen=True)
class ParseResult:
    records: List[ConfigurationRecord] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_records(text: str) -> ParseResult:
    """
    Parse the JSON array held in SAUCE_ONDEMAND_BROWSERS.

    Malformed JSON and a wrong shape (not an array of objects) are reported
    through ParseResult.error rather than raised.
    """
    try:
        records = _RECORDS_ADAPTER.validate_json(text)
    except ValidationError as exc:
        return ParseResult(error=f"Invalid browser list: {exc}")
    return ParseResult(records=records)
