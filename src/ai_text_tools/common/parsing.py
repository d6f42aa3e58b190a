"""Parse model replies that are expected to be JSON arrays of strings."""
from __future__ import annotations
import json
from dataclasses import dataclass

@dataclass(frozen=True)
class Parsed:
    """The reply was a JSON array of strings."""
    values: list[str]

    @property
    def items(self) -> list[str]:
        return list(self.values)

@dataclass(frozen=True)
class Fallback:
    """The reply could not be read as a string array; keep it verbatim."""
    raw: str

    @property
    def items(self) -> list[str]:
        return [self.raw]

ListOutcome = Parsed | Fallback

def parse_string_list(raw: str) -> ListOutcome:
    """
    Interpret a model reply as a list of strings.

    Models do not always honour "return ONLY a JSON array", so anything other
    than a JSON array whose elements are all strings yields a Fallback
    carrying the untouched reply.

    Args:
        raw: Reply text from the model.
    """
    try:
        value = json.loads(raw)
    except (ValueError, RecursionError):
        return Fallback(raw)
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return Parsed(value)
    return Fallback(raw)
