"""
Engine error taxonomy.

- DataUnavailable: an upstream collaborator failed or returned malformed data.
- InvalidArgument: a caller passed an argument the engine cannot honor (e.g. negative limit).
"""

from typing import Optional


class EngineError(Exception):
    """Base class for recommendation engine errors."""


class DataUnavailable(EngineError):
    """An upstream read failed or produced data that could not be validated."""

    def __init__(self, source: str, entity_id: Optional[str] = None, detail: str = ""):
        self.source = source
        self.entity_id = entity_id
        self.detail = detail
        target = f"{source}({entity_id})" if entity_id else source
        message = f"Data unavailable from {target}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidArgument(EngineError, ValueError):
    """Raised immediately for arguments outside the accepted range."""
