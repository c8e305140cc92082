"""Shared base model and timestamp helpers for the data classes."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops the offset on read)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def next_timestamp(previous: Optional[datetime] = None) -> datetime:
    """Return a write timestamp strictly later than ``previous``.

    Args:
        previous: Timestamp of the last write to the same record, if any

    Returns:
        The current UTC time, bumped by one microsecond on a clock tie
    """
    now = utc_now()
    if previous is not None:
        previous = ensure_utc(previous)
        if now <= previous:
            now = previous + timedelta(microseconds=1)
    return now


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys for the web client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> Dict[str, Any]:
        """Convert the model to a JSON-serialisable dictionary.

        Returns:
            Dictionary with camelCase keys and ISO-formatted timestamps
        """
        return self.model_dump(mode="json", by_alias=True)
