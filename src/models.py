"""Data models for tododin.

Exposes the Task dataclass. Persisted field names are kept exactly as
they appear in existing ~/.tododin files (text, creation_date, done,
is_counter, count) so old saves keep loading.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict
from datetime import date
from typing import Any, Dict, Mapping, Optional
import logging

DATE_FORMAT = '%y-%m-%d'

logger = logging.getLogger(__name__)


def _typed(raw: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    """Return raw[key] if it has exactly type ``kind``, else ``default``."""
    if key not in raw:
        return default
    value = raw[key]
    # exact type: bool is an int subclass
    if type(value) is not kind:
        logger.warning("task %r: ignoring %s=%r (expected %s)", raw.get('text'), key, value, kind.__name__)
        return default
    return value


def today_stamp(day: Optional[date] = None) -> str:
    """Return the creation stamp (YY-MM-DD) for ``day`` (default: today)."""
    return (day or date.today()).strftime(DATE_FORMAT)


@dataclass
class Task:
    """A single to-do item.

    Fields:
        text: Non-empty, unique title (exact, case-sensitive match).
        creation_date: YY-MM-DD stamp set once at creation.
        done: Completion flag, toggled by the ``done`` command.
        is_counter: Counter tasks carry a tally; fixed at creation.
        count: The tally; only meaningful when is_counter is true.
    """
    text: str
    creation_date: str
    done: bool = False
    is_counter: bool = False
    count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Task:
        return cls(
            text=str(raw['text']),
            creation_date=_typed(raw, 'creation_date', str, ''),
            done=_typed(raw, 'done', bool, False),
            is_counter=_typed(raw, 'is_counter', bool, False),
            count=_typed(raw, 'count', int, 0),
        )

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(text={self.text!r}, done={self.done}, count={self.count})"
