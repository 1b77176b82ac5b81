"""Logbook domain models."""

from __future__ import annotations

from dataclasses import dataclass

from fieldday.db import models as orm

# Offered in mode selectors; the store accepts any text.
MODES: tuple[str, ...] = ("CW", "SSB", "FM", "Digital")


@dataclass(slots=True, frozen=True)
class LogEntry:
    id: int
    callsign: str
    time: str
    frequency: str
    mode: str
    notes: str

    @classmethod
    def from_orm(cls, instance: orm.LogEntry) -> "LogEntry":
        return cls(
            id=int(instance.id),
            callsign=instance.callsign or "",
            time=instance.time or "",
            frequency=instance.frequency or "",
            mode=instance.mode or "",
            notes=instance.notes or "",
        )


@dataclass(slots=True)
class LogEntryInput:
    """The five editable fields of an entry, as submitted by the client."""

    callsign: str = ""
    time: str = ""
    frequency: str = ""
    mode: str = ""
    notes: str = ""
