"""
Domain-Entitäten für die Agenda (Termine und Sperrzeiten).

Reine Datenklassen ohne externe Abhängigkeiten.
Wiederholung einer Sperrzeit als eigener Variantentyp statt
recurrence_type + recurrence_days, damit z.B. 'weekly' ohne Tage
nicht aus Versehen als 'daily' behandelt wird.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from typing import ClassVar, FrozenSet, Iterable, List, Optional, Dict

from utils.date_utils import parse_timestamp, parse_date, format_hhmm

logger = logging.getLogger(__name__)

STATUS_CONFIRMED = 'confirmed'
STATUS_COMPLETED = 'completed'
STATUS_CANCELLED = 'cancelled'


# ═══════════════════════════════════════════════════════════
# Wiederholung
# ═══════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Recurrence:
    """Basis: keine Wiederholung (einmalige Sperrzeit)."""
    kind: ClassVar[Optional[str]] = None

    @property
    def is_recurring(self) -> bool:
        return self.kind is not None

    def applies_on_weekday(self, weekday: int) -> bool:
        return False


@dataclass(frozen=True)
class OneOff(Recurrence):
    kind: ClassVar[Optional[str]] = None


@dataclass(frozen=True)
class Daily(Recurrence):
    kind: ClassVar[Optional[str]] = 'daily'

    def applies_on_weekday(self, weekday: int) -> bool:
        return True


@dataclass(frozen=True)
class Weekly(Recurrence):
    """Woechentlich an den Tagen 0-6 (Sonntag=0). Leere Menge gilt nie."""
    kind: ClassVar[Optional[str]] = 'weekly'
    days: FrozenSet[int] = frozenset()

    def applies_on_weekday(self, weekday: int) -> bool:
        return weekday in self.days


def parse_recurrence(is_recurring: bool, recurrence_type: Optional[str],
                     recurrence_days: Optional[Iterable[int]]) -> Recurrence:
    """Tabellenfelder in den Variantentyp uebersetzen.

    Unbekannte Typen (z.B. 'monthly') greifen nie, wie bisher im Frontend.
    """
    if not is_recurring:
        return OneOff()
    if recurrence_type == 'daily':
        return Daily()
    if recurrence_type == 'weekly':
        return Weekly(frozenset(int(d) for d in (recurrence_days or [])))
    logger.warning(f"Unbekannter Wiederholungstyp ignoriert: {recurrence_type!r}")
    return Weekly(frozenset())


# ═══════════════════════════════════════════════════════════
# Sperrzeiten und Termine
# ═══════════════════════════════════════════════════════════


@dataclass
class TimeBlock:
    """Sperrzeit eines Profissional (Pause, Urlaub, Fortbildung)."""
    id: str = ''
    professional_id: str = ''
    title: str = ''
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    recurrence: Recurrence = field(default_factory=OneOff)
    recurrence_end_date: Optional[date] = None
    notes: Optional[str] = None

    @property
    def is_recurring(self) -> bool:
        return self.recurrence.is_recurring

    @property
    def recurrence_type(self) -> Optional[str]:
        return self.recurrence.kind

    @property
    def recurrence_days(self) -> Optional[List[int]]:
        if isinstance(self.recurrence, Weekly):
            return sorted(self.recurrence.days)
        return None

    @classmethod
    def from_dict(cls, d: Dict, tz: Optional[tzinfo] = None) -> 'TimeBlock':
        return cls(
            id=d.get('id', '') or '',
            professional_id=d.get('professional_id', '') or '',
            title=d.get('title', '') or '',
            start_at=parse_timestamp(d.get('start_at'), tz),
            end_at=parse_timestamp(d.get('end_at'), tz),
            recurrence=parse_recurrence(
                bool(d.get('is_recurring')),
                d.get('recurrence_type'),
                d.get('recurrence_days'),
            ),
            recurrence_end_date=parse_date(d.get('recurrence_end_date')),
            notes=d.get('notes'),
        )


@dataclass
class Appointment:
    """Termin aus Agenda-Sicht (nur Zeitraum, Status, Anzeigenamen)."""
    id: str = ''
    professional_id: str = ''
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    status: str = STATUS_CONFIRMED
    client_name: Optional[str] = None
    professional_name: Optional[str] = None

    @property
    def is_cancelled(self) -> bool:
        return self.status == STATUS_CANCELLED

    @classmethod
    def from_dict(cls, d: Dict, tz: Optional[tzinfo] = None) -> 'Appointment':
        client = d.get('client') or {}
        prof = d.get('professional') or {}
        return cls(
            id=d.get('id', '') or '',
            professional_id=d.get('professional_id', '') or '',
            start_at=parse_timestamp(d.get('start_at'), tz),
            end_at=parse_timestamp(d.get('end_at'), tz),
            status=d.get('status', STATUS_CONFIRMED),
            client_name=client.get('full_name'),
            professional_name=prof.get('display_name'),
        )


# ═══════════════════════════════════════════════════════════
# Layout-Ergebnisse
# ═══════════════════════════════════════════════════════════


@dataclass
class BlockPosition:
    """Sperrzeit als Rechteck in der Tagesansicht (Pixel ab 08:00)."""
    block: TimeBlock
    top: float = 0.0
    height: float = 0.0
    start_minutes: int = 0
    end_minutes: int = 0

    @property
    def time_label(self) -> str:
        return f"{format_hhmm(self.start_minutes)} - {format_hhmm(self.end_minutes)}"


@dataclass
class AppointmentPosition:
    """Termin als Rechteck in der Tagesansicht (Pixel ab 08:00)."""
    appointment: Appointment
    top: float = 0.0
    height: float = 0.0
    start_minutes: int = 0
    end_minutes: int = 0

    @property
    def time_label(self) -> str:
        return f"{format_hhmm(self.start_minutes)} - {format_hhmm(self.end_minutes)}"


@dataclass
class DayAgenda:
    """Alles, was die Tagesansicht fuer einen Tag braucht."""
    day: date
    professional_filter: str = 'all'
    blocks: List[BlockPosition] = field(default_factory=list)
    appointments: List[AppointmentPosition] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.blocks and not self.appointments
