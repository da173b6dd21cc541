"""
Interfaces (Protocols) für die Agenda.
"""

from datetime import date
from typing import Protocol, List, runtime_checkable

from .entities import Appointment, TimeBlock, DayAgenda


@runtime_checkable
class ITimeBlockRepository(Protocol):
    """Sperrzeiten des Salons."""

    def get_time_blocks(self, professional_id: str = None) -> List[TimeBlock]: ...


@runtime_checkable
class IAppointmentRepository(Protocol):
    """Termine eines Kalendertags (Ortszeit des Salons)."""

    def get_appointments_for_day(self, day: date) -> List[Appointment]: ...


@runtime_checkable
class IAgendaView(Protocol):
    """Interface für Tages- und Monatsansicht."""

    def show_agenda(self, agenda: DayAgenda, lines: List[tuple]) -> None: ...
    def show_slots(self, professional_id: str, day: date, slots: List[str]) -> None: ...
    def show_month(self, title: str, weeks: List[List[date]], anchor: date) -> None: ...
    def show_error(self, message: str) -> None: ...
