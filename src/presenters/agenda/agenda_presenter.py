"""
Presenter: Agenda (Tagesansicht und freie Zeiten).
"""

import logging
from datetime import date
from typing import List, Optional, Tuple

from domain.agenda.entities import DayAgenda, TimeBlock, Daily, Weekly
from domain.agenda.interfaces import IAgendaView
from domain.agenda.layout import FILTER_ALL
from domain.agenda.slots import month_grid
from i18n import pt_br as texts
from infrastructure.api.salon_repository import SalonRepository
from usecases.agenda.find_available_slots import FindAvailableSlots
from usecases.agenda.load_day_agenda import LoadDayAgenda
from utils.date_utils import format_date_br, format_month_title

logger = logging.getLogger(__name__)


def describe_recurrence(block: TimeBlock) -> str:
    """
    Kurzbeschreibung einer Sperrzeit.

    'Diário', 'Semanal (Seg, Qua)' (+ 'até dd/mm/aaaa') oder bei einmaligen
    Sperrzeiten der Zeitraum 'dd/mm/aaaa HH:MM - dd/mm/aaaa HH:MM'.
    """
    recurrence = block.recurrence
    if isinstance(recurrence, Daily):
        text = texts.RECURRENCE_DAILY
    elif isinstance(recurrence, Weekly):
        if recurrence.days:
            days = ', '.join(texts.WEEKDAY_SHORT[d] for d in sorted(recurrence.days) if 0 <= d <= 6)
            text = texts.RECURRENCE_WEEKLY_DAYS.format(days=days)
        else:
            text = texts.RECURRENCE_WEEKLY
    else:
        if block.start_at is None or block.end_at is None:
            return texts.EMPTY_VALUE
        start = block.start_at.strftime('%d/%m/%Y %H:%M')
        if block.start_at.date() == block.end_at.date():
            return f"{start} - {block.end_at.strftime('%H:%M')}"
        return f"{start} - {block.end_at.strftime('%d/%m/%Y %H:%M')}"

    if block.recurrence_end_date is not None:
        text = f"{text} {texts.RECURRENCE_UNTIL.format(datum=format_date_br(block.recurrence_end_date))}"
    return text


def month_weeks(anchor: date) -> List[List[date]]:
    """Monatsraster in Wochenzeilen zu je 7 Tagen."""
    days = month_grid(anchor)
    return [days[i:i + 7] for i in range(0, len(days), 7)]


def agenda_lines(agenda: DayAgenda) -> List[Tuple[str, str, str]]:
    """(Zeit, Titel, Detail) je Rechteck, nach Beginn sortiert."""
    rows = []
    for pos in agenda.blocks:
        rows.append((pos.start_minutes, (
            pos.time_label,
            f"{texts.AGENDA_BLOCK_PREFIX}: {pos.block.title}",
            describe_recurrence(pos.block),
        )))
    for pos in agenda.appointments:
        apt = pos.appointment
        rows.append((pos.start_minutes, (
            pos.time_label,
            apt.client_name or texts.AGENDA_CLIENT_FALLBACK,
            texts.APPOINTMENT_STATUS_LABELS.get(apt.status, apt.status),
        )))
    rows.sort(key=lambda r: r[0])
    return [line for _, line in rows]


class AgendaPresenter:

    def __init__(self, repository: SalonRepository):
        self._view: Optional[IAgendaView] = None
        self._load_day = LoadDayAgenda(repository, repository)
        self._find_slots = FindAvailableSlots(repository)

    def set_view(self, view: IAgendaView) -> None:
        self._view = view

    def load_day(self, day: date, professional_filter: str = FILTER_ALL) -> DayAgenda:
        agenda = self._load_day.execute(day, professional_filter)
        logger.debug(
            f"Agenda {day.isoformat()}: {len(agenda.blocks)} Sperrzeiten, "
            f"{len(agenda.appointments)} Termine"
        )
        if self._view:
            self._view.show_agenda(agenda, agenda_lines(agenda))
        return agenda

    def load_slots(self, professional_id: str, day: date) -> List[str]:
        slots = self._find_slots.execute(professional_id, day)
        if self._view:
            self._view.show_slots(professional_id, day, slots)
        return slots

    def load_month(self, anchor: date) -> List[List[date]]:
        weeks = month_weeks(anchor)
        if self._view:
            self._view.show_month(format_month_title(anchor), weeks, anchor)
        return weeks
