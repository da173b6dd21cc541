"""
Tagesansicht: Position von Sperrzeiten und Terminen auf der Zeitleiste.

Reine Geschäftsregeln:
  Sichtbares Fenster 08:00-20:00, 64 px pro Stunde
  top    = Minuten ab 08:00 * 64/60
  height = max(Dauer * 64/60, Mindesthoehe)  (Sperrzeit 24 px, Termin 32 px)

Ueberlappende Eintraege werden nicht in Spalten verteilt, sondern in
Eingabereihenfolge uebereinander gezeichnet.
"""

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Tuple

from config.agenda import (
    DAY_START_MINUTES, DAY_END_MINUTES, HOUR_HEIGHT_PX,
    MIN_BLOCK_HEIGHT_PX, MIN_APPOINTMENT_HEIGHT_PX,
)
from utils.date_utils import minutes_of_day, sunday_based_weekday

from .entities import (
    TimeBlock, Appointment, BlockPosition, AppointmentPosition,
)

logger = logging.getLogger(__name__)

FILTER_ALL = 'all'


def _matches_professional(professional_id: str, professional_filter: Optional[str]) -> bool:
    if not professional_filter or professional_filter == FILTER_ALL:
        return True
    return professional_id == professional_filter


def block_applies_on(block: TimeBlock, day: date) -> bool:
    """Gilt die Sperrzeit an diesem Kalendertag?"""
    if block.start_at is None or block.end_at is None:
        return False
    if block.is_recurring:
        if block.recurrence_end_date is not None and day > block.recurrence_end_date:
            return False
        return block.recurrence.applies_on_weekday(sunday_based_weekday(day))
    return block.start_at.date() <= day <= block.end_at.date()


def block_minutes_on(block: TimeBlock, day: date) -> Tuple[int, int]:
    """Beginn/Ende in Minuten seit Mitternacht, bevor auf das Fenster geschnitten wird.

    Wiederkehrend: nur die Uhrzeit der gespeicherten Zeitstempel zaehlt.
    Mehrtaegig: echter Beginn nur am ersten, echtes Ende nur am letzten Tag,
    dazwischen volles Fenster.
    """
    if block.is_recurring:
        return minutes_of_day(block.start_at), minutes_of_day(block.end_at)

    if day == block.start_at.date():
        start = minutes_of_day(block.start_at)
    else:
        start = DAY_START_MINUTES
    if day == block.end_at.date():
        end = minutes_of_day(block.end_at)
    else:
        end = DAY_END_MINUTES
    return start, end


def clip_to_window(start: int, end: int) -> Optional[Tuple[int, int]]:
    """Auf 08:00-20:00 schneiden; None wenn komplett ausserhalb."""
    if end <= DAY_START_MINUTES or start >= DAY_END_MINUTES:
        return None
    return max(start, DAY_START_MINUTES), min(end, DAY_END_MINUTES)


def to_pixels(start: int, end: int, min_height: float) -> Tuple[float, float]:
    top = (start - DAY_START_MINUTES) * HOUR_HEIGHT_PX / 60
    height = max((end - start) * HOUR_HEIGHT_PX / 60, min_height)
    return top, height


def layout_blocks_for_day(
    blocks: Iterable[TimeBlock],
    day: date,
    professional_filter: str = FILTER_ALL,
) -> List[BlockPosition]:
    """
    Sperrzeiten eines Tages als Rechtecke.

    Args:
        blocks: Alle geladenen Sperrzeiten (beliebige Tage).
        day: Angezeigter Kalendertag.
        professional_filter: ID eines Profissional oder 'all'.

    Returns:
        BlockPosition je sichtbarer Sperrzeit, in Eingabereihenfolge.
    """
    positions: List[BlockPosition] = []
    for block in blocks:
        if not _matches_professional(block.professional_id, professional_filter):
            continue
        if not block_applies_on(block, day):
            continue
        clipped = clip_to_window(*block_minutes_on(block, day))
        if clipped is None:
            continue
        start, end = clipped
        top, height = to_pixels(start, end, MIN_BLOCK_HEIGHT_PX)
        positions.append(BlockPosition(
            block=block, top=top, height=height,
            start_minutes=start, end_minutes=end,
        ))
    logger.debug(f"Tagesansicht {day.isoformat()}: {len(positions)} Sperrzeiten sichtbar")
    return positions


def _appointment_minutes(start_at: datetime, end_at: datetime) -> Tuple[int, int]:
    """Ende relativ zum Starttag, damit Termine ueber Mitternacht nicht kippen."""
    start = minutes_of_day(start_at)
    end = minutes_of_day(end_at) + (end_at.date() - start_at.date()).days * 24 * 60
    return start, end


def position_appointment(apt: Appointment) -> Optional[AppointmentPosition]:
    """Rechteck eines Termins; None wenn ausserhalb 08:00-20:00."""
    if apt.start_at is None or apt.end_at is None:
        return None
    clipped = clip_to_window(*_appointment_minutes(apt.start_at, apt.end_at))
    if clipped is None:
        return None
    start, end = clipped
    top, height = to_pixels(start, end, MIN_APPOINTMENT_HEIGHT_PX)
    return AppointmentPosition(
        appointment=apt, top=top, height=height,
        start_minutes=start, end_minutes=end,
    )


def layout_appointments_for_day(
    appointments: Iterable[Appointment],
    professional_filter: str = FILTER_ALL,
) -> List[AppointmentPosition]:
    """Nicht stornierte Termine als Rechtecke (bereits tagesgenau geladen)."""
    positions: List[AppointmentPosition] = []
    for apt in appointments:
        if apt.is_cancelled:
            continue
        if not _matches_professional(apt.professional_id, professional_filter):
            continue
        pos = position_appointment(apt)
        if pos is not None:
            positions.append(pos)
    return positions
