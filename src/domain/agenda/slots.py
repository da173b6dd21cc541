"""
Buchungsraster und Monatsansicht.

Freie Zeitfenster fuer neue Termine (30-Minuten-Raster 08:00-19:30)
unter Beruecksichtigung der Sperrzeiten eines Profissional.
"""

from datetime import date, datetime, time, timedelta
from typing import Iterable, List

from config.agenda import (
    DAY_START_MINUTES, DAY_END_MINUTES, SLOT_STEP_MINUTES, SLOT_DURATION_MINUTES,
    WEEK_STARTS_ON,
)
from utils.date_utils import format_hhmm, minutes_of_day, sunday_based_weekday

from .entities import TimeBlock
from .layout import block_applies_on


def time_slots(step_minutes: int = SLOT_STEP_MINUTES) -> List[str]:
    """Alle buchbaren Startzeiten als 'HH:MM' (08:00 .. 19:30 bei 30 min)."""
    return [format_hhmm(m) for m in range(DAY_START_MINUTES, DAY_END_MINUTES, step_minutes)]


def _slot_minutes(slot: str) -> int:
    hours, minutes = slot.split(':')[:2]
    return int(hours) * 60 + int(minutes)


def is_time_slot_blocked(
    blocks: Iterable[TimeBlock],
    professional_id: str,
    day: date,
    slot: str,
    slot_minutes: int = SLOT_DURATION_MINUTES,
) -> bool:
    """
    Kollidiert der Slot mit einer Sperrzeit des Profissional?

    Wiederkehrend: Slot-Beginn liegt in [Beginn, Ende) nach Uhrzeit.
    Einmalig: halboffene Intervalle [Beginn, Ende) ueberlappen sich. Ein Slot,
    der genau am Ende der Sperrzeit beginnt oder genau an ihrem Beginn endet,
    ist frei. Mit geschlossenen Intervallen (Grenzen inklusive) waere er
    gesperrt.
    """
    start_min = _slot_minutes(slot)
    for block in blocks:
        if block.professional_id != professional_id:
            continue
        if not block_applies_on(block, day):
            continue

        if block.is_recurring:
            if minutes_of_day(block.start_at) <= start_min < minutes_of_day(block.end_at):
                return True
            continue

        slot_start = datetime.combine(
            day, time(start_min // 60, start_min % 60), tzinfo=block.start_at.tzinfo,
        )
        slot_end = slot_start + timedelta(minutes=slot_minutes)
        if slot_start < block.end_at and slot_end > block.start_at:
            return True
    return False


def available_slots(
    blocks: Iterable[TimeBlock],
    professional_id: str,
    day: date,
    step_minutes: int = SLOT_STEP_MINUTES,
) -> List[str]:
    blocks = list(blocks)
    return [
        slot for slot in time_slots(step_minutes)
        if not is_time_slot_blocked(blocks, professional_id, day, slot, step_minutes)
    ]


def month_grid(anchor: date) -> List[date]:
    """
    Tage der Monatsansicht: vom Sonntag vor (oder am) Monatsersten bis
    zum Samstag nach (oder am) Monatsletzten. Immer ein Vielfaches von 7.
    """
    first = anchor.replace(day=1)
    if first.month == 12:
        last = first.replace(year=first.year + 1, month=1) - timedelta(days=1)
    else:
        last = first.replace(month=first.month + 1) - timedelta(days=1)

    start = first - timedelta(days=(sunday_based_weekday(first) - WEEK_STARTS_ON) % 7)
    end = last + timedelta(days=(WEEK_STARTS_ON + 6 - sunday_based_weekday(last)) % 7)
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]
