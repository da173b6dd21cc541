"""
Tests fuer Buchungsraster und Monatsansicht (domain/agenda/slots.py).
"""

from datetime import date, timedelta

from conftest import local

from domain.agenda.entities import TimeBlock, Daily, Weekly
from domain.agenda.slots import time_slots, is_time_slot_blocked, available_slots, month_grid

MONDAY = date(2025, 3, 10)


def daily_lunch(professional='p1', until=None):
    return TimeBlock(id='lunch', professional_id=professional, title='Almoço',
                     start_at=local(2025, 1, 6, 12), end_at=local(2025, 1, 6, 13),
                     recurrence=Daily(), recurrence_end_date=until)


def test_time_slots():
    slots = time_slots()
    assert len(slots) == 24
    assert slots[0] == '08:00'
    assert slots[1] == '08:30'
    assert slots[-1] == '19:30'
    assert time_slots(60)[-1] == '19:00'


def test_recurring_block_blocks_slot_start_inside():
    blocks = [daily_lunch()]
    assert is_time_slot_blocked(blocks, 'p1', MONDAY, '12:00')
    assert is_time_slot_blocked(blocks, 'p1', MONDAY, '12:30')
    assert not is_time_slot_blocked(blocks, 'p1', MONDAY, '13:00')
    assert not is_time_slot_blocked(blocks, 'p1', MONDAY, '11:30')


def test_other_professional_not_blocked():
    assert not is_time_slot_blocked([daily_lunch()], 'p2', MONDAY, '12:00')


def test_recurring_block_respects_end_date_and_weekdays():
    assert not is_time_slot_blocked([daily_lunch(until=date(2025, 3, 9))], 'p1', MONDAY, '12:00')
    weekend = TimeBlock(professional_id='p1', start_at=local(2025, 1, 4, 9),
                        end_at=local(2025, 1, 4, 18), recurrence=Weekly(frozenset({0, 6})))
    assert not is_time_slot_blocked([weekend], 'p1', MONDAY, '10:00')
    assert is_time_slot_blocked([weekend], 'p1', date(2025, 3, 8), '10:00')


def test_one_off_block_overlap():
    dentist = TimeBlock(professional_id='p1', start_at=local(2025, 3, 10, 10, 15),
                        end_at=local(2025, 3, 10, 11))
    assert not is_time_slot_blocked([dentist], 'p1', MONDAY, '09:30')
    assert is_time_slot_blocked([dentist], 'p1', MONDAY, '10:00')
    assert is_time_slot_blocked([dentist], 'p1', MONDAY, '10:30')
    assert not is_time_slot_blocked([dentist], 'p1', MONDAY, '11:00')
    assert not is_time_slot_blocked([dentist], 'p1', MONDAY + timedelta(days=1), '10:30')


def test_one_off_block_touching_slot_is_free():
    meeting = TimeBlock(professional_id='p1', start_at=local(2025, 3, 10, 10),
                        end_at=local(2025, 3, 10, 11))
    assert not is_time_slot_blocked([meeting], 'p1', MONDAY, '09:30')
    assert is_time_slot_blocked([meeting], 'p1', MONDAY, '10:30')
    assert not is_time_slot_blocked([meeting], 'p1', MONDAY, '11:00')


def test_available_slots():
    slots = available_slots([daily_lunch()], 'p1', MONDAY)
    assert len(slots) == 22
    assert '12:00' not in slots and '12:30' not in slots
    assert len(available_slots([], 'p1', MONDAY)) == 24


def test_month_grid_starts_sunday_ends_saturday():
    grid = month_grid(date(2025, 3, 15))
    assert grid[0] == date(2025, 2, 23)
    assert grid[-1] == date(2025, 4, 5)
    assert len(grid) == 42


def test_month_grid_exact_weeks():
    grid = month_grid(date(2026, 2, 1))
    assert grid[0] == date(2026, 2, 1)
    assert grid[-1] == date(2026, 2, 28)
    assert len(grid) == 28


def test_month_grid_december():
    grid = month_grid(date(2025, 12, 10))
    assert grid[0] == date(2025, 11, 30)
    assert grid[-1] == date(2026, 1, 3)
    assert len(grid) % 7 == 0
