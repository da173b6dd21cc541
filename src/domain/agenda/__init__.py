# domain/agenda: Tagesansicht, Sperrzeiten, Buchungsraster (kein HTTP, keine UI)

from .entities import (
    Recurrence, OneOff, Daily, Weekly, parse_recurrence,
    TimeBlock, Appointment, BlockPosition, AppointmentPosition, DayAgenda,
)
from .interfaces import ITimeBlockRepository, IAppointmentRepository, IAgendaView
from .layout import (
    layout_blocks_for_day, position_appointment, layout_appointments_for_day,
    block_applies_on,
)
from .slots import time_slots, is_time_slot_blocked, available_slots, month_grid

__all__ = [
    # Entities
    'Recurrence', 'OneOff', 'Daily', 'Weekly', 'parse_recurrence',
    'TimeBlock', 'Appointment', 'BlockPosition', 'AppointmentPosition', 'DayAgenda',
    # Interfaces
    'ITimeBlockRepository', 'IAppointmentRepository', 'IAgendaView',
    # Layout
    'layout_blocks_for_day', 'position_appointment', 'layout_appointments_for_day',
    'block_applies_on',
    # Raster
    'time_slots', 'is_time_slot_blocked', 'available_slots', 'month_grid',
]
