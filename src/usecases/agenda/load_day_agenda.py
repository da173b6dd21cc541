"""
UseCase: Tagesansicht laden (Sperrzeiten + Termine positioniert).
"""

from datetime import date

from domain.agenda.entities import DayAgenda
from domain.agenda.interfaces import ITimeBlockRepository, IAppointmentRepository
from domain.agenda.layout import (
    layout_blocks_for_day, layout_appointments_for_day, FILTER_ALL,
)


class LoadDayAgenda:

    def __init__(self, blocks: ITimeBlockRepository, appointments: IAppointmentRepository):
        self._blocks = blocks
        self._appointments = appointments

    def execute(self, day: date, professional_filter: str = FILTER_ALL) -> DayAgenda:
        return DayAgenda(
            day=day,
            professional_filter=professional_filter,
            blocks=layout_blocks_for_day(self._blocks.get_time_blocks(), day, professional_filter),
            appointments=layout_appointments_for_day(
                self._appointments.get_appointments_for_day(day), professional_filter),
        )
