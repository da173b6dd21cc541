"""
UseCase: Freie Buchungszeiten eines Profissional an einem Tag.
"""

from datetime import date
from typing import List

from domain.agenda.interfaces import ITimeBlockRepository
from domain.agenda.slots import available_slots


class FindAvailableSlots:
    """Raster 08:00-19:30 abzueglich Sperrzeiten (Termine werden nicht geprueft)."""

    def __init__(self, blocks: ITimeBlockRepository):
        self._blocks = blocks

    def execute(self, professional_id: str, day: date) -> List[str]:
        blocks = self._blocks.get_time_blocks(professional_id=professional_id)
        return available_slots(blocks, professional_id, day)
