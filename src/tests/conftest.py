"""
Gemeinsame Fixtures fuer die Tests.

Ausfuehrung:
    python -m pytest src/tests -v
"""

import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / 'src'))

from domain.commission.entities import FeeSchedule  # noqa: E402

SAO_PAULO = ZoneInfo('America/Sao_Paulo')


def local(y, m, d, hh=0, mm=0) -> datetime:
    """Ortszeit des Salons."""
    return datetime(y, m, d, hh, mm, tzinfo=SAO_PAULO)


@pytest.fixture
def fees() -> FeeSchedule:
    return FeeSchedule(
        card_fees_by_installment={'1': Decimal('3.5'), '2': Decimal('4'), '3': Decimal('5')},
        admin_fee_percent=Decimal('10'),
    )


@pytest.fixture
def no_fees() -> FeeSchedule:
    return FeeSchedule()
