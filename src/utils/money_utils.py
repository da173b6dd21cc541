"""
Geldbetraege: Decimal-Umwandlung und Anzeige in Real (pt-BR).

Gerechnet wird durchgehend mit Decimal, gerundet wird erst bei der Anzeige.
"""

import logging
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

from i18n import pt_br as texts

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')
ZERO = Decimal('0')


def to_decimal(value: Any) -> Decimal:
    """Beliebigen Zahlwert (API liefert float, int oder str) nach Decimal.

    float geht ueber str(), damit 0.1 nicht als 0.1000000000000000055... landet.
    None und unlesbare Werte ergeben 0.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    s = str(value).strip()
    if not s:
        return ZERO
    try:
        return Decimal(s)
    except InvalidOperation:
        logger.warning(f"Ungueltiger Zahlwert ignoriert: {value!r}")
        return ZERO


def round_money(value: Decimal) -> Decimal:
    """Kaufmaennisch auf Centavos runden."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_brl(value: Any) -> str:
    """Betrag als 'R$ 1.234,56' (negativ: '-R$ 1.234,56')."""
    amount = round_money(to_decimal(value))
    sign = '-' if amount < 0 else ''
    body = f"{abs(amount):,.2f}".replace(',', 'X').replace('.', ',').replace('X', '.')
    return f"{sign}{texts.CURRENCY_SYMBOL} {body}"


def format_percent(value: Any) -> str:
    """Prozentsatz ohne ueberfluessige Nullen: 40 -> '40', 12.50 -> '12,5'."""
    s = format(to_decimal(value), 'f')
    if '.' in s:
        s = s.rstrip('0').rstrip('.')
    return s.replace('.', ',')


def format_cpf(cpf: str) -> str:
    """CPF als '123.456.789-01'; andere Laengen bleiben unveraendert."""
    if not cpf:
        return ''
    digits = re.sub(r'\D', '', cpf)
    if len(digits) != 11:
        return cpf
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"
