"""
Tests fuer Geld- und Datumshilfen.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

from conftest import SAO_PAULO

from utils.date_utils import (
    parse_timestamp, parse_date, sunday_based_weekday, format_hhmm,
    format_date_br, format_datetime_br, format_month_title,
)
from utils.money_utils import to_decimal, round_money, format_brl, format_percent, format_cpf


def test_to_decimal():
    assert to_decimal(0.1) == Decimal('0.1')
    assert to_decimal('12.50') == Decimal('12.50')
    assert to_decimal(None) == 0
    assert to_decimal('') == 0
    assert to_decimal('abc') == 0
    assert to_decimal(7) == Decimal(7)


def test_round_money_half_up():
    assert round_money(Decimal('10.005')) == Decimal('10.01')
    assert round_money(Decimal('10.004')) == Decimal('10.00')


def test_format_brl():
    assert format_brl(Decimal('1234.5')) == 'R$ 1.234,50'
    assert format_brl(0) == 'R$ 0,00'
    assert format_brl(Decimal('-4')) == '-R$ 4,00'
    assert format_brl(Decimal('1234567.891')) == 'R$ 1.234.567,89'


def test_format_percent():
    assert format_percent(Decimal(40)) == '40'
    assert format_percent(Decimal('12.50')) == '12,5'
    assert format_percent(3.5) == '3,5'


def test_format_cpf():
    assert format_cpf('12345678901') == '123.456.789-01'
    assert format_cpf('123.456.789-01') == '123.456.789-01'
    assert format_cpf('123') == '123'
    assert format_cpf(None) == ''


def test_parse_timestamp():
    assert parse_timestamp(None) is None
    utc = parse_timestamp('2025-03-10T15:00:00Z')
    assert utc == datetime(2025, 3, 10, 15, tzinfo=timezone.utc)
    local = parse_timestamp('2025-03-10T15:00:00+00:00', SAO_PAULO)
    assert (local.hour, local.minute) == (12, 0)
    naive = parse_timestamp('2025-03-10T09:30:00', SAO_PAULO)
    assert naive.tzinfo is None and naive.hour == 9


def test_parse_date():
    assert parse_date('2025-03-10') == date(2025, 3, 10)
    assert parse_date('2025-03-10T23:00:00') == date(2025, 3, 10)
    assert parse_date('') is None


def test_sunday_based_weekday():
    assert sunday_based_weekday(date(2025, 3, 9)) == 0
    assert sunday_based_weekday(date(2025, 3, 10)) == 1
    assert sunday_based_weekday(date(2025, 3, 15)) == 6


def test_formatting():
    assert format_hhmm(570) == '09:30'
    assert format_date_br('2025-03-10T12:00:00') == '10/03/2025'
    assert format_date_br(date(2025, 3, 10)) == '10/03/2025'
    assert format_datetime_br(datetime(2025, 3, 10, 9, 5)) == '10/03/2025 às 09:05'
    assert format_month_title(date(2025, 3, 1)) == 'março de 2025'
