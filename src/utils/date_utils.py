"""
Datums-Hilfsfunktionen.

Parsing der Supabase-Zeitstempel und Anzeige im brasilianischen Format.
"""

from datetime import date, datetime, tzinfo
from typing import Optional, Union

from i18n import pt_br as texts


def parse_timestamp(value: Union[str, datetime, None],
                    tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """ISO-Zeitstempel (auch mit 'Z') in datetime umwandeln.

    Zeitzonenbehaftete Werte werden nach ``tz`` konvertiert, falls angegeben.
    Naive Werte bleiben unveraendert (bereits Ortszeit des Salons).
    """
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        dt = datetime.fromisoformat(str(value).strip().replace('Z', '+00:00'))
    if tz is not None and dt.tzinfo is not None:
        dt = dt.astimezone(tz)
    return dt


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """'YYYY-MM-DD' (oder datetime) in date umwandeln."""
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])


def sunday_based_weekday(day: date) -> int:
    """Wochentag mit Sonntag=0 .. Samstag=6 (Python: Montag=0)."""
    return (day.weekday() + 1) % 7


def minutes_of_day(dt: datetime) -> int:
    return dt.hour * 60 + dt.minute


def format_hhmm(minutes: int) -> str:
    """Minuten seit Mitternacht als 'HH:MM'."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_date_br(value: Union[str, date, datetime, None]) -> str:
    """Konvertiert ISO-Datum/Datetime ins brasilianische Format (DD/MM/YYYY).

    Unterstuetzt: 'YYYY-MM-DD', 'YYYY-MM-DDTHH:MM:SS', 'YYYY-MM-DD HH:MM:SS'
    sowie date/datetime-Objekte.
    """
    if not value:
        return ""
    if isinstance(value, (date, datetime)):
        return value.strftime('%d/%m/%Y')
    try:
        date_part = value.strip()
        if 'T' in date_part:
            date_part = date_part.split('T')[0]
        elif ' ' in date_part:
            date_part = date_part.split(' ')[0]
        parts = date_part.split('-')
        if len(parts) == 3:
            year, month, day = parts
            return f"{day}/{month}/{year}"
    except (ValueError, IndexError):
        pass
    return value


def format_datetime_br(dt: Optional[datetime]) -> str:
    """'dd/MM/yyyy às HH:mm'"""
    if dt is None:
        return ""
    return f"{dt.strftime('%d/%m/%Y')} {texts.DATETIME_AT} {dt.strftime('%H:%M')}"


def format_month_title(day: date) -> str:
    """'maio de 2025' (Kopfzeile der Monatsansicht)."""
    return texts.MONTH_TITLE.format(month=texts.MONTH_NAMES[day.month - 1], year=day.year)
