"""
Agenda- und Provisions-Konstanten.

Zentrale Stelle fuer die Masse der Tagesansicht (08:00-20:00, 64 px pro
Stunde) und die Grenzen der Ratenzahlung.
"""

# Sichtbares Zeitfenster der Tagesansicht
DAY_START_HOUR = 8
DAY_END_HOUR = 20

DAY_START_MINUTES = DAY_START_HOUR * 60
DAY_END_MINUTES = DAY_END_HOUR * 60

# Eine Stunde = 64 px (h-16 Zeile)
HOUR_HEIGHT_PX = 64

# Mindesthoehen, damit kurze Eintraege lesbar bleiben
MIN_BLOCK_HEIGHT_PX = 24
MIN_APPOINTMENT_HEIGHT_PX = 32

# Buchungsraster beim Anlegen eines Termins
SLOT_STEP_MINUTES = 30
SLOT_DURATION_MINUTES = 30

# Kreditkarte: 1x bis 12x
MAX_INSTALLMENTS = 12

# Beispielwert der Gebuehren-Vorschau (Einstellungen)
FEE_PREVIEW_GROSS = 100

# Wochenbeginn der Monatsansicht (0 = Sonntag)
WEEK_STARTS_ON = 0
