"""
Infrastructure-Adapter: Supabase-REST → Domain Repository Interfaces.

Konvertiert zwischen PostgREST-Zeilen und Domain-Entitäten.
Lesefehler werden geloggt und als leeres Ergebnis geliefert,
Schreibfehler werden geloggt und weitergereicht.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Optional, List, Dict
from zoneinfo import ZoneInfo

from api.client import APIClient, APIError
from domain.agenda.entities import Appointment, TimeBlock
from domain.commission.entities import (
    AppointmentCharge, Commission, CommissionRule, CompletionRecords,
    FeeSchedule, Professional, STATUS_PAID,
)
from infrastructure.cache.read_model_cache import (
    ReadModelCache, make_key,
    PREFIX_PROFESSIONALS, PREFIX_SERVICE_COMMISSIONS, PREFIX_FEE_SCHEDULE,
    TTL_PROFESSIONALS, TTL_SERVICE_COMMISSIONS, TTL_FEE_SCHEDULE,
)

logger = logging.getLogger(__name__)

APPOINTMENT_SELECT = (
    '*,professional:professionals(*),client:clients(*),'
    'appointment_services(*,service:services(*))'
)
COMMISSION_SELECT = (
    '*,professional:professionals(*),appointment:appointments(*,client:clients(*))'
)


class SalonRepository:
    """Implementiert IAppointmentChargeRepository, ICommissionRuleRepository,
    IProfessionalRepository, ICommissionRepository, ITimeBlockRepository,
    IAppointmentRepository.

    Einzelne Klasse als Fassade für die Tabellen eines Salons.
    """

    def __init__(self, client: APIClient, salon_id: str,
                 timezone: str = 'America/Sao_Paulo',
                 cache: ReadModelCache = None):
        self._client = client
        self._salon_id = salon_id
        self._tz = ZoneInfo(timezone)
        self._cache = cache or ReadModelCache()

    @property
    def salon_id(self) -> str:
        return self._salon_id

    @property
    def tz(self) -> ZoneInfo:
        return self._tz

    def _salon_filter(self) -> Dict[str, str]:
        return {'salon_id': f'eq.{self._salon_id}'}

    # ── Termine ──

    def get_appointment(self, appointment_id: str) -> Optional[AppointmentCharge]:
        params = {
            'select': APPOINTMENT_SELECT,
            'id': f'eq.{appointment_id}',
            'limit': 1,
        }
        try:
            rows = self._client.get('/appointments', params=params)
            if rows:
                return AppointmentCharge.from_dict(rows[0], self._tz)
        except APIError as e:
            logger.error(f"Fehler beim Laden des Termins {appointment_id}: {e}")
        return None

    def get_appointments_for_day(self, day: date) -> List[Appointment]:
        """Termine mit Beginn am Kalendertag (Ortszeit des Salons)."""
        day_start = datetime.combine(day, time.min, tzinfo=self._tz)
        day_end = day_start + timedelta(days=1)
        params = [
            ('select', APPOINTMENT_SELECT),
            ('salon_id', f'eq.{self._salon_id}'),
            ('start_at', f'gte.{day_start.isoformat()}'),
            ('start_at', f'lt.{day_end.isoformat()}'),
            ('order', 'start_at.asc'),
        ]
        try:
            rows = self._client.get('/appointments', params=params)
            return [Appointment.from_dict(r, self._tz) for r in rows]
        except APIError as e:
            logger.error(f"Fehler beim Laden der Termine fuer {day.isoformat()}: {e}")
        return []

    # ── Stammdaten (gecacht) ──

    def get_professionals(self) -> List[Professional]:
        def load() -> List[Professional]:
            params = dict(self._salon_filter(), order='display_name.asc')
            try:
                rows = self._client.get('/professionals', params=params)
                return [Professional.from_dict(r) for r in rows]
            except APIError as e:
                logger.error(f"Fehler beim Laden der Profissionais: {e}")
            return []

        key = make_key(PREFIX_PROFESSIONALS, salon_id=self._salon_id)
        return self._cache.get_or_load(key, load, TTL_PROFESSIONALS)

    def get_service_commissions(self, professional_id: str) -> List[CommissionRule]:
        def load() -> List[CommissionRule]:
            params = {
                'select': '*,service:services(*)',
                'professional_id': f'eq.{professional_id}',
            }
            try:
                rows = self._client.get('/professional_service_commissions', params=params)
            except APIError as e:
                logger.error(f"Fehler beim Laden der Provisionsregeln {professional_id}: {e}")
                return []
            rules = []
            for row in rows:
                try:
                    rules.append(CommissionRule.from_dict(row))
                except ValueError as e:
                    logger.warning(f"Provisionsregel {row.get('id')} uebersprungen: {e}")
            return rules

        key = make_key(PREFIX_SERVICE_COMMISSIONS, professional_id=professional_id)
        return self._cache.get_or_load(key, load, TTL_SERVICE_COMMISSIONS)

    def get_fee_schedule(self) -> FeeSchedule:
        key = make_key(PREFIX_FEE_SCHEDULE, salon_id=self._salon_id)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        params = {
            'select': 'card_fees_by_installment,admin_fee_percent',
            'id': f'eq.{self._salon_id}',
            'limit': 1,
        }
        try:
            rows = self._client.get('/salons', params=params)
        except APIError as e:
            logger.error(f"Fehler beim Laden der Gebuehren: {e}")
            return FeeSchedule()
        schedule = FeeSchedule.from_dict(rows[0] if rows else None)
        self._cache.set(key, schedule, TTL_FEE_SCHEDULE)
        return schedule

    def get_salon_name(self) -> str:
        params = {'select': 'name', 'id': f'eq.{self._salon_id}', 'limit': 1}
        try:
            rows = self._client.get('/salons', params=params)
            if rows:
                return rows[0].get('name') or ''
        except APIError as e:
            logger.error(f"Fehler beim Laden des Salons: {e}")
        return ''

    # ── Sperrzeiten ──

    def get_time_blocks(self, professional_id: str = None) -> List[TimeBlock]:
        params = dict(self._salon_filter(), order='start_at.desc')
        if professional_id:
            params['professional_id'] = f'eq.{professional_id}'
        try:
            rows = self._client.get('/time_blocks', params=params)
            return [TimeBlock.from_dict(r, self._tz) for r in rows]
        except APIError as e:
            logger.error(f"Fehler beim Laden der Sperrzeiten: {e}")
        return []

    # ── Provisionen ──

    def get_commissions(self, status: str = None) -> List[Commission]:
        params = dict(self._salon_filter(), select=COMMISSION_SELECT,
                      order='calculated_at.desc')
        if status:
            params['status'] = f'eq.{status}'
        try:
            rows = self._client.get('/commissions', params=params)
            return [Commission.from_dict(r, self._tz) for r in rows]
        except APIError as e:
            logger.error(f"Fehler beim Laden der Provisionen: {e}")
        return []

    def complete_appointment(self, appointment_id: str, records: CompletionRecords) -> None:
        """Termin abschliessen: Status, Zahlung, Provision, Kassenbuch.

        Raises:
            APIError: bei jedem fehlgeschlagenen Schritt (keine Transaktion,
                bereits geschriebene Zeilen bleiben bestehen).
        """
        try:
            self._client.patch('/appointments', params={'id': f'eq.{appointment_id}'},
                               json_data={'status': 'completed'})
            self._client.post('/payments', json_data=records.payment)
            self._client.post('/commissions', json_data=records.commission)
            self._client.post('/cashflow_entries', json_data=records.cashflow)
        except APIError as e:
            logger.error(f"Fehler beim Abschluss des Termins {appointment_id}: {e}")
            raise
        logger.info(f"Termin {appointment_id} abgeschlossen")

    def pay_commission(self, commission_id: str) -> None:
        payload = {
            'status': STATUS_PAID,
            'paid_at': datetime.now(self._tz).isoformat(),
        }
        try:
            self._client.patch('/commissions', params={'id': f'eq.{commission_id}'},
                               json_data=payload)
        except APIError as e:
            logger.error(f"Fehler beim Bezahlen der Provision {commission_id}: {e}")
            raise
        logger.info(f"Provision {commission_id} als bezahlt markiert")

    def invalidate_master_data(self) -> None:
        """Stammdaten neu laden (z.B. nach Aenderung der Regeln/Gebuehren)."""
        for prefix in (PREFIX_PROFESSIONALS, PREFIX_SERVICE_COMMISSIONS, PREFIX_FEE_SCHEDULE):
            self._cache.invalidate(prefix)
