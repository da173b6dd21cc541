"""
UseCase: Termin abschliessen.

Orchestriert Berechnung → Buchungssaetze → Speichern
(Zahlung, Provision, Kassenbuch).
"""

import logging
from datetime import datetime
from typing import Optional

from domain.commission.entities import PaymentSelection
from domain.commission.interfaces import (
    IAppointmentChargeRepository, ICommissionRuleRepository, ICommissionRepository,
)
from domain.commission.reporting import build_completion_records

from .calculate_commission import CalculateAppointmentCommission, AppointmentCommission

logger = logging.getLogger(__name__)


class CompleteAppointment:
    """Berechnet die Provision und schreibt die Abschluss-Buchungen."""

    def __init__(self, appointments: IAppointmentChargeRepository,
                 rules: ICommissionRuleRepository,
                 commissions: ICommissionRepository,
                 salon_id: str):
        self._calculate = CalculateAppointmentCommission(appointments, rules)
        self._commissions = commissions
        self._salon_id = salon_id

    def execute(self, appointment_id: str, payment: PaymentSelection,
                occurred_at: Optional[datetime] = None) -> Optional[AppointmentCommission]:
        """
        Returns:
            Berechnete Provision, oder None wenn der Termin nicht existiert.
            Ist der Termin nicht mehr bestaetigt (abgeschlossen, storniert),
            wird nichts gespeichert und completed bleibt False.

        Raises:
            APIError: wenn das Speichern fehlschlaegt.
        """
        calculated = self._calculate.execute(appointment_id, payment)
        if calculated is None:
            logger.warning(f"Termin {appointment_id} nicht gefunden, Abschluss abgebrochen")
            return None

        appointment = calculated.appointment
        if not appointment.is_confirmed:
            logger.warning(
                f"Termin {appointment.id} hat Status {appointment.status!r}, Abschluss abgebrochen"
            )
            return calculated

        records = build_completion_records(
            salon_id=self._salon_id,
            appointment_id=appointment.id,
            professional_id=appointment.professional_id,
            amount=appointment.total_amount,
            payment=calculated.result.payment,
            result=calculated.result,
            occurred_at=occurred_at,
        )
        self._commissions.complete_appointment(appointment.id, records)
        calculated.completed = True
        return calculated
