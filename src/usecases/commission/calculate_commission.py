"""
UseCase: Provision eines Termins berechnen (Vorschau vor dem Abschluss).
"""

from dataclasses import dataclass
from typing import Optional

from domain.commission.calculator import compute_commission
from domain.commission.entities import AppointmentCharge, CommissionResult, PaymentSelection
from domain.commission.interfaces import IAppointmentChargeRepository, ICommissionRuleRepository


@dataclass
class AppointmentCommission:
    """Termin + berechnete Provision (completed: Abschluss wurde gespeichert)."""
    appointment: AppointmentCharge
    result: CommissionResult
    completed: bool = False


class CalculateAppointmentCommission:
    """Laedt Termin, Regeln und Gebuehren und rechnet die Provision aus."""

    def __init__(self, appointments: IAppointmentChargeRepository,
                 rules: ICommissionRuleRepository):
        self._appointments = appointments
        self._rules = rules

    def execute(self, appointment_id: str,
                payment: PaymentSelection) -> Optional[AppointmentCommission]:
        appointment = self._appointments.get_appointment(appointment_id)
        if appointment is None:
            return None
        payment = payment.normalized()
        result = compute_commission(
            services=appointment.services,
            default_percent=appointment.default_percent,
            rules=self._rules.get_service_commissions(appointment.professional_id),
            payment=payment,
            fees=self._rules.get_fee_schedule(),
        )
        return AppointmentCommission(appointment=appointment, result=result)
