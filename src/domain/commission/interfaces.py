"""
Interfaces (Protocols) für Provisionen.

Domain und UseCases hängen nur von diesen Interfaces ab,
nie von konkreten Implementierungen.
"""

from typing import Protocol, Optional, List, runtime_checkable

from .entities import (
    AppointmentCharge, Commission, CommissionRule, CommissionResult,
    CommissionReport, CompletionRecords, FeeSchedule, Professional,
)


# ═══════════════════════════════════════════════════════════
# Repository Interfaces (implementiert in Infrastructure)
# ═══════════════════════════════════════════════════════════


@runtime_checkable
class IAppointmentChargeRepository(Protocol):
    """Termin inkl. Leistungen und Profissional."""

    def get_appointment(self, appointment_id: str) -> Optional[AppointmentCharge]: ...


@runtime_checkable
class ICommissionRuleRepository(Protocol):
    """Provisionsregeln je Profissional, Gebuehrenordnung und Name des Salons."""

    def get_service_commissions(self, professional_id: str) -> List[CommissionRule]: ...
    def get_fee_schedule(self) -> FeeSchedule: ...
    def get_salon_name(self) -> str: ...


@runtime_checkable
class IProfessionalRepository(Protocol):

    def get_professionals(self) -> List[Professional]: ...


@runtime_checkable
class ICommissionRepository(Protocol):
    """Gespeicherte Provisionen lesen/schreiben."""

    def get_commissions(self, status: str = None) -> List[Commission]: ...
    def complete_appointment(self, appointment_id: str,
                             records: CompletionRecords) -> None: ...
    def pay_commission(self, commission_id: str) -> None: ...


# ═══════════════════════════════════════════════════════════
# View Interfaces (implementiert in der Oberflaeche)
# ═══════════════════════════════════════════════════════════


@runtime_checkable
class ICommissionView(Protocol):
    """Interface für Provisionsanzeige (Termin-Abschluss + Bericht)."""

    def show_commission(self, result: CommissionResult, lines: List[tuple]) -> None: ...
    def show_report(self, report: CommissionReport, lines: List[tuple]) -> None: ...
    def show_error(self, message: str) -> None: ...
    def show_success(self, message: str) -> None: ...
