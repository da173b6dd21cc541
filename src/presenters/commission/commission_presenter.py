"""
Presenter: Provisionen (Termin-Abschluss, Bericht, Recibo).

Vermittelt zwischen einer View (ICommissionView) und den UseCases.
Formatiert Betraege fuer die Anzeige und meldet Fehler an die View
statt sie weiterzuwerfen.
"""

import logging
from typing import List, Optional, Tuple

from api.client import APIError
from domain.commission.calculator import installment_options
from domain.commission.entities import CommissionReport, CommissionResult, PaymentSelection
from domain.commission.interfaces import ICommissionView
from domain.commission.reporting import FILTER_ALL
from i18n import pt_br as texts
from infrastructure.api.salon_repository import SalonRepository
from services.commission_export import ReceiptData, export_receipt, export_report
from usecases.commission.calculate_commission import (
    CalculateAppointmentCommission, AppointmentCommission,
)
from usecases.commission.complete_appointment import CompleteAppointment
from usecases.commission.load_commission_report import LoadCommissionReport
from usecases.commission.pay_commission import PayCommission
from utils.money_utils import format_brl, format_percent

logger = logging.getLogger(__name__)


def commission_lines(result: CommissionResult) -> List[Tuple[str, str]]:
    """
    Zeilen der Provisionsaufstellung: je Leistung, Brutto, Abzuege, Netto.

    Abzugszeilen erscheinen nur, wenn der jeweilige Satz > 0 ist.
    """
    lines = [
        (f"{line.display_name} ({line.rule_description})", format_brl(line.amount))
        for line in result.breakdown
    ]
    lines.append((texts.COMMISSION_GROSS, format_brl(result.gross_commission)))
    if result.card_fee_percent > 0:
        lines.append((
            texts.COMMISSION_CARD_FEE.format(
                installments=result.payment.installments,
                percent=format_percent(result.card_fee_percent)),
            f"- {format_brl(result.card_fee_amount)}",
        ))
    if result.admin_fee_percent > 0:
        lines.append((
            texts.COMMISSION_ADMIN_FEE.format(percent=format_percent(result.admin_fee_percent)),
            f"- {format_brl(result.admin_fee_amount)}",
        ))
    lines.append((texts.COMMISSION_NET, format_brl(result.net_commission)))
    return lines


def report_lines(report: CommissionReport) -> List[Tuple[str, str, str, str]]:
    """(Name, pendente, pago, total) je aktivem Profissional."""
    return [
        (s.display_name, format_brl(s.pending), format_brl(s.paid), format_brl(s.total))
        for s in report.per_professional
    ]


class CommissionPresenter:
    """Presenter fuer Provisionsberechnung, Bericht und Export."""

    def __init__(self, repository: SalonRepository):
        self._repo = repository
        self._view: Optional[ICommissionView] = None
        self._calculate = CalculateAppointmentCommission(repository, repository)
        self._complete = CompleteAppointment(
            repository, repository, repository, repository.salon_id)
        self._load_report = LoadCommissionReport(repository, repository)
        self._pay = PayCommission(repository)

    def set_view(self, view: ICommissionView) -> None:
        self._view = view

    def _error(self, message: str) -> None:
        logger.error(message)
        if self._view:
            self._view.show_error(message)

    def _success(self, message: str) -> None:
        if self._view:
            self._view.show_success(message)

    # ── Termin ──

    def show_commission(self, appointment_id: str,
                        payment: PaymentSelection) -> Optional[AppointmentCommission]:
        """Vorschau der Provision vor dem Abschluss."""
        calculated = self._calculate.execute(appointment_id, payment)
        if calculated is None:
            self._error(texts.MSG_APPOINTMENT_NOT_FOUND)
            return None
        if self._view:
            self._view.show_commission(calculated.result, commission_lines(calculated.result))
        return calculated

    def complete_appointment(self, appointment_id: str, payment: PaymentSelection) -> bool:
        try:
            calculated = self._complete.execute(appointment_id, payment)
        except APIError as e:
            self._error(texts.MSG_SAVE_ERROR.format(error=e))
            return False
        if calculated is None:
            self._error(texts.MSG_APPOINTMENT_NOT_FOUND)
            return False
        if not calculated.completed:
            self._error(texts.MSG_APPOINTMENT_NOT_CONFIRMED)
            return False
        if self._view:
            self._view.show_commission(calculated.result, commission_lines(calculated.result))
        self._success(texts.MSG_APPOINTMENT_COMPLETED)
        return True

    def installment_labels(self) -> List[str]:
        """Auswahl 1x..12x inkl. hinterlegter Kartengebuehr."""
        return [opt.label for opt in installment_options(self._repo.get_fee_schedule())]

    # ── Bericht ──

    def load_report(self, status: str = None,
                    professional_filter: str = FILTER_ALL) -> CommissionReport:
        report = self._load_report.execute(status=status, professional_filter=professional_filter)
        if self._view:
            self._view.show_report(report, report_lines(report))
        return report

    def pay_commission(self, commission_id: str) -> bool:
        try:
            self._pay.execute(commission_id)
        except APIError as e:
            self._error(texts.MSG_SAVE_ERROR.format(error=e))
            return False
        self._success(texts.MSG_COMMISSION_PAID)
        return True

    # ── Export ──

    def export_receipt(self, commission_id: str, folder: str) -> Optional[str]:
        commission = next(
            (c for c in self._repo.get_commissions() if c.id == commission_id), None)
        if commission is None:
            self._error(texts.MSG_COMMISSION_NOT_FOUND)
            return None
        data = ReceiptData(salon_name=self._repo.get_salon_name() or texts.APP_NAME,
                           commission=commission)
        try:
            path = export_receipt(data, folder)
        except OSError as e:
            self._error(texts.MSG_EXPORT_ERROR.format(error=e))
            return None
        self._success(texts.MSG_EXPORT_DONE.format(path=path))
        return path

    def export_report(self, folder: str, status: str = None,
                      professional_filter: str = FILTER_ALL) -> Optional[str]:
        report = self._load_report.execute(status=status, professional_filter=professional_filter)
        try:
            path = export_report(report, folder)
        except OSError as e:
            self._error(texts.MSG_EXPORT_ERROR.format(error=e))
            return None
        self._success(texts.MSG_EXPORT_DONE.format(path=path))
        return path
