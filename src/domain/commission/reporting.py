"""
Auswertung gespeicherter Provisionen und Abschluss-Buchungssaetze.

Reine Funktionen ueber bereits geladenen Daten.
"""

from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from i18n import pt_br as texts
from utils.money_utils import round_money, ZERO

from .entities import (
    Commission, CommissionReport, CommissionResult, CompletionRecords,
    Professional, ProfessionalCommissionSummary, PaymentSelection,
    STATUS_PENDING, STATUS_PAID,
)

FILTER_ALL = 'all'

CASHFLOW_INCOME = 'income'


def _sum_amounts(commissions: Iterable[Commission], status: str) -> Decimal:
    return sum((c.amount for c in commissions if c.status == status), ZERO)


def filter_by_professional(commissions: Sequence[Commission],
                           professional_filter: str = FILTER_ALL) -> List[Commission]:
    if not professional_filter or professional_filter == FILTER_ALL:
        return list(commissions)
    return [c for c in commissions if c.professional_id == professional_filter]


def summarize_commissions(
    commissions: Sequence[Commission],
    professionals: Sequence[Professional],
    professional_filter: str = FILTER_ALL,
) -> CommissionReport:
    """
    Summen fuer den Provisionsbericht.

    Gesamtsummen und Summen je Profissional beziehen sich immer auf alle
    uebergebenen Provisionen; nur ``filtered`` beruecksichtigt den Filter.
    Inaktive Profissionais erscheinen nicht in der Zusammenfassung.
    """
    per_professional = []
    for prof in professionals:
        if not prof.active:
            continue
        own = [c for c in commissions if c.professional_id == prof.id]
        per_professional.append(ProfessionalCommissionSummary(
            professional_id=prof.id,
            display_name=prof.display_name,
            pending=_sum_amounts(own, STATUS_PENDING),
            paid=_sum_amounts(own, STATUS_PAID),
        ))
    per_professional.sort(key=lambda s: s.pending, reverse=True)

    return CommissionReport(
        total_pending=_sum_amounts(commissions, STATUS_PENDING),
        total_paid=_sum_amounts(commissions, STATUS_PAID),
        per_professional=per_professional,
        filtered=filter_by_professional(commissions, professional_filter),
    )


def build_completion_records(
    salon_id: str,
    appointment_id: str,
    professional_id: str,
    amount: Decimal,
    payment: PaymentSelection,
    result: CommissionResult,
    occurred_at: Optional[datetime] = None,
) -> CompletionRecords:
    """
    Datensaetze fuer den Abschluss eines Termins.

    Zahlung (voller Terminbetrag), Provision (netto, Status pending) und
    Kassenbuch-Einnahme. Betraege werden hier auf Centavos gerundet, da sie
    die Domain verlassen. Ohne occurred_at setzt die Datenbank den Zeitpunkt.
    """
    amount_str = str(round_money(amount))
    records = CompletionRecords(
        payment={
            'salon_id': salon_id,
            'appointment_id': appointment_id,
            'method': payment.method,
            'amount': amount_str,
        },
        commission={
            'salon_id': salon_id,
            'appointment_id': appointment_id,
            'professional_id': professional_id,
            'amount': str(round_money(result.net_commission)),
            'gross_amount': str(round_money(result.gross_commission)),
            'card_fee_amount': str(round_money(result.card_fee_amount)),
            'admin_fee_amount': str(round_money(result.admin_fee_amount)),
            'payment_method': payment.method,
            'status': STATUS_PENDING,
        },
        cashflow={
            'salon_id': salon_id,
            'type': CASHFLOW_INCOME,
            'amount': amount_str,
            'description': texts.CASHFLOW_COMPLETION_DESCRIPTION,
            'related_appointment_id': appointment_id,
        },
    )
    if occurred_at is not None:
        records.cashflow['occurred_at'] = occurred_at.isoformat()
    return records


def commissions_by_status(commissions: Iterable[Commission]) -> Dict[str, List[Commission]]:
    """Gruppiert nach Status (Tabs 'pendentes' / 'pagas')."""
    groups: Dict[str, List[Commission]] = {STATUS_PENDING: [], STATUS_PAID: []}
    for c in commissions:
        groups.setdefault(c.status, []).append(c)
    return groups
