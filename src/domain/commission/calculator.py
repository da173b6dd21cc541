"""
Provisionsberechnung pro Termin.

Reine Geschäftsregeln ohne I/O:

  Pro Leistung:
    Regel 'percent' -> Preis * Wert / 100
    Regel 'fixed'   -> Wert (unabhaengig vom Preis)
    keine Regel     -> Preis * Standardsatz / 100

  Brutto = Summe der Leistungen
  Kartengebuehr nur bei credit_card (Satz je Ratenzahl, fehlend = 0 %)
  Verwaltungsgebuehr immer, beide nur auf Brutto
  Netto = Brutto - Kartengebuehr - Verwaltungsgebuehr (keine Untergrenze)
"""

from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from config.agenda import MAX_INSTALLMENTS, FEE_PREVIEW_GROSS
from utils.money_utils import to_decimal, ZERO

from .entities import (
    AppointmentService, CommissionRule, CommissionLine, CommissionResult,
    FeeSchedule, FeeDeduction, PaymentSelection, InstallmentOption,
    RULE_PERCENT, RULE_FIXED, RULE_DEFAULT, PAYMENT_CREDIT_CARD,
)

HUNDRED = Decimal(100)


def index_rules(rules: Iterable[CommissionRule]) -> Dict[str, CommissionRule]:
    """Regeln nach service_id. Bei Dubletten gewinnt die erste (wie find())."""
    index: Dict[str, CommissionRule] = {}
    for rule in rules:
        index.setdefault(rule.service_id, rule)
    return index


def commission_for_service(
    service: AppointmentService,
    default_percent: Decimal,
    rule: Optional[CommissionRule] = None,
) -> CommissionLine:
    """Provision einer einzelnen Leistung inkl. angewandter Regel."""
    price = to_decimal(service.price_charged)
    if rule is None:
        percent = to_decimal(default_percent)
        return CommissionLine(
            service_id=service.service_id,
            service_name=service.service_name,
            price_charged=price,
            amount=price * percent / HUNDRED,
            rule_type=RULE_DEFAULT,
            rule_value=percent,
        )
    if rule.type == RULE_FIXED:
        amount = rule.value
    else:
        amount = price * rule.value / HUNDRED
    return CommissionLine(
        service_id=service.service_id,
        service_name=service.service_name,
        price_charged=price,
        amount=amount,
        rule_type=RULE_FIXED if rule.type == RULE_FIXED else RULE_PERCENT,
        rule_value=rule.value,
    )


def apply_fees(gross: Decimal, payment: PaymentSelection, fees: FeeSchedule) -> FeeDeduction:
    """Karten- und Verwaltungsgebuehr auf die Bruttoprovision."""
    gross = to_decimal(gross)
    card_percent = fees.card_fee_percent(payment.installments) if payment.is_credit_card else ZERO
    admin_percent = fees.admin_fee_percent
    return FeeDeduction(
        gross=gross,
        card_fee_percent=card_percent,
        card_fee_amount=gross * card_percent / HUNDRED,
        admin_fee_percent=admin_percent,
        admin_fee_amount=gross * admin_percent / HUNDRED,
    )


def compute_commission(
    services: Sequence[AppointmentService],
    default_percent: Decimal,
    rules: Iterable[CommissionRule],
    payment: PaymentSelection,
    fees: FeeSchedule,
) -> CommissionResult:
    """
    Berechnet Brutto-, Gebuehren- und Nettoprovision eines Termins.

    Args:
        services: Abgerechnete Leistungen des Termins.
        default_percent: Standardsatz des Profissional (0-100).
        rules: Provisionsregeln des Profissional (je Serviço hoechstens eine).
        payment: Zahlungsart und Raten.
        fees: Gebuehrenordnung des Salons.

    Returns:
        CommissionResult mit Aufschluesselung je Leistung. Keine Rundung.
    """
    rule_index = index_rules(rules)
    breakdown: List[CommissionLine] = [
        commission_for_service(service, default_percent, rule_index.get(service.service_id))
        for service in services
    ]
    gross = sum((line.amount for line in breakdown), ZERO)
    deduction = apply_fees(gross, payment, fees)

    return CommissionResult(
        gross_commission=gross,
        card_fee_amount=deduction.card_fee_amount,
        admin_fee_amount=deduction.admin_fee_amount,
        net_commission=deduction.net,
        breakdown=breakdown,
        card_fee_percent=deduction.card_fee_percent,
        admin_fee_percent=deduction.admin_fee_percent,
        payment=payment,
    )


def installment_options(fees: FeeSchedule,
                        max_installments: int = MAX_INSTALLMENTS) -> List[InstallmentOption]:
    """1x..12x mit der jeweils hinterlegten Kartengebuehr."""
    return [
        InstallmentOption(installments=n, fee_percent=fees.card_fee_percent(n))
        for n in range(1, max_installments + 1)
    ]


def preview_fees(fees: FeeSchedule, installments: int = 1,
                 example_gross: Decimal = Decimal(FEE_PREVIEW_GROSS)) -> FeeDeduction:
    """Beispielrechnung der Einstellungsseite (Kreditkarte, Brutto R$ 100)."""
    return apply_fees(
        to_decimal(example_gross),
        PaymentSelection(PAYMENT_CREDIT_CARD, installments),
        fees,
    )
