"""
Domain-Entitäten für Provisionen (Comissões).

Reine Datenklassen ohne externe Abhängigkeiten (ausser i18n/utils für
Anzeigetexte). Beträge sind Decimal, gerundet wird erst bei der Anzeige.
"""

from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from decimal import Decimal
from typing import Optional, List, Dict

from i18n import pt_br as texts
from utils.date_utils import parse_timestamp
from utils.money_utils import to_decimal, round_money, format_brl, format_percent, ZERO


PAYMENT_CASH = 'cash'
PAYMENT_PIX = 'pix'
PAYMENT_CREDIT_CARD = 'credit_card'
PAYMENT_DEBIT_CARD = 'debit_card'
PAYMENT_OTHER = 'other'
PAYMENT_METHODS = (PAYMENT_CASH, PAYMENT_PIX, PAYMENT_CREDIT_CARD,
                   PAYMENT_DEBIT_CARD, PAYMENT_OTHER)

RULE_PERCENT = 'percent'
RULE_FIXED = 'fixed'
RULE_DEFAULT = 'default'
RULE_TYPES = (RULE_PERCENT, RULE_FIXED)

APPOINTMENT_CONFIRMED = 'confirmed'

STATUS_PENDING = 'pending'
STATUS_PAID = 'paid'


@dataclass
class AppointmentService:
    """Abgerechnete Leistung eines Termins."""
    service_id: str = ''
    service_name: str = ''
    price_charged: Decimal = ZERO
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict) -> 'AppointmentService':
        service = d.get('service') or {}
        return cls(
            id=d.get('id'),
            service_id=d.get('service_id', '') or '',
            service_name=d.get('service_name') or service.get('name') or '',
            price_charged=to_decimal(d.get('price_charged')),
        )


@dataclass
class CommissionRule:
    """Provisionsregel pro Profissional + Serviço (ueberschreibt den Standardsatz)."""
    service_id: str = ''
    type: str = RULE_PERCENT
    value: Decimal = ZERO
    id: Optional[str] = None
    professional_id: Optional[str] = None

    def __post_init__(self):
        if self.type not in RULE_TYPES:
            raise ValueError(f"Unbekannter Regeltyp: {self.type!r}")
        self.value = to_decimal(self.value)

    @classmethod
    def from_dict(cls, d: Dict) -> 'CommissionRule':
        return cls(
            id=d.get('id'),
            professional_id=d.get('professional_id'),
            service_id=d.get('service_id', '') or '',
            type=d.get('type', RULE_PERCENT),
            value=to_decimal(d.get('value')),
        )


@dataclass
class Professional:
    """Profissional mit Standard-Provisionssatz (0-100)."""
    id: str = ''
    display_name: str = ''
    commission_percent_default: Decimal = ZERO
    active: bool = True
    cpf: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict) -> 'Professional':
        return cls(
            id=d.get('id', '') or '',
            display_name=d.get('display_name', '') or '',
            commission_percent_default=to_decimal(d.get('commission_percent_default')),
            active=bool(d.get('active', True)),
            cpf=d.get('cpf'),
        )


@dataclass
class FeeSchedule:
    """Gebuehren des Salons: Kartengebuehr je Ratenzahl + Verwaltungsgebuehr."""
    card_fees_by_installment: Dict[str, Decimal] = field(default_factory=dict)
    admin_fee_percent: Decimal = ZERO

    def __post_init__(self):
        self.card_fees_by_installment = {
            str(k): to_decimal(v) for k, v in (self.card_fees_by_installment or {}).items()
        }
        self.admin_fee_percent = to_decimal(self.admin_fee_percent)

    def card_fee_percent(self, installments: int) -> Decimal:
        """Kartengebuehr fuer die Ratenzahl; fehlender Eintrag = 0 %."""
        return self.card_fees_by_installment.get(str(installments), ZERO)

    @classmethod
    def from_dict(cls, d: Optional[Dict]) -> 'FeeSchedule':
        d = d or {}
        return cls(
            card_fees_by_installment=d.get('card_fees_by_installment') or {},
            admin_fee_percent=d.get('admin_fee_percent'),
        )


@dataclass
class PaymentSelection:
    """Zahlungsart + Raten (Raten nur bei Kreditkarte relevant)."""
    method: str = PAYMENT_CASH
    installments: int = 1

    @property
    def is_credit_card(self) -> bool:
        return self.method == PAYMENT_CREDIT_CARD

    def normalized(self) -> 'PaymentSelection':
        """Bei Nicht-Kreditkarte immer 1x (wie beim Wechsel der Zahlungsart)."""
        if self.is_credit_card:
            return PaymentSelection(self.method, self.installments)
        return PaymentSelection(self.method, 1)

    @property
    def method_label(self) -> str:
        return texts.PAYMENT_METHOD_LABELS.get(self.method, self.method)


@dataclass
class CommissionLine:
    """Aufschluesselung der Provision einer einzelnen Leistung."""
    service_id: str = ''
    service_name: str = ''
    price_charged: Decimal = ZERO
    amount: Decimal = ZERO
    rule_type: str = RULE_DEFAULT
    rule_value: Decimal = ZERO

    @property
    def rule_description(self) -> str:
        if self.rule_type == RULE_PERCENT:
            return texts.COMMISSION_RULE_PERCENT.format(percent=format_percent(self.rule_value))
        if self.rule_type == RULE_FIXED:
            return texts.COMMISSION_RULE_FIXED.format(amount=format_brl(self.rule_value))
        return texts.COMMISSION_RULE_DEFAULT.format(percent=format_percent(self.rule_value))

    @property
    def display_name(self) -> str:
        return self.service_name or texts.COMMISSION_SERVICE_FALLBACK


@dataclass
class FeeDeduction:
    """Abzuege auf die Bruttoprovision (nie aufeinander aufbauend)."""
    gross: Decimal = ZERO
    card_fee_percent: Decimal = ZERO
    card_fee_amount: Decimal = ZERO
    admin_fee_percent: Decimal = ZERO
    admin_fee_amount: Decimal = ZERO

    @property
    def net(self) -> Decimal:
        return self.gross - self.card_fee_amount - self.admin_fee_amount


@dataclass
class CommissionResult:
    """Ergebnis der Provisionsberechnung eines Termins."""
    gross_commission: Decimal = ZERO
    card_fee_amount: Decimal = ZERO
    admin_fee_amount: Decimal = ZERO
    net_commission: Decimal = ZERO
    breakdown: List[CommissionLine] = field(default_factory=list)
    card_fee_percent: Decimal = ZERO
    admin_fee_percent: Decimal = ZERO
    payment: PaymentSelection = field(default_factory=PaymentSelection)

    @property
    def has_fees(self) -> bool:
        return self.card_fee_amount > 0 or self.admin_fee_amount > 0

    def to_dict(self) -> Dict:
        """Auf Centavos gerundete, JSON-taugliche Darstellung."""
        return {
            'gross_commission': str(round_money(self.gross_commission)),
            'card_fee_percent': str(self.card_fee_percent),
            'card_fee_amount': str(round_money(self.card_fee_amount)),
            'admin_fee_percent': str(self.admin_fee_percent),
            'admin_fee_amount': str(round_money(self.admin_fee_amount)),
            'net_commission': str(round_money(self.net_commission)),
            'payment_method': self.payment.method,
            'installments': self.payment.installments,
            'breakdown': [
                {
                    'service_id': line.service_id,
                    'service_name': line.display_name,
                    'price_charged': str(round_money(line.price_charged)),
                    'amount': str(round_money(line.amount)),
                    'rule': line.rule_description,
                }
                for line in self.breakdown
            ],
        }


@dataclass
class InstallmentOption:
    """Auswahlmoeglichkeit 1x..12x mit hinterlegter Kartengebuehr."""
    installments: int = 1
    fee_percent: Decimal = ZERO

    @property
    def label(self) -> str:
        if self.fee_percent > 0:
            return texts.INSTALLMENT_LABEL_WITH_FEE.format(
                n=self.installments, percent=format_percent(self.fee_percent))
        return texts.INSTALLMENT_LABEL.format(n=self.installments)


@dataclass
class AppointmentCharge:
    """Termin aus Abrechnungssicht: Leistungen, Profissional, Gesamtbetrag."""
    id: str = ''
    professional_id: str = ''
    status: str = APPOINTMENT_CONFIRMED
    start_at: Optional[datetime] = None
    total_amount: Decimal = ZERO
    client_name: Optional[str] = None
    professional: Optional[Professional] = None
    services: List[AppointmentService] = field(default_factory=list)

    @property
    def is_confirmed(self) -> bool:
        """Nur bestaetigte Termine koennen abgeschlossen werden."""
        return self.status == APPOINTMENT_CONFIRMED

    @property
    def default_percent(self) -> Decimal:
        if self.professional is None:
            return ZERO
        return self.professional.commission_percent_default

    @classmethod
    def from_dict(cls, d: Dict, tz: Optional[tzinfo] = None) -> 'AppointmentCharge':
        prof = d.get('professional')
        client = d.get('client') or {}
        return cls(
            id=d.get('id', '') or '',
            professional_id=d.get('professional_id', '') or '',
            status=d.get('status', APPOINTMENT_CONFIRMED),
            start_at=parse_timestamp(d.get('start_at'), tz),
            total_amount=to_decimal(d.get('total_amount')),
            client_name=client.get('full_name'),
            professional=Professional.from_dict(prof) if prof else None,
            services=[AppointmentService.from_dict(s) for s in d.get('appointment_services') or []],
        )


@dataclass
class Commission:
    """Gespeicherte Provisionsbuchung (Tabelle commissions)."""
    id: str = ''
    appointment_id: Optional[str] = None
    professional_id: str = ''
    amount: Decimal = ZERO
    gross_amount: Optional[Decimal] = None
    card_fee_amount: Decimal = ZERO
    admin_fee_amount: Decimal = ZERO
    payment_method: Optional[str] = None
    status: str = STATUS_PENDING
    calculated_at: Optional[datetime] = None
    paid_at: Optional[datetime] = None
    professional_name: Optional[str] = None
    professional_cpf: Optional[str] = None
    client_name: Optional[str] = None
    appointment_start: Optional[datetime] = None
    appointment_total: Decimal = ZERO

    @property
    def is_paid(self) -> bool:
        return self.status == STATUS_PAID

    @property
    def gross_or_net(self) -> Decimal:
        """Bruttoprovision; Altbuchungen ohne Gebuehrenerfassung haben nur amount."""
        if self.gross_amount:
            return self.gross_amount
        return self.amount

    @property
    def short_id(self) -> str:
        return self.id[:8].upper()

    @property
    def status_label(self) -> str:
        return texts.COMMISSION_STATUS_LABELS.get(self.status, self.status)

    @property
    def payment_method_label(self) -> str:
        if not self.payment_method:
            return texts.NOT_INFORMED
        return texts.PAYMENT_METHOD_LABELS.get(self.payment_method, self.payment_method)

    @classmethod
    def from_dict(cls, d: Dict, tz: Optional[tzinfo] = None) -> 'Commission':
        prof = d.get('professional') or {}
        appointment = d.get('appointment') or {}
        client = appointment.get('client') or {}
        gross_raw = d.get('gross_amount')
        return cls(
            id=d.get('id', '') or '',
            appointment_id=d.get('appointment_id'),
            professional_id=d.get('professional_id', '') or '',
            amount=to_decimal(d.get('amount')),
            gross_amount=to_decimal(gross_raw) if gross_raw is not None else None,
            card_fee_amount=to_decimal(d.get('card_fee_amount')),
            admin_fee_amount=to_decimal(d.get('admin_fee_amount')),
            payment_method=d.get('payment_method'),
            status=d.get('status', STATUS_PENDING),
            calculated_at=parse_timestamp(d.get('calculated_at'), tz),
            paid_at=parse_timestamp(d.get('paid_at'), tz),
            professional_name=prof.get('display_name'),
            professional_cpf=prof.get('cpf'),
            client_name=client.get('full_name'),
            appointment_start=parse_timestamp(appointment.get('start_at'), tz),
            appointment_total=to_decimal(appointment.get('total_amount')),
        )


@dataclass
class ProfessionalCommissionSummary:
    """Summen je Profissional (Relatorio)."""
    professional_id: str = ''
    display_name: str = ''
    pending: Decimal = ZERO
    paid: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        return self.pending + self.paid

    @property
    def initials(self) -> str:
        return ''.join(part[0] for part in self.display_name.split() if part).upper()[:2]


@dataclass
class CommissionReport:
    """Relatorio de Comissões: Gesamtsummen, Summen je Profissional, Filterliste."""
    total_pending: Decimal = ZERO
    total_paid: Decimal = ZERO
    per_professional: List[ProfessionalCommissionSummary] = field(default_factory=list)
    filtered: List[Commission] = field(default_factory=list)


@dataclass
class CompletionRecords:
    """Zeilen, die beim Abschluss eines Termins geschrieben werden."""
    payment: Dict = field(default_factory=dict)
    commission: Dict = field(default_factory=dict)
    cashflow: Dict = field(default_factory=dict)
