"""
Tests fuer Provisionsbericht und Abschluss-Buchungssaetze.
"""

from datetime import datetime
from decimal import Decimal

from conftest import SAO_PAULO

from domain.commission.calculator import compute_commission
from domain.commission.entities import (
    AppointmentCharge, AppointmentService, Commission, PaymentSelection, Professional,
)
from domain.commission.reporting import (
    summarize_commissions, build_completion_records, commissions_by_status,
)


def commission(cid, prof, amount, status, gross=None):
    return Commission(id=cid, professional_id=prof, amount=Decimal(amount), status=status,
                      gross_amount=Decimal(gross) if gross is not None else None)


PROFESSIONALS = [
    Professional(id='p1', display_name='Ana Souza'),
    Professional(id='p2', display_name='Bruno Lima'),
    Professional(id='p3', display_name='Carla Inativa', active=False),
]

COMMISSIONS = [
    commission('c1', 'p1', '10', 'pending'),
    commission('c2', 'p1', '20', 'paid'),
    commission('c3', 'p2', '50', 'pending'),
    commission('c4', 'p3', '5', 'pending'),
]


def test_totals_over_all_commissions():
    report = summarize_commissions(COMMISSIONS, PROFESSIONALS)
    assert report.total_pending == Decimal(65)
    assert report.total_paid == Decimal(20)


def test_per_professional_sorted_by_pending_and_only_active():
    report = summarize_commissions(COMMISSIONS, PROFESSIONALS)
    assert [s.professional_id for s in report.per_professional] == ['p2', 'p1']
    ana = report.per_professional[1]
    assert (ana.pending, ana.paid, ana.total) == (Decimal(10), Decimal(20), Decimal(30))
    assert ana.initials == 'AS'


def test_filter_only_affects_list():
    report = summarize_commissions(COMMISSIONS, PROFESSIONALS, professional_filter='p1')
    assert [c.id for c in report.filtered] == ['c1', 'c2']
    assert report.total_pending == Decimal(65)

    report = summarize_commissions(COMMISSIONS, PROFESSIONALS, professional_filter='all')
    assert len(report.filtered) == 4


def test_gross_falls_back_to_net():
    assert commission('x', 'p1', '8', 'pending').gross_or_net == Decimal(8)
    assert commission('x', 'p1', '8', 'pending', gross='10').gross_or_net == Decimal(10)


def test_group_by_status():
    groups = commissions_by_status(COMMISSIONS)
    assert [c.id for c in groups['pending']] == ['c1', 'c3', 'c4']
    assert [c.id for c in groups['paid']] == ['c2']


def test_completion_records(fees):
    appointment = AppointmentCharge(
        id='apt-1', professional_id='p1', total_amount=Decimal('150.00'),
        services=[AppointmentService(service_id='A', price_charged=Decimal('150'))],
    )
    payment = PaymentSelection('credit_card', 2)
    result = compute_commission(appointment.services, Decimal(40), [], payment, fees)
    when = datetime(2025, 3, 10, 15, 30, tzinfo=SAO_PAULO)

    records = build_completion_records(
        salon_id='s1', appointment_id=appointment.id, professional_id='p1',
        amount=appointment.total_amount, payment=payment, result=result, occurred_at=when,
    )

    assert records.payment == {
        'salon_id': 's1', 'appointment_id': 'apt-1', 'method': 'credit_card', 'amount': '150.00',
    }
    assert records.commission['amount'] == '51.60'
    assert records.commission['gross_amount'] == '60.00'
    assert records.commission['card_fee_amount'] == '2.40'
    assert records.commission['admin_fee_amount'] == '6.00'
    assert records.commission['status'] == 'pending'
    assert records.cashflow['type'] == 'income'
    assert records.cashflow['amount'] == '150.00'
    assert records.cashflow['description'] == 'Atendimento concluído'
    assert records.cashflow['occurred_at'] == when.isoformat()


def test_completion_records_without_timestamp_leave_it_to_database(no_fees):
    result = compute_commission([], Decimal(0), [], PaymentSelection(), no_fees)
    records = build_completion_records(
        salon_id='s1', appointment_id='apt-1', professional_id='p1',
        amount=Decimal(80), payment=PaymentSelection(), result=result,
    )
    assert 'occurred_at' not in records.cashflow
    assert records.cashflow['amount'] == '80.00'
