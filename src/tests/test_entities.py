"""
Tests fuer die from_dict-Fabriken der Domain-Entitaeten (PostgREST-Zeilen).
"""

from decimal import Decimal

from conftest import SAO_PAULO

from domain.agenda.entities import Appointment, OneOff, Daily, Weekly, parse_recurrence
from domain.commission.entities import AppointmentCharge, Commission, CommissionRule, Professional


APPOINTMENT_ROW = {
    'id': 'apt-1',
    'professional_id': 'p1',
    'status': 'confirmed',
    'start_at': '2025-03-10T13:00:00+00:00',
    'end_at': '2025-03-10T14:00:00+00:00',
    'total_amount': 120.5,
    'client': {'full_name': 'Maria Silva'},
    'professional': {'id': 'p1', 'display_name': 'Ana', 'commission_percent_default': 40,
                     'active': True, 'cpf': '12345678901'},
    'appointment_services': [
        {'id': 's1', 'service_id': 'A', 'price_charged': 80, 'service': {'name': 'Corte'}},
        {'id': 's2', 'service_id': 'B', 'price_charged': '40.50', 'service': None},
    ],
}


def test_appointment_charge_from_row():
    apt = AppointmentCharge.from_dict(APPOINTMENT_ROW, SAO_PAULO)
    assert apt.total_amount == Decimal('120.5')
    assert apt.client_name == 'Maria Silva'
    assert apt.default_percent == Decimal(40)
    assert [s.service_name for s in apt.services] == ['Corte', '']
    assert apt.services[1].price_charged == Decimal('40.50')
    assert apt.start_at.hour == 10


def test_appointment_charge_without_professional():
    apt = AppointmentCharge.from_dict({'id': 'x', 'appointment_services': None})
    assert apt.default_percent == 0
    assert apt.services == []


def test_agenda_appointment_from_row():
    apt = Appointment.from_dict(dict(APPOINTMENT_ROW, status='cancelled'), SAO_PAULO)
    assert apt.is_cancelled
    assert apt.professional_name == 'Ana'
    assert (apt.end_at.hour, apt.end_at.minute) == (11, 0)


def test_commission_from_row():
    row = {
        'id': 'abcdef123456', 'appointment_id': 'apt-1', 'professional_id': 'p1',
        'amount': 34.2, 'gross_amount': None, 'card_fee_amount': 0, 'admin_fee_amount': 3.8,
        'payment_method': 'pix', 'status': 'paid', 'calculated_at': '2025-03-10T14:00:00Z',
        'paid_at': '2025-03-11T18:00:00Z',
        'professional': {'display_name': 'Ana', 'cpf': '12345678901'},
        'appointment': {'start_at': '2025-03-10T13:00:00Z', 'total_amount': 100,
                        'client': {'full_name': 'Maria'}},
    }
    c = Commission.from_dict(row, SAO_PAULO)
    assert c.short_id == 'ABCDEF12'
    assert c.is_paid
    assert c.status_label == 'PAGO'
    assert c.payment_method_label == 'PIX'
    assert c.gross_amount is None
    assert c.gross_or_net == Decimal('34.2')
    assert c.client_name == 'Maria'
    assert c.appointment_total == Decimal(100)
    assert c.paid_at.hour == 15


def test_commission_without_payment_method():
    assert Commission().payment_method_label == 'Não informado'


def test_rule_and_professional_from_row():
    rule = CommissionRule.from_dict({'service_id': 'A', 'type': 'fixed', 'value': '15'})
    assert rule.value == Decimal(15)
    prof = Professional.from_dict({'id': 'p1', 'display_name': 'Ana', 'active': False})
    assert not prof.active
    assert prof.commission_percent_default == 0


def test_parse_recurrence():
    assert parse_recurrence(False, 'daily', [1]) == OneOff()
    assert parse_recurrence(True, 'daily', None) == Daily()
    assert parse_recurrence(True, 'weekly', [1, 3, 3]) == Weekly(frozenset({1, 3}))
    assert parse_recurrence(True, 'weekly', None) == Weekly(frozenset())
    assert not OneOff().is_recurring
    assert Daily().is_recurring
