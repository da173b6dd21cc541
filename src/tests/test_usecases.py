"""
Tests fuer die UseCases mit In-Memory-Repository.
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from conftest import local
from fakes import FakeSalonRepository

from api.client import APIError
from domain.agenda.entities import Appointment, TimeBlock, Daily
from domain.commission.entities import Commission, PaymentSelection
from domain.commission.interfaces import (
    IAppointmentChargeRepository, ICommissionRepository, ICommissionRuleRepository,
    IProfessionalRepository,
)
from domain.agenda.interfaces import ITimeBlockRepository, IAppointmentRepository
from usecases.agenda.find_available_slots import FindAvailableSlots
from usecases.agenda.load_day_agenda import LoadDayAgenda
from usecases.commission.calculate_commission import CalculateAppointmentCommission
from usecases.commission.complete_appointment import CompleteAppointment
from usecases.commission.load_commission_report import LoadCommissionReport
from usecases.commission.pay_commission import PayCommission


@pytest.fixture
def repo():
    return FakeSalonRepository()


def test_fake_satisfies_protocols(repo):
    for protocol in (IAppointmentChargeRepository, ICommissionRuleRepository,
                     IProfessionalRepository, ICommissionRepository,
                     ITimeBlockRepository, IAppointmentRepository):
        assert isinstance(repo, protocol)


def test_calculate_commission(repo):
    calculated = CalculateAppointmentCommission(repo, repo).execute(
        'apt-1', PaymentSelection('credit_card', 2))
    result = calculated.result
    # Corte 40 % von 100 + Escova fix 15
    assert result.gross_commission == Decimal(55)
    assert result.card_fee_amount == Decimal('2.75')
    assert result.admin_fee_amount == Decimal('5.5')
    assert result.net_commission == Decimal('46.75')


def test_calculate_normalizes_installments(repo):
    calculated = CalculateAppointmentCommission(repo, repo).execute(
        'apt-1', PaymentSelection('pix', 2))
    assert calculated.result.payment == PaymentSelection('pix', 1)
    assert calculated.result.card_fee_amount == 0


def test_calculate_unknown_appointment(repo):
    assert CalculateAppointmentCommission(repo, repo).execute(
        'nope', PaymentSelection()) is None


def test_complete_appointment_persists_records(repo):
    calculated = CompleteAppointment(repo, repo, repo, repo.salon_id).execute(
        'apt-1', PaymentSelection('cash'))
    assert calculated.result.net_commission == Decimal('49.5')
    assert calculated.completed

    appointment_id, records = repo.completed[0]
    assert appointment_id == 'apt-1'
    assert records.payment['amount'] == '150.00'
    assert records.payment['salon_id'] == 'salon-1'
    assert records.commission['amount'] == '49.50'
    assert records.commission['professional_id'] == 'p1'


@pytest.mark.parametrize('status', ['completed', 'cancelled'])
def test_complete_only_confirmed_appointments(repo, status):
    repo.appointments['apt-2'] = replace(repo.appointments['apt-1'], id='apt-2', status=status)

    calculated = CompleteAppointment(repo, repo, repo, repo.salon_id).execute(
        'apt-2', PaymentSelection('cash'))

    assert calculated is not None
    assert not calculated.completed
    assert repo.completed == []


def test_complete_unknown_appointment_writes_nothing(repo):
    assert CompleteAppointment(repo, repo, repo, repo.salon_id).execute(
        'nope', PaymentSelection()) is None
    assert repo.completed == []


def test_complete_propagates_write_errors(repo):
    repo.fail_writes = True
    with pytest.raises(APIError):
        CompleteAppointment(repo, repo, repo, repo.salon_id).execute('apt-1', PaymentSelection())


def test_load_report_and_pay(repo):
    repo.commissions = [
        Commission(id='c1', professional_id='p1', amount=Decimal(10), status='pending'),
        Commission(id='c2', professional_id='p1', amount=Decimal(5), status='paid'),
    ]
    report = LoadCommissionReport(repo, repo).execute()
    assert report.total_pending == Decimal(10)
    assert report.per_professional[0].total == Decimal(15)

    pending_only = LoadCommissionReport(repo, repo).execute(status='pending')
    assert [c.id for c in pending_only.filtered] == ['c1']

    PayCommission(repo).execute('c1')
    assert repo.paid == ['c1']


def test_load_day_agenda(repo):
    repo.time_blocks = [TimeBlock(professional_id='p1', title='Almoço',
                                  start_at=local(2025, 1, 1, 12), end_at=local(2025, 1, 1, 13),
                                  recurrence=Daily())]
    repo.day_appointments = [
        Appointment(id='a1', professional_id='p1', start_at=local(2025, 3, 10, 9),
                    end_at=local(2025, 3, 10, 10)),
        Appointment(id='a2', professional_id='p1', start_at=local(2025, 3, 10, 15),
                    end_at=local(2025, 3, 10, 16), status='cancelled'),
    ]
    agenda = LoadDayAgenda(repo, repo).execute(date(2025, 3, 10))
    assert len(agenda.blocks) == 1
    assert [p.appointment.id for p in agenda.appointments] == ['a1']
    assert not agenda.is_empty

    assert LoadDayAgenda(repo, repo).execute(date(2025, 3, 10), 'p2').is_empty


def test_find_available_slots(repo):
    repo.time_blocks = [TimeBlock(professional_id='p1', start_at=local(2025, 3, 10, 8),
                                  end_at=local(2025, 3, 10, 12))]
    slots = FindAvailableSlots(repo).execute('p1', date(2025, 3, 10))
    assert slots[0] == '12:00'
    assert len(slots) == 16
