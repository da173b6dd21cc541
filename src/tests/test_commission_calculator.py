"""
Tests fuer die Provisionsberechnung (domain/commission/calculator.py).
"""

from decimal import Decimal

import pytest

from domain.commission.calculator import (
    compute_commission, apply_fees, preview_fees, installment_options, index_rules,
)
from domain.commission.entities import (
    AppointmentService, CommissionRule, FeeSchedule, PaymentSelection,
    RULE_DEFAULT, RULE_FIXED, RULE_PERCENT,
)

PIX = PaymentSelection('pix')


def service(service_id='A', price='100', name='Corte'):
    return AppointmentService(service_id=service_id, service_name=name,
                              price_charged=Decimal(price))


def test_default_percent_without_rules(fees):
    result = compute_commission([service()], Decimal(40), [], PIX, fees)
    assert result.gross_commission == Decimal(40)
    assert result.card_fee_amount == 0
    assert result.admin_fee_amount == Decimal(4)
    assert result.net_commission == Decimal(36)
    assert result.breakdown[0].rule_type == RULE_DEFAULT


def test_default_percent_without_admin_fee(no_fees):
    result = compute_commission([service()], Decimal(40), [], PIX, no_fees)
    assert result.gross_commission == Decimal(40)
    assert result.net_commission == Decimal(40)
    assert not result.has_fees


def test_fixed_rule_ignores_price(fees):
    rules = [CommissionRule(service_id='A', type=RULE_FIXED, value=Decimal(15))]
    for price in ('100', '0', '999.90'):
        result = compute_commission([service(price=price)], Decimal(40), rules, PIX, fees)
        assert result.gross_commission == Decimal(15)
        assert result.breakdown[0].amount == Decimal(15)


def test_percent_rule_overrides_default(no_fees):
    rules = [CommissionRule(service_id='A', type=RULE_PERCENT, value=Decimal(25))]
    result = compute_commission([service()], Decimal(40), rules, PIX, no_fees)
    assert result.gross_commission == Decimal(25)
    assert result.breakdown[0].rule_type == RULE_PERCENT


def test_rule_only_applies_to_its_service(no_fees):
    rules = [CommissionRule(service_id='B', type=RULE_FIXED, value=Decimal(50))]
    result = compute_commission(
        [service('A', '100'), service('B', '80')], Decimal(40), rules, PIX, no_fees)
    assert [line.amount for line in result.breakdown] == [Decimal(40), Decimal(50)]
    assert result.gross_commission == Decimal(90)


def test_gross_equals_sum_of_breakdown(fees):
    services = [service('A', '35.90'), service('B', '120'), service('C', '12.35')]
    rules = [CommissionRule(service_id='B', type=RULE_PERCENT, value=Decimal('12.5'))]
    result = compute_commission(services, Decimal(33), rules, PIX, fees)
    assert result.gross_commission == sum(line.amount for line in result.breakdown)


def test_first_duplicate_rule_wins():
    rules = [
        CommissionRule(service_id='A', type=RULE_FIXED, value=Decimal(10)),
        CommissionRule(service_id='A', type=RULE_FIXED, value=Decimal(20)),
    ]
    assert index_rules(rules)['A'].value == Decimal(10)


def test_card_fee_only_for_credit_card(fees):
    for method in ('cash', 'pix', 'debit_card', 'other'):
        result = compute_commission(
            [service()], Decimal(40), [], PaymentSelection(method, 3), fees)
        assert result.card_fee_amount == 0
        assert result.card_fee_percent == 0


def test_credit_card_fee_by_installments(fees):
    result = compute_commission(
        [service()], Decimal(40), [], PaymentSelection('credit_card', 3), fees)
    assert result.card_fee_percent == Decimal(5)
    assert result.card_fee_amount == Decimal(2)
    assert result.admin_fee_amount == Decimal(4)
    assert result.net_commission == Decimal(34)


def test_missing_installment_entry_means_no_card_fee(fees):
    result = compute_commission(
        [service()], Decimal(40), [], PaymentSelection('credit_card', 7), fees)
    assert result.card_fee_amount == 0
    assert result.net_commission == Decimal(36)


def test_net_is_exact_difference(fees):
    services = [service('A', '33.33'), service('B', '19.99')]
    result = compute_commission(
        services, Decimal('37.5'), [], PaymentSelection('credit_card', 1), fees)
    assert result.net_commission == (
        result.gross_commission - result.card_fee_amount - result.admin_fee_amount)


def test_net_is_not_clamped_at_zero():
    fees = FeeSchedule(card_fees_by_installment={'1': Decimal(50)},
                       admin_fee_percent=Decimal(60))
    result = compute_commission(
        [service()], Decimal(40), [], PaymentSelection('credit_card', 1), fees)
    assert result.net_commission == Decimal(-4)


def test_no_services_means_zero(fees):
    result = compute_commission([], Decimal(40), [], PIX, fees)
    assert result.gross_commission == 0
    assert result.net_commission == 0
    assert result.breakdown == []


def test_unrounded_until_display(no_fees):
    result = compute_commission([service(price='33.33')], Decimal(33), [], PIX, no_fees)
    assert result.gross_commission == Decimal('10.9989')
    assert result.to_dict()['gross_commission'] == '11.00'


def test_apply_fees_uses_gross_for_both_fees(fees):
    deduction = apply_fees(Decimal(200), PaymentSelection('credit_card', 2), fees)
    assert deduction.card_fee_amount == Decimal(8)
    assert deduction.admin_fee_amount == Decimal(20)
    assert deduction.net == Decimal(172)


def test_preview_fees_uses_example_gross(fees):
    preview = preview_fees(fees, installments=2)
    assert preview.gross == Decimal(100)
    assert preview.card_fee_amount == Decimal(4)
    assert preview.admin_fee_amount == Decimal(10)
    assert preview.net == Decimal(86)


def test_installment_options(fees):
    options = installment_options(fees)
    assert [o.installments for o in options] == list(range(1, 13))
    assert options[0].label == '1x (taxa: 3,5%)'
    assert options[2].label == '3x (taxa: 5%)'
    assert options[3].label == '4x'


def test_rule_descriptions(no_fees):
    rules = [
        CommissionRule(service_id='B', type=RULE_FIXED, value=Decimal(15)),
        CommissionRule(service_id='C', type=RULE_PERCENT, value=Decimal('12.5')),
    ]
    result = compute_commission(
        [service('A'), service('B'), service('C', name='')], Decimal(40), rules, PIX, no_fees)
    assert [line.rule_description for line in result.breakdown] == [
        '40% (padrão)', 'R$ 15,00 fixo', '12,5%',
    ]
    assert result.breakdown[2].display_name == 'Serviço'


def test_unknown_rule_type_rejected():
    with pytest.raises(ValueError):
        CommissionRule(service_id='A', type='bonus', value=Decimal(1))


def test_payment_normalized_resets_installments():
    assert PaymentSelection('pix', 5).normalized() == PaymentSelection('pix', 1)
    assert PaymentSelection('credit_card', 5).normalized() == PaymentSelection('credit_card', 5)
    assert PaymentSelection('credit_card').method_label == 'Cartão de Crédito'


def test_fee_schedule_from_row():
    schedule = FeeSchedule.from_dict({
        'card_fees_by_installment': {'1': 3.5, 2: 4},
        'admin_fee_percent': 10,
    })
    assert schedule.card_fee_percent(1) == Decimal('3.5')
    assert schedule.card_fee_percent(2) == Decimal(4)
    assert schedule.card_fee_percent(12) == 0
    assert FeeSchedule.from_dict(None).admin_fee_percent == 0


def test_fee_schedule_accepts_plain_numbers():
    fees = FeeSchedule(card_fees_by_installment={'3': 2.5, 2: 4}, admin_fee_percent=10.0)
    assert fees.card_fees_by_installment == {'3': Decimal('2.5'), '2': Decimal(4)}
    assert fees.admin_fee_percent == Decimal(10)

    result = compute_commission(
        [service()], 40, [], PaymentSelection('credit_card', 3), fees)
    assert result.card_fee_amount == Decimal(1)
    assert result.admin_fee_amount == Decimal(4)
    assert result.net_commission == Decimal(35)
