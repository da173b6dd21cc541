# domain/commission: Reine Business-Logik fuer Provisionen (kein HTTP, keine UI)

from .entities import (
    AppointmentService, CommissionRule, Professional, FeeSchedule,
    PaymentSelection, CommissionLine, FeeDeduction, CommissionResult,
    InstallmentOption, AppointmentCharge, Commission,
    ProfessionalCommissionSummary, CommissionReport, CompletionRecords,
)
from .interfaces import (
    IAppointmentChargeRepository, ICommissionRuleRepository,
    IProfessionalRepository, ICommissionRepository, ICommissionView,
)
from .calculator import (
    compute_commission, apply_fees, preview_fees, installment_options,
    commission_for_service, index_rules,
)
from .reporting import (
    summarize_commissions, build_completion_records, filter_by_professional,
    commissions_by_status,
)

__all__ = [
    # Entities
    'AppointmentService', 'CommissionRule', 'Professional', 'FeeSchedule',
    'PaymentSelection', 'CommissionLine', 'FeeDeduction', 'CommissionResult',
    'InstallmentOption', 'AppointmentCharge', 'Commission',
    'ProfessionalCommissionSummary', 'CommissionReport', 'CompletionRecords',
    # Interfaces
    'IAppointmentChargeRepository', 'ICommissionRuleRepository',
    'IProfessionalRepository', 'ICommissionRepository', 'ICommissionView',
    # Berechnung
    'compute_commission', 'apply_fees', 'preview_fees', 'installment_options',
    'commission_for_service', 'index_rules',
    # Auswertung
    'summarize_commissions', 'build_completion_records', 'filter_by_professional',
    'commissions_by_status',
]
