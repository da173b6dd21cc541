"""
UseCase: Provisionsbericht laden.
"""

from domain.commission.entities import CommissionReport
from domain.commission.interfaces import ICommissionRepository, IProfessionalRepository
from domain.commission.reporting import summarize_commissions, FILTER_ALL


class LoadCommissionReport:
    """Laedt Provisionen + Profissionais und bildet die Summen."""

    def __init__(self, commissions: ICommissionRepository,
                 professionals: IProfessionalRepository):
        self._commissions = commissions
        self._professionals = professionals

    def execute(self, status: str = None,
                professional_filter: str = FILTER_ALL) -> CommissionReport:
        return summarize_commissions(
            self._commissions.get_commissions(status=status),
            self._professionals.get_professionals(),
            professional_filter,
        )
