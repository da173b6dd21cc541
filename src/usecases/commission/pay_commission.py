"""
UseCase: Provision als bezahlt markieren.
"""

from domain.commission.interfaces import ICommissionRepository


class PayCommission:

    def __init__(self, repository: ICommissionRepository):
        self._repo = repository

    def execute(self, commission_id: str) -> None:
        self._repo.pay_commission(commission_id)
