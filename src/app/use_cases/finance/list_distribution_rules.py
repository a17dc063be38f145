"""List Distribution Rules Use Case"""

from libs.result import Result, Return
from src.domain.distribution_rule import DistributionRuleTable
from .dtos import DistributionRuleDTO, ListDistributionRulesResponseDTO, TransferDTO


class ListDistributionRules:
    """Read-only view of the routing table loaded at startup"""

    def __init__(self, distribution_table: DistributionRuleTable):
        self.distribution_table = distribution_table

    async def execute(self) -> Result[ListDistributionRulesResponseDTO]:
        table = self.distribution_table
        rules = [
            DistributionRuleDTO(
                key=rule.key,
                is_default=rule.key == table.default_rule,
                transfers=[
                    TransferDTO(
                        target=t.target,
                        account_id=table.accounts[t.target],
                        amount=t.amount,
                    )
                    for t in rule.transfers
                ],
                total=rule.total,
            )
            for rule in table.rules.values()
        ]
        return Return.ok(
            ListDistributionRulesResponseDTO(
                primary_account_id=table.primary_account_id,
                default_rule=table.default_rule,
                rules=rules,
            )
        )
