"""Distribution Rules

Static paycheck routing table: which sub-accounts receive a fixed amount out
of every paycheck. Loaded once from configuration and read-only afterwards.
"""

from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Transfer(BaseModel):
    """Fixed amount routed to one target account key"""

    model_config = ConfigDict(frozen=True)

    target: str
    amount: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)


class DistributionRule(BaseModel):
    """Named set of transfers, kept in configuration order"""

    model_config = ConfigDict(frozen=True)

    key: str
    transfers: Tuple[Transfer, ...] = ()

    @property
    def total(self) -> Decimal:
        return sum((t.amount for t in self.transfers), Decimal("0"))


class PlannedTransfer(BaseModel):
    model_config = ConfigDict(frozen=True)

    target: str
    account_id: int
    amount: Decimal


class DistributionPlan(BaseModel):
    """
    Balance deltas for one routed paycheck

    remainder + total_transfers == gross_amount holds exactly; remainder may
    be negative when the rule moves more than the paycheck.
    """

    model_config = ConfigDict(frozen=True)

    rule_key: str
    rule_found: bool
    gross_amount: Decimal
    primary_account_id: int
    transfers: Tuple[PlannedTransfer, ...]
    total_transfers: Decimal
    remainder: Decimal

    def account_ids(self) -> list[int]:
        """Primary first, then targets in rule order"""
        ids = [self.primary_account_id]
        for transfer in self.transfers:
            if transfer.account_id not in ids:
                ids.append(transfer.account_id)
        return ids

    def deltas(self) -> Dict[int, Decimal]:
        """Net balance change per account id"""
        result = {self.primary_account_id: self.remainder}
        for transfer in self.transfers:
            result[transfer.account_id] = result.get(transfer.account_id, Decimal("0")) + transfer.amount
        return result


class DistributionRuleTable(BaseModel):
    """
    Process-wide routing configuration

    Domain Rules:
    - Every transfer target must map to an account id
    - Targets cannot be the primary account
    - default_rule must name a configured rule
    """

    model_config = ConfigDict(frozen=True)

    primary_account_id: int
    default_rule: str
    accounts: Dict[str, int]
    rules: Dict[str, DistributionRule]

    @field_validator("rules", mode="before")
    @classmethod
    def parse_rules(cls, v):
        """Accept {rule_key: {target: amount}} as written in env.yaml"""
        parsed = {}
        for key, rule in (v or {}).items():
            if isinstance(rule, DistributionRule):
                parsed[key] = rule
                continue
            transfers = tuple(
                Transfer(target=target, amount=Decimal(str(amount)))
                for target, amount in (rule or {}).items()
            )
            parsed[key] = DistributionRule(key=key, transfers=transfers)
        return parsed

    @model_validator(mode="after")
    def check_references(self):
        if self.default_rule not in self.rules:
            raise ValueError(f"default_rule '{self.default_rule}' is not a configured rule")
        for rule in self.rules.values():
            for transfer in rule.transfers:
                account_id = self.accounts.get(transfer.target)
                if account_id is None:
                    raise ValueError(
                        f"Rule '{rule.key}' routes to unknown account key '{transfer.target}'"
                    )
                if account_id == self.primary_account_id:
                    raise ValueError(
                        f"Rule '{rule.key}' routes to the primary account via '{transfer.target}'"
                    )
        return self

    @classmethod
    def from_config(cls, raw: Mapping[str, Any]) -> "DistributionRuleTable":
        return cls.model_validate(dict(raw))

    def get_rule(self, rule_key: Optional[str] = None) -> Optional[DistributionRule]:
        """Rule for the key; None selects the default, unknown keys give None"""
        return self.rules.get(rule_key or self.default_rule)

    def plan(self, gross_amount: Decimal, rule_key: Optional[str] = None) -> DistributionPlan:
        """
        Compute the balance deltas for a paycheck

        Unknown rule keys produce an empty transfer set, leaving the whole
        gross amount in the primary account.
        """
        key = rule_key or self.default_rule
        rule = self.rules.get(key)

        planned = tuple(
            PlannedTransfer(
                target=t.target,
                account_id=self.accounts[t.target],
                amount=t.amount,
            )
            for t in (rule.transfers if rule else ())
        )
        total = sum((t.amount for t in planned), Decimal("0"))

        return DistributionPlan(
            rule_key=key,
            rule_found=rule is not None,
            gross_amount=gross_amount,
            primary_account_id=self.primary_account_id,
            transfers=planned,
            total_transfers=total,
            remainder=gross_amount - total,
        )
