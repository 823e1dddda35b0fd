"""Condition -> action automation rules.

Rules are evaluated on demand against a thermostat. A condition is three
whitespace-separated tokens, ``<property> <operator> <value>``, for
example ``"temperature > 75"``. Only the ``temperature`` property and the
``>`` operator are recognized; any other rule simply never fires.

Fired actions are reported, not executed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smarthub.devices.thermostat import Thermostat

logger = logging.getLogger(__name__)

SUPPORTED_PROPERTIES = frozenset({"temperature"})
SUPPORTED_OPERATORS = frozenset({">"})
_INTEGER = re.compile(r"-?\d+", re.ASCII)


@dataclass(frozen=True)
class Condition:
    """A parsed rule condition.

    Attributes:
        property: Device property the condition reads.
        operator: Comparison operator token.
        value: Integer threshold.
    """

    property: str
    operator: str
    value: int

    @property
    def supported(self) -> bool:
        """Whether the property/operator pair can ever be satisfied."""
        return (
            self.property in SUPPORTED_PROPERTIES
            and self.operator in SUPPORTED_OPERATORS
        )

    def is_met(self, thermostat: Thermostat) -> bool:
        """Check the condition against a thermostat."""
        if not self.supported:
            return False
        return thermostat.temperature > self.value


def parse_condition(text: str) -> Condition | None:
    """Parse a condition expression.

    Args:
        text: Expression such as ``"temperature > 75"``.

    Returns:
        The parsed condition, or None if the expression does not have
        exactly three tokens or the value is not an integer.
    """
    tokens = text.split()
    if len(tokens) != 3:
        return None

    prop, operator, raw_value = tokens
    # Plain ASCII digits only; int() would also take "7_5" and "+75"
    if _INTEGER.fullmatch(raw_value) is None:
        return None

    return Condition(property=prop, operator=operator, value=int(raw_value))


@dataclass(frozen=True)
class AutomationRule:
    """A condition -> action pair.

    Attributes:
        condition: Condition expression, unvalidated.
        action: Descriptive action text.
    """

    condition: str
    action: str

    def fires_for(self, thermostat: Thermostat) -> bool:
        """Whether this rule fires against a thermostat."""
        parsed = parse_condition(self.condition)
        if parsed is None:
            logger.debug("Skipping malformed condition %r", self.condition)
            return False
        return parsed.is_met(thermostat)


class AutomationEngine:
    """Stores automation rules and evaluates them against a thermostat."""

    def __init__(self) -> None:
        self._rules: list[AutomationRule] = []

    def add_rule(self, condition: str, action: str) -> AutomationRule:
        """Add a rule. No deduplication or validation is done.

        Args:
            condition: Condition expression.
            action: Action text reported when the rule fires.

        Returns:
            The stored rule.
        """
        rule = AutomationRule(condition=condition, action=action)
        self._rules.append(rule)
        logger.info("Added trigger: %s -> %s", condition, action)
        return rule

    def list_rules(self) -> list[AutomationRule]:
        """All rules in insertion order."""
        return list(self._rules)

    def evaluate(self, thermostat: Thermostat) -> list[str]:
        """Evaluate every rule against a thermostat.

        Malformed rules are skipped without raising and do not stop the
        remaining rules from being evaluated.

        Args:
            thermostat: Device whose state the conditions read.

        Returns:
            Actions of the rules that fired, in rule order.
        """
        fired: list[str] = []
        for rule in self._rules:
            if rule.fires_for(thermostat):
                logger.info(
                    "Trigger met: %s. Executing: %s", rule.condition, rule.action
                )
                fired.append(rule.action)
        return fired

    def clear(self) -> None:
        """Remove all rules."""
        self._rules.clear()

    def __len__(self) -> int:
        return len(self._rules)
