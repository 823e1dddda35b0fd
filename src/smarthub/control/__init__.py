"""Scheduling and automation for the smart-device hub.

- Scheduler: records deferred commands for later execution elsewhere
- AutomationEngine: evaluates condition -> action rules on demand
"""

from smarthub.control.automation import (
    AutomationEngine,
    AutomationRule,
    Condition,
    parse_condition,
)
from smarthub.control.scheduler import ScheduledTask, Scheduler

__all__ = [
    "Scheduler",
    "ScheduledTask",
    "AutomationEngine",
    "AutomationRule",
    "Condition",
    "parse_condition",
]
