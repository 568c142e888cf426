from typing import Any, Callable
import logging

logger = logging.getLogger(__name__)


class ConstraintManager:
    def __init__(self, model, state: Any):
        self.model = model
        self.state = state
        self.rules: list[Callable] = []

    def add_rule(self, rule_func: Callable, condition: bool = True):
        """Register a rule with optional enablement condition."""
        if condition:
            self.rules.append(rule_func)

    def apply_all(self):
        """Apply all registered rules in order."""
        for rule in self.rules:
            before = len(self.model.Proto().constraints)
            rule(self.model, self.state)
            added = len(self.model.Proto().constraints) - before
            logger.info(f"→ {rule.__name__}: {added} constraints")
