from dataclasses import dataclass
from ortools.sat.python import cp_model
from typing import Any, Iterable, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PenaltyRecord:
    """Human-readable context of a cost term, used only when reporting."""

    rule: str
    """Name of the rule that created the term, e.g. `shift_constraint`."""
    context: str
    """Unit and slot context, e.g. `employee 3, shift 3`."""
    unit: Optional[Any] = None
    """The unit the term belongs to, if any."""
    detail: str = ""
    """Extra detail, e.g. `under_span(start=4, length=1)`."""

    @property
    def name(self) -> str:
        label = f"{self.rule}({self.context})"
        return f"{label}: {self.detail}" if self.detail else label


@dataclass(frozen=True)
class CostTerm:
    """A `(variable, coefficient)` pair of the objective.

    A positive coefficient is a penalty paid when the variable is true/positive,
    a negative one is a gain.
    """

    variable: Any
    coefficient: int
    record: PenaltyRecord
    is_integer: bool = False
    """True for excess integer variables, False for boolean indicators."""


class ObjectiveAggregator:
    """Collects the cost terms of every rule into one weighted linear objective."""

    def __init__(self):
        self._terms: list[CostTerm] = []

    def add(self, term: CostTerm):
        self._terms.append(term)

    def extend(self, terms: Iterable[CostTerm]):
        self._terms.extend(terms)

    @property
    def terms(self) -> Tuple[CostTerm, ...]:
        return tuple(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def expression(self):
        """The weighted sum of every collected term (0 when there are none)."""
        return sum(t.coefficient * t.variable for t in self._terms)

    def apply(self, model: cp_model.CpModel) -> bool:
        """Set the objective to minimise. Without terms the model stays a pure feasibility problem."""
        if not self._terms:
            logger.info("No cost terms: solving for feasibility only.")
            return False
        model.Minimize(self.expression())
        logger.info(f"Objective built from {len(self._terms)} cost terms.")
        return True
