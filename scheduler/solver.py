from dataclasses import dataclass, field
from pathlib import Path
from google.protobuf import text_format
from ortools.sat.python import cp_model
import logging
from typing import Dict, List, Optional, Tuple
from core.objective import ObjectiveAggregator
from core.state import SolveStatus
from core.variables import VariableGrid
from exceptions.custom_errors import InvalidConfigError
from utils.constants import (
    SOLVER_NUM_WORKERS,
    SOLVER_RANDOM_SEED,
    SOLVER_TIME_LIMIT_SECONDS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveStats:
    """Statistics reported by the solver for one solve."""

    status: SolveStatus
    objective_value: float
    best_bound: float
    wall_time: float
    num_conflicts: int
    num_branches: int
    response_stats: str

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "objectiveValue": self.objective_value,
            "bestBound": self.best_bound,
            "wallTime": self.wall_time,
            "numConflicts": self.num_conflicts,
            "numBranches": self.num_branches,
        }


@dataclass
class SolverResult:
    """
    The read-only outcome of a solve.

    Attributes:
        status (SolveStatus): The status of the solver after the solving attempt.
        stats (SolveStats): Objective value, timing and search statistics.
        grid_values (Dict[Tuple[int, int, int], int]): Cached values of the decision grid,
            empty when there is no solution.
        term_values (List[int]): Cached values of the objective's cost term variables, in
            the aggregator's order, empty when there is no solution.
    """

    status: SolveStatus
    stats: SolveStats
    grid_values: Dict[Tuple[int, int, int], int] = field(default_factory=dict)
    term_values: List[int] = field(default_factory=list)

    @property
    def objective_value(self) -> float:
        return self.stats.objective_value


def configure_solver(
    timeout: float = SOLVER_TIME_LIMIT_SECONDS,
    seed: int = SOLVER_RANDOM_SEED,
    num_workers: int = SOLVER_NUM_WORKERS,
    params: Optional[str] = None,
) -> cp_model.CpSolver:
    """
    Configure the CP solver.

    `params` is an optional text-format SatParameters string, e.g. `"max_time_in_seconds:5.0"`.
    It is merged last, so it overrides the other arguments.
    """
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.random_seed = seed
    solver.parameters.num_workers = num_workers
    solver.parameters.log_search_progress = False
    if params:
        try:
            text_format.Merge(params, solver.parameters)
        except text_format.ParseError as e:
            raise InvalidConfigError(f"❌ Invalid solver parameters {params!r}: {e}") from e
    return solver


def get_model_size(model: cp_model.CpModel) -> Tuple[int, int]:
    """Get the number of constraints and variables in the model."""
    proto = model.Proto()
    num_constraints = len(proto.constraints)
    num_vars = len(proto.variables)
    return num_constraints, num_vars


def export_model(model: cp_model.CpModel, path: Path | str):
    """Write the model proto in text format."""
    path = Path(path)
    path.write_text(str(model.Proto()), encoding="utf-8")
    logger.info(f"📝 Model proto written to {path}")


def solve_model(
    model: cp_model.CpModel,
    grid: VariableGrid,
    objective: ObjectiveAggregator,
    timeout: float = SOLVER_TIME_LIMIT_SECONDS,
    params: Optional[str] = None,
    num_workers: int = SOLVER_NUM_WORKERS,
    seed: int = SOLVER_RANDOM_SEED,
) -> SolverResult:
    """
    Run a single, blocking solve bounded by `timeout` seconds.

    A time-out returns FEASIBLE with the best assignment found so far, or UNKNOWN when none
    was found; neither is raised. Values are cached only when an assignment exists.
    """
    num_constraints, num_vars = get_model_size(model)
    logger.info(f"→ #constraints = {num_constraints},  #vars = {num_vars}")

    solver = configure_solver(timeout, seed, num_workers, params)
    status = SolveStatus.from_cp_status(solver.Solve(model))

    stats = SolveStats(
        status=status,
        objective_value=solver.ObjectiveValue(),
        best_bound=solver.BestObjectiveBound(),
        wall_time=solver.WallTime(),
        num_conflicts=solver.NumConflicts(),
        num_branches=solver.NumBranches(),
        response_stats=solver.ResponseStats(),
    )
    logger.info(f"⏱ Solve time: {stats.wall_time:.2f} seconds, status {status.value}")

    if not status.has_solution:
        if status is SolveStatus.INFEASIBLE:
            logger.warning("⚠️ No feasible solution: the hard constraints cannot all hold.")
        elif status is SolveStatus.MODEL_INVALID:
            logger.error(f"❌ Invalid model: {model.Validate()}")
        else:
            logger.warning("⚠️ No solution found within the time limit.")
        return SolverResult(status, stats)

    grid_values = {key: solver.Value(var) for key, var in grid.items()}
    term_values = [solver.Value(t.variable) for t in objective.terms]
    logger.info(f"📊 Objective value = {stats.objective_value}")
    return SolverResult(status, stats, grid_values, term_values)
