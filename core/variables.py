from ortools.sat.python import cp_model
from typing import Iterator, List, Sequence, Tuple


class VariableGrid:
    """
    Dense cube of boolean decision variables indexed by `(unit, category, slot)`.

    `grid[u, c, t]` is true when unit `u` holds category `c` at slot `t`. The
    variables are created once, in a fixed `unit -> category -> slot` order, and
    are owned by the CP-SAT model; the grid only references them. Every
    accessor is bounds-checked and raises `IndexError` on an out-of-range index.
    """

    def __init__(
        self,
        model: cp_model.CpModel,
        units: Sequence,
        categories: Sequence[str],
        num_slots: int,
        prefix: str = "work",
    ):
        self.units = list(units)
        self.categories = list(categories)
        self.num_slots = num_slots
        self._vars: List[cp_model.IntVar] = [
            model.NewBoolVar(f"{prefix}{u}_{c}_{t}")
            for u in range(len(self.units))
            for c in range(len(self.categories))
            for t in range(num_slots)
        ]

    @property
    def num_units(self) -> int:
        return len(self.units)

    @property
    def num_categories(self) -> int:
        return len(self.categories)

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self.num_units, self.num_categories, self.num_slots

    def _offset(self, unit: int, category: int, slot: int) -> int:
        for name, value, size in (
            ("unit", unit, self.num_units),
            ("category", category, self.num_categories),
            ("slot", slot, self.num_slots),
        ):
            if not 0 <= value < size:
                raise IndexError(f"{name} index {value} out of range [0, {size})")
        return (unit * self.num_categories + category) * self.num_slots + slot

    def __getitem__(self, key: Tuple[int, int, int]) -> cp_model.IntVar:
        unit, category, slot = key
        return self._vars[self._offset(unit, category, slot)]

    def __len__(self) -> int:
        return len(self._vars)

    def sequence(self, unit: int, category: int) -> List[cp_model.IntVar]:
        """All slots of one unit for one category, in slot order."""
        return [self[unit, category, t] for t in range(self.num_slots)]

    def window(self, unit: int, category: int, start: int, stop: int) -> List[cp_model.IntVar]:
        """Slots `[start, stop)` of one unit for one category."""
        return [self[unit, category, t] for t in range(start, stop)]

    def across_units(self, category: int, slot: int) -> List[cp_model.IntVar]:
        """One category at one slot, for every unit in unit order."""
        return [self[u, category, slot] for u in range(self.num_units)]

    def categories_at(self, unit: int, slot: int) -> List[cp_model.IntVar]:
        """Every category of one unit at one slot."""
        return [self[unit, c, slot] for c in range(self.num_categories)]

    def items(self) -> Iterator[Tuple[Tuple[int, int, int], cp_model.IntVar]]:
        for u in range(self.num_units):
            for c in range(self.num_categories):
                for t in range(self.num_slots):
                    yield (u, c, t), self[u, c, t]
