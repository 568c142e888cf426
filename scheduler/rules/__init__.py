"""
scheduler.rules
---------------

Exposes all scheduling constraints by importing from:

- `fixed`: One-hot assignment, fixed pre-assignments and per-class weekly counts.
- `sequence`: Run-length (consecutive shifts) constraints with soft penalty bands.
- `sums`: Per-window count constraints with linear excess penalties.
- `transitions`: Penalised or forbidden shift successions and teacher room changes.
- `coverage`: Minimum staffing per shift and teacher/room exclusivity.
- `requests`: Direct employee requests added to the objective.

Allows unified access to all rule and constraint definitions via wildcard imports.
"""
from .fixed import *
from .sequence import *
from .sums import *
from .transitions import *
from .coverage import *
from .requests import *
