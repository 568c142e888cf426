"""
scheduler
---------

Main scheduling module. Initializes key components:

- `setup`: Model and decision grid creation.
- `rules`: The constraint compilers.
- `builder`: Model construction and constraint setup.
- `solver`: CP-SAT configuration and the single solve.
- `extractor`: Decoding a solution into a report.
- `runner`: Solving and result handling logic.

Provides high-level access to core scheduling functionality.
"""
from . import builder, runner
