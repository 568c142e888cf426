"""
core
----

Core model-building components:

- VariableGrid:
  The dense (unit, category, slot) cube of CP-SAT boolean decision variables.

- ObjectiveAggregator:
  Collects every cost term emitted by the rules into one weighted linear objective.

- ConstraintManager:
  Register and apply rule functions in a controlled sequence.

- ShiftScheduleState / TimetableState:
  Encapsulate all inputs, parameters, and intermediate collections needed to build
  and solve a shift scheduling or timetabling problem.
"""
