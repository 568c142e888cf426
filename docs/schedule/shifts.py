shift_schedule_description = """
Generate an employee shift schedule that satisfies every hard rule and minimises the weighted
sum of soft-rule penalties.

### Request Body

A `ShiftProblem` object. Every field is optional; omitted fields fall back to the bundled
8-employee, 3-week sample.

- `numEmployees`: Number of employees
- `numWeeks`: Number of weeks in the horizon (7 days each)
- `shifts`: Shift labels; index 0 is the off shift (e.g. `["O", "M", "A", "N"]`)
- `fixedAssignments`: List of `{employee, shift, day}` that every solution must keep
- `requests`: List of `{employee, shift, day, weight}`; a negative weight rewards granting the request
- `shiftConstraints`: Run-length rules `{shift, hardMin, softMin, minCost, softMax, hardMax, maxCost}`
- `weeklySumConstraints`: Per-week count rules, same shape as `shiftConstraints`
- `penalizedTransitions`: List of `{previousShift, nextShift, penalty}`; penalty 0 forbids the succession
- `weeklyCoverDemands`: For each day of the week, the minimum staffing of each non-off shift
- `excessCoverPenalties`: Penalty per employee above the demand, one per non-off shift
- `timeLimitSeconds`: Solver wall-clock limit
- `solverParams`: Optional text-format solver parameters (e.g. `"num_workers:4"`)

### Response

- `mode`: `"shifts"`
- `schedule`: One record per employee with the shift label of every day (`w0d0`, `w0d1`, ...)
- `penalties`: Every active cost term with its rule, context, coefficient, value and penalty
- `totalPenalty`: Sum of the active penalties (equals the objective value)
- `stats`: Solver status, objective value, best bound and wall time

A problem proven infeasible returns **422**; a time-out without any solution returns **504**.
"""
