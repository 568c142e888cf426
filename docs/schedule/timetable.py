timetable_description = """
Generate a weekly timetable assigning each class to (day, block) slots.

### Request Body

A `TimetableConfig` object. Omitted fields fall back to the bundled sample.

- `days`: Ordered day names (e.g. `["Mon", "Tue", "Wed", "Thu", "Fri"]`)
- `blocksPerDay`: Number of teaching blocks per day
- `teachers`: List of `{name}`
- `classes`: List of `{id, teacher, room, weeklyBlocks}`
- `roomChangePenalty`: Cost of a teacher changing rooms between consecutive blocks of a day
- `timeLimitSeconds`: Solver wall-clock limit
- `solverParams`: Optional text-format solver parameters

Hard rules: every class gets exactly `weeklyBlocks` slots, and no teacher or room holds two
classes in the same slot.

### Response

- `mode`: `"timetable"`
- `schedule`: One record per class with its room in every slot it is taught (`"Mon 0"`, ...)
- `penalties`: Every room change charged, with teacher, day and block
- `totalPenalty`, `stats`: As for shift schedules

Configuration errors (empty day list, unknown teacher, too many weekly blocks, ...) return **400**.
"""
