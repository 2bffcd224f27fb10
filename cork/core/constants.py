# cork/core/constants.py
# Constants & enums shared by the timer engine & UI

from enum import Enum


# * Default tick period in seconds for stopwatch & countdown recomputation
TICK_INTERVAL = 0.1

# remainders at or below this are treated as zero (float drift from repeated decrements)
COUNTDOWN_EPSILON = 1e-9


# * Stopwatch state machine states
class TimerState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"
