"""Default loop settings."""
from typing import Any, Dict

DEFAULT_TIMEOUT = 5.0

default_loop_settings: Dict[str, Any] = {
    "sleep_increment_us": 10000,
    "max_sleep_us": 1000000,
    "min_iteration_seconds": 0.010,
    "interrupt_wall_threshold": 0.100,
    "interrupt_cpu_ratio": 0.03,
}
