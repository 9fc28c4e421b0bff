# Copyright 2020 Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"). You
# may not use this file except in compliance with the License. A copy of
# the License is located at
#
#     http://aws.amazon.com/apache2.0/
#
# or in the "license" file accompanying this file. This file is
# distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF
# ANY KIND, either express or implied. See the License for the specific
# language governing permissions and limitations under the License.
"""Contains the timing settings of the wait loop."""
# https://docs.python.org/3/whatsnew/3.7.html#pep-563-postponed-evaluation-of-annotations
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from waitloop.defaults import default_loop_settings
from waitloop.errors import InputError


@dataclass(frozen=True)
class LoopSettings:
    """Dataclass representing the timing heuristics of a wait loop.

    The defaults were chosen empirically:

    * sleep_increment_us: added to the sleep delay on every iteration that really sleeps.
    * max_sleep_us: cap of the sleep delay. 10 polls sleep 10(10+100)/2 ms = 550ms in total.
    * min_iteration_seconds: least time an iteration counts for, even if the clock went back.
    * interrupt_wall_threshold: a check slower than this (in seconds) may be interrupt-bound...
    * interrupt_cpu_ratio: ...if it used at most this fraction of its wall time as CPU time.
    """

    sleep_increment_us: int = default_loop_settings["sleep_increment_us"]
    max_sleep_us: int = default_loop_settings["max_sleep_us"]
    min_iteration_seconds: float = default_loop_settings["min_iteration_seconds"]
    interrupt_wall_threshold: float = default_loop_settings["interrupt_wall_threshold"]
    interrupt_cpu_ratio: float = default_loop_settings["interrupt_cpu_ratio"]

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise InputError(
                    message="invalid loop setting {}={!r}".format(field.name, value),
                    caused_by=ValueError("must be a positive number"),
                )
        if self.sleep_increment_us > self.max_sleep_us:
            raise InputError(
                message="sleep_increment_us exceeds max_sleep_us",
                caused_by=ValueError("{} > {}".format(self.sleep_increment_us, self.max_sleep_us)),
            )

    @classmethod
    def from_dict(cls, settings: Mapping[str, Any]) -> LoopSettings:
        """Build settings from a plain mapping, e.g. parsed JSON. Missing keys keep their defaults."""
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(settings) - known)
        if unknown:
            raise InputError(
                message="unknown loop settings {}".format(", ".join(unknown)),
                caused_by=KeyError(unknown[0]),
            )
        return cls(**settings)

    def is_interrupt_bound(self, wall: float, cpu: float) -> bool:
        """Decide whether a check seemed to block on something external rather than burn CPU."""
        return wall > self.interrupt_wall_threshold and cpu <= wall * self.interrupt_cpu_ratio

    def next_sleep_us(self, sleep_us: int) -> int:
        """Return the delay following `sleep_us`, ramping linearly up to the cap."""
        return min(sleep_us + self.sleep_increment_us, self.max_sleep_us)
