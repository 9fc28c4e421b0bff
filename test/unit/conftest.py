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
from typing import List

import pytest

from waitloop.clock import Clock


class FakeClock(Clock):
    """Deterministic clock. Sleeping advances the wall clock; CPU time never moves unless asked to."""

    def __init__(self, now: float = 0.0, cpu_follows_wall: bool = False) -> None:
        self.now = now
        self.cpu_follows_wall = cpu_follows_wall
        self.sleeps: List[int] = []

    @property
    def reports_cpu_time(self) -> bool:
        return not self.cpu_follows_wall

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def wall_time(self) -> float:
        return self.now

    def cpu_time(self) -> float:
        return self.now if self.cpu_follows_wall else 0.0

    def usleep(self, microseconds: int) -> None:
        self.sleeps.append(microseconds)
        self.now += microseconds / 1e6


@pytest.fixture
def clock() -> FakeClock:
    """Clock whose checks look interrupt-bound once they take over 100ms."""
    return FakeClock()


@pytest.fixture
def cpu_bound_clock() -> FakeClock:
    """Clock reporting all time as CPU time, so no check looks interrupt-bound."""
    return FakeClock(cpu_follows_wall=True)
