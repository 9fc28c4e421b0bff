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
"""Time sources used by the wait loop."""
import logging
import time
from typing import Callable, Optional

import psutil


class Clock:
    """Wall clock, CPU clock, and sleep used by a wait loop.

    This exists so that tests can substitute deterministic time; override the methods or
    pass replacement functions.
    """

    def __init__(
        self,
        wall_fn: Callable[[], float] = lambda: time.time(),
        sleep_fn: Callable[[float], None] = lambda seconds: time.sleep(seconds),
        process: Optional[psutil.Process] = None,
    ) -> None:
        self._wall_fn = wall_fn
        self._sleep_fn = sleep_fn
        self.logger = logging.getLogger(__name__)
        self._process = process if process is not None else self._current_process()

    def _current_process(self) -> Optional[psutil.Process]:
        try:
            process = psutil.Process()
            process.cpu_times()
        except (psutil.Error, NotImplementedError, OSError) as e:
            self.logger.info("CPU time is not available, treating all time as CPU time: {}".format(e))
            return None
        return process

    @property
    def reports_cpu_time(self) -> bool:
        """Whether cpu_time() measures real CPU usage rather than falling back to the wall clock."""
        return self._process is not None

    def wall_time(self) -> float:
        """Return the wall clock time in seconds."""
        return self._wall_fn()

    def cpu_time(self) -> float:
        """Return the user plus system CPU seconds used by this process.

        Returns the wall clock if CPU usage can't be reported, so every check looks CPU-bound.
        """
        if self._process is None:
            # assume worst case (all time is CPU)
            return self.wall_time()

        cpu_times = self._process.cpu_times()
        return cpu_times.user + cpu_times.system

    def usleep(self, microseconds: int) -> None:
        """Block for `microseconds`."""
        self._sleep_fn(microseconds / 1e6)
