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
"""Wait loop that reaches a condition or times out."""
import logging
from typing import Any, Callable, List, Optional, Union

from waitloop.busy_work import BusyWork, BusyWorkQueue
from waitloop.clock import Clock
from waitloop.config import LoopSettings
from waitloop.defaults import DEFAULT_TIMEOUT
from waitloop.errors import InputError
from waitloop.status import ConditionStatus, StatusCode, normalize_signal, to_status


class WaitConditionLoop:
    """Polls a condition until it is reached, fails, is aborted, or the timeout elapses.

    Between checks the loop runs one item of busy work if any is queued, and otherwise
    sleeps with a delay that ramps up linearly to a cap. Checks that appear to block on
    something external (slow, with little CPU used) are not followed by a sleep.
    """

    def __init__(
        self,
        condition: Callable[[], Any],
        timeout: float = DEFAULT_TIMEOUT,
        busy_work: Optional[Union[BusyWorkQueue, List[Callable[[], Any]]]] = None,
        clock: Optional[Clock] = None,
        settings: Optional[LoopSettings] = None,
    ) -> None:
        """Initialize the loop.

        Args:
            condition: callable returning a ConditionStatus code, another integer, or a bool.
            timeout: seconds to wait. 0 or less performs a single non-blocking check.
            busy_work: queue of work to do while waiting, shared by reference. A plain list
                of callables is consumed in place.
            clock: time sources, replaceable for testing.
            settings: timing heuristics.
        """
        self.condition = condition
        self.timeout = timeout
        if busy_work is None:
            busy_work = BusyWorkQueue()
        elif isinstance(busy_work, list):
            busy_work = BusyWorkQueue.shared(busy_work)
        elif not isinstance(busy_work, BusyWorkQueue):
            raise InputError(
                message="busy work must be a BusyWorkQueue or a list",
                caused_by=TypeError(type(busy_work).__name__),
            )
        self.busy_work = busy_work
        self.clock = clock if clock is not None else Clock()
        self.settings = settings if settings is not None else LoopSettings()
        self._last_wait_time: Optional[float] = None
        self.logger = logging.getLogger(__name__)

    def invoke(self) -> StatusCode:
        """Invoke the loop and continue until either:

        * the condition returns neither CONTINUE nor False, or
        * the timeout is reached.

        A condition may thus return True (stop) or False (continue) for convenience; True is
        converted to REACHED. Any other integer it returns is passed through verbatim.

        If the timeout is 0, the condition is checked once (no busy work is done), and
        FAILED is returned if it was not met.

        Exceptions raised by busy work are caught, and the work's slot is poisoned so that
        it re-raises the exception when called again. Exceptions raised by the condition
        propagate to the caller.

        Returns:
            ConditionStatus, or the caller's own integer code.
        """
        elapsed = 0.0
        sleep_us = 0
        last_check = False
        final_result: StatusCode = ConditionStatus.TIMED_OUT
        while True:
            check_start_time = self.clock.wall_time()
            # Check if the condition is met yet
            real_start = self.clock.wall_time()
            cpu_start = self.clock.cpu_time()
            signal = self.condition()
            cpu = self.clock.cpu_time() - cpu_start
            real = self.clock.wall_time() - real_start
            check_result = normalize_signal(signal)
            # Exit if the condition is reached, an error occurs, or this is non-blocking
            if self.timeout <= 0:
                final_result = ConditionStatus.REACHED if check_result > 0 else ConditionStatus.FAILED
                break
            elif check_result != ConditionStatus.CONTINUE:
                final_result = to_status(check_result)
                break
            elif last_check:
                self.logger.info("condition not reached after {:.3f}s (timeout: {}s)".format(elapsed, self.timeout))
                break

            uses_interrupts = self.settings.is_interrupt_bound(real, cpu)
            if not self._pop_and_run_busy_work() and not uses_interrupts:
                sleep_us = self.settings.next_sleep_us(sleep_us)
                self.logger.debug("condition not reached, sleeping {}us".format(sleep_us))
                self.clock.usleep(sleep_us)
            check_end_time = self.clock.wall_time()
            # The floor protects against the clock getting set back
            elapsed += max(check_end_time - check_start_time, self.settings.min_iteration_seconds)
            # Do not let slow callbacks time out without checking the condition one more time
            last_check = elapsed >= self.timeout

        self._last_wait_time = elapsed

        return final_result

    @property
    def last_wait_time(self) -> Optional[float]:
        """Seconds spent waiting by the last invoke(), None if it was never invoked."""
        return self._last_wait_time

    def get_last_wait_time(self) -> Optional[float]:
        return self._last_wait_time

    def _pop_and_run_busy_work(self) -> bool:
        """Run one of the callbacks that does work ahead of time for another caller.

        Returns:
            Whether any busy work was run.
        """
        slot: Optional[BusyWork] = self.busy_work.pop()
        if slot is None:
            return False

        try:
            slot()
        except Exception as e:
            self.logger.warning("busy work {} failed: {}".format(slot, e), exc_info=True)
            slot.poison(e)

        return True
