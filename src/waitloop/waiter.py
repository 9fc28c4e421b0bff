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
"""Waiter implementation."""
from typing import Any, Callable, List, Optional, Union

from waitloop.busy_work import BusyWorkQueue
from waitloop.clock import Clock
from waitloop.config import LoopSettings
from waitloop.errors import WaitError
from waitloop.loop import WaitConditionLoop
from waitloop.status import ConditionStatus


class Waiter:
    """Waits for a condition pred_fn to hold, raising if it doesn't."""

    def __init__(self, clock: Optional[Clock] = None, settings: Optional[LoopSettings] = None) -> None:
        self.clock = clock
        self.settings = settings

    def wait_for(
        self,
        predicate_fn: Callable[..., Any],
        timeout: float,
        busy_work: Optional[Union[BusyWorkQueue, List[Callable[[], Any]]]] = None,
    ) -> float:
        """Wait `timeout` seconds until `predicate_fn` is reached, returning the seconds waited."""
        loop = WaitConditionLoop(
            predicate_fn, timeout=timeout, busy_work=busy_work, clock=self.clock, settings=self.settings
        )
        status = loop.invoke()
        name = getattr(predicate_fn, "__name__", repr(predicate_fn))
        if status == ConditionStatus.REACHED:
            waited = loop.get_last_wait_time()
            # invoke() always records the wait before returning
            assert waited is not None
            return waited
        if status == ConditionStatus.TIMED_OUT:
            raise WaitError(
                "Timed out waiting for function {}".format(name), caused_by=TimeoutError(),
            )
        raise WaitError(
            "Condition {} was not reached".format(name), caused_by=RuntimeError("status {}".format(status)),
        )
