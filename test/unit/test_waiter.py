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
from typing import Callable

import pytest

from waitloop.errors import WaitError
from waitloop.status import ConditionStatus
from waitloop.waiter import Waiter


def counter(invocation_count: int) -> Callable[..., bool]:
    """Function that returns true after `invocation_count` invocations."""
    count = 0

    def inc() -> bool:
        nonlocal count
        count += 1
        return count >= invocation_count

    return inc


def test_waiter(clock) -> None:
    waiter = Waiter(clock=clock)

    waited = waiter.wait_for(predicate_fn=counter(3), timeout=2.0)

    assert clock.sleeps == [10000, 20000]
    assert waited == pytest.approx(0.03)
    assert isinstance(waited, float)


def test_waiter_timeout(clock) -> None:
    waiter = Waiter(clock=clock)

    with pytest.raises(WaitError) as excinfo:
        waiter.wait_for(predicate_fn=counter(10000), timeout=2.0)

    assert isinstance(excinfo.value.caused_by, TimeoutError)
    assert "Timed out waiting for function inc" in str(excinfo.value)


def test_waiter_aborted(clock) -> None:
    waiter = Waiter(clock=clock)

    def aborts() -> int:
        return ConditionStatus.ABORTED

    with pytest.raises(WaitError) as excinfo:
        waiter.wait_for(predicate_fn=aborts, timeout=2.0)

    assert isinstance(excinfo.value.caused_by, RuntimeError)
    assert excinfo.value.message == (
        "Wait Error: (caused by RuntimeError): Condition aborts was not reached: status ABORTED"
    )


def test_waiter_non_blocking_failure(clock) -> None:
    waiter = Waiter(clock=clock)

    with pytest.raises(WaitError, match="status FAILED"):
        waiter.wait_for(predicate_fn=counter(2), timeout=0)


def test_waiter_runs_busy_work(clock) -> None:
    done = []
    waiter = Waiter(clock=clock)

    waiter.wait_for(predicate_fn=counter(2), timeout=2.0, busy_work=[lambda: done.append(1)])

    assert done == [1]
    assert clock.sleeps == []


def test_waiter_pred_fn_errors(clock) -> None:
    waiter = Waiter(clock=clock)

    def pred_fn() -> float:
        return 1 / 0

    with pytest.raises(ZeroDivisionError):
        waiter.wait_for(predicate_fn=pred_fn, timeout=2.0)
