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
import pytest

from waitloop.status import ConditionStatus, normalize_signal, to_status


def test_status_values() -> None:
    assert ConditionStatus.REACHED == 1
    assert ConditionStatus.CONTINUE == 0
    assert ConditionStatus.FAILED == -1
    assert ConditionStatus.TIMED_OUT == -2
    assert ConditionStatus.ABORTED == -3
    assert not ConditionStatus.CONTINUE


def test_status_str() -> None:
    assert str(ConditionStatus.TIMED_OUT) == "TIMED_OUT"
    assert repr(ConditionStatus.ABORTED) == '"ABORTED"'


def test_to_status() -> None:
    assert to_status(-3) is ConditionStatus.ABORTED
    assert to_status(1) is ConditionStatus.REACHED

    other = to_status(42)
    assert other == 42
    assert not isinstance(other, ConditionStatus)


@pytest.mark.parametrize(
    "signal,expected",
    [
        (True, 1),
        (False, 0),
        (ConditionStatus.ABORTED, -3),
        (7, 7),
        (0, 0),
        (None, 0),
        ("", 0),
        ("done", 1),
        (0.5, 1),
    ],
)
def test_normalize_signal(signal, expected) -> None:
    assert normalize_signal(signal) == expected
