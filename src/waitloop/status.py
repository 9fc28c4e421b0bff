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
"""Status codes returned by a wait loop and normalization of condition signals."""
from enum import IntEnum
from typing import Any, Union


class ConditionStatus(IntEnum):
    """Enum of wait loop results. The integer values are part of the public contract."""

    REACHED = 1
    # evaluates as falsey
    CONTINUE = 0
    FAILED = -1
    TIMED_OUT = -2
    ABORTED = -3

    def __repr__(self) -> str:
        return '"{}"'.format(self.name)

    def __str__(self) -> str:
        return "{}".format(self.name)


StatusCode = Union[ConditionStatus, int]


def to_status(code: int) -> StatusCode:
    """Return the ConditionStatus member for `code`, or `code` itself if it is not a known status."""
    try:
        return ConditionStatus(code)
    except ValueError:
        return code


def normalize_signal(signal: Any) -> int:
    """Normalize what a condition returned to an integer signal.

    Booleans map to REACHED/CONTINUE, integers pass through unchanged, and any other
    value maps to REACHED if truthy and CONTINUE otherwise.
    """
    if isinstance(signal, bool):
        return int(ConditionStatus.REACHED if signal else ConditionStatus.CONTINUE)
    if isinstance(signal, int):
        return int(signal)
    return int(ConditionStatus.REACHED if signal else ConditionStatus.CONTINUE)
