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
"""Busy work: deferred, non-essential callables run by a wait loop instead of sleeping."""
import threading
from typing import Any, Callable, Iterable, List, Optional, Union


def _reraise(fault: Exception) -> Callable[[], Any]:
    def reraise() -> Any:
        raise fault

    return reraise


class BusyWork:
    """A slot holding one unit of busy work.

    Once the work raises, the slot is poisoned: its body is replaced in place by one that
    re-raises the captured exception, so anyone still holding the slot sees the same
    fault again instead of re-running the work.
    """

    def __init__(self, fn: Callable[[], Any]) -> None:
        self._fn = fn
        self._fault: Optional[Exception] = None

    def __call__(self) -> Any:
        return self._fn()

    def __repr__(self) -> str:
        name = getattr(self._fn, "__name__", repr(self._fn))
        if self._fault is not None:
            return "BusyWork({}, fault={!r})".format(name, self._fault)
        return "BusyWork({})".format(name)

    @property
    def fault(self) -> Optional[Exception]:
        """The exception the work raised, or None if it has not failed."""
        return self._fault

    def poison(self, fault: Exception) -> None:
        """Replace the work with a stand-in that raises `fault` whenever called."""
        self._fault = fault
        self._fn = _reraise(fault)


class BusyWorkQueue:
    """A FIFO of busy work, shared by reference between its owner and any number of wait loops.

    Work may be added at any time, including while loops are draining the queue. Each slot
    is handed out by pop() at most once.
    """

    def __init__(self, items: Iterable[Union[BusyWork, Callable[[], Any]]] = ()) -> None:
        self._lock = threading.Lock()
        self._slots: List[Union[BusyWork, Callable[[], Any]]] = []
        for item in items:
            self.add(item)

    @classmethod
    def shared(cls, slots: List[Union[BusyWork, Callable[[], Any]]]) -> "BusyWorkQueue":
        """Return a queue backed by the caller's own list.

        The list is consumed in place: popped work is removed from it, and work the caller
        appends to it later is picked up. Mutations the caller makes directly to the list
        don't take the queue's lock.
        """
        queue = cls()
        queue._slots = slots
        return queue

    def __len__(self) -> int:
        with self._lock:
            return len(self._slots)

    def __bool__(self) -> bool:
        return len(self) > 0

    def add(self, work: Union[BusyWork, Callable[[], Any]]) -> BusyWork:
        """Append `work` and return its slot."""
        slot = work if isinstance(work, BusyWork) else BusyWork(work)
        with self._lock:
            self._slots.append(slot)
        return slot

    def pop(self) -> Optional[BusyWork]:
        """Remove and return the oldest slot, or None if the queue is empty."""
        with self._lock:
            if not self._slots:
                return None
            work = self._slots.pop(0)
        return work if isinstance(work, BusyWork) else BusyWork(work)
