"""Per-frame callback scheduling driven by the host loop."""

from __future__ import annotations

import itertools
from typing import Callable

FrameCallback = Callable[[float], None]


class FrameScheduler:
    """Queue of callbacks to run on the next display frame.

    Callbacks requested while a frame is running are deferred to the
    following frame, so a callback that reschedules itself runs once per
    frame. Cancelling a handle that is due in the running frame still
    prevents it from running.
    """

    def __init__(self) -> None:
        self._pending: dict[int, FrameCallback] = {}
        self._due: dict[int, FrameCallback] = {}
        self._handles = itertools.count(1)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._handles)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)
        self._due.pop(handle, None)

    def run_pending(self, timestamp: float) -> int:
        """Run every callback due this frame; return how many ran."""
        self._due, self._pending = self._pending, {}
        ran = 0
        while self._due:
            handle = next(iter(self._due))
            callback = self._due.pop(handle)
            callback(timestamp)
            ran += 1
        return ran

    def __len__(self) -> int:
        return len(self._pending)
