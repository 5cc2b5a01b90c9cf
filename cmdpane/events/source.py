# events/source.py

import select
import time
from collections import deque
from contextlib import ExitStack
from typing import Any, Iterable, Optional, Protocol

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyPress


class EventSource(Protocol):
    """Terminal-side collaborator polled by the event bridge."""

    def open(self) -> None: ...
    def poll(self, timeout: float) -> bool: ...
    def read(self) -> Optional[Any]: ...
    def close(self) -> None: ...


class TerminalEventSource:
    """
    Reads key presses from the controlling terminal through prompt_toolkit.

    The terminal is put in raw mode between open() and close(). One read of the
    underlying input can decode several key presses; the extra ones are kept
    and handed out by later read() calls.
    """

    def __init__(self, input: Optional[Input] = None):
        self._input = input or create_input()
        self._pending: deque = deque()
        self._modes: Optional[ExitStack] = None

    def open(self) -> None:
        if self._modes is not None:
            return
        self._modes = ExitStack()
        self._modes.enter_context(self._input.raw_mode())

    def poll(self, timeout: float) -> bool:
        if self._pending:
            return True
        ready, _, _ = select.select([self._input.fileno()], [], [], timeout)
        return bool(ready)

    def read(self) -> Optional[KeyPress]:
        if not self._pending:
            self._pending.extend(self._input.read_keys())
            if not self._pending:
                # A lone escape stays buffered in the parser until flushed
                self._pending.extend(self._input.flush_keys())
        return self._pending.popleft() if self._pending else None

    def close(self) -> None:
        if self._modes is not None:
            self._modes.close()
            self._modes = None
        self._input.close()


class ScriptedEventSource:
    """
    Replays a fixed sequence of events, then reports nothing ready.

    Used for tests and for hosts that feed events from somewhere other than a tty.
    """

    def __init__(self, events: Iterable[Any] = ()):
        self._events: deque = deque(events)
        self.opened = False
        self.closed = False

    def push(self, event: Any) -> None:
        self._events.append(event)

    def open(self) -> None:
        self.opened = True

    def poll(self, timeout: float) -> bool:
        if self._events:
            return True
        # Nothing scripted; behave like an idle terminal for one tick
        time.sleep(timeout)
        return False

    def read(self) -> Optional[Any]:
        return self._events.popleft() if self._events else None

    def close(self) -> None:
        self.closed = True
