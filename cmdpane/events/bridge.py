# events/bridge.py

import queue
import threading
from typing import Any, Optional

from ..config import Config
from ..errors import SourceExhausted
from .source import EventSource, TerminalEventSource

# Pushed by the poller when it stops; nothing after it is ever queued
_CLOSED = object()


class EventBridge:
    """
    Background poller plus a single-producer/single-consumer queue.

    The poller thread waits up to one tick for the source to become ready,
    reads exactly one event and queues it. It stops after forwarding the
    configured exit key (unless the exit key is disabled), when the source
    fails, or when close() is called. The UI thread drains the queue with
    next_nonblocking() once per redraw.
    """

    def __init__(self, config: Optional[Config] = None,
                 source: Optional[EventSource] = None, logger=None):
        self.config = config or Config()
        self.source = source if source is not None else TerminalEventSource()
        self.logger = logger
        self._queue: "queue.Queue[Any]" = queue.Queue()
        self._ignore_exit_key = threading.Event()
        self._stop = threading.Event()
        self._exhausted = False
        self._thread: Optional[threading.Thread] = None

    @classmethod
    def start(cls, config: Optional[Config] = None,
              source: Optional[EventSource] = None, logger=None) -> "EventBridge":
        """Create a bridge and launch its poller thread."""
        bridge = cls(config=config, source=source, logger=logger)
        bridge.run()
        return bridge

    def run(self) -> None:
        if self._thread is not None:
            return
        self.source.open()
        self._thread = threading.Thread(target=self._poll_loop, name="cmdpane-events", daemon=True)
        self._thread.start()
        if self.logger:
            self.logger.debug(f"Event bridge started (exit key {self.config.exit_key!r}, "
                              f"tick {self.config.tick_interval}s)")

    def _poll_loop(self) -> None:
        try:
            while not self._stop.is_set():
                if not self.source.poll(self.config.tick_interval):
                    continue
                event = self.source.read()
                if event is None:
                    continue
                self._queue.put(event)
                if self._ignore_exit_key.is_set():
                    continue
                if self.config.is_exit_key(getattr(event, "key", None)):
                    if self.logger:
                        self.logger.debug("Exit key observed, stopping event poller")
                    return
        except OSError as e:
            if self.logger:
                self.logger.error(f"Event source failed: {e}")
        finally:
            self._queue.put(_CLOSED)

    def _take(self, item: Any) -> Any:
        if item is _CLOSED:
            self._exhausted = True
            raise SourceExhausted()
        return item

    def next_nonblocking(self) -> Optional[Any]:
        """
        Return the next queued event, or None if nothing is queued yet.

        Raises SourceExhausted once the poller has stopped and every event it
        produced has been consumed.
        """
        if self._exhausted:
            raise SourceExhausted()
        try:
            item = self._queue.get_nowait()
        except queue.Empty:
            return None
        return self._take(item)

    def next_blocking(self, timeout: Optional[float] = None) -> Optional[Any]:
        """Wait for the next event. Returns None only if `timeout` elapses."""
        if self._exhausted:
            raise SourceExhausted()
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            return None
        return self._take(item)

    def disable_exit_key(self) -> None:
        self._ignore_exit_key.set()

    def enable_exit_key(self) -> None:
        self._ignore_exit_key.clear()

    @property
    def exit_key_enabled(self) -> bool:
        return not self._ignore_exit_key.is_set()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def close(self, timeout: Optional[float] = None) -> None:
        """Stop the poller, wait for it to finish and release the source."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout if timeout is not None else self.config.tick_interval * 4)
            if self._thread.is_alive() and self.logger:
                self.logger.warning("Event poller did not stop in time")
        self.source.close()
        if self.logger:
            self.logger.debug("Event bridge closed")

    def __enter__(self) -> "EventBridge":
        self.run()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
