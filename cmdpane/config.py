# config.py

from dataclasses import dataclass
from typing import Union

from prompt_toolkit.keys import Keys

# A key is either a single character or a named prompt_toolkit key
Key = Union[Keys, str]

DEFAULT_EXIT_KEY: Key = "q"
DEFAULT_TICK_INTERVAL = 0.25

@dataclass(frozen=True)
class Config:
    """
    Settings for the event bridge.

    exit_key: key press that stops the background poller (unless suppressed)
    tick_interval: seconds the poller waits for input on each iteration
    """
    exit_key: Key = DEFAULT_EXIT_KEY
    tick_interval: float = DEFAULT_TICK_INTERVAL

    def __post_init__(self):
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval!r}")
        if not isinstance(self.exit_key, Keys) and len(self.exit_key) != 1:
            raise ValueError(f"exit_key must be a single character or a Keys member, got {self.exit_key!r}")

    def is_exit_key(self, key) -> bool:
        """Check a key press' key against the configured exit key."""
        return key is not None and key == self.exit_key
