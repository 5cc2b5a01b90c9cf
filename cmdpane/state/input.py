# state/input.py

from typing import List


class InputState:
    """
    The editable command line and the history of committed commands.

    history_index points into history counted from the newest entry: 0 is the
    most recent command, len(history) - 1 the oldest. Navigation clamps at both
    ends and is a no-op while the history is empty.
    """

    def __init__(self):
        self._content: List[str] = []
        self._history: List[str] = []
        self._history_index = 0

    @property
    def content(self) -> str:
        return ''.join(self._content)

    @property
    def history(self) -> List[str]:
        return list(self._history)

    @property
    def history_index(self) -> int:
        return self._history_index

    def is_empty(self) -> bool:
        return not self._content

    def append(self, char: str) -> None:
        self._content.append(char)

    def delete_last(self) -> None:
        if self._content:
            self._content.pop()

    def reset(self) -> None:
        """Clear the line; history is left alone."""
        self._content.clear()

    def commit(self) -> str:
        """Move the line into history, clear it and return what was typed."""
        command = self.content
        self._history.append(command)
        self.reset()
        return command

    enter = commit

    def _entry(self, index: int) -> str:
        return self._history[len(self._history) - 1 - index]

    def navigate_back(self) -> None:
        """Step toward older entries and load that entry into the line."""
        if not self._history:
            return
        self._history_index = min(self._history_index + 1, len(self._history) - 1)
        self._content = list(self._entry(self._history_index))

    def navigate_forward(self) -> None:
        """Step toward newer entries and load that entry into the line."""
        if not self._history:
            return
        # Stop at the newest entry rather than going negative
        if self._history_index > 0:
            self._history_index -= 1
        self._content = list(self._entry(self._history_index))
