# state/output.py

from typing import Iterable, List


def split_lines(text: str) -> List[str]:
    """
    Split on "\n" and "\r\n" only. A trailing line break adds no empty entry
    and an empty string gives no lines.
    """
    if not text:
        return []
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def wrap_line(line: str, width: int) -> List[str]:
    """Split a line every `width` characters. An empty line stays one empty segment."""
    if not line:
        return ['']
    return [line[i:i + width] for i in range(0, len(line), width)]


class OutputState:
    """
    Append-only scrollback log.

    Nothing is ever trimmed here; visible_lines() decides what fits on screen.
    """

    def __init__(self):
        self._history: List[str] = []

    @property
    def history(self) -> List[str]:
        return list(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def append_text(self, text: str) -> None:
        """Append text, one history entry per line."""
        self._history.extend(split_lines(text))

    def append_lines(self, lines: Iterable[str]) -> None:
        """Append each item as its own entry; an empty item is kept as a blank line."""
        for line in lines:
            self._history.extend(split_lines(line) or [''])

    def visible_lines(self, width: int, height: int) -> List[str]:
        """
        Wrap every stored line to `width`, then keep the newest `height` rows.

        Wrapping happens before windowing so a long entry takes as many rows as
        it needs and pushes older rows off the top.
        """
        if width <= 0 or height <= 0:
            return []
        wrapped = [segment for line in self._history for segment in wrap_line(line, width)]
        return wrapped[-height:]
