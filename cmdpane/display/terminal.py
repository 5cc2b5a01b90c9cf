# display/terminal.py

from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, Tuple

from rich import box
from rich.console import Console
from rich.control import Control

from .render import DrawText, Rect


class ScreenCanvas:
    """Executes drawing instructions on the terminal through a rich Console."""

    def __init__(self, console: Optional[Console] = None, frame_box: box.Box = box.ROUNDED):
        self.console = console or Console(highlight=False)
        self.frame_box = frame_box
        self._cursor_visible = True

    @property
    def size(self) -> Tuple[int, int]:
        width, height = self.console.size
        return width, height

    def area(self) -> Rect:
        width, height = self.size
        return Rect(0, 0, width, height)

    def _is_terminal(self) -> bool:
        return self.console.is_terminal

    def _manage_cursor(self, show: bool) -> None:
        if self._cursor_visible != show and self._is_terminal():
            self._cursor_visible = show
            self.console.control(Control.show_cursor(show))

    def show_cursor(self) -> None:
        self._manage_cursor(True)

    def hide_cursor(self) -> None:
        self._manage_cursor(False)

    def clear(self) -> None:
        if self._is_terminal():
            self.console.clear()

    def draw_text(self, row: int, col: int, text: str, style: Optional[str] = None) -> None:
        width, height = self.size
        if row < 0 or row >= height or col < 0 or col >= width:
            return
        self.console.control(Control.move_to(col, row))
        self.console.out(text[:width - col], style=style, end="", highlight=False)

    def draw(self, instructions: Iterable[DrawText]) -> None:
        for item in instructions:
            self.draw_text(item.row, item.col, item.text, item.style)

    def draw_frame(self, rect: Rect, title: Optional[str] = None, style: Optional[str] = None) -> None:
        """Draw a box border along the edge of `rect`, with an optional title in the top edge."""
        if rect.width < 2 or rect.height < 2:
            return
        b = self.frame_box
        inner = rect.width - 2
        top = b.top * inner
        if title:
            label = f" {title} "[:inner]
            top = label + top[len(label):]
        self.draw_text(rect.top, rect.left, b.top_left + top + b.top_right, style)
        for row in range(rect.top + 1, rect.top + rect.height - 1):
            self.draw_text(row, rect.left, b.mid_left, style)
            self.draw_text(row, rect.left + rect.width - 1, b.mid_right, style)
        self.draw_text(rect.top + rect.height - 1, rect.left,
                       b.bottom_left + b.bottom * inner + b.bottom_right, style)

    @contextmanager
    def frame(self) -> Iterator["ScreenCanvas"]:
        """Buffer one full redraw and flush it at the end."""
        with self.console:
            self.hide_cursor()
            self.clear()
            yield self
