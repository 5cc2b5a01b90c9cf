# display/render.py

"""
Pure projections from input/output state to drawing instructions.

Nothing here touches the terminal. A canvas (see terminal.py) or any other
backend executes the returned DrawText instructions.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..state import InputState, OutputState


@dataclass(frozen=True)
class Rect:
    """Screen area; x/y are the column/row of the top-left cell."""
    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    def inset(self, margin: int) -> "Rect":
        """Move the top-left corner in by `margin` and shrink by the same amount."""
        return Rect(self.x + margin, self.y + margin,
                    max(0, self.width - margin), max(0, self.height - margin))


@dataclass(frozen=True)
class DrawText:
    row: int
    col: int
    text: str
    style: Optional[str] = None


def _clip(text: str, room: int) -> str:
    return text[:max(0, room)]


class CommandInput:
    """Input line widget; only holds the prompt shown before the typed text."""

    def __init__(self, prompt: str = ""):
        self.prompt = prompt

    def set_prompt(self, prompt: str) -> None:
        self.prompt = prompt

    def render(self, state: InputState, area: Rect) -> List[DrawText]:
        return render_input(self.prompt, state, area)


def render_input(prompt: str, state: InputState, area: Rect) -> List[DrawText]:
    if area.width <= 0 or area.height <= 0:
        return []
    instructions = [DrawText(area.top, area.left, _clip(prompt, area.width))]
    room = area.width - len(prompt)
    if room > 0:
        instructions.append(DrawText(area.top, area.left + len(prompt), _clip(state.content, room)))
    return instructions


def render_output(state: OutputState, area: Rect) -> List[DrawText]:
    return [
        DrawText(area.top + offset, area.left, line)
        for offset, line in enumerate(state.visible_lines(area.width, area.height))
    ]
