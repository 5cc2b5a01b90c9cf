# display/__init__.py

from .render import CommandInput, DrawText, Rect, render_input, render_output
from .terminal import ScreenCanvas

__all__ = ['CommandInput', 'DrawText', 'Rect', 'ScreenCanvas', 'render_input', 'render_output']
