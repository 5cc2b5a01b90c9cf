# state/__init__.py

from .input import InputState
from .output import OutputState, split_lines, wrap_line

__all__ = ['InputState', 'OutputState', 'split_lines', 'wrap_line']
