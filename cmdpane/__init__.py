# __init__.py

from .config import Config
from .errors import CmdpaneError, CommandError, SourceExhausted
from .logger import Logger
from .events import EventBridge, ScriptedEventSource, TerminalEventSource
from .state import InputState, OutputState
from .command import (
    CommandArgumentParser, CommandDispatcher, FormatInternal, HelpRequested,
    ParseError, UsageError, VersionRequested,
)
from .display import CommandInput, DrawText, Rect, ScreenCanvas, render_input, render_output
from .interface import CommandLine

__all__ = [
    "CommandLine", "Config", "Logger",
    "CmdpaneError", "CommandError", "SourceExhausted",
    "EventBridge", "ScriptedEventSource", "TerminalEventSource",
    "InputState", "OutputState",
    "CommandArgumentParser", "CommandDispatcher",
    "ParseError", "HelpRequested", "VersionRequested", "FormatInternal", "UsageError",
    "CommandInput", "DrawText", "Rect", "ScreenCanvas", "render_input", "render_output",
]
