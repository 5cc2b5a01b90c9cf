# events/__init__.py

from .bridge import EventBridge
from .source import EventSource, ScriptedEventSource, TerminalEventSource

__all__ = ['EventBridge', 'EventSource', 'ScriptedEventSource', 'TerminalEventSource']
