# command/__init__.py

from .parser import (
    CommandArgumentParser, CommandParser, FormatInternal, HelpRequested,
    ParseError, UsageError, VersionRequested, tokenize,
)
from .dispatcher import (
    CommandDispatcher, CommandHandler, DispatchOutcome, DispatchPhase,
    Handled, HandlerFailed, HelpText, Suppressed, UserError, VersionText,
)

__all__ = [
    'CommandArgumentParser', 'CommandParser', 'FormatInternal', 'HelpRequested',
    'ParseError', 'UsageError', 'VersionRequested', 'tokenize',
    'CommandDispatcher', 'CommandHandler', 'DispatchOutcome', 'DispatchPhase',
    'Handled', 'HandlerFailed', 'HelpText', 'Suppressed', 'UserError', 'VersionText',
]
