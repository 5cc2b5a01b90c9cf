# command/parser.py

"""
Contract between the dispatcher and the argument parser, plus an argparse
implementation of it.

A parser turns a token list into a matches object or raises one of exactly
four ParseError kinds:

    HelpRequested     -h/--help was given
    VersionRequested  --version was given
    FormatInternal    the parser failed while formatting its own text
    UsageError        the tokens do not fit the grammar
"""

import argparse
import sys
from typing import Any, List, Optional, Protocol, Sequence

from ..errors import CmdpaneError


class ParseError(CmdpaneError):
    """Base of the closed set of parse failures."""


class HelpRequested(ParseError):
    def __init__(self, text: Optional[str] = None):
        super().__init__("help requested")
        self.text = text


class VersionRequested(ParseError):
    def __init__(self, text: Optional[str] = None):
        super().__init__("version requested")
        self.text = text


class FormatInternal(ParseError):
    """Carries no message worth showing; the dispatcher stays silent."""


class UsageError(ParseError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CommandParser(Protocol):
    def parse(self, tokens: Sequence[str]) -> Any: ...
    def render_help(self) -> str: ...
    def render_version(self) -> str: ...


def tokenize(line: str) -> List[str]:
    """
    Split a command line on single spaces.

    There is no quoting or escaping, so an argument cannot contain a space.
    Consecutive spaces produce empty tokens and an empty line gives no tokens.
    """
    return line.split(' ') if line else []


# Errors argparse raises while expanding %-placeholders in help strings
_FORMAT_ERRORS = (ValueError, TypeError, KeyError)


class _HelpAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS,
                 help=None, **kwargs):
        super().__init__(option_strings=option_strings, dest=dest, default=default,
                         nargs=0, help=help, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        raise HelpRequested(parser.render_help())


class _VersionAction(argparse.Action):
    def __init__(self, option_strings, version=None, dest=argparse.SUPPRESS,
                 default=argparse.SUPPRESS, help="show program's version number and exit",
                 **kwargs):
        super().__init__(option_strings=option_strings, dest=dest, default=default,
                         nargs=0, help=help, **kwargs)
        self.version = version

    def __call__(self, parser, namespace, values, option_string=None):
        raise VersionRequested(parser.render_version(self.version))


class CommandArgumentParser(argparse.ArgumentParser):
    """
    argparse.ArgumentParser that reports instead of printing and exiting.

    Help, version and usage errors become ParseError exceptions so the
    dispatcher can route them to the output pane. Subparsers created through
    add_subparsers() inherit this class.
    """

    def __init__(self, *args, add_help: bool = True, version: Optional[str] = None, **kwargs):
        if sys.version_info >= (3, 14):
            # Help text goes to the output pane, not straight to a tty
            kwargs.setdefault('color', False)
        super().__init__(*args, add_help=False, **kwargs)
        self.register('action', 'help', _HelpAction)
        self.register('action', 'version', _VersionAction)
        self.add_help = add_help
        self.version = version
        prefix = self.prefix_chars[0]
        if add_help:
            self.add_argument(prefix + 'h', prefix * 2 + 'help', action='help',
                              help='show this help message and exit')
        if version is not None:
            self.add_argument(prefix + 'V', prefix * 2 + 'version', action='version',
                              version=version)

    def parse(self, tokens: Sequence[str]) -> argparse.Namespace:
        try:
            return self.parse_args(list(tokens))
        except argparse.ArgumentError as e:
            # Only reachable with exit_on_error=False
            raise UsageError(str(e)) from e

    def render_help(self) -> str:
        try:
            return self.format_help()
        except _FORMAT_ERRORS as e:
            raise FormatInternal(str(e)) from e

    def render_version(self, version: Optional[str] = None) -> str:
        version = version if version is not None else self.version
        if version is None:
            return self.prog
        try:
            return version % dict(prog=self.prog) if '%(prog)' in version else version
        except _FORMAT_ERRORS as e:
            raise FormatInternal(str(e)) from e

    def error(self, message: str):
        raise UsageError(message)

    def exit(self, status: int = 0, message: Optional[str] = None):
        # argparse only gets here through error() or the stock help/version
        # actions, all of which are replaced above
        raise UsageError(message.strip() if message else f"parser exited with status {status}")
