# command/dispatcher.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Protocol, Union

from ..errors import CommandError
from ..state import InputState, OutputState
from .parser import (
    CommandParser, FormatInternal, HelpRequested, ParseError, UsageError,
    VersionRequested, tokenize,
)


class CommandHandler(Protocol):
    """Host callback run once per successfully parsed command."""

    def handle(self, matches: Any) -> List[str]: ...


@dataclass
class Handled:
    lines: List[str] = field(default_factory=list)

@dataclass
class HandlerFailed:
    message: str

@dataclass
class HelpText:
    text: str

@dataclass
class VersionText:
    text: str

@dataclass
class UserError:
    message: str

@dataclass
class Suppressed:
    pass

DispatchOutcome = Union[Handled, HandlerFailed, HelpText, VersionText, UserError, Suppressed]


class DispatchPhase(Enum):
    IDLE = "idle"
    TOKENIZING = "tokenizing"
    PARSING = "parsing"
    DISPATCHING = "dispatching"
    DIAGNOSING = "diagnosing"


class CommandDispatcher:
    """
    Runs one submit cycle: tokenize, parse, then either call the handler or
    write a diagnostic to the output state.

    No branch raises. Every cycle ends with lines appended to the output or,
    for parser formatting failures, with nothing at all.
    """

    def __init__(self, parser: CommandParser,
                 handler: Union[CommandHandler, Callable[[Any], List[str]]],
                 output: OutputState, logger=None):
        self.parser = parser
        self.output = output
        self.logger = logger
        # Objects implementing CommandHandler win over plain callables
        self._handle = handler.handle if hasattr(type(handler), "handle") else handler
        self.phase = DispatchPhase.IDLE

    def _enter(self, phase: DispatchPhase) -> None:
        if self.logger:
            self.logger.debug(f"Dispatch phase: {self.phase.value} -> {phase.value}")
        self.phase = phase

    def submit(self, state: InputState) -> DispatchOutcome:
        """Commit the input line to history and dispatch it."""
        return self.dispatch(state.commit())

    def dispatch(self, line: str) -> DispatchOutcome:
        try:
            self._enter(DispatchPhase.TOKENIZING)
            tokens = tokenize(line)

            self._enter(DispatchPhase.PARSING)
            try:
                matches = self.parser.parse(tokens)
            except ParseError as e:
                self._enter(DispatchPhase.DIAGNOSING)
                outcome = self._diagnose(e)
            except Exception as e:
                if self.logger:
                    self.logger.error(f"Parser raised: {e}", exc_info=True)
                self._enter(DispatchPhase.DIAGNOSING)
                outcome = UserError(str(e))
            else:
                self._enter(DispatchPhase.DISPATCHING)
                outcome = self._run_handler(matches)

            self._apply(outcome)
            return outcome
        finally:
            self._enter(DispatchPhase.IDLE)

    def _run_handler(self, matches: Any) -> DispatchOutcome:
        try:
            result = self._handle(matches)
            if result is None:
                lines = []
            elif isinstance(result, str):
                lines = [result]
            else:
                lines = [str(line) for line in result]
            return Handled(lines)
        except CommandError as e:
            return HandlerFailed(e.message)
        except Exception as e:
            if self.logger:
                self.logger.error(f"Command handler raised: {e}", exc_info=True)
            return HandlerFailed(str(e))

    def _diagnose(self, error: ParseError) -> DispatchOutcome:
        try:
            if isinstance(error, HelpRequested):
                return HelpText(error.text if error.text is not None else self.parser.render_help())
            if isinstance(error, VersionRequested):
                return VersionText(error.text if error.text is not None else self.parser.render_version())
        except FormatInternal:
            return self._suppress()
        except Exception as e:
            if self.logger:
                self.logger.error(f"Rendering parser text raised: {e}", exc_info=True)
            return UserError(str(e))
        if isinstance(error, FormatInternal):
            return self._suppress()
        if isinstance(error, UsageError):
            return UserError(error.message)
        # A bare ParseError from a custom parser is reported like a usage error
        if self.logger:
            self.logger.warning(f"Unclassified parse error {type(error).__name__}: {error}")
        return UserError(str(error))

    def _suppress(self) -> Suppressed:
        if self.logger:
            self.logger.debug("Parser formatting error suppressed")
        return Suppressed()

    def _apply(self, outcome: DispatchOutcome) -> None:
        if isinstance(outcome, Handled):
            self.output.append_lines(outcome.lines)
        elif isinstance(outcome, HandlerFailed):
            # An empty message still leaves a visible blank entry
            self.output.append_lines([outcome.message])
        elif isinstance(outcome, HelpText):
            self.output.append_text(outcome.text)
        elif isinstance(outcome, VersionText):
            self.output.append_text(outcome.text)
        elif isinstance(outcome, UserError):
            self.output.append_text(f"error: {outcome.message}")
