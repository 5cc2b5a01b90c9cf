# interface.py

from typing import Any, Callable, List, Optional, Union

from prompt_toolkit.keys import Keys

from .logger import Logger
from .config import Config
from .events import EventBridge, EventSource
from .state import InputState, OutputState
from .command import CommandDispatcher, CommandHandler, CommandParser, DispatchOutcome
from .display import CommandInput, Rect, ScreenCanvas, render_output

ENTER_KEYS = (Keys.Enter, Keys.ControlJ)
BACKSPACE_KEYS = (Keys.Backspace, Keys.Delete)


class CommandLine:
    """
    Main entry point that assembles the input line, the output pane, the
    command dispatcher and the terminal event bridge.

    The host loop calls render_input()/render_output() to draw and then
    fetch_event() to consume at most one key press per tick.
    """

    def __init__(self, parser: CommandParser,
                 handler: Union[CommandHandler, Callable[[Any], List[str]]],
                 config: Optional[Config] = None,
                 logging_enabled: bool = False,
                 log_file: Optional[str] = None,
                 source: Optional[EventSource] = None):
        """
        Initialize components.

        Args:
            parser: argument parser (see cmdpane.command.CommandArgumentParser)
            handler: called with the parse result of every valid command
            config: exit key and poll interval for the event bridge
            logging_enabled: enable debug logging
            log_file: path to log file. Use "-" for stdout.
            source: event source for the bridge; defaults to the terminal
        """
        self.logger = Logger(__name__, logging_enabled, log_file)
        self.config = config or Config()
        self.state = InputState()
        self.output = OutputState()
        self.input_widget = CommandInput()
        self.dispatcher = CommandDispatcher(parser, handler, self.output, logger=self.logger)
        self._source = source
        self._exit_key_disabled = False
        self.events: Optional[EventBridge] = None
        self.logger.debug(f"Initialized command line with {type(parser).__name__}")

    def start(self) -> "CommandLine":
        """Start listening for terminal events."""
        if self.events is None:
            self.events = EventBridge(self.config, source=self._source, logger=self.logger)
            if self._exit_key_disabled:
                self.events.disable_exit_key()
            self.events.run()
        return self

    def close(self) -> None:
        if self.events is not None:
            self.events.close()
            self.events = None

    def __enter__(self) -> "CommandLine":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def write_to_output(self, text: str) -> None:
        """Write text to the output pane, one entry per line."""
        self.output.append_text(text)

    def submit(self) -> DispatchOutcome:
        """Commit the current line and run it as a command."""
        outcome = self.dispatcher.submit(self.state)
        self.logger.debug(f"Command outcome: {type(outcome).__name__}")
        return outcome

    def handle_event(self, event: Any) -> bool:
        """Apply one key press to the input line. Returns False if it was ignored."""
        key = getattr(event, "key", None)
        if key is None:
            return False
        if key in ENTER_KEYS:
            self.submit()
        elif key in BACKSPACE_KEYS:
            self.state.delete_last()
        elif key == Keys.Up:
            self.state.navigate_back()
        elif key == Keys.Down:
            self.state.navigate_forward()
        elif not isinstance(key, Keys) and len(key) == 1 and key.isprintable():
            self.state.append(key)
        else:
            return False
        return True

    def fetch_event(self) -> bool:
        """
        Take one pending event from the bridge, if any, and handle it.

        Returns True if an event was taken, even one the input line ignores.
        Raises SourceExhausted once the bridge has stopped.
        """
        if self.events is None:
            self.start()
        event = self.events.next_nonblocking()
        if event is None:
            return False
        self.handle_event(event)
        return True

    def disable_exit_key(self) -> None:
        """Let the exit key through as a normal key without stopping the bridge."""
        self._exit_key_disabled = True
        if self.events is not None:
            self.events.disable_exit_key()

    def enable_exit_key(self) -> None:
        self._exit_key_disabled = False
        if self.events is not None:
            self.events.enable_exit_key()

    def render_input(self, canvas: ScreenCanvas, area: Rect) -> None:
        canvas.draw(self.input_widget.render(self.state, area))

    def render_output(self, canvas: ScreenCanvas, area: Rect) -> None:
        canvas.draw(render_output(self.output, area))
