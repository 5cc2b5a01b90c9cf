# test_dispatcher.py

import pytest
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cmdpane.errors import CommandError
from cmdpane.state import InputState, OutputState
from cmdpane.command import (
    CommandArgumentParser, CommandDispatcher, DispatchPhase, FormatInternal,
    Handled, HandlerFailed, HelpRequested, HelpText, ParseError, Suppressed,
    UsageError, UserError, VersionRequested, VersionText,
)


class MockLogger:
    def __init__(self):
        self.debug = Mock()
        self.info = Mock()
        self.warning = Mock()
        self.error = Mock()


class TestDispatchClassification:
    """Each parse result is routed to exactly one output."""

    def setup_method(self):
        self.parser = Mock()
        self.parser.render_help.return_value = "usage: app [-h]\n\noptions:\n  -h, --help"
        self.parser.render_version.return_value = "app 1.0"
        self.handler = Mock(return_value=["first", "second"])
        self.output = OutputState()
        self.logger = MockLogger()
        self.dispatcher = CommandDispatcher(self.parser, self.handler, self.output, logger=self.logger)

    def test_success_invokes_handler_once(self):
        self.parser.parse.return_value = "matches"

        outcome = self.dispatcher.dispatch("run fast")

        self.parser.parse.assert_called_once_with(["run", "fast"])
        self.handler.assert_called_once_with("matches")
        assert outcome == Handled(["first", "second"])
        assert self.output.history == ["first", "second"]

    def test_handler_object_with_handle_method(self):
        class Recorder:
            def __init__(self):
                self.seen = []

            def handle(self, matches):
                self.seen.append(matches)
                return ["done"]

        handler = Recorder()
        self.parser.parse.return_value = "m"
        dispatcher = CommandDispatcher(self.parser, handler, self.output)

        dispatcher.dispatch("x")

        assert handler.seen == ["m"]
        assert self.output.history == ["done"]

    def test_help_request(self):
        self.parser.parse.side_effect = HelpRequested()

        outcome = self.dispatcher.dispatch("--help")

        assert outcome == HelpText(self.parser.render_help.return_value)
        assert self.output.history == ["usage: app [-h]", "", "options:", "  -h, --help"]
        self.handler.assert_not_called()

    def test_help_request_with_own_text(self):
        self.parser.parse.side_effect = HelpRequested("sub help")
        self.dispatcher.dispatch("sub --help")
        assert self.output.history == ["sub help"]
        self.parser.render_help.assert_not_called()

    def test_version_request(self):
        self.parser.parse.side_effect = VersionRequested()

        outcome = self.dispatcher.dispatch("--version")

        assert outcome == VersionText("app 1.0")
        assert self.output.history == ["app 1.0"]
        self.handler.assert_not_called()

    def test_format_internal_is_suppressed(self):
        self.parser.parse.side_effect = FormatInternal("bad format")

        outcome = self.dispatcher.dispatch("anything")

        assert outcome == Suppressed()
        assert self.output.history == []
        self.handler.assert_not_called()

    def test_format_error_while_rendering_help_is_suppressed(self):
        self.parser.parse.side_effect = HelpRequested()
        self.parser.render_help.side_effect = FormatInternal("bad format")

        assert self.dispatcher.dispatch("--help") == Suppressed()
        assert self.output.history == []

    def test_usage_error(self):
        self.parser.parse.side_effect = UsageError("unrecognized arguments: --bogus")

        outcome = self.dispatcher.dispatch("--bogus")

        assert outcome == UserError("unrecognized arguments: --bogus")
        assert self.output.history == ["error: unrecognized arguments: --bogus"]
        self.handler.assert_not_called()

    def test_bare_parse_error_reads_as_usage_error(self):
        self.parser.parse.side_effect = ParseError("odd")
        self.dispatcher.dispatch("x")
        assert self.output.history == ["error: odd"]
        self.logger.warning.assert_called_once()

    def test_unexpected_parser_exception_does_not_escape(self):
        self.parser.parse.side_effect = RuntimeError("parser bug")
        assert self.dispatcher.dispatch("x") == UserError("parser bug")
        assert self.dispatcher.phase is DispatchPhase.IDLE

    def test_handler_error_rendered_verbatim(self):
        self.parser.parse.return_value = "m"
        self.handler.side_effect = CommandError("no such file: in.txt")

        outcome = self.dispatcher.dispatch("in.txt")

        assert outcome == HandlerFailed("no such file: in.txt")
        assert self.output.history == ["no such file: in.txt"]

    def test_handler_crash_is_contained(self):
        self.parser.parse.return_value = "m"
        self.handler.side_effect = ValueError("boom")

        assert self.dispatcher.dispatch("x") == HandlerFailed("boom")
        assert self.output.history == ["boom"]
        self.logger.error.assert_called_once()

    def test_phase_returns_to_idle(self):
        seen = []
        self.parser.parse.side_effect = lambda tokens: seen.append(self.dispatcher.phase) or "m"
        self.handler.side_effect = lambda matches: seen.append(self.dispatcher.phase) or []

        self.dispatcher.dispatch("x")

        assert seen == [DispatchPhase.PARSING, DispatchPhase.DISPATCHING]
        assert self.dispatcher.phase is DispatchPhase.IDLE

    def test_empty_line_is_still_parsed(self):
        self.parser.parse.return_value = "m"
        self.dispatcher.dispatch("")
        self.parser.parse.assert_called_once_with([])

    def test_non_string_handler_lines_are_converted(self):
        self.parser.parse.return_value = "m"
        self.handler.return_value = [1, 2]

        outcome = self.dispatcher.dispatch("count")

        assert outcome == Handled(["1", "2"])
        assert self.output.history == ["1", "2"]

    def test_string_handler_result_is_one_line(self):
        self.parser.parse.return_value = "m"
        self.handler.return_value = "done"

        assert self.dispatcher.dispatch("x") == Handled(["done"])
        assert self.output.history == ["done"]

    def test_non_iterable_handler_result_is_contained(self):
        self.parser.parse.return_value = "m"
        self.handler.return_value = 42

        outcome = self.dispatcher.dispatch("x")

        assert isinstance(outcome, HandlerFailed)
        assert self.dispatcher.phase is DispatchPhase.IDLE
        self.logger.error.assert_called_once()

    def test_empty_handler_error_leaves_blank_line(self):
        self.parser.parse.return_value = "m"
        self.handler.side_effect = CommandError("")

        assert self.dispatcher.dispatch("x") == HandlerFailed("")
        assert self.output.history == [""]

    def test_help_render_crash_does_not_escape(self):
        self.parser.parse.side_effect = HelpRequested()
        self.parser.render_help.side_effect = RuntimeError("help broke")

        outcome = self.dispatcher.dispatch("--help")

        assert outcome == UserError("help broke")
        assert self.output.history == ["error: help broke"]
        assert self.dispatcher.phase is DispatchPhase.IDLE
        self.logger.error.assert_called_once()

    def test_version_render_crash_does_not_escape(self):
        self.parser.parse.side_effect = VersionRequested()
        self.parser.render_version.side_effect = AttributeError("no version")

        assert self.dispatcher.dispatch("--version") == UserError("no version")
        assert self.dispatcher.phase is DispatchPhase.IDLE


class TestSubmit:
    """Submitting commits the input line before dispatching it."""

    def setup_method(self):
        self.parser = CommandArgumentParser(prog="app", version="%(prog)s 2.1")
        self.parser.add_argument('name')
        self.parser.add_argument('--shout', action='store_true')
        self.output = OutputState()
        self.handler = Mock(side_effect=lambda m: [f"hello {m.name.upper() if m.shout else m.name}"])
        self.dispatcher = CommandDispatcher(self.parser, self.handler, self.output)
        self.state = InputState()

    def _type(self, text):
        for ch in text:
            self.state.append(ch)

    def test_submit_commits_and_handles(self):
        self._type("bob --shout")

        self.dispatcher.submit(self.state)

        assert self.state.content == ""
        assert self.state.history == ["bob --shout"]
        assert self.output.history == ["hello BOB"]

    def test_submit_help(self):
        self._type("--help")
        self.dispatcher.submit(self.state)
        assert self.output.history[0].startswith("usage: app")
        self.handler.assert_not_called()

    def test_submit_version(self):
        self._type("-V")
        self.dispatcher.submit(self.state)
        assert self.output.history == ["app 2.1"]

    def test_submit_unknown_flag_gives_one_error_line(self):
        self._type("bob --loud")
        self.dispatcher.submit(self.state)
        assert self.output.history == ["error: unrecognized arguments: --loud"]
        self.handler.assert_not_called()

    def test_submit_empty_line(self):
        self.dispatcher.submit(self.state)
        assert self.state.history == [""]
        assert len(self.output.history) == 1
        assert self.output.history[0].startswith("error: ")
