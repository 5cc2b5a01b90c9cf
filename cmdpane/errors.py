# errors.py

class CmdpaneError(Exception):
    """Base class for errors raised by cmdpane."""


class SourceExhausted(CmdpaneError):
    """
    The background poller has stopped and no more events will arrive.

    Distinct from "no event yet": the host loop should decide whether to exit.
    """

    def __init__(self, message: str = "event source exhausted"):
        super().__init__(message)


class CommandError(CmdpaneError):
    """Raised by a command handler; the message is shown verbatim in the output."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
