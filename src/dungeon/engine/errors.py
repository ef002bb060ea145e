"""Failures raised by command actions and reported by the dispatcher."""


class CommandError(Exception):
    """A command could not be carried out. The session continues."""


class UnknownCommand(CommandError):
    def __init__(self, verb: str):
        super().__init__(f"Unknown command: {verb}")
        self.verb = verb


class InvalidArgument(CommandError):
    """Missing or unusable argument."""


class NotFound(CommandError):
    """A named item or save slot is not where it was expected."""


class InvalidState(CommandError):
    """The action's precondition does not hold."""
