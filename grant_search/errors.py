"""Error taxonomy for the search interface.

User-input errors carry the message shown to the user. They are raised
before any state is mutated and never reach the remote store. Remote-call
failures are not represented here: they are logged at the call site and
degrade to an empty result.
"""


class GrantSearchError(Exception):
    """Base class for errors raised by grant_search."""


class UserInputError(GrantSearchError):
    """Rejected user input. ``str(exc)`` is the user-visible prompt."""

    default_message = "Invalid input."

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)


class EmptySearchTermError(UserInputError):
    default_message = "Please enter a search term"


class EmptyEmailError(UserInputError):
    default_message = "Please enter your email address."


class InvalidEmailError(UserInputError):
    default_message = "Please enter a valid email address."


class NoResultsToExportError(UserInputError):
    default_message = "No grants to export. Please perform a search first."


class ExportGateClosedError(GrantSearchError):
    """An address was submitted without opening the email gate first."""
