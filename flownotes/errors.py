"""Errors raised by the note and PDF stores."""


class FlowNotesError(Exception):
    """Base class for all store failures.

    Attributes:
        kind: Short tag identifying the failure category at the API boundary.
    """

    kind = "error"


class ConfigError(FlowNotesError):
    """The application data directory could not be determined."""

    kind = "config"


class StoreIOError(FlowNotesError):
    """Creating, reading, writing or deleting a file failed."""

    kind = "io"


class NotFoundError(FlowNotesError):
    """No record is stored under the requested id."""

    kind = "not_found"


class ParseError(FlowNotesError):
    """A stored file is not valid JSON or does not match the record shape."""

    kind = "parse"


class InvalidIdError(FlowNotesError):
    """The id cannot be used as a filename stem."""

    kind = "invalid_id"
