"""Errors raised while scaffolding a project."""


class ScaffoldError(Exception):
    """Base class for scaffolding failures."""

    pass


class UserInputError(ScaffoldError):
    """Raised for invalid user input (missing name, existing directory, ...).

    Reported to the user without a non-zero exit code.
    """

    pass


class FilesystemError(ScaffoldError):
    """Raised when a directory or file cannot be created or copied.

    Fatal: aborts the whole command. Files already written are left in place.
    """

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
