"""Base exception for all vitae domain errors."""


class VitaeError(Exception):
    """
    Base class for every error that should abort a build or deploy run.

    Command-line entry points catch this type, print the message and exit
    with a non-zero status. Anything else is a bug and propagates.
    """

    pass


class ConfigError(VitaeError):
    """Raised when an environment setting cannot be interpreted."""

    def __init__(self, name: str, value: str, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name} setting {value!r}: {reason}")
