"""Failures raised while resolving DSWE command-line arguments."""

from __future__ import annotations


class DsweArgumentError(ValueError):
    """Base class for every argument resolution failure."""

    exit_code = 1


class MissingArgumentsError(DsweArgumentError):
    def __init__(self) -> None:
        super().__init__("Missing required command line arguments")


class UnrecognizedOptionError(DsweArgumentError):
    def __init__(self, option: str, detail: str | None = None) -> None:
        message = f"Unknown option {option}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.option = option


class MissingOptionValueError(DsweArgumentError):
    def __init__(self, option: str) -> None:
        super().__init__(f"Option {option} requires a value")
        self.option = option


class MissingRequiredArgumentError(DsweArgumentError):
    def __init__(self, option: str) -> None:
        super().__init__(f"{option} is a required command line argument")
        self.option = option


class OutOfRangeError(DsweArgumentError):
    """A numeric threshold fell outside its documented range."""

    def __init__(self, parameter: str, value: float) -> None:
        super().__init__(f"{parameter} is out of range ({value!r})")
        self.parameter = parameter
        self.value = value


class HelpRequested(DsweArgumentError):
    """``--help`` was given; usage is shown and processing must not continue."""

    def __init__(self) -> None:
        super().__init__("Help requested")


__all__ = [
    "DsweArgumentError",
    "HelpRequested",
    "MissingArgumentsError",
    "MissingOptionValueError",
    "MissingRequiredArgumentError",
    "OutOfRangeError",
    "UnrecognizedOptionError",
]
