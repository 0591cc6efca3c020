"""Dynamic Surface Water Extent command-line configuration."""

from .cli import main, resolve
from .config import DEFAULTS, DsweConfig, validate_config
from .errors import (
    DsweArgumentError,
    HelpRequested,
    MissingArgumentsError,
    MissingOptionValueError,
    MissingRequiredArgumentError,
    OutOfRangeError,
    UnrecognizedOptionError,
)

__all__ = [
    "DEFAULTS",
    "DsweArgumentError",
    "DsweConfig",
    "HelpRequested",
    "MissingArgumentsError",
    "MissingOptionValueError",
    "MissingRequiredArgumentError",
    "OutOfRangeError",
    "UnrecognizedOptionError",
    "main",
    "resolve",
    "validate_config",
]
