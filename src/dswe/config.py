"""Configuration objects for the Dynamic Surface Water Extent tool."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, Tuple

from .errors import MissingRequiredArgumentError, OutOfRangeError

MINSIGMA = 1e-6
"""Tolerance applied to every bounded float comparison."""


@dataclass(frozen=True)
class DsweConfig:
    """Validated command-line parameters handed to the DSWE pipeline."""

    xml_path: str
    """Input ESPA XML metadata file; its contents are not inspected here."""
    use_ledaps_mask: bool = False
    use_zeven_thorne: bool = False
    use_toa: bool = False
    verbose: bool = False
    wigt: float = 0.015
    """Modified Normalized Difference Wetness Index threshold."""
    awgt: float = 0.0
    """Automated Water Extent shadow threshold."""
    pswt: float = -0.05
    """Partial surface water threshold."""
    pswnt: int = 1500
    """Partial surface water NIR threshold."""
    pswst: int = 1000
    """Partial surface water SWIR1 threshold."""
    percent_slope: float = 3.0

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


DEFAULTS = DsweConfig(xml_path="")

# Checked in this order; the first violation is reported.
FLOAT_RANGES: Tuple[Tuple[str, str, float, float], ...] = (
    ("wigt", "WIGT", 0.0, 2.0),
    ("awgt", "AWGT", -2.0, 2.0),
    ("pswt", "PSWT", -2.0, 2.0),
)
INT_LOWER_BOUNDS: Tuple[Tuple[str, str, int], ...] = (
    ("pswnt", "PSWNT", 0),
    ("pswst", "PSWST", 0),
)
PERCENT_SLOPE_RANGE: Tuple[str, str, float, float] = ("percent_slope", "PercentSlope", 0.0, 100.0)


def within_range(value: float, lower: float, upper: float) -> bool:
    """Return True when ``value`` lies in ``[lower, upper]`` give or take ``MINSIGMA``."""

    if math.isnan(value):
        return False
    return lower - MINSIGMA <= value <= upper + MINSIGMA


def validate_config(config: DsweConfig) -> DsweConfig:
    """Raise on the first invalid field of ``config``, otherwise return it unchanged."""

    if not config.xml_path:
        raise MissingRequiredArgumentError("--xml")

    for field_name, label, lower, upper in FLOAT_RANGES:
        value = getattr(config, field_name)
        if not within_range(value, lower, upper):
            raise OutOfRangeError(label, value)

    for field_name, label, lower in INT_LOWER_BOUNDS:
        value = getattr(config, field_name)
        if value < lower:
            raise OutOfRangeError(label, value)

    field_name, label, lower, upper = PERCENT_SLOPE_RANGE
    value = getattr(config, field_name)
    if not within_range(value, lower, upper):
        raise OutOfRangeError(label, value)

    return config


__all__ = [
    "DEFAULTS",
    "DsweConfig",
    "MINSIGMA",
    "validate_config",
    "within_range",
]
