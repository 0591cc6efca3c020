"""Command-line argument resolution for the DSWE batch tool."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Callable, Optional, Sequence, TextIO, TypeVar

from .config import DEFAULTS, DsweConfig, validate_config
from .errors import (
    DsweArgumentError,
    HelpRequested,
    MissingArgumentsError,
    MissingOptionValueError,
    UnrecognizedOptionError,
)
from .usage import USAGE


LOGGER = logging.getLogger(__name__)

PROG = "dswe"

VALUE_OPTIONS = ("xml", "wigt", "awgt", "pswt", "pswnt", "pswst", "percent-slope")
FLAG_OPTIONS = ("use-ledaps-mask", "use-zeven-thorne", "use-toa", "verbose", "help")
OPTION_NAMES = VALUE_OPTIONS + FLAG_OPTIONS

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

T = TypeVar("T", int, float)


def atof(text: str) -> float:
    """Convert the longest numeric prefix of ``text`` to a float, 0.0 if there is none."""

    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def atoi(text: str) -> int:
    """Convert the leading digit run of ``text`` to an int, 0 if there is none."""

    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _lenient(option: str, convert: Callable[[str], T], pattern: re.Pattern) -> Callable[[str], T]:
    def _convert(text: str) -> T:
        value = convert(text)
        match = pattern.match(text)
        if match is None or match.end(1) != len(text.rstrip()):
            LOGGER.warning("--%s: could not fully parse %r, using %r", option, text, value)
        return value

    _convert.__name__ = convert.__name__
    return _convert


def _lenient_float(option: str) -> Callable[[str], float]:
    return _lenient(option, atof, _FLOAT_PREFIX)


def _lenient_int(option: str) -> Callable[[str], int]:
    return _lenient(option, atoi, _INT_PREFIX)


class _HelpAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        raise HelpRequested()


class _ResolverParser(argparse.ArgumentParser):
    """Argument parser that raises instead of printing and exiting."""

    def error(self, message):
        raise DsweArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    # Help is rendered from usage.USAGE, so the actions carry no help strings.
    parser = _ResolverParser(prog=PROG, add_help=False, allow_abbrev=False, exit_on_error=False)
    parser.add_argument("--xml", dest="xml_path", default=DEFAULTS.xml_path)
    parser.add_argument("--wigt", type=_lenient_float("wigt"), default=DEFAULTS.wigt)
    parser.add_argument("--awgt", type=_lenient_float("awgt"), default=DEFAULTS.awgt)
    parser.add_argument("--pswt", type=_lenient_float("pswt"), default=DEFAULTS.pswt)
    parser.add_argument("--pswnt", type=_lenient_int("pswnt"), default=DEFAULTS.pswnt)
    parser.add_argument("--pswst", type=_lenient_int("pswst"), default=DEFAULTS.pswst)
    parser.add_argument("--percent-slope", type=_lenient_float("percent-slope"),
                        default=DEFAULTS.percent_slope)
    parser.add_argument("--use-ledaps-mask", action="store_true")
    parser.add_argument("--use-zeven-thorne", action="store_true")
    parser.add_argument("--use-toa", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--help", action=_HelpAction)
    return parser


def expand_abbreviation(token: str) -> str:
    """Expand an unambiguous long-option prefix such as ``--perc=5`` to its full name."""

    if not token.startswith("--") or token == "--":
        return token
    name, sep, value = token[2:].partition("=")
    if name in OPTION_NAMES:
        return token
    matches = [candidate for candidate in OPTION_NAMES if candidate.startswith(name)]
    if len(matches) != 1:
        return token
    return f"--{matches[0]}{sep}{value}"


def _is_option(token: str) -> bool:
    name = expand_abbreviation(token)[2:].partition("=")[0]
    return token.startswith("--") and name in OPTION_NAMES


def _expand_tokens(tokens: Sequence[str]) -> list[str]:
    """Expand abbreviations and join each value option with its value token.

    ``--awgt -1e-1`` becomes ``--awgt=-1e-1`` so a value starting with ``-``
    is never mistaken for an option. A value option followed by another
    recognized option or by nothing is left alone and reported as missing its
    value; any other following token, ``--`` included, is its value.
    """

    expanded = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token == "--":
            expanded.extend(tokens[index:])
            break
        token = expand_abbreviation(token)
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if (
            token[2:] in VALUE_OPTIONS
            and following is not None
            and not _is_option(following)
        ):
            expanded.append(f"{token}={following}")
            index += 2
            continue
        expanded.append(token)
        index += 1
    return expanded


def _parse_tokens(tokens: Sequence[str]) -> DsweConfig:
    parser = build_parser()
    try:
        parsed, extras = parser.parse_known_args(_expand_tokens(tokens))
    except argparse.ArgumentError as exc:
        option = exc.argument_name or ""
        if option[2:] in VALUE_OPTIONS:
            raise MissingOptionValueError(option) from exc
        raise UnrecognizedOptionError(option, exc.message) from exc

    # A bare "--" ends the options; anything after it is a stray token.
    stray = [token for token in extras if token != "--"]
    if stray:
        raise UnrecognizedOptionError(stray[0])

    config = DsweConfig(
        xml_path=parsed.xml_path or "",
        use_ledaps_mask=parsed.use_ledaps_mask,
        use_zeven_thorne=parsed.use_zeven_thorne,
        use_toa=parsed.use_toa,
        verbose=parsed.verbose,
        wigt=parsed.wigt,
        awgt=parsed.awgt,
        pswt=parsed.pswt,
        pswnt=parsed.pswnt,
        pswst=parsed.pswst,
        percent_slope=parsed.percent_slope,
    )
    return validate_config(config)


def resolve(argv: Sequence[str], stream: Optional[TextIO] = None) -> DsweConfig:
    """Turn ``argv`` (program name first) into a validated :class:`DsweConfig`.

    Any failure writes a one-line diagnostic and the usage text to ``stream``
    (``sys.stderr`` by default) and raises a :class:`DsweArgumentError`
    subclass. ``--help`` writes only the usage text, to ``sys.stdout`` unless
    ``stream`` is given, and raises :class:`HelpRequested`.
    """

    tokens = list(argv[1:])
    try:
        if not tokens:
            raise MissingArgumentsError()
        config = _parse_tokens(tokens)
    except HelpRequested:
        (stream or sys.stdout).write(USAGE)
        raise
    except DsweArgumentError as exc:
        out = stream or sys.stderr
        out.write(f"{PROG}: error: {exc}\n\n")
        out.write(USAGE)
        raise

    LOGGER.debug("Resolved DSWE arguments: %s", config.as_dict())
    return config


def log_config(config: DsweConfig) -> None:
    LOGGER.info("XML input file: %s", config.xml_path)
    LOGGER.info("Use LEDAPS mask: %s", config.use_ledaps_mask)
    LOGGER.info("Use Zevenbergen&Thorne: %s", config.use_zeven_thorne)
    LOGGER.info("Use TOA: %s", config.use_toa)
    LOGGER.info("WIGT: %0.3f", config.wigt)
    LOGGER.info("AWGT: %0.3f", config.awgt)
    LOGGER.info("PSWT: %0.3f", config.pswt)
    LOGGER.info("PSWNT: %d", config.pswnt)
    LOGGER.info("PSWST: %d", config.pswst)
    LOGGER.info("Percent slope: %0.1f", config.percent_slope)


def main(argv: Sequence[str] | None = None) -> int:
    argv = sys.argv if argv is None else argv
    try:
        config = resolve(argv)
    except DsweArgumentError as exc:
        return exc.exit_code

    logging.basicConfig(level=logging.DEBUG if config.verbose else logging.INFO)
    log_config(config)
    return 0


__all__ = ["atof", "atoi", "build_parser", "expand_abbreviation", "log_config", "main", "resolve"]


if __name__ == "__main__":
    sys.exit(main())
