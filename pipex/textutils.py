"""Small text helpers: number parsing, word splitting, environment lookup
and a minimal printf-style formatter."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Optional, Union

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_C_SPACE = " \t\n\v\f\r"
_SPACE_RUN = re.compile(r"[ \t\n\v\f\r]+")
_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")

Environment = Union[Mapping[str, str], Iterable[str]]


def _wrap(value: int, bits: int) -> int:
    """Reduce an integer to a signed two's-complement value of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _parse(text: str) -> tuple[int, str]:
    """Return the sign and the leading digit run of a C-style number."""
    match = _NUMBER.match(text)
    sign = -1 if match.group(1) == "-" else 1
    return sign, match.group(2)


def is_space(ch: str) -> bool:
    """True for the six C locale whitespace characters."""
    return len(ch) == 1 and ch in _C_SPACE


def atoi(text: str) -> int:
    """Parse a leading integer as a 32-bit signed int, wrapping on overflow."""
    sign, digits = _parse(text)
    return _wrap(sign * int(digits or "0"), 32)


def atol(text: str) -> int:
    """Parse a leading integer as a 64-bit signed long, wrapping on overflow."""
    sign, digits = _parse(text)
    return _wrap(sign * int(digits or "0"), 64)


def atol_checked(text: str) -> int:
    """Parse a leading integer, raising OverflowError outside the int range."""
    sign, digits = _parse(text)
    value = 0
    for digit in digits:
        value = value * 10 + int(digit)
        if not INT_MIN <= sign * value <= INT_MAX:
            raise OverflowError(f"{text!r} does not fit in a 32-bit int")
    return sign * value


def split_on(text: str, sep: str) -> list[str]:
    """Split on a separator character, dropping empty words."""
    if not sep:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def split_space(text: str) -> list[str]:
    """Split on runs of C whitespace, dropping empty words."""
    return [word for word in _SPACE_RUN.split(text) if word]


def getenv(name: Optional[str], env: Optional[Environment]) -> Optional[str]:
    """Look a variable up in a mapping or in a list of ``NAME=value`` strings."""
    if name is None or env is None:
        return None
    if isinstance(env, Mapping):
        return env.get(name)
    prefix = name + "="
    for entry in env:
        if entry.startswith(prefix):
            return entry[len(prefix):]
    return None


def itoa(number: int) -> str:
    """Render an integer in decimal."""
    return str(int(number))


def trim(text: str, charset: str) -> str:
    """Strip characters in ``charset`` from both ends; an empty set strips nothing."""
    if not charset:
        return text
    return text.strip(charset)


def find_bounded(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``limit`` characters."""
    if not needle:
        return 0
    index = haystack[: max(limit, 0)].find(needle)
    return None if index < 0 else index


def _convert(spec: str, arg: object) -> str:
    if spec == "c":
        return arg if isinstance(arg, str) else chr(int(arg) & 0xFF)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        if not arg:
            return "(nil)"
        address = arg if isinstance(arg, int) else id(arg)
        return f"0x{address:x}"
    if spec in "id":
        return str(_wrap(int(arg), 32))
    value = int(arg) & 0xFFFFFFFF
    if spec == "u":
        return str(value)
    return f"{value:x}" if spec == "x" else f"{value:X}"


def format_printf(fmt: str, *args: object) -> str:
    """Format with the conversions c, s, p, d, i, u, x and X.

    Any other character after ``%`` is emitted as itself, and a lone
    trailing ``%`` produces nothing.
    """
    out: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in "cspiduxX":
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
            out.append(_convert(spec, arg))
        else:
            out.append(spec)
    return "".join(out)