"""Printf-style formatting and unit-aware value types."""

from __future__ import annotations

import math
import re
from typing import Any

_VERB = re.compile(r"%([ +\-#0]*)(\d*)(?:\.(\d*))?(.)", re.DOTALL)


def _shortest(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _hex_float(value: float, prec: int, upper: bool) -> str:
    if prec >= 0:
        mant, exp = math.frexp(abs(value))
        text = float.hex(value) if value == 0 else None
        if text is None:
            # normalise to 1.xxx form, then round the fraction to prec hex digits
            scaled = round((mant * 2) * 16 ** prec)
            exp -= 1
            whole, frac = divmod(scaled, 16 ** prec)
            if whole >= 2:
                whole, frac, exp = 1, 0, exp + 1
            sign = "-" if value < 0 else ""
            digits = f"{frac:0{prec}x}" if prec else ""
            text = f"{sign}0x{whole}" + (f".{digits}" if digits else "") + f"p{exp:+03d}"
    else:
        text = float.hex(value)
        head, _, exp_part = text.partition("p")
        if "." in head:
            head = head.rstrip("0").rstrip(".")
        text = f"{head}p{int(exp_part):+03d}"
    return text.upper() if upper else text


def _binary_float(value: float) -> str:
    if value == 0:
        return "0p-1074"
    mant, exp = math.frexp(abs(value))
    sign = "-" if value < 0 else ""
    return f"{sign}{int(mant * 2 ** 53)}p{exp - 53:+d}"


def _append_float(value: float, verb: str, prec: int) -> str:
    if verb in "fF":
        return f"{value:.{max(prec, 0)}f}"
    if verb in "eE":
        text = f"{value:.{prec}e}" if prec >= 0 else f"{value:e}"
        return text.upper() if verb == "E" else text
    if verb in "gG":
        text = _shortest(value) if prec < 0 else f"{value:.{prec}g}"
        return text.upper() if verb == "G" else text
    if verb in "xX":
        return _hex_float(value, prec, verb == "X")
    return _binary_float(value)


def _resolve(verb: str, precision: int | None) -> tuple[str, int]:
    prec = -1
    if verb in "feE":
        prec = 6 if precision is None else precision
    elif verb in "bgGxX":
        if precision is not None:
            prec = precision
    else:
        verb, prec = "f", 0
    return verb, prec


def _format_sized(
    amount: int,
    units: tuple[tuple[int, str], ...],
    verb: str,
    precision: int | None,
    space: bool,
) -> str:
    verb, prec = _resolve(verb, precision)
    unit, label = units[0]
    for size, unit_name in units[1:]:
        if amount < size:
            break
        unit, label = size, unit_name
    text = _append_float(amount / unit, verb, prec)
    return text + (" " if space else "") + label


_UNITS_1024 = ((1, "b"), (1 << 10, "KiB"), (1 << 20, "MiB"), (1 << 30, "GiB"), (1 << 40, "TiB"))
_UNITS_1000 = ((1, "b"), (10 ** 3, "KB"), (10 ** 6, "MB"), (10 ** 9, "GB"), (10 ** 12, "TB"))


class SizeB1024(int):
    """Byte count shown in multiples of 1024 (b, KiB, MiB, GiB, TiB)."""

    def format_verb(self, verb: str, precision: int | None, space: bool) -> str:
        """Render scaled to the largest fitting unit, followed by the unit label."""
        return _format_sized(int(self), _UNITS_1024, verb, precision, space)


class SizeB1000(int):
    """Byte count shown in multiples of 1000 (b, KB, MB, GB, TB)."""

    def format_verb(self, verb: str, precision: int | None, space: bool) -> str:
        """Render scaled to the largest fitting unit, followed by the unit label."""
        return _format_sized(int(self), _UNITS_1000, verb, precision, space)


class PercentageValue(float):
    """A float that formats with a trailing percent sign."""

    def format_verb(self, verb: str, precision: int | None, space: bool) -> str:
        verb, prec = _resolve(verb, precision)
        text = _append_float(float(self), verb, prec)
        return text + (" %" if space else "%")


class SpeedFormatter:
    """Wraps a formattable value and appends ``/s``."""

    def __init__(self, value: Any) -> None:
        self.value = value

    def format_verb(self, verb: str, precision: int | None, space: bool) -> str:
        return self.value.format_verb(verb, precision, space) + "/s"


def fmt_as_speed(value: Any) -> SpeedFormatter:
    """Mark a sized value as a per-second rate."""
    return SpeedFormatter(value)


def _format_plain(arg: Any, flags: str, verb: str, precision: int | None) -> str:
    sign = "+" if "+" in flags else (" " if " " in flags else "")
    if verb in "dv" and isinstance(arg, int) and not isinstance(arg, bool):
        return (sign if arg >= 0 else "") + str(arg)
    if verb in "feEgGxXb" and isinstance(arg, (int, float)) and not isinstance(arg, bool):
        value = float(arg)
        prec = precision if precision is not None else (6 if verb in "feE" else -1)
        text = _append_float(value, verb, prec)
        return (sign if value >= 0 else "") + text
    if verb in "sv":
        text = str(arg)
        return text[:precision] if precision is not None else text
    return f"%!{verb}({type(arg).__name__}={arg})"


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` with printf-style verbs."""
    out: list[str] = []
    remaining = iter(args)
    pos = 0
    for match in _VERB.finditer(fmt):
        out.append(fmt[pos:match.start()])
        pos = match.end()
        flags, width, prec, verb = match.groups()
        if verb == "%":
            out.append("%")
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            out.append(f"%!{verb}(MISSING)")
            continue
        precision = None if prec is None else int(prec or 0)
        if hasattr(arg, "format_verb"):
            text = arg.format_verb(verb, precision, " " in flags)
        else:
            text = _format_plain(arg, flags, verb, precision)
        if width:
            size = int(width)
            if "-" in flags:
                text = text.ljust(size)
            elif "0" in flags and not hasattr(arg, "format_verb"):
                text = text.rjust(size, "0")
            else:
                text = text.rjust(size)
        out.append(text)
    out.append(fmt[pos:])
    return "".join(out)