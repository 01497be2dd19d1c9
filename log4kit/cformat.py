"""Rendering of printf-style format strings with C ``snprintf`` semantics.

Parsing is done by :mod:`log4kit.cspec`; this module turns the parsed
pieces into text, applying flags, field width and precision the way the
C99 ``snprintf`` family does. Numeric values with an ``h`` length modifier
are narrowed to 16 bits here. The sign used for ``+`` and space flags is
taken before that narrowing, as C does.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union

from log4kit.cspec import ConversionSpec, Literal, iter_format

__all__ = ["render", "vformat", "snprintf", "asprintf", "asnprintf"]


def _narrow_short(value: int, signed: bool) -> int:
    value &= 0xFFFF
    if signed and value & 0x8000:
        value -= 0x10000
    return value


def _string_argument(spec: ConversionSpec) -> str:
    if spec.conversion == "%":
        return "%"
    if spec.conversion == "c":
        return str(spec.argument)
    value = spec.argument
    if value is None:
        return ""
    text = str(value).split("\0", 1)[0]
    if spec.precision is None:
        return text
    return text[: spec.precision]


def _digits(spec: ConversionSpec) -> str:
    conversion = spec.conversion
    value = int(spec.argument or 0)
    if conversion == "p":
        return f"0x{value:x}" if value else "(nil)"
    if spec.length_modifier == "h":
        value = _narrow_short(value, signed=conversion == "d")
    if conversion in ("d", "u"):
        return str(value)
    if conversion == "o":
        return format(value, "o")
    return format(value, conversion)


def _numeric_parts(spec: ConversionSpec) -> Tuple[str, int, str]:
    """Return (text before zero padding, number of zeros, text after)."""
    sign = spec.sign
    conversion = spec.conversion
    prefix = ""
    if conversion == "d":
        if spec.force_sign and sign >= 0:
            prefix = " " if spec.space_for_positive else "+"
    elif spec.alternate_form and sign != 0 and conversion in ("x", "X"):
        prefix = "0" + conversion

    precision_specified = spec.precision is not None
    precision = spec.precision if precision_specified else 1

    text = prefix
    insert_at = len(prefix)
    if not (precision == 0 and sign == 0):
        text += _digits(spec)
        if insert_at < len(text) and text[insert_at] == "-":
            insert_at += 1
        if text[insert_at : insert_at + 2] in ("0x", "0X"):
            insert_at += 2

    num_digits = len(text) - insert_at
    if (
        spec.alternate_form
        and conversion == "o"
        and not (insert_at < len(text) and text[insert_at] == "0")
    ):
        if not precision_specified or precision < num_digits + 1:
            precision = num_digits + 1

    zeros = max(0, precision - num_digits)
    if not spec.justify_left and spec.zero_padding:
        zeros += max(0, spec.min_field_width - (len(text) + zeros))

    if zeros <= 0:
        return "", 0, text
    return text[:insert_at], zeros, text[insert_at:]


def render(spec: Union[ConversionSpec, Literal]) -> str:
    """Render one parsed piece of a format string."""
    if isinstance(spec, Literal):
        return spec.text
    if not spec.is_known:
        # Unrecognised conversion: only the conversion character survives.
        return spec.conversion

    if spec.is_numeric:
        head, zeros, tail = _numeric_parts(spec)
    else:
        head, zeros, tail = "", 0, _string_argument(spec)

    body = head + "0" * zeros + tail
    padding = max(0, spec.min_field_width - len(body))
    if spec.justify_left:
        return body + " " * padding
    fill = "0" if spec.zero_padding else " "
    return fill * padding + body


def vformat(fmt: Optional[str], args: Iterable[object]) -> str:
    """Format ``fmt`` with the arguments in ``args``; None formats as empty."""
    return "".join(render(piece) for piece in iter_format(fmt, args))


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"buffer size must not be negative, got {size}")


def snprintf(size: int, fmt: Optional[str], *args: object) -> Tuple[str, int]:
    """Format into a buffer of ``size`` characters including the terminator.

    Returns the text that fits (at most ``size - 1`` characters) and the
    length the full result would have had.
    """
    _check_size(size)
    full = vformat(fmt, args)
    return full[: max(size - 1, 0)], len(full)


def asprintf(fmt: Optional[str], *args: object) -> str:
    """Format ``fmt`` with ``args`` and return the whole result."""
    return vformat(fmt, args)


def asnprintf(size: int, fmt: Optional[str], *args: object) -> Tuple[Optional[str], int]:
    """Like :func:`snprintf`, but with ``size == 0`` no text is produced at all.

    Returns the (possibly truncated) text, or None when ``size`` is 0, and
    the length of the full result.
    """
    _check_size(size)
    full = vformat(fmt, args)
    if size == 0:
        return None, len(full)
    return full[: size - 1], len(full)