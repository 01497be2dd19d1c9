"""Parsing of printf-style format strings into literal runs and conversion specs.

Only the conversions ``s c d i u o x X p`` (with the synonyms ``D U O``) and
``%%`` are recognised, with the flags ``- + space 0 #`` and ``'`` (accepted and
ignored), field width and precision (both may be ``*``) and the length
modifiers ``h``, ``l`` and ``ll`` (the latter treated as ``l``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, Union

__all__ = ["ConversionSpec", "Literal", "parse_conversion", "iter_format"]

_DIGITS = "0123456789"
_FLAGS = "0-+ #'"
_STRING_CONVERSIONS = "%cs"
_NUMERIC_CONVERSIONS = "duoxXp"
_SYNONYMS = {"i": ("d", None), "D": ("d", "l"), "U": ("u", "l"), "O": ("o", "l")}
_UINT_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class Literal:
    """A run of format text copied to the output unchanged."""

    text: str


@dataclass(frozen=True)
class ConversionSpec:
    """One parsed conversion specification together with its argument.

    ``conversion`` is the normalised conversion character (synonyms folded),
    an unrecognised character kept as-is, or ``""`` when the format ended
    before one. ``precision`` is None when no precision applies. For
    numeric conversions ``argument`` holds the value as the matching C
    argument type would read it (``h`` narrowing happens when rendered);
    for ``c`` it is a one-character string, for ``s`` a string or None.
    """

    conversion: str
    raw: str
    justify_left: bool = False
    zero_padding: bool = False
    force_sign: bool = False
    space_for_positive: bool = True
    alternate_form: bool = False
    min_field_width: int = 0
    precision: Optional[int] = None
    length_modifier: str = ""
    argument: object = None

    @property
    def is_numeric(self) -> bool:
        return self.conversion != "" and self.conversion in _NUMERIC_CONVERSIONS

    @property
    def is_known(self) -> bool:
        return self.conversion != "" and (
            self.conversion in _NUMERIC_CONVERSIONS or self.conversion in _STRING_CONVERSIONS
        )

    @property
    def sign(self) -> int:
        """-1, 0 or +1 for numeric arguments (unsigned ones are never negative); 0 otherwise."""
        if not self.is_numeric or not self.argument:
            return 0
        return -1 if self.argument < 0 else 1


def _wrap(value: int, bits: int, signed: bool) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _next_arg(args: Iterator[object]) -> object:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _next_int(args: Iterator[object], what: str) -> int:
    value = _next_arg(args)
    if not isinstance(value, int):
        raise TypeError(f"{what} requires an integer, not {type(value).__name__}")
    return value


def _read_number(fmt: str, pos: int) -> Tuple[int, int]:
    value = 0
    while pos < len(fmt) and fmt[pos] in _DIGITS:
        value = (10 * value + int(fmt[pos])) & _UINT_MAX
        pos += 1
    return value, pos


def _char_argument(value: object) -> str:
    if isinstance(value, int):
        return chr(value & 0xFF)
    if isinstance(value, str) and len(value) == 1:
        return value
    raise TypeError("%c requires an integer or a single character")


def _numeric_argument(conversion: str, length_modifier: str, value: object) -> int:
    if conversion == "p":
        if value is None:
            return 0
        if not isinstance(value, int):
            raise TypeError("%p requires an integer address or None")
        return _wrap(value, 64, signed=False)
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} requires an integer, not {type(value).__name__}")
    bits = 64 if length_modifier == "l" else 32
    return _wrap(value, bits, signed=conversion == "d")


def parse_conversion(
    fmt: str, pos: int, args: Iterable[object]
) -> Tuple[ConversionSpec, int]:
    """Parse the conversion starting at ``fmt[pos]`` (a ``%``).

    Arguments for ``*`` widths, precisions and the conversion itself are
    taken from ``args``. Returns the spec and the position just past it.
    """
    if pos < 0 or pos >= len(fmt) or fmt[pos] != "%":
        raise ValueError(f"no conversion specification at position {pos}")
    it = iter(args)
    end = len(fmt)
    i = pos + 1

    zero_padding = justify_left = force_sign = alternate_form = False
    space_for_positive = True
    while i < end and fmt[i] in _FLAGS:
        flag = fmt[i]
        if flag == "0":
            zero_padding = True
        elif flag == "-":
            justify_left = True
        elif flag == "+":
            force_sign = True
            space_for_positive = False
        elif flag == " ":
            force_sign = True
        elif flag == "#":
            alternate_form = True
        i += 1

    min_field_width = 0
    if i < end and fmt[i] == "*":
        i += 1
        width = _wrap(_next_int(it, "* field width"), 32, signed=True)
        if width >= 0:
            min_field_width = width
        else:
            min_field_width = -width
            justify_left = True
    elif i < end and fmt[i] in _DIGITS:
        min_field_width, i = _read_number(fmt, i)

    precision: Optional[int] = None
    if i < end and fmt[i] == ".":
        i += 1
        precision = 0
        if i < end and fmt[i] == "*":
            i += 1
            value = _wrap(_next_int(it, "* precision"), 32, signed=True)
            precision = value if value >= 0 else None
        elif i < end and fmt[i] in _DIGITS:
            precision, i = _read_number(fmt, i)

    length_modifier = ""
    if i < end and fmt[i] in "hl":
        length_modifier = fmt[i]
        i += 1
        if length_modifier == "l" and i < end and fmt[i] == "l":
            i += 1

    conversion = fmt[i] if i < end else ""
    if conversion in _SYNONYMS:
        conversion, forced = _SYNONYMS[conversion]
        if forced:
            length_modifier = forced

    argument: object = None
    if conversion and conversion in _STRING_CONVERSIONS:
        length_modifier = ""
        zero_padding = False
        if conversion == "c":
            argument = _char_argument(_next_arg(it))
        elif conversion == "s":
            value = _next_arg(it)
            argument = None if value is None else str(value)
        else:
            precision = None
    elif conversion and conversion in _NUMERIC_CONVERSIONS:
        if conversion == "p":
            length_modifier = ""
        argument = _numeric_argument(conversion, length_modifier, _next_arg(it))
        if precision is not None:
            zero_padding = False
    else:
        zero_padding = False
        justify_left = True
        min_field_width = 0

    if i < end:
        i += 1

    spec = ConversionSpec(
        conversion=conversion,
        raw=fmt[pos:i],
        justify_left=justify_left,
        zero_padding=zero_padding,
        force_sign=force_sign,
        space_for_positive=space_for_positive,
        alternate_form=alternate_form,
        min_field_width=min_field_width,
        precision=precision,
        length_modifier=length_modifier,
        argument=argument,
    )
    return spec, i


def iter_format(
    fmt: Optional[str], args: Iterable[object]
) -> Iterator[Union[Literal, ConversionSpec]]:
    """Split ``fmt`` into literal runs and parsed conversions, consuming ``args`` in order.

    A None format is treated as empty; surplus arguments are ignored.
    """
    text = fmt or ""
    it = iter(args)
    pos = 0
    while pos < len(text):
        if text[pos] != "%":
            nxt = text.find("%", pos)
            stop = len(text) if nxt < 0 else nxt
            yield Literal(text[pos:stop])
            pos = stop
        else:
            spec, pos = parse_conversion(text, pos, it)
            yield spec