import pytest

from log4kit.cformat import asnprintf, asprintf, render, snprintf, vformat
from log4kit.cspec import Literal, iter_format, parse_conversion

LENGTHY = "Test for variable-arguments lists overflow. " * 26


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%5d", (42,)),
        ("%-5d|", (42,)),
        ("%05d", (-42,)),
        ("%+d", (7,)),
        ("% d", (7,)),
        ("%+ d", (7,)),
        ("%.3d", (5,)),
        ("%.5d", (-42,)),
        ("%-08d|", (3,)),
        ("%x", (255,)),
        ("%X", (255,)),
        ("%#x", (255,)),
        ("%#X", (255,)),
        ("%08x", (255,)),
        ("%#010x", (255,)),
        ("%o", (8,)),
        ("%10s", ("abc",)),
        ("%-10s|", ("abc",)),
        ("%.2s", ("abc",)),
        ("%3.5s", ("abcdefgh",)),
        ("%c", (65,)),
        ("%5c", ("z",)),
        ("100%%", ()),
        ("This contains %d %s", (2, "variable arguments")),
        ("%s %s %d", ("test", "vform", 123)),
    ],
)
def test_matches_standard_printf(fmt, args):
    assert vformat(fmt, args) == fmt % args


def test_source_log_message():
    text = vformat("This contains %d %s", (2, "variable arguments"))
    assert text == "This contains 2 variable arguments"


def test_zero_with_explicit_zero_precision_is_empty():
    assert vformat("%.0d", (0,)) == ""
    assert vformat("[%.0x]", (0,)) == vformat("[%s]", (None,))


def test_alternate_octal_has_single_leading_zero():
    assert vformat("%#o", (8,)) == "010"
    assert vformat("%#o", (0,)) == vformat("%o", (0,))


def test_alternate_octal_zero_precision_zero():
    assert vformat("%#.0o", (0,)) == "0"


def test_unknown_conversion_keeps_character_only():
    assert vformat("a%-10yb", ()) == "ayb"
    assert vformat("end%", ()) == "end"


def test_percent_honours_width():
    assert vformat("%5%", ()) == "%".rjust(5)
    assert vformat("%-5%|", ()) == "%".ljust(5) + "|"


def test_star_width_and_precision():
    assert vformat("%*d", (6, 42)) == vformat("%6d", (42,))
    assert vformat("%*d|", (-6, 42)) == vformat("%-6d|", (42,))
    assert vformat("%.*s", (2, "abcdef")) == vformat("%.2s", ("abcdef",))
    assert vformat("%.*s", (-1, "abcdef")) == "abcdef"


def test_char_argument_is_unsigned_char():
    assert vformat("%c", (321,)) == vformat("%c", (65,))


def test_short_modifier_narrows():
    assert vformat("%hd", (65537,)) == vformat("%d", (1,))
    assert vformat("%hx", (0x1FFFF,)) == "%x" % 0xFFFF
    assert vformat("%hd", (0x18000,)) == "%d" % -0x8000


def test_unsigned_wraps_negative_values():
    assert vformat("%u", (-1,)) == "%d" % (2**32 - 1)
    assert vformat("%lu", (-1,)) == "%d" % (2**64 - 1)
    assert vformat("%llu", (-1,)) == vformat("%lu", (-1,))


def test_synonyms():
    assert vformat("%i", (7,)) == vformat("%d", (7,))
    assert vformat("%D", (-1,)) == "%d" % -1
    assert vformat("%U", (5,)) == vformat("%lu", (5,))
    assert vformat("%O", (8,)) == vformat("%lo", (8,))


def test_pointer_conversion():
    assert vformat("%p", (255,)) == "%#x" % 255
    assert vformat("%p", (None,)) == vformat("%p", (0,))


def test_string_stops_at_nul():
    assert vformat("%s", ("ab\0cd",)) == vformat("%s", ("ab",))


def test_field_width_invariant():
    for value in (0, 1, -1, 12345, -12345):
        assert len(vformat("%20d", (value,))) == 20
        assert len(vformat("%-20d", (value,))) == 20
        assert len(vformat("%020d", (value,))) == 20


def test_render_pieces_join_to_vformat():
    fmt = "x=%5d y=%-3s z=%%"
    args = (9, "ab")
    joined = "".join(render(piece) for piece in iter_format(fmt, args))
    assert joined == vformat(fmt, args)


def test_render_literal_and_spec():
    assert render(Literal("hello")) == "hello"
    spec, end = parse_conversion("%04x", 0, [255])
    assert render(spec) == "%04x" % 255
    assert end == 4


def test_snprintf_truncates_and_reports_full_length():
    full = vformat("%s (%d bytes)", (LENGTHY, len(LENGTHY)))
    for size in (1, 2, 10, 100, len(full), len(full) + 1, len(full) + 50):
        text, length = snprintf(size, "%s (%d bytes)", LENGTHY, len(LENGTHY))
        assert length == len(full)
        assert text == full[: size - 1]
        assert len(text) <= size - 1


def test_snprintf_size_zero():
    text, length = snprintf(0, "%d", 12345)
    assert text == vformat("%.0s", ("abc",))
    assert length == len("12345")


def test_asprintf_returns_whole_result():
    assert asprintf("%s-%d", "abc", 7) == vformat("%s-%d", ("abc", 7))
    assert asprintf(LENGTHY) == LENGTHY


def test_asnprintf():
    text, length = asnprintf(0, "%s", "abc")
    assert text is None
    assert length == 3
    text, length = asnprintf(3, "%s", "abcdef")
    assert text == "ab"
    assert length == 6
    text, length = asnprintf(100, "%s", "abcdef")
    assert text == "abcdef"


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        snprintf(-1, "x")
    with pytest.raises(ValueError):
        asnprintf(-1, "x")


def test_missing_and_wrong_arguments():
    with pytest.raises(TypeError):
        vformat("%d", ())
    with pytest.raises(TypeError):
        vformat("%d", ("x",))
    with pytest.raises(TypeError):
        asprintf("%s %s", "only one")


def test_surplus_arguments_ignored():
    assert vformat("%d", (1, 2, 3)) == vformat("%d", (1,))