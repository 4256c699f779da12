import pytest

from flagset import (
    CoercionError,
    CombinedShortOptionError,
    Kind,
    MissingArgumentError,
    UnknownOptionError,
)


@pytest.fixture
def cat(registry):
    """Options of a small ``cat`` program."""
    return {
        "f": registry.declare_bool("f", False, "reverse"),
        "n": registry.declare_bool("n", False, "number"),
        "b": registry.declare_bool("b", False, "binary"),
        "p": registry.declare_int("p", -1, "limit"),
        "h": registry.declare_bool("h", False, "help"),
        "help": registry.declare_bool("help", False, "help"),
    }


@pytest.mark.parametrize(
    "tokens, expected",
    [
        ([], set()),
        (["-f"], {"f"}),
        (["-fn"], {"f", "n"}),
        (["-nf", "-f", "-ff"], {"f", "n"}),
        (["-b", "-n", "-b"], {"b", "n"}),
        (["--help", "-h"], {"h", "help"}),
        (["-fnbh"], {"f", "n", "b", "h"}),
    ],
)
def test_parse_bool_only(parser, cat, tokens, expected):
    positionals = parser.parse(tokens)

    assert len(positionals) == 0
    for name in ("f", "n", "b", "h", "help"):
        assert cat[name].value is (name in expected)


def test_parse_int_with_positional(parser, cat):
    positionals = parser.parse(["-p", "10", "file.txt"])

    assert cat["p"].value == 10
    assert positionals == ["file.txt"]


def test_parse_group_with_trailing_value(parser, cat):
    positionals = parser.parse(["-nfp", "10", "a.txt", "b.txt"])

    assert cat["n"].value is True
    assert cat["f"].value is True
    assert cat["p"].value == 10
    assert positionals == ["a.txt", "b.txt"]


def test_parse_value_option_mid_group(parser, cat):
    """The value is the next token even when the value option is not last in its group."""
    parser.parse(["-pn", "3"])
    assert cat["p"].value == 3
    assert cat["n"].value is True


def test_parse_positionals_interleaved(parser, cat):
    positionals = parser.parse(["a", "-n", "b", "-p", "2", "c"])
    assert positionals == ["a", "b", "c"]


def test_parse_value_may_look_like_flag(parser, registry):
    s = registry.declare_string("o", "", "output")
    parser.parse(["-o", "-n"])
    assert s.value == "-n"


def test_parse_negative_int(parser, cat):
    parser.parse(["-p", "-5"])
    assert cat["p"].value == -5


def test_parse_long_string(parser, registry):
    name = registry.declare_string("name", "anon", "your name")
    positionals = parser.parse(["--name", "Ada Lovelace", "x"])
    assert name.value == "Ada Lovelace"
    assert positionals == ["x"]


def test_parse_lone_dash_is_positional(parser, cat):
    positionals = parser.parse(["-", "-n"])
    assert positionals == ["-"]
    assert cat["n"].value is True


def test_parse_double_dash_is_short_group(parser, cat):
    """``--`` is too short to be a long flag; it resolves to the option name ``-``."""
    with pytest.raises(UnknownOptionError) as e:
        parser.parse(["--"])
    assert e.value.name == "-"


def test_parse_single_dash_long_name_is_group(parser, cat):
    """``-help`` is the group ``h e l p``, not the long option."""
    with pytest.raises(UnknownOptionError) as e:
        parser.parse(["-help"])
    assert e.value.name == "e"
    assert cat["h"].value is True
    assert cat["help"].value is False


def test_parse_unknown_no_rollback(parser, registry):
    x = registry.declare_bool("x", False, "x")
    y = registry.declare_bool("y", False, "y")

    with pytest.raises(UnknownOptionError) as e:
        parser.parse(["-xyz"])

    assert e.value.name == "z"
    assert e.value.token == "-xyz"
    assert x.value is True
    assert y.value is True


def test_parse_unknown_stops_processing(parser, cat):
    with pytest.raises(UnknownOptionError):
        parser.parse(["a", "--nope", "-f", "b"])
    assert cat["f"].value is False
    assert parser.positionals == ["a"]


def test_parse_combined_value_options(parser, registry):
    p = registry.declare_int("p", 0, "u1")
    registry.declare_int("q", 0, "u1")

    with pytest.raises(CombinedShortOptionError) as e:
        parser.parse(["-pq", "5"])

    assert e.value.token == "-pq"
    assert e.value.names == ("p", "q")
    # ``p`` consumed its value before ``q`` was resolved.
    assert p.value == 5


def test_parse_value_options_in_separate_tokens(parser, registry):
    """The single value-option restriction is per flag token, not per parse."""
    p = registry.declare_int("p", 0, "u1")
    q = registry.declare_int("q", 0, "u2")

    positionals = parser.parse(["-p", "10", "-q", "20"])

    assert p.value == 10
    assert q.value == 20
    assert positionals == []


def test_parse_missing_value(parser, cat):
    with pytest.raises(MissingArgumentError) as e:
        parser.parse(["-p"])
    assert e.value.name == "p"


def test_parse_missing_value_in_group(parser, cat):
    with pytest.raises(MissingArgumentError) as e:
        parser.parse(["-np"])
    assert e.value.name == "p"
    assert cat["n"].value is True


def test_parse_bad_value(parser, cat):
    with pytest.raises(CoercionError) as e:
        parser.parse(["-p", "abc"])

    assert e.value.token == "abc"
    assert e.value.name == "p"
    assert e.value.kind == Kind.INT
    assert cat["p"].value == -1


def test_parse_default_untouched(parser, registry):
    b = registry.declare_bool("b", False, "b")
    i = registry.declare_int("i", 42, "i")
    s = registry.declare_string("s", "default", "s")

    parser.parse(["x", "y"])

    assert b.value is False
    assert i.value == 42
    assert s.value == "default"


def test_parse_resets_positionals(parser, cat):
    parser.parse(["a"])
    parser.parse(["b"])
    assert parser.positionals == ["b"]


def test_parse_does_not_reset_values(parser, cat):
    parser.parse(["-n"])
    parser.parse([])
    assert cat["n"].value is True
