import pytest

from mystd.arg_parser import Nargs, Parser
from mystd.errors import LibraryError


def values(parser, name):
    return [parser.value(name, i) for i in range(parser.argument_size(name))]


def make(*specs):
    parser = Parser()
    for spec in specs:
        parser.add_argument(*spec)
    return parser


def test_len_counts_declared_arguments():
    parser = make(
        ("-a", "--alpha", "alpha", Nargs.COMMAND_ONLY),
        ("-b", "--beta", "beta", Nargs.DELAYED_OPTIONAL),
    )
    assert len(parser) == len(["alpha", "beta"])
    assert len(Parser()) == 0


def test_command_only_flag_marks_involved_without_values():
    parser = make(
        ("-v", "--verbose", "verbose", Nargs.COMMAND_ONLY),
        ("-q", "--quiet", "quiet", Nargs.COMMAND_ONLY),
    )
    parser.parse(["prog", "-v"])
    assert parser.involved("verbose") is True
    assert parser.involved("quiet") is False
    assert values(parser, "verbose") == []


def test_long_name_behaves_like_small_name():
    parser = make(("-o", "--output", "output", Nargs.IMMEDIATE_OPTIONAL))
    parser.parse(["prog", "--output", "out.txt"])
    assert parser.involved("output") is True
    assert values(parser, "output") == ["out.txt"]


def test_program_name_is_skipped():
    parser = make(("-o", "--output", "output", Nargs.IMMEDIATE_OPTIONAL))
    parser.parse(["-o", "x"])
    assert parser.involved("output") is False
    assert values(parser, "output") == []


def test_immediate_optional_takes_one_value():
    parser = make(
        ("-o", "--output", "output", Nargs.IMMEDIATE_OPTIONAL),
        ("", "", "rest", Nargs.REMAINING_ARGUMENTS),
    )
    parser.parse(["prog", "-o", "out.txt", "extra"])
    assert values(parser, "output") == ["out.txt"]
    assert values(parser, "rest") == ["extra"]


def test_immediate_optional_with_equals_keeps_first_value():
    parser = make(("-o", "--output", "output", Nargs.IMMEDIATE_OPTIONAL))
    parser.parse(["prog", "-o=first.txt", "--output=second.txt"])
    assert values(parser, "output") == ["first.txt"]


def test_delayed_optional_with_equals_appends_every_time():
    parser = make(("-d", "--define", "define", Nargs.DELAYED_OPTIONAL))
    parser.parse(["prog", "-d=x", "--define=y"])
    assert values(parser, "define") == ["x", "y"]


def test_immediate_zero_or_more_reads_until_next_flag():
    parser = make(
        ("-l", "--list", "list", Nargs.IMMEDIATE_ZERO_OR_MORE),
        ("-v", "--verbose", "verbose", Nargs.COMMAND_ONLY),
        ("", "", "rest", Nargs.REMAINING_ARGUMENTS),
    )
    parser.parse(["prog", "--list", "a", "b", "-v", "c"])
    assert values(parser, "list") == ["a", "b"]
    assert parser.involved("verbose") is True
    assert values(parser, "rest") == ["c"]


def test_delayed_zero_or_more_survives_other_flags():
    parser = make(
        ("-i", "--in", "in", Nargs.DELAYED_ZERO_OR_MORE),
        ("-n", "--num", "num", Nargs.IMMEDIATE_OPTIONAL),
    )
    parser.parse(["prog", "--in", "a", "--num", "1", "b"])
    assert values(parser, "num") == ["1"]
    assert values(parser, "in") == ["a", "b"]


def test_delayed_optional_takes_first_free_positional():
    parser = make(
        ("-f", "--file", "file", Nargs.DELAYED_OPTIONAL),
        ("", "", "rest", Nargs.REMAINING_ARGUMENTS),
    )
    parser.parse(["prog", "--file", "a.txt", "b.txt"])
    assert values(parser, "file") == ["a.txt"]
    assert values(parser, "rest") == ["b.txt"]


def test_zero_or_more_with_equals_starts_reading_but_drops_inline_value():
    parser = make(("-f", "--files", "files", Nargs.IMMEDIATE_ZERO_OR_MORE))
    parser.parse(["prog", "--files=x", "y", "z"])
    assert parser.involved("files") is True
    assert values(parser, "files") == ["y", "z"]


def test_remaining_arguments_collect_unclaimed_tokens():
    parser = make(
        ("-v", "--verbose", "verbose", Nargs.COMMAND_ONLY),
        ("", "", "rest", Nargs.REMAINING_ARGUMENTS),
    )
    parser.parse(["prog", "one", "-v", "two"])
    assert values(parser, "rest") == ["one", "two"]


def test_unclaimed_token_without_remaining_is_dropped():
    parser = make(("-v", "--verbose", "verbose", Nargs.COMMAND_ONLY))
    parser.parse(["prog", "stray"])
    assert parser.involved("verbose") is False
    assert values(parser, "verbose") == []


def test_unknown_name_lookups():
    parser = make(("-v", "--verbose", "verbose", Nargs.COMMAND_ONLY))
    parser.parse(["prog", "-v"])
    assert parser.involved("missing") is False
    assert parser.argument_size("missing") == 0
    with pytest.raises(LibraryError) as info:
        parser.value("missing", 0)
    assert info.value.error == 5


def test_none_name_lookups():
    parser = make(("-v", "--verbose", "verbose", Nargs.COMMAND_ONLY))
    assert parser.involved(None) is False
    assert parser.argument_size(None) == 0
    with pytest.raises(LibraryError) as info:
        parser.value(None, 0)
    assert info.value.error == 5


def test_value_index_out_of_range():
    parser = make(("-o", "--output", "output", Nargs.IMMEDIATE_OPTIONAL))
    parser.parse(["prog", "-o", "out.txt"])
    with pytest.raises(IndexError):
        parser.value("output", parser.argument_size("output"))


def test_first_declared_argument_wins_on_shared_name():
    parser = make(
        ("-a", "--aa", "shared", Nargs.COMMAND_ONLY),
        ("-b", "--bb", "shared", Nargs.IMMEDIATE_OPTIONAL),
    )
    parser.parse(["prog", "-b", "value"])
    assert parser.involved("shared") is False
    assert values(parser, "shared") == []