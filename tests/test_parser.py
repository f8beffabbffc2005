import logging
from textwrap import dedent

import pytest

from rwini.errors import IniParseError, IniParseErrorType
from rwini.model import Ini, IniSection
from rwini.parser import IniParser, parse
from rwini.position import Position, Range


def _range(start: tuple[int, int], end: tuple[int, int]) -> Range:
    return Range(Position(*start), Position(*end))


class TestIniParserDefaults:
    def test_default_policy(self):
        parser = IniParser()

        assert parser.error_if_unknown_line_before_any_section is True
        assert parser.error_if_unknown_line_in_section is True
        assert parser.error_if_repeated_key is False
        assert parser.error_if_endless_multiline is True

    def test_module_parse_uses_default_policy(self):
        with pytest.raises(IniParseError):
            parse("garbage")


class TestParse:
    def test_empty_section(self):
        assert parse("[core]") == Ini([IniSection("core")])

    def test_empty_source(self):
        assert parse("") == Ini()

    def test_multiline_value(self):
        result = parse("[core]\nname: abc\nprice: '''1\n2\n'''")

        assert result == Ini([IniSection("core", {"name": "abc", "price": "12"})])

    def test_multiple_sections(self):
        result = parse("[core]\nname: abc\nprice: '''1\n2\n'''\n[abc]\ndef:abc")

        assert result == Ini(
            [
                IniSection("core", {"name": "abc", "price": "12"}),
                IniSection("abc", {"def": "abc"}),
            ],
        )

    def test_comments_and_blank_lines(self):
        src = dedent("""\
            # header comment

            [core]
              # indented comment

            key : value\x20
            """)

        assert parse(src) == Ini([IniSection("core", {"key": "value"})])

    def test_value_split_on_first_colon(self):
        result = parse("[core]\nurl: http://localhost:8080")

        assert result["core"]["url"] == "http://localhost:8080"

    def test_empty_value(self):
        assert parse("[core]\nkey:")["core"]["key"] == ""

    def test_repeated_section_last_wins(self):
        result = parse("[a]\nx:1\n[b]\n[a]\ny:2")

        assert result == Ini([IniSection("a", {"y": "2"}), IniSection("b")])

    def test_parsing_twice_gives_equal_documents(self, tank_source: str):
        assert parse(tank_source) == parse(tank_source)

    def test_fixture_file(self, tank_source: str):
        result = parse(tank_source)

        assert sorted(result) == ["core", "graphics", "movement"]
        assert result["graphics"]["description"] == "A slow tank with thick armour."
        assert result["movement"]["turnSpeed"] == "2 s"


class TestMultiline:
    def test_double_quoted_marker(self):
        src = '[core]\ntext: """first\n  middle\nlast"""   '

        assert parse(src)["core"]["text"] == "first  middlelast"

    def test_header_inside_multiline_is_content(self):
        result = parse("[core]\na: '''x\n[other]\n'''")

        assert result == Ini([IniSection("core", {"a": "x[other]"})])

    def test_other_terminator_is_content(self):
        result = parse("[core]\na: '''x\ny\"\"\"\n'''")

        assert result["core"]["a"] == 'xy"""'

    def test_opening_line_is_never_closing_line(self):
        with pytest.raises(IniParseError) as exc_info:
            parse("[core]\na: '''abc'''")

        assert exc_info.value.kind == IniParseErrorType.ENDLESS_MULTILINE

    def test_comment_inside_multiline_is_content(self):
        assert parse("[core]\na: '''\n# not a comment\n'''")["core"]["a"] == "# not a comment"

    def test_carriage_returns_kept_in_multiline_content(self):
        result = parse("[core]\r\na: '''x\r\ny\r\n'''\r\nb: 1\r\n")

        assert result["core"]["a"] == "xy\r"
        assert result["core"]["b"] == "1"


class TestUnknownLineBeforeAnySection:
    def test_error(self):
        with pytest.raises(IniParseError) as exc_info:
            parse("garbage\n[core]")

        assert exc_info.value.kind == IniParseErrorType.UNKNOWN_LINE_BEFORE_ANY_SECTION
        assert exc_info.value.location == _range((1, 1), (1, 7))
        assert exc_info.value.message == ""

    def test_tolerated(self):
        parser = IniParser(error_if_unknown_line_before_any_section=False)

        assert parser.parse("garbage\n[core]") == Ini([IniSection("core")])

    def test_tolerated_line_is_logged(self, caplog: pytest.LogCaptureFixture):
        parser = IniParser(error_if_unknown_line_before_any_section=False)

        with caplog.at_level(logging.DEBUG, logger="rwini"):
            parser.parse("garbage\n[core]")

        assert "skipped line 1 before any section" in caplog.text


class TestUnknownLineInSection:
    def test_error(self):
        with pytest.raises(IniParseError) as exc_info:
            parse("[core]\nname: a\njunk")

        assert exc_info.value.kind == IniParseErrorType.UNKNOWN_LINE_IN_SECTION
        assert exc_info.value.location == _range((3, 1), (3, 4))

    def test_tolerated(self):
        parser = IniParser(error_if_unknown_line_in_section=False)

        assert parser.parse("[core]\njunk\nname: a") == Ini([IniSection("core", {"name": "a"})])

    def test_first_error_wins(self):
        with pytest.raises(IniParseError) as exc_info:
            parse("[core]\njunk\n[other]\na: '''never closed")

        assert exc_info.value.kind == IniParseErrorType.UNKNOWN_LINE_IN_SECTION


class TestRepeatedKey:
    def test_error(self):
        parser = IniParser(error_if_repeated_key=True)

        with pytest.raises(IniParseError) as exc_info:
            parser.parse("[core]\na:1\na:2")

        assert exc_info.value.kind == IniParseErrorType.REPEATED_KEY
        assert exc_info.value.location == _range((3, 1), (3, 3))

    def test_last_value_wins_by_default(self):
        assert parse("[core]\na:1\na:2") == Ini([IniSection("core", {"a": "2"})])

    def test_same_key_in_other_section_is_not_repeated(self):
        parser = IniParser(error_if_repeated_key=True)

        result = parser.parse("[a]\nk:1\n[b]\nk:2")

        assert result == Ini([IniSection("a", {"k": "1"}), IniSection("b", {"k": "2"})])

    def test_error_message(self):
        parser = IniParser(error_if_repeated_key=True)

        with pytest.raises(IniParseError, match=r"^type:RepeatedKey, range:\(\(3, 1\), \(3, 3\)\), msg:$"):
            parser.parse("[core]\na:1\na:2")


class TestEndlessMultiline:
    def test_error(self):
        with pytest.raises(IniParseError) as exc_info:
            parse("[core]\na:'''x")

        assert exc_info.value.kind == IniParseErrorType.ENDLESS_MULTILINE
        assert exc_info.value.location == _range((2, 3), (2, 6))

    def test_range_grows_with_each_line(self):
        with pytest.raises(IniParseError) as exc_info:
            parse("[core]\na: '''x\nyy\n")

        assert exc_info.value.location == _range((2, 4), (4, 1))

    def test_tolerated_value_is_discarded(self):
        parser = IniParser(error_if_endless_multiline=False)

        assert parser.parse("[core]\na:'''x") == Ini([IniSection("core")])

    def test_tolerated_keeps_earlier_properties(self):
        parser = IniParser(error_if_endless_multiline=False)

        assert parser.parse("[core]\nb: 1\na:'''x\ny") == Ini([IniSection("core", {"b": "1"})])


class TestColumns:
    def test_multibyte_characters_count_once(self):
        with pytest.raises(IniParseError) as ascii_info:
            parse("[core]\nabcd: '''x")
        with pytest.raises(IniParseError) as unicode_info:
            parse("[core]\nключ: '''x")

        assert ascii_info.value.location == unicode_info.value.location == _range((2, 7), (2, 10))

    def test_multibyte_unknown_line(self):
        with pytest.raises(IniParseError) as exc_info:
            parse("[core]\nмусор")

        assert exc_info.value.location == _range((2, 1), (2, 5))
