"""Tests for single line recognition."""

import pytest

from pyyaip.ini.matcher import IniLineMatcher, LineKind


@pytest.fixture
def matcher():
    return IniLineMatcher()


class TestSectionRule:
    @pytest.mark.parametrize(
        "line, expected",
        [
            ("[Section]", "Section"),
            ("   [Section]   ", "Section"),
            ("[Section] ; comment", "Section"),
            ("[Section];comment", "Section"),
            ("[ Spaced Name ]", " Spaced Name "),
            ("[MixedCase]", "MixedCase"),
            ("[Section] trailing junk", "Section"),
        ],
    )
    def test_matches(self, matcher, line, expected):
        assert matcher.match_section(line) == expected

    @pytest.mark.parametrize(
        "line", ["", "[]", "Section", "[Section", "; [Section]", "Key=Value"]
    )
    def test_no_match(self, matcher, line):
        assert matcher.match_section(line) is None


class TestPairRule:
    @pytest.mark.parametrize(
        "line, expected",
        [
            ("Key=Value", ("Key", "Value")),
            ("  Key = Value", ("Key", "Value")),
            ("Key=Value;comment", ("Key", "Value")),
            ("My Key = My Value", ("My Key", "My Value")),
            ("Key=a=b", ("Key", "a=b")),
            ("Path=C:\\Games\\yr", ("Path", "C:\\Games\\yr")),
        ],
    )
    def test_matches(self, matcher, line, expected):
        assert matcher.match_pair(line) == expected

    def test_blanks_before_comment_are_kept(self, matcher):
        assert matcher.match_pair("Key = Value ; note") == ("Key", "Value ")

    def test_blank_value(self, matcher):
        assert matcher.match_pair("Key= ") == ("Key", " ")
        assert matcher.match_pair("Key=   ;note") == ("Key", " ")

    @pytest.mark.parametrize(
        "line", ["", "   ", "Key", "Key=", "=Value", "  =Value",
                 "; Key=Value", "Key=;comment"]
    )
    def test_no_match(self, matcher, line):
        assert matcher.match_pair(line) is None


class TestClassify:
    def test_section(self, matcher):
        parsed = matcher.classify("[Video] ; display")
        assert parsed.kind is LineKind.SECTION
        assert parsed.section == "Video"
        assert parsed.comment == " display"

    def test_pair(self, matcher):
        parsed = matcher.classify("Width=1920;px")
        assert parsed.kind is LineKind.PAIR
        assert (parsed.key, parsed.value, parsed.comment) == ("Width", "1920", "px")
        assert parsed.section is None

    def test_section_wins_over_pair(self, matcher):
        parsed = matcher.classify("[a=b]")
        assert parsed.kind is LineKind.SECTION
        assert parsed.section == "a=b"

    def test_nothing(self, matcher):
        assert matcher.classify("; just a comment") is None


class TestCommentSeparator:
    def test_default(self, matcher):
        assert matcher.comment_sep == ";"

    def test_custom(self):
        matcher = IniLineMatcher("#")
        assert matcher.match_pair("Key=a;b#comment") == ("Key", "a;b")
        assert matcher.match_section("[Sect]#comment") == "Sect"

    @pytest.mark.parametrize("sep", ["^", "]", "-", "\\"])
    def test_regex_metachars(self, sep):
        matcher = IniLineMatcher(sep)
        assert matcher.match_pair(f"Key=Value{sep}comment") == ("Key", "Value")

    @pytest.mark.parametrize("sep", ["", ";;"])
    def test_invalid(self, sep):
        with pytest.raises(ValueError):
            IniLineMatcher(sep)
