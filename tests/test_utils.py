from inidoc.utils import (
    trim,
    compare_no_case,
    equals_no_case,
    split_key_value,
    strip_comment_indicators,
)
import pytest


class TestTrim:

    @pytest.mark.parametrize(
        "string,result",
        [
            ("  key  ", "key"),
            ("\tkey = value\r\n", "key = value"),
            ("==key==", "key"),
            (" = ", ""),
            ("a b", "a b"),
        ],
    )
    def test_trim(self, string, result):
        assert trim(string) == result

    def test_trim_custom_equal_indicators(self):
        assert trim(":key=", ("=", ":")) == "key"
        assert trim(":key=", "=") == ":key"


class TestCompareNoCase:

    def test_equal(self):
        assert compare_no_case("Port", "PORT") == 0
        assert equals_no_case("ServerSettings", "serversettings")

    def test_ordering(self):
        assert compare_no_case("a", "B") < 0
        assert compare_no_case("b", "A") > 0
        assert not equals_no_case("a", "b")


class TestSplitKeyValue:

    @pytest.mark.parametrize(
        "line,result",
        [
            ("key=value", ("key", "value")),
            ("key = value", ("key", "value")),
            ("Date of Birth=12/25/01", ("Date of Birth", "12/25/01")),
            ("url = http://host/?a=b", ("url", "http://host/?a=b")),
            ("key = two  words  ", ("key", "two  words")),
            ("flag", ("flag", "")),
            ("key=", ("key", "")),
        ],
    )
    def test_split(self, line, result):
        assert split_key_value(line) == result

    def test_first_of_several_indicators(self):
        assert split_key_value("a:b=c", ("=", ":")) == ("a", "b=c")
        assert split_key_value("a=b:c", ("=", ":")) == ("a", "b:c")


def test_strip_comment_indicators():
    assert strip_comment_indicators("; a comment", ";") == "a comment"
    assert strip_comment_indicators(";;; banner", ";") == "banner"
    assert strip_comment_indicators("# other", (";", "#")) == "other"
    assert strip_comment_indicators(";", ";") == ""
