import io
import pytest
from lazylist import LazyList
from errors import UnsupportedShapeError
from models import set_settings, LazyListSettings


class TestTextConversion:
    """Test character lists and their textual forms"""

    def test_from_string_and_as_string(self):
        """Test round trip between str and a character list"""
        seq = LazyList.from_string("lazy")
        assert seq == ["l", "a", "z", "y"]
        assert seq.as_string() == "lazy"
        assert LazyList.empty().as_string() == ""

    def test_as_string_of_non_characters(self):
        """Test as_string rejects elements that are not single characters"""
        with pytest.raises(UnsupportedShapeError):
            LazyList.of(1, 2).as_string()
        with pytest.raises(UnsupportedShapeError):
            LazyList.of("ab").as_string()

    @pytest.mark.parametrize("word", ["anna", "otto", "racecar", "a", ""])
    def test_palindromes(self, word):
        """Test reversing a character list"""
        assert LazyList.from_string(word).reverse().as_string() == word

    def test_show_infinite(self):
        """Test show produces text for an infinite list lazily"""
        text = LazyList.from_(11).show().take(12).as_string()
        assert text == "[11, 12, 13,", f"Unexpected text: {text!r}"

    def test_show_finite(self):
        """Test show of finite lists"""
        assert LazyList.of(1, 2, 3).show().as_string() == "[1, 2, 3]"
        assert LazyList.empty().show().as_string() == "[]"
        assert LazyList.of("a").show().as_string() == "['a']"

    def test_str(self):
        """Test str matches Python's list text"""
        assert str(LazyList.of(1, 2, 3)) == "[1, 2, 3]"
        assert str(LazyList.of("a", "b")) == str(["a", "b"])
        assert str(LazyList.of(LazyList.of(1), LazyList.empty())) == "[[1], []]"

    def test_repr_never_pulls(self, naturals):
        """Test repr shows only what is realized"""
        assert repr(naturals) == "LazyList([], growing)"
        naturals.get(2)
        assert repr(naturals) == "LazyList([0, 1, 2], growing)"
        assert naturals.realized_length == 3
        assert repr(LazyList.of(1, 2)) == "LazyList([1, 2], sealed)"

    def test_repr_preview_setting(self, naturals):
        """Test repr respects the configured preview size"""
        set_settings(LazyListSettings(repr_preview=2))
        naturals.get(4)
        assert repr(naturals) == "LazyList([0, 1, ...], growing)"


class TestLinesAndWords:
    """Test lines, words and their inverses"""

    @pytest.mark.parametrize("text, expected", [
        ("a\nb\n\nc", ["a", "b", "", "c"]),
        ("abc\n", ["abc"]),
        ("", []),
        ("\n", [""]),
    ])
    def test_lines(self, text, expected):
        """Test splitting at newlines"""
        assert LazyList.from_string(text).lines().to_list() == expected

    def test_unlines(self):
        """Test joining lines"""
        assert LazyList.of("a", "b").unlines().as_string() == "a\nb\n"
        assert LazyList.of(LazyList.from_string("x")).unlines().as_string() == "x\n"

    def test_lines_round_trip(self):
        """Test unlines(lines(s)) == s for newline-terminated text"""
        text = "first line\nsecond line\n"
        assert LazyList.from_string(text).lines().unlines().as_string() == text

    def test_words(self):
        """Test splitting at whitespace"""
        words = LazyList.from_string("  hello   lazy\tworld ").words()
        assert words == ["hello", "lazy", "world"]
        assert LazyList.from_string("   ").words().is_empty()

    def test_unwords(self):
        """Test joining words"""
        assert LazyList.of("lazy", "lists").unwords().as_string() == "lazy lists"
        assert LazyList.empty().unwords().as_string() == ""

    def test_words_of_infinite_text(self):
        """Test words stays lazy on an endless character list"""
        words = LazyList.of("a", "b", " ").cycle().words()
        assert words.take(3) == ["ab", "ab", "ab"]

    def test_unlines_of_non_strings(self):
        """Test unlines reports the bad element when it is reached"""
        joined = LazyList.of("ok", 5).unlines()
        assert joined.take(3).as_string() == "ok\n"
        with pytest.raises(UnsupportedShapeError):
            joined.to_list()


class TestSplit:
    """Test splitting at a delimiter"""

    @pytest.mark.parametrize("text, delimiter", [
        ("a,b,,c", ","),
        ("", ","),
        ("aaa", "aa"),
        ("one<->two<->", "<->"),
    ])
    def test_split_matches_str_split(self, text, delimiter):
        """Test split agrees with str.split"""
        assert LazyList.from_string(text).split(delimiter).to_list() == text.split(delimiter)

    def test_split_infinite(self):
        """Test split of an endless character list"""
        parts = LazyList.of("a", ",").cycle().split(",")
        assert parts.take(3) == ["a", "a", "a"]

    def test_split_empty_delimiter(self):
        """Test the empty delimiter is rejected"""
        with pytest.raises(ValueError):
            LazyList.from_string("abc").split("")


class TestPrinting:
    """Test printing to a stream"""

    def test_print_to(self):
        """Test print_to writes the list text"""
        out = io.StringIO()
        LazyList.of(1, 2, 3).print_to(out)
        assert out.getvalue() == "[1, 2, 3]"

    def test_print_to_stdout(self, capsys):
        """Test print_to defaults to stdout"""
        LazyList.of("x").print_to()
        assert capsys.readouterr().out == "['x']"
