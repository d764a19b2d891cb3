"""Unit tests for engines.sass.filters: Ruby literal escaping."""

from sassbridge.engines.sass.filters import (
    encode_content,
    ruby_quoted,
    ruby_single_quoted,
    sass_content,
)


class TestEncodeContent:
    def test_plain_ascii_unchanged(self) -> None:
        s = ".a { color: red; margin: 0 auto; }\n@import 'x';"
        assert encode_content(s) == s
        assert sass_content(s) == s

    def test_backslash_doubled(self) -> None:
        assert encode_content("a\\b") == "a\\\\b"

    def test_non_ascii_lowercase_escape(self) -> None:
        out = encode_content("caf\u00e9 \u00c9\u4e2d")
        assert out == "caf\\u00e9 \\u00c9\\u4e2d"
        assert "\u00e9" not in out

    def test_first_non_ascii_code_point(self) -> None:
        assert encode_content("\u0080") == "\\u0080"
        assert encode_content("\u007f") == "\u007f"

    def test_astral_code_point_braced(self) -> None:
        """Code points above the BMP use the braced escape, one per code point."""
        assert encode_content("\U0001f600") == "\\u{1f600}"


class TestSassContent:
    def test_double_quote_escaped(self) -> None:
        assert sass_content('a:"b"') == 'a:\\"b\\"'

    def test_hash_escaped(self) -> None:
        assert sass_content("#main { color: #fff; }") == "\\#main { color: \\#fff; }"

    def test_interpolation_escaped(self) -> None:
        assert sass_content("#{$x}") == "\\#{$x}"

    def test_backslash_before_quote(self) -> None:
        assert sass_content('\\"') == '\\\\\\"'

    def test_example_from_accented_content(self) -> None:
        out = sass_content('h1{content:"caf\u00e9"}')
        assert out == 'h1{content:\\"caf\\u00e9\\"}'


class TestRubyQuoted:
    def test_name_passthrough(self) -> None:
        assert ruby_quoted("bourbon") == "bourbon"

    def test_name_quote_escaped(self) -> None:
        assert ruby_quoted("o'neil") == "o\\'neil"

    def test_path_backslashes_normalized(self) -> None:
        assert ruby_single_quoted("C:\\styles\\partials") == "C:/styles/partials"

    def test_path_quote_escaped_after_normalizing(self) -> None:
        assert ruby_single_quoted("/a/it's") == "/a/it\\'s"
        assert ruby_single_quoted("C:\\it's") == "C:/it\\'s"
