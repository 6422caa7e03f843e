"""
Tests for h2h.pipeline.codecs.

Covers format parsing, decoding and encoding of YAML and TOML front
matter, and deterministic output.
"""
import pytest

from h2h.core.exceptions import ConfigurationError, DecodeError, EncodeError
from h2h.pipeline.codecs import Format, decode, encode


class TestFormat:
    """Format enum parsing."""

    def test_choices(self):
        assert Format.choices() == ["yaml", "toml"]

    @pytest.mark.parametrize("value", ["yaml", "YAML", " yaml ", Format.YAML])
    def test_parse_yaml(self, value):
        assert Format.parse(value) is Format.YAML

    def test_parse_unknown(self):
        with pytest.raises(ConfigurationError, match="unsupported format: 'json'"):
            Format.parse("json")


class TestDecode:
    """Decoding front matter text."""

    def test_yaml(self):
        assert decode(Format.YAML, "title: Hello\ntags: [a, b]\n") == {
            "title": "Hello",
            "tags": ["a", "b"],
        }

    def test_toml(self):
        text = 'title = "Hello"\ntags = ["a", "b"]\n\n[params]\ntoc = true\n'
        assert decode("toml", text) == {
            "title": "Hello",
            "tags": ["a", "b"],
            "params": {"toc": True},
        }

    @pytest.mark.parametrize("fmt", ["yaml", "toml"])
    def test_empty_block(self, fmt):
        assert decode(fmt, "") == {}
        assert decode(fmt, "  \n") == {}

    def test_invalid_yaml(self):
        with pytest.raises(DecodeError, match="decoding yaml front matter") as exc_info:
            decode("yaml", "title: [unclosed\n")
        assert exc_info.value.format == "yaml"
        assert exc_info.value.cause is not None

    def test_invalid_toml(self):
        with pytest.raises(DecodeError, match="decoding toml front matter"):
            decode("toml", 'title = "unterminated\n')

    def test_yaml_front_matter_read_as_toml(self):
        """The configured format is used, never guessed from content."""
        with pytest.raises(DecodeError):
            decode("toml", "title: Hello\n")

    @pytest.mark.parametrize("text", ["- a\n- b\n", "just a sentence\n", "42\n"])
    def test_yaml_non_mapping(self, text):
        with pytest.raises(DecodeError, match="key/value mapping"):
            decode("yaml", text)

    def test_unknown_format(self):
        with pytest.raises(ConfigurationError):
            decode("json", "{}")


class TestEncode:
    """Encoding metadata."""

    def test_yaml_simple(self):
        assert encode("yaml", {"title": "Hello", "slug": "/x"}) == "slug: /x\ntitle: Hello\n"

    def test_toml_simple(self):
        assert encode("toml", {"title": "Hello", "slug": "/x"}) == 'slug = "/x"\ntitle = "Hello"\n'

    def test_yaml_unicode_kept(self):
        assert encode("yaml", {"title": "Café"}) == "title: Café\n"

    def test_key_order_does_not_matter(self):
        first = {"b": 1, "a": {"y": 2, "x": 3}, "c": [1, 2]}
        second = {"c": [1, 2], "a": {"x": 3, "y": 2}, "b": 1}
        for fmt in Format:
            assert encode(fmt, first) == encode(fmt, second)

    def test_toml_nested_tables_sorted(self):
        text = encode("toml", {"params": {"toc": True, "author": "Ada"}, "title": "T"})
        assert text.index("author") < text.index("toc")
        assert decode("toml", text) == {"params": {"author": "Ada", "toc": True}, "title": "T"}

    def test_yaml_nested_round_trip(self):
        metadata = {"tags": ["a", "b"], "params": {"toc": True, "n": 3}}
        assert decode("yaml", encode("yaml", metadata)) == metadata

    def test_yaml_to_toml_values_survive(self):
        metadata = decode("yaml", "title: Hi\nweight: 10\ndraft: false\ntags: [x]\n")
        assert decode("toml", encode("toml", metadata)) == metadata

    def test_yaml_unrepresentable_value(self):
        with pytest.raises(EncodeError, match="encoding yaml front matter"):
            encode("yaml", {"bad": object()})

    def test_empty_mapping(self):
        assert encode("toml", {}) == ""
        assert encode("yaml", {}) == "{}\n"


class TestTomlTables:
    """TOML tables decode to plain dicts usable by every encoder."""

    def test_inline_table_is_plain_dict(self):
        metadata = decode("toml", 'author = { name = "Ada" }\n')
        assert type(metadata["author"]) is dict

    def test_inline_and_section_tables_encode_as_yaml(self):
        text = 'title = "T"\nauthor = { name = "Ada" }\n\n[params]\ntoc = true\n'
        metadata = decode("toml", text)
        assert decode("yaml", encode("yaml", metadata)) == {
            "title": "T",
            "author": {"name": "Ada"},
            "params": {"toc": True},
        }
