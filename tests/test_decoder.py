"""
Tests for fixture decoders and the file reader.
"""

from pathlib import Path

import pytest

from fixseed.config import reset_settings
from fixseed.seeding.decoder import decode_json, decode_yaml, decoder_for
from fixseed.seeding.reader import read_file, resolve_path
from fixseed.utils.errors import FixtureError, FixtureNotFoundError


class TestDecoders:
    """Test YAML and JSON decoding."""

    def test_yaml_preserves_label_order(self):
        records = decode_yaml("b:\n  x: 1\na:\n  x: 2\nc:\n  x: 3\n")

        assert list(records) == ["b", "a", "c"]
        assert records["a"] == {"x": 2}

    def test_labels_are_text(self):
        records = decode_yaml("1200:\n  id: 1200\n")

        assert list(records) == ["1200"]

    def test_empty_document(self):
        assert decode_yaml("") == {}
        assert decode_json("  \n") == {}

    def test_yaml_syntax_error(self):
        with pytest.raises(ValueError):
            decode_yaml("melon:\n  price: [500\n")

    def test_top_level_must_be_mapping(self):
        with pytest.raises(ValueError, match="must be a mapping"):
            decode_yaml("- a\n- b\n")

    def test_json(self):
        records = decode_json('{"grape": {"price": 800}, "lemon": {"price": 120}}')

        assert list(records) == ["grape", "lemon"]

    def test_json_syntax_error(self):
        with pytest.raises(ValueError):
            decode_json("{not json")

    @pytest.mark.parametrize(
        "filename, decoder",
        [
            ("items.yml", decode_yaml),
            ("items.YAML", decode_yaml),
            ("items.json", decode_json),
            ("items.txt", decode_yaml),
            ("items", decode_yaml),
        ],
    )
    def test_decoder_for(self, filename, decoder):
        assert decoder_for(filename) is decoder


class TestReader:
    """Test reading fixture files."""

    def test_read_relative_to_base_dir(self, fixtures_dir):
        text = read_file("items.yml", fixtures_dir)

        assert text.startswith("melon:")

    def test_absolute_filename_ignores_base_dir(self, fixtures_dir, tmp_path):
        text = read_file(fixtures_dir / "items.yml", tmp_path)

        assert "carrot" in text

    def test_base_dir_defaults_to_settings(self, fixtures_dir, monkeypatch):
        monkeypatch.setenv("FIXSEED_FIXTURES_DIR", str(fixtures_dir))
        reset_settings()

        assert resolve_path("items.yml") == fixtures_dir / "items.yml"
        assert "melon" in read_file("items.yml")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FixtureNotFoundError) as exc_info:
            read_file("missing.yml", tmp_path)

        assert exc_info.value.path == str(Path(tmp_path) / "missing.yml")
        assert isinstance(exc_info.value, FixtureError)
