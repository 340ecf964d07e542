"""Tests for JSON extraction utility."""

import pytest

from resume_matcher.utils.json_parser import extract_json_object


class TestExtractJsonObject:
    def test_direct_json(self):
        assert extract_json_object('{"name": "test"}') == {"name": "test"}

    def test_fenced_code_block(self):
        text = '```json\n{"matchScore": 70}\n```'
        assert extract_json_object(text) == {"matchScore": 70}

    def test_embedded_in_prose(self):
        text = 'Here is the result:\n```json\n{"name": "test"}\n```\nDone.'
        assert extract_json_object(text) == {"name": "test"}

    def test_nested_json(self):
        result = extract_json_object('{"outer": {"inner": [1, 2, 3]}}')
        assert result["outer"]["inner"] == [1, 2, 3]

    def test_invalid_json_raises(self):
        with pytest.raises(ValueError, match="Could not extract JSON"):
            extract_json_object("no json here at all")

    def test_truncated_json_raises(self):
        with pytest.raises(ValueError):
            extract_json_object('{"matchScore": 70, "keywordsFound": ["py')

    def test_empty_string_raises(self):
        with pytest.raises(ValueError):
            extract_json_object("")

    def test_array_rejected(self):
        with pytest.raises(ValueError, match="Expected JSON object"):
            extract_json_object("[1, 2, 3]")
