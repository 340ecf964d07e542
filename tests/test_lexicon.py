"""Tests for keyword lexicon and bundled resources."""

import pytest

from resume_matcher.resources.loader import (
    KeywordLexicon,
    default_lexicon,
    default_mock_template,
    load_lexicon,
    load_mock_template,
)


class TestKeywordLexicon:
    def test_normalizes_and_dedupes(self):
        lexicon = KeywordLexicon(["Python", " SQL ", "python", "", "Docker"])
        assert lexicon.terms == ("python", "sql", "docker")

    def test_preserves_order(self):
        assert list(KeywordLexicon(["b", "a", "c"])) == ["b", "a", "c"]

    def test_contains_is_substring_match(self):
        lexicon = KeywordLexicon(["node", "sql"])
        assert lexicon.contains("node.js")
        assert lexicon.contains("postgresql,")
        assert lexicon.contains("SQL")
        assert not lexicon.contains("docker")

    def test_terms_are_immutable(self):
        lexicon = KeywordLexicon(["python"])
        assert isinstance(lexicon.terms, tuple)


class TestBundledResources:
    def test_default_lexicon(self):
        lexicon = default_lexicon()
        assert len(lexicon) == 20
        assert lexicon.terms[0] == "javascript"
        assert lexicon.terms[-1] == "linux"
        assert "kubernetes" in lexicon.terms

    def test_default_lexicon_is_cached(self):
        assert default_lexicon() is default_lexicon()

    def test_default_mock_template(self):
        template = default_mock_template()
        assert len(template.suggestions) == 3
        assert template.suggestions[0].section == "Professional Summary"
        assert template.optimized_sections.education == ["Bachelor's in Computer Science"]
        assert len(template.warnings) == 2

    def test_load_lexicon_from_file(self, tmp_path):
        path = tmp_path / "lexicon.yaml"
        path.write_text("terms:\n  - Rust\n  - Go\n")
        assert load_lexicon(path).terms == ("rust", "go")

    def test_load_lexicon_without_terms(self, tmp_path):
        path = tmp_path / "lexicon.yaml"
        path.write_text("name: empty\n")
        with pytest.raises(ValueError, match="no terms"):
            load_lexicon(path)

    @pytest.mark.parametrize("body", ["terms: python\n", "terms: {python: 1}\n", "terms:\n  - 1\n"])
    def test_load_lexicon_rejects_non_list_terms(self, tmp_path, body):
        path = tmp_path / "lexicon.yaml"
        path.write_text(body)
        with pytest.raises(ValueError, match="list of strings"):
            load_lexicon(path)

    def test_missing_resource(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_mock_template(tmp_path / "nope.yaml")
