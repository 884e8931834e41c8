"""
Tests pour la découverte des paires de documents.
"""

from pathlib import Path

import pytest

from glossary_compliance.discovery import (
    discover_document_pairs,
    language_from_marker,
    target_path_for,
)


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Arborescence : deux paires, un PDF source, un fichier verrou Office."""
    (tmp_path / "guide_EN.docx").touch()
    (tmp_path / "guide_ES.docx").touch()
    (tmp_path / "readme_EN.pdf").touch()
    (tmp_path / "~$guide_EN.docx").touch()
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "notes_en.tmx").touch()
    (sub / "notes_ES.tmx").touch()
    return tmp_path


class TestDiscovery:
    """Tests pour discover_document_pairs()."""

    def test_pairs_in_traversal_order(self, corpus_dir: Path):
        result = discover_document_pairs(corpus_dir, "_EN.", "_ES.")

        assert [(ref.source_path, ref.target_path) for ref in result] == [
            (corpus_dir / "guide_EN.docx", corpus_dir / "guide_ES.docx"),
            (corpus_dir / "sub" / "notes_en.tmx", corpus_dir / "sub" / "notes_ES.tmx"),
        ]

    def test_unsupported_files_are_reported(self, corpus_dir: Path):
        result = discover_document_pairs(corpus_dir, "_EN.", "_ES.")

        assert result.skipped == [corpus_dir / "readme_EN.pdf"]
        assert result.notices() == [
            f"Skipping unsupported file type: {corpus_dir / 'readme_EN.pdf'}"
        ]

    def test_languages_come_from_markers(self, corpus_dir: Path):
        result = discover_document_pairs(corpus_dir, "_EN.", "_ES.")

        ref = result.pairs[0]
        assert (ref.source_language, ref.target_language) == ("en", "es")

    def test_target_files_are_not_sources(self, corpus_dir: Path):
        result = discover_document_pairs(corpus_dir, "_EN.", "_ES.")

        assert all("_ES." not in ref.source_path.name for ref in result)
        assert len(result) == 2

    def test_identical_markers_give_degenerate_pairs(self, corpus_dir: Path):
        result = discover_document_pairs(corpus_dir, "_EN.", "_EN.")

        assert result.pairs[0].source_path == result.pairs[0].target_path


class TestHelpers:
    """Tests pour les fonctions utilitaires de nommage."""

    def test_target_path_for_is_case_insensitive(self):
        assert target_path_for(Path("d/report_en.docx"), "_EN.", "_ES.") == Path(
            "d/report_ES.docx"
        )

    def test_target_path_for_only_touches_file_name(self):
        assert target_path_for(Path("x_EN./a_EN.docx"), "_EN.", "_ES.") == Path(
            "x_EN./a_ES.docx"
        )

    @pytest.mark.parametrize(
        "marker, expected",
        [("_EN.", "en"), ("-es-ES.", "es-es"), ("__", None)],
    )
    def test_language_from_marker(self, marker, expected):
        assert language_from_marker(marker) == expected
