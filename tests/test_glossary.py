"""
Tests pour le modèle du glossaire et son chargement.
"""

import pytest

from glossary_compliance.glossary import Glossary, GlossaryEntry, split_alternatives


class TestGlossaryEntry:
    """Tests pour GlossaryEntry."""

    def test_from_raw_splits_and_trims(self):
        entry = GlossaryEntry.from_raw(" shelter ", " refugio / albergue ")
        assert entry.source_term == "shelter"
        assert entry.target_alternatives == ("refugio", "albergue")

    def test_display_target(self):
        entry = GlossaryEntry.from_raw("shelter", "refugio / albergue")
        assert entry.display_target == "refugio/albergue"

    def test_requires_source_term(self):
        with pytest.raises(ValueError):
            GlossaryEntry("", ("refugio",))

    def test_requires_alternative(self):
        with pytest.raises(ValueError):
            GlossaryEntry("shelter", ())

    def test_is_immutable(self):
        entry = GlossaryEntry.from_raw("shelter", "refugio")
        with pytest.raises(AttributeError):
            entry.source_term = "other"  # type: ignore[misc]

    def test_split_alternatives_drops_empty_pieces(self):
        assert split_alternatives("refugio//albergue/ ") == ("refugio", "albergue")


class TestGlossaryLoad:
    """Tests pour Glossary.load()."""

    def test_one_entry_per_row(self):
        glossary = Glossary.load(
            [
                ("shelter", "refugio/albergue"),
                ("financial assistance", "asistencia financiera"),
            ]
        )

        assert len(glossary) == 2
        assert glossary["shelter"].target_alternatives == ("refugio", "albergue")
        assert glossary["financial assistance"].target_alternatives == (
            "asistencia financiera",
        )
        assert glossary.issues == []

    def test_source_term_is_case_sensitive(self):
        glossary = Glossary.load([("Shelter", "Refugio"), ("shelter", "refugio")])

        assert glossary.terms() == ["Shelter", "shelter"]

    def test_duplicate_keeps_first(self, caplog):
        with caplog.at_level("WARNING"):
            glossary = Glossary.load([("shelter", "refugio"), ("shelter", "albergue")])

        assert len(glossary) == 1
        assert glossary["shelter"].target_alternatives == ("refugio",)
        assert [issue.kind for issue in glossary.issues] == ["duplicate"]
        assert "Duplicate glossary entry: shelter - albergue" in caplog.text

    def test_malformed_rows_are_skipped(self, caplog):
        with caplog.at_level("WARNING"):
            glossary = Glossary.load(
                [
                    ("shelter", None),
                    (None, "albergue"),
                    ("camp", "   "),
                    ("tent", " / "),
                    ("aid", "ayuda"),
                ]
            )

        assert glossary.terms() == ["aid"]
        assert [issue.kind for issue in glossary.issues] == ["malformed"] * 4
        assert [issue.row_number for issue in glossary.issues] == [1, 2, 3, 4]
        assert "Either source or target are empty" in caplog.text

    def test_blank_rows_are_ignored_silently(self):
        glossary = Glossary.load([(None, None), ("", "  "), ("aid", "ayuda")])

        assert glossary.terms() == ["aid"]
        assert glossary.issues == []

    def test_non_string_cells_are_converted(self):
        glossary = Glossary.load([(2024, "dos mil veinticuatro")])

        assert "2024" in glossary

    def test_iteration_follows_load_order(self):
        glossary = Glossary.load([("b", "B"), ("a", "A"), ("c", "C")])

        assert [entry.source_term for entry in glossary] == ["b", "a", "c"]

    def test_get_unknown_term(self):
        glossary = Glossary.load([("aid", "ayuda")])

        assert glossary.get("shelter") is None
        assert "shelter" not in glossary
