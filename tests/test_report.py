"""
Tests pour le rendu et l'écriture du rapport.
"""

from datetime import datetime
from pathlib import Path

from glossary_compliance.compliance.aggregator import CorpusTotals, PairOutcome
from glossary_compliance.compliance.checker import ComplianceChecker
from glossary_compliance.exceptions import TargetDocumentMissing
from glossary_compliance.glossary import Glossary
from glossary_compliance.report import ReportRenderer, ReportWriter
from glossary_compliance.segment import DocumentPair, DocumentPairRef

REF = DocumentPairRef(Path("docs/guide_EN.docx"), Path("docs/guide_ES.docx"))


def _outcome(glossary: Glossary, source, target) -> PairOutcome:
    report = ComplianceChecker(glossary).check(DocumentPair.from_texts(source, target))
    return PairOutcome(REF, report=report)


class TestReportRenderer:
    """Tests pour ReportRenderer."""

    def test_mismatch_section(self, shelter_glossary: Glossary):
        outcome = _outcome(shelter_glossary, ["shelter"], ["no matching word here"])

        text = ReportRenderer().render_pair(outcome)

        assert text.splitlines() == [
            "=================================================",
            "guide_EN.docx\tguide_ES.docx",
            "-------------------------------------------------",
            "Glossary mismatch:\tshelter\t1\trefugio/albergue\t0",
            "0 entries verified.\t1 entries failed.",
        ]

    def test_verified_section_has_no_mismatch_line(self, shelter_glossary: Glossary):
        outcome = _outcome(shelter_glossary, ["the shelter"], ["el refugio"])

        text = ReportRenderer().render_pair(outcome)

        assert "Glossary mismatch" not in text
        assert text.splitlines()[-1] == "1 entries verified.\t0 entries failed."

    def test_error_section(self):
        error = TargetDocumentMissing(REF.source_path, REF.target_path)

        text = ReportRenderer().render_pair(PairOutcome(REF, error=error))

        assert text == f"ERROR: Target file {REF.target_path} not found."

    def test_summary(self):
        assert ReportRenderer().render_summary(CorpusTotals(3, 1)) == "Total hits: 3\tTotal misses: 1"

    def test_header(self):
        assert ReportRenderer().render_header(datetime(2024, 5, 2, 9, 30)) == "2024-05-02 09:30"


class TestReportWriter:
    """Tests pour ReportWriter."""

    def test_new_report_replaces_previous(self, tmp_path: Path):
        path = tmp_path / "report.txt"
        path.write_text("old content\n", encoding="utf-8")

        writer = ReportWriter(path, timestamp=datetime(2024, 5, 2, 9, 30))
        writer.write_line("Glossary read.")

        assert writer.read() == "2024-05-02 09:30\nGlossary read.\n"

    def test_sections_are_appended_in_order(self, tmp_path: Path, shelter_glossary: Glossary):
        writer = ReportWriter(tmp_path / "out" / "report.txt")

        writer.write_pair(_outcome(shelter_glossary, ["shelter"], ["refugio"]))
        writer.write_summary(CorpusTotals(1, 0))

        lines = writer.read().splitlines()
        assert lines[1] == "================================================="
        assert lines[-1] == "Total hits: 1\tTotal misses: 0"
