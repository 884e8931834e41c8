"""
Orchestration d'un run complet de vérification.

Étapes :
1. Chargement du glossaire (erreur fatale si le classeur est illisible)
2. Découverte des paires de documents sous le dossier racine
3. Vérification de chaque paire et écriture de sa section dans le rapport
4. Ligne de totaux du corpus
"""

from pathlib import Path
from typing import Optional

from .compliance import ComplianceChecker, CorpusAggregator, CorpusTotals, TermMatcher
from .config import Matching, Pairing
from .discovery import discover_document_pairs
from .exceptions import GlossarySourceUnavailable
from .extraction import extract_plain_text_segments
from .glossary import Glossary
from .logger import get_logger
from .report import ReportWriter

logger = get_logger(__name__)


class ComplianceRun:
    """
    Vérifie un corpus complet contre un glossaire et écrit le rapport.

    Example:
        >>> run = ComplianceRun(Path("corpus"), Path("corpus/glossary.xlsx"))
        >>> totals = run.execute()
        >>> print(run.report.path)
    """

    def __init__(
        self,
        root: Path,
        glossary_path: Path,
        report_path: Optional[Path] = None,
        source_marker: str = Pairing.source_marker,
        target_marker: str = Pairing.target_marker,
        escape_terms: bool = Matching.escape_terms,
        max_workers: int = 1,
        show_progress: bool = False,
    ):
        self.root = Path(root)
        self.glossary_path = Path(glossary_path)
        self.report_path = report_path
        self.source_marker = source_marker
        self.target_marker = target_marker
        self.escape_terms = escape_terms
        self.max_workers = max_workers
        self.show_progress = show_progress
        self.report: Optional[ReportWriter] = None

    def execute(self) -> CorpusTotals:
        """
        Exécute le run.

        Returns:
            Totaux du corpus

        Raises:
            GlossarySourceUnavailable: Si le glossaire ne peut pas être ouvert
        """
        if self.report_path is not None:
            self.report = ReportWriter(self.report_path)
        else:
            self.report = ReportWriter()

        try:
            glossary = Glossary.from_spreadsheet(self.glossary_path)
        except GlossarySourceUnavailable as e:
            self.report.write_line(f"ERROR: {e}")
            raise

        for issue in glossary.issues:
            self.report.write_line(str(issue))
        self.report.write_line("Glossary read.")
        self.report.write_line(f"{len(glossary)} glossary entries read.")

        discovery = discover_document_pairs(
            self.root, self.source_marker, self.target_marker
        )
        for notice in discovery.notices():
            self.report.write_line(notice)

        checker = ComplianceChecker(glossary, TermMatcher(escape_terms=self.escape_terms))
        aggregator = CorpusAggregator(checker, extract_plain_text_segments)
        totals = aggregator.run(
            discovery.pairs,
            on_outcome=self.report.write_pair,
            max_workers=self.max_workers,
            show_progress=self.show_progress,
        )

        self.report.write_summary(totals)
        logger.info(f"Report written to {self.report.path}")
        return totals
