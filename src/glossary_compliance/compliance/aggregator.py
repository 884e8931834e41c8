"""
Agrégation des résultats sur l'ensemble d'un corpus.

Le CorpusAggregator vérifie chaque paire découverte, transmet chaque résultat
au rapport dans l'ordre de découverte et tient les totaux du corpus. Une paire
en erreur (cible manquante, document illisible...) contribue 0/0 et ne bloque
jamais les paires suivantes.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from tqdm import tqdm

from ..exceptions import DocumentPairError, UnsupportedDocumentType
from ..logger import get_logger
from ..segment import DocumentPairRef
from .checker import ComplianceChecker, ComplianceReport, SegmentExtractor

logger = get_logger(__name__)

PairError = Union[DocumentPairError, UnsupportedDocumentType]


@dataclass
class CorpusTotals:
    """Totaux cumulés du run (ne font qu'augmenter)."""

    total_hits: int = 0
    total_misses: int = 0

    def add(self, report: ComplianceReport) -> None:
        self.total_hits += report.verified_count
        self.total_misses += report.failed_count


@dataclass
class PairOutcome:
    """Résultat d'une paire : un rapport, ou l'erreur qui l'a empêché."""

    ref: DocumentPairRef
    report: Optional[ComplianceReport] = None
    error: Optional[PairError] = None

    @property
    def verified_count(self) -> int:
        return self.report.verified_count if self.report else 0

    @property
    def failed_count(self) -> int:
        return self.report.failed_count if self.report else 0


OutcomeSink = Callable[[PairOutcome], None]


class CorpusAggregator:
    """
    Pilote le checker sur toutes les paires d'un corpus.

    Example:
        >>> aggregator = CorpusAggregator(checker, extract_plain_text_segments)
        >>> totals = aggregator.run(discover_document_pairs(root))
        >>> totals.total_hits, totals.total_misses
    """

    def __init__(self, checker: ComplianceChecker, extract: SegmentExtractor):
        self.checker = checker
        self.extract = extract
        self.totals = CorpusTotals()

    def check_pair(self, ref: DocumentPairRef) -> PairOutcome:
        """Vérifie une paire en convertissant les erreurs récupérables en résultat."""
        try:
            report = self.checker.check_files(ref, self.extract)
        except (DocumentPairError, UnsupportedDocumentType) as e:
            logger.warning(f"{ref.source_path}: {e}")
            return PairOutcome(ref, error=e)
        return PairOutcome(ref, report=report)

    def record(self, outcome: PairOutcome) -> None:
        if outcome.report is not None:
            self.totals.add(outcome.report)

    def run(
        self,
        refs: Iterable[DocumentPairRef],
        on_outcome: Optional[OutcomeSink] = None,
        max_workers: int = 1,
        show_progress: bool = False,
    ) -> CorpusTotals:
        """
        Vérifie toutes les paires et retourne les totaux du corpus.

        Args:
            refs: Paires à vérifier
            on_outcome: Appelé pour chaque paire, dans l'ordre de refs
            max_workers: >1 pour vérifier les paires en parallèle (threads)
            show_progress: Affiche une barre de progression tqdm

        Returns:
            Totaux cumulés (incluant les runs précédents de cet agrégateur)
        """
        refs = list(refs)

        with tqdm(
            total=len(refs),
            desc="Vérification des paires",
            unit="paire",
            ncols=100,
            disable=not show_progress,
        ) as pbar:
            if max_workers > 1:
                with ThreadPoolExecutor(max_workers=max_workers) as executor:
                    # map() conserve l'ordre de soumission
                    outcomes = executor.map(self.check_pair, refs)
                    self._consume(outcomes, on_outcome, pbar)
            else:
                self._consume(map(self.check_pair, refs), on_outcome, pbar)

        logger.info(
            f"Total hits: {self.totals.total_hits}\tTotal misses: {self.totals.total_misses}"
        )
        return self.totals

    def _consume(
        self,
        outcomes: Iterable[PairOutcome],
        on_outcome: Optional[OutcomeSink],
        pbar: tqdm,
    ) -> None:
        for outcome in outcomes:
            self.record(outcome)
            if on_outcome is not None:
                on_outcome(outcome)
            pbar.update(1)
