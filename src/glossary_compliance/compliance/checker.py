"""
Vérification de conformité terminologique d'une paire de documents.

Pour chaque entrée du glossaire trouvée dans le document source, le checker
compare le nombre de segments source contenant le terme au nombre
d'occurrences de ses traductions dans le document cible.

Comptage :
- source : +1 par segment contenant le terme, quel que soit le nombre
  d'occurrences dans ce segment (sous-comptage connu, conservé)
- cible : somme des occurrences de chaque alternative, sans déduplication
  (deux alternatives qui se recouvrent comptent deux fois)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..exceptions import DegenerateDocumentPair, TargetDocumentMissing
from ..glossary import Glossary, GlossaryEntry
from ..logger import get_logger
from ..segment import DocumentPair, DocumentPairRef, TextSegment
from .count_pair import CountPair
from .matcher import TermMatcher

logger = get_logger(__name__)

SegmentExtractor = Callable[[Path, Optional[str]], Sequence[TextSegment]]


@dataclass
class EntryResult:
    """Résultat d'une entrée du glossaire pour une paire."""

    entry: GlossaryEntry
    counts: CountPair

    @property
    def satisfied(self) -> bool:
        return self.counts.satisfied


@dataclass
class ComplianceReport:
    """
    Rapport de conformité d'une paire de documents.

    Attributes:
        label: Libellé de la paire
        entry_results: {terme source: CountPair}, dans l'ordre du premier
            segment source où chaque terme a été trouvé
        entries: {terme source: GlossaryEntry} pour les termes de entry_results
    """

    label: str = ""
    entry_results: dict[str, CountPair] = field(default_factory=dict)
    entries: dict[str, GlossaryEntry] = field(default_factory=dict)

    @property
    def verified_count(self) -> int:
        return sum(1 for counts in self.entry_results.values() if counts.satisfied)

    @property
    def failed_count(self) -> int:
        return sum(1 for counts in self.entry_results.values() if not counts.satisfied)

    def results(self) -> list[EntryResult]:
        return [
            EntryResult(self.entries[term], counts)
            for term, counts in self.entry_results.items()
        ]

    def mismatches(self) -> list[EntryResult]:
        return [result for result in self.results() if not result.satisfied]


class ComplianceChecker:
    """
    Compare une paire de documents au glossaire.

    Example:
        >>> glossary = Glossary.load([("shelter", "refugio/albergue")])
        >>> checker = ComplianceChecker(glossary)
        >>> pair = DocumentPair.from_texts(["the shelter"], ["el Albergue"])
        >>> report = checker.check(pair)
        >>> report.verified_count, report.failed_count
        (1, 0)
    """

    def __init__(self, glossary: Glossary, matcher: Optional[TermMatcher] = None):
        self.glossary = glossary
        self.matcher = matcher or TermMatcher()

    def check(self, pair: DocumentPair) -> ComplianceReport:
        """
        Produit le rapport de conformité d'une paire déjà extraite.

        Args:
            pair: Segments source et cible

        Returns:
            ComplianceReport (les entrées absentes du source n'y figurent pas)
        """
        report = ComplianceReport(label=pair.label)

        # 1. Côté source : un segment compte au plus une fois par terme
        for segment in pair.source_segments:
            for entry in self.glossary:
                if self.matcher.occurs_in(segment.content, entry.source_term):
                    counts = report.entry_results.setdefault(entry.source_term, CountPair())
                    counts.source_count += 1
                    report.entries.setdefault(entry.source_term, entry)

        # 2. Côté cible : seulement les entrées trouvées dans le source
        for segment in pair.target_segments:
            for term, counts in report.entry_results.items():
                for alternative in report.entries[term].target_alternatives:
                    counts.target_count += self.matcher.count_occurrences(
                        segment.content, alternative
                    )

        logger.debug(
            f"{pair.label or '<pair>'}: {report.verified_count} verified, "
            f"{report.failed_count} failed"
        )
        return report

    def check_files(
        self,
        ref: DocumentPairRef,
        extract: SegmentExtractor,
    ) -> ComplianceReport:
        """
        Extrait puis vérifie une paire de fichiers.

        Args:
            ref: Chemins source et cible
            extract: Extracteur de segments (voir extraction.extract_plain_text_segments)

        Raises:
            DegenerateDocumentPair: Si source et cible sont le même fichier
            TargetDocumentMissing: Si le fichier cible n'existe pas
            DocumentExtractionError: Si un des documents ne peut pas être lu
        """
        if _same_document(ref.source_path, ref.target_path):
            raise DegenerateDocumentPair(ref.source_path)
        if not ref.target_path.is_file():
            raise TargetDocumentMissing(ref.source_path, ref.target_path)

        pair = DocumentPair(
            source_segments=list(extract(ref.source_path, ref.source_language)),
            target_segments=list(extract(ref.target_path, ref.target_language)),
            label=ref.label,
        )
        return self.check(pair)


def _same_document(source: Path, target: Path) -> bool:
    if source == target:
        return True
    try:
        return source.resolve() == target.resolve()
    except OSError:
        return False
