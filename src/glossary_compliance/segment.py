"""
Segments de texte extraits des documents et paires de documents à comparer.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional


@dataclass(frozen=True)
class TextSegment:
    """Unité de texte brut extraite d'un document (un run Word, un <seg> TMX...)."""

    content: str

    def __str__(self) -> str:
        return self.content


@dataclass(frozen=True)
class DocumentPairRef:
    """
    Paire de fichiers découverte sur disque, avant extraction.

    Attributes:
        source_path: Document dans la langue source
        target_path: Document traduit attendu (peut ne pas exister)
        source_language: Code langue déduit du marqueur source ("en")
        target_language: Code langue déduit du marqueur cible ("es")
    """

    source_path: Path
    target_path: Path
    source_language: Optional[str] = None
    target_language: Optional[str] = None

    @property
    def label(self) -> str:
        return f"{self.source_path.name}\t{self.target_path.name}"


@dataclass
class DocumentPair:
    """
    Segments source et cible d'une paire de documents.

    Attributes:
        source_segments: Segments du document source, dans l'ordre du document
        target_segments: Segments du document cible, dans l'ordre du document
        label: Libellé utilisé dans l'en-tête du rapport
    """

    source_segments: list[TextSegment] = field(default_factory=list)
    target_segments: list[TextSegment] = field(default_factory=list)
    label: str = ""

    @classmethod
    def from_texts(
        cls,
        source_texts: Iterable[str],
        target_texts: Iterable[str],
        label: Optional[str] = None,
    ) -> "DocumentPair":
        """Construit une paire directement depuis des chaînes (tests, intégrations)."""
        return cls(
            source_segments=[TextSegment(text) for text in source_texts],
            target_segments=[TextSegment(text) for text in target_texts],
            label=label or "",
        )
