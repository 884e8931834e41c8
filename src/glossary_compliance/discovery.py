"""
Découverte des paires de documents dans une arborescence.

Convention de nommage : le document source porte un marqueur de langue dans
son nom (guide_EN.docx) ; le document cible est le même chemin avec le
marqueur cible (guide_ES.docx). La détection du marqueur ignore la casse.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from .config import Pairing
from .extraction import is_supported
from .logger import get_logger
from .segment import DocumentPairRef

logger = get_logger(__name__)

# Fichiers verrous créés par Office pendant l'édition
LOCK_FILE_PREFIX = "~$"


def language_from_marker(marker: str) -> Optional[str]:
    """Déduit le code langue d'un marqueur de nom de fichier ("_EN." → "en")."""
    letters = re.sub(r"[^A-Za-z-]", "", marker).strip("-")
    return letters.lower() or None


def target_path_for(source_path: Path, source_marker: str, target_marker: str) -> Path:
    """Remplace le marqueur source par le marqueur cible dans le nom du fichier."""
    pattern = re.compile(re.escape(source_marker), re.IGNORECASE)
    name = pattern.sub(lambda _: target_marker, source_path.name, count=1)
    return source_path.with_name(name)


@dataclass
class DiscoveryResult:
    """Paires trouvées et fichiers source ignorés (type non supporté)."""

    pairs: list[DocumentPairRef] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    def __iter__(self) -> Iterator[DocumentPairRef]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def notices(self) -> list[str]:
        return [f"Skipping unsupported file type: {path}" for path in self.skipped]


def _walk(root: Path) -> Iterator[Path]:
    # Fichiers du dossier d'abord, puis sous-dossiers, triés pour un rapport reproductible
    entries = sorted(root.iterdir(), key=lambda p: p.name)
    for entry in entries:
        if entry.is_file():
            yield entry
    for entry in entries:
        if entry.is_dir():
            yield from _walk(entry)


def discover_document_pairs(
    root: Path,
    source_marker: str = Pairing.source_marker,
    target_marker: str = Pairing.target_marker,
) -> DiscoveryResult:
    """
    Parcourt root récursivement et associe chaque document source à sa cible.

    Args:
        root: Dossier racine du corpus
        source_marker: Marqueur des documents source (ex: "_EN.")
        target_marker: Marqueur des documents cible (ex: "_ES.")

    Returns:
        DiscoveryResult avec les paires, dans l'ordre de parcours
    """
    root = Path(root)
    result = DiscoveryResult()
    source_language = language_from_marker(source_marker)
    target_language = language_from_marker(target_marker)
    marker = source_marker.upper()

    for path in _walk(root):
        if path.name.startswith(LOCK_FILE_PREFIX):
            continue
        if marker not in path.name.upper():
            continue
        if not is_supported(path):
            logger.info(f"Skipping unsupported file type: {path}")
            result.skipped.append(path)
            continue

        result.pairs.append(
            DocumentPairRef(
                source_path=path,
                target_path=target_path_for(path, source_marker, target_marker),
                source_language=source_language,
                target_language=target_language,
            )
        )

    logger.info(f"{len(result.pairs)} document pairs found under {root}")
    return result
