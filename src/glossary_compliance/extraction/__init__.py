"""
Extraction du texte des documents, par type de fichier.

Extracteurs disponibles :
- .docx : runs <w:t> d'un document Word
- .tmx : segments d'une mémoire de traduction (texte normalisé)

Le glossaire est lu séparément via load_glossary_rows() (.xlsx).
"""

from pathlib import Path
from typing import Callable, Optional

from ..exceptions import UnsupportedDocumentType
from ..segment import TextSegment
from .docx_extractor import extract_docx_segments
from .tmx_extractor import extract_tmx_segments
from .spreadsheet import load_glossary_rows

Extractor = Callable[[Path, Optional[str]], list[TextSegment]]

EXTRACTORS: dict[str, Extractor] = {
    ".docx": extract_docx_segments,
    ".tmx": extract_tmx_segments,
}


def is_supported(path: Path) -> bool:
    return path.suffix.lower() in EXTRACTORS


def extract_plain_text_segments(
    path: Path, language: Optional[str] = None
) -> list[TextSegment]:
    """
    Extrait les segments d'un document selon son extension.

    Args:
        path: Chemin du document
        language: Langue du document, utilisée par les formats multilingues

    Raises:
        UnsupportedDocumentType: Si aucun extracteur ne gère cette extension
        DocumentExtractionError: Si le document ne peut pas être lu
    """
    path = Path(path)
    extractor = EXTRACTORS.get(path.suffix.lower())
    if extractor is None:
        raise UnsupportedDocumentType(path, path.suffix)
    return extractor(path, language)


__all__ = [
    "EXTRACTORS",
    "extract_plain_text_segments",
    "extract_docx_segments",
    "extract_tmx_segments",
    "load_glossary_rows",
    "is_supported",
]
