"""
Extraction des runs de texte d'un document Word (.docx).

Chaque élément <w:t> du corps du document devient un segment, dans l'ordre
du document (paragraphes, tableaux, zones de texte inclus).
"""

import zipfile
from pathlib import Path
from typing import Optional

from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from docx.oxml.ns import qn
from lxml.etree import XMLSyntaxError

from ..exceptions import DocumentExtractionError
from ..segment import TextSegment


def extract_docx_segments(path: Path, language: Optional[str] = None) -> list[TextSegment]:
    """
    Extrait les segments de texte d'un .docx.

    Args:
        path: Chemin du document
        language: Ignoré (un document Word est monolingue)

    Returns:
        Segments non vides, dans l'ordre du document

    Raises:
        DocumentExtractionError: Si le fichier n'est pas un .docx lisible
    """
    # ValueError : paquet OPC valide mais pas un document Word (classeur renommé)
    # XMLSyntaxError : word/document.xml corrompu
    try:
        document = Document(str(path))
    except (
        PackageNotFoundError,
        zipfile.BadZipFile,
        KeyError,
        OSError,
        ValueError,
        XMLSyntaxError,
    ) as e:
        raise DocumentExtractionError(path, str(e) or type(e).__name__) from e

    body = document.element.body
    if body is None:
        return []
    return [
        TextSegment(node.text)
        for node in body.iter(qn("w:t"))
        if node.text and node.text.strip()
    ]
