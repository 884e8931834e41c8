"""
Extraction des segments d'une mémoire de traduction (.tmx).

Les éléments de code natif (<bpt>, <ept>, <it>, <ph>, <ut>) sont retirés du
<seg> ; le balisage restant (<hi>, <b>...) passe par normalize_markup_text()
et les entités (&lt;, &amp;...) ne sont décodées qu'ensuite, pour qu'un "<"
du texte ne soit jamais pris pour une balise.
"""

import html
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup

from ..compliance.normalizer import normalize_markup_text
from ..exceptions import DocumentExtractionError
from ..segment import TextSegment

NATIVE_CODE_TAGS = ["bpt", "ept", "it", "ph", "ut"]


def _tuv_language(tuv) -> Optional[str]:
    # TMX 1.4 : xml:lang ; TMX 1.1 : lang
    value = tuv.get("xml:lang") or tuv.get("lang")
    return value.lower() if value else None


def _matches_language(tuv_language: Optional[str], language: Optional[str]) -> bool:
    if language is None or tuv_language is None:
        return True
    return tuv_language.split("-")[0] == language.lower().split("-")[0]


def segment_text(seg) -> str:
    """Texte comparable d'un élément <seg> (code natif retiré, entités décodées)."""
    for native in seg.find_all(NATIVE_CODE_TAGS):
        native.decompose()
    return html.unescape(normalize_markup_text(seg.decode_contents()))


def extract_tmx_segments(path: Path, language: Optional[str] = None) -> list[TextSegment]:
    """
    Extrait les segments d'un fichier TMX.

    Args:
        path: Chemin du fichier TMX
        language: Code langue ("en", "es-ES"...) ; seules les variantes de
            cette langue sont retenues. None = toutes les variantes.

    Returns:
        Segments normalisés non vides, dans l'ordre du fichier

    Raises:
        DocumentExtractionError: Si le fichier ne peut pas être lu
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        raise DocumentExtractionError(path, str(e)) from e

    soup = BeautifulSoup(content, "xml")
    if soup.find("tmx") is None:
        raise DocumentExtractionError(path, "no <tmx> root element")

    segments: list[TextSegment] = []
    for tuv in soup.find_all("tuv"):
        if not _matches_language(_tuv_language(tuv), language):
            continue
        seg = tuv.find("seg")
        if seg is None:
            continue
        text = segment_text(seg).strip()
        if text:
            segments.append(TextSegment(text))

    return segments
