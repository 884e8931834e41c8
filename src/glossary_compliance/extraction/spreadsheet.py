"""
Lecture des lignes du glossaire depuis un classeur Excel (.xlsx).

Toutes les feuilles sont lues ; colonne A = terme source, colonne B =
traduction(s) séparées par "/".
"""

import zipfile
from pathlib import Path
from typing import Optional

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..exceptions import GlossarySourceUnavailable
from ..logger import get_logger

logger = get_logger(__name__)


def _cell_text(value: object) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def load_glossary_rows(path: Path) -> list[tuple[Optional[str], Optional[str]]]:
    """
    Lit les paires (colonne A, colonne B) de toutes les feuilles, dans l'ordre.

    Args:
        path: Chemin du classeur

    Returns:
        Liste de tuples (cellule source, cellule cible), None pour une cellule vide

    Raises:
        GlossarySourceUnavailable: Si le classeur ne peut pas être ouvert
    """
    try:
        workbook = load_workbook(filename=str(path), read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
        raise GlossarySourceUnavailable(path, str(e) or type(e).__name__) from e

    rows: list[tuple[Optional[str], Optional[str]]] = []
    try:
        for worksheet in workbook.worksheets:
            for values in worksheet.iter_rows(min_col=1, max_col=2, values_only=True):
                padded = tuple(values) + (None, None)
                rows.append((_cell_text(padded[0]), _cell_text(padded[1])))
    finally:
        workbook.close()

    logger.debug(f"{len(rows)} rows read from {path}")
    return rows
