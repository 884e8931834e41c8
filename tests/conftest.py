"""
Configuration pytest pour les tests glossary-compliance.

Ce fichier contient les fixtures communes à tous les tests : glossaire de
référence et fabriques de fichiers .docx / .xlsx / .tmx.
"""

from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest
from docx import Document
from openpyxl import Workbook

from glossary_compliance.glossary import Glossary


@pytest.fixture
def shelter_glossary() -> Glossary:
    """Glossaire minimal : shelter → refugio / albergue."""
    return Glossary.load([("shelter", "refugio/albergue")])


@pytest.fixture
def make_docx() -> Callable[[Path, Iterable[str]], Path]:
    """Fabrique un .docx avec un paragraphe (donc un run) par texte."""

    def _make(path: Path, paragraphs: Iterable[str]) -> Path:
        document = Document()
        for text in paragraphs:
            document.add_paragraph(text)
        path.parent.mkdir(parents=True, exist_ok=True)
        document.save(str(path))
        return path

    return _make


@pytest.fixture
def make_xlsx() -> Callable[..., Path]:
    """Fabrique un classeur dont chaque ligne est (colonne A, colonne B)."""

    def _make(path: Path, rows: Iterable[tuple], extra_sheet: Optional[Iterable[tuple]] = None) -> Path:
        workbook = Workbook()
        worksheet = workbook.active
        for row in rows:
            worksheet.append(list(row))
        if extra_sheet is not None:
            second = workbook.create_sheet("More")
            for row in extra_sheet:
                second.append(list(row))
        path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(str(path))
        return path

    return _make


TMX_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<tmx version="1.4">
  <header creationtool="test" srclang="en-US" datatype="plaintext" segtype="sentence" adminlang="en-US" o-tmf="test"/>
  <body>
{units}
  </body>
</tmx>
"""


@pytest.fixture
def make_tmx() -> Callable[[Path, Iterable[tuple[str, str]]], Path]:
    """Fabrique un .tmx bilingue en-US / es-ES (segments bruts, balisage compris)."""

    def _make(path: Path, units: Iterable[tuple[str, str]]) -> Path:
        body = "\n".join(
            f'    <tu><tuv xml:lang="en-US"><seg>{en}</seg></tuv>'
            f'<tuv xml:lang="es-ES"><seg>{es}</seg></tuv></tu>'
            for en, es in units
        )
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(TMX_TEMPLATE.format(units=body), encoding="utf-8")
        return path

    return _make
