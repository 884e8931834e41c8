"""
Vérification de la conformité terminologique de documents traduits.

Glossary Compliance compare chaque document source à sa traduction : pour
chaque terme du glossaire présent dans le source, la traduction doit contenir
au moins autant d'occurrences d'une des traductions acceptées.

Le processus :
1. Charge le glossaire depuis un classeur (colonne A source, colonne B cible)
2. Découvre les paires de documents (guide_EN.docx ↔ guide_ES.docx)
3. Extrait les segments de texte (.docx, .tmx)
4. Compte les termes et leurs traductions, paire par paire
5. Écrit le rapport des écarts et les totaux du corpus

Organisation du package :
- glossary.py : Modèle du glossaire et chargement
- segment.py : Segments de texte et paires de documents
- compliance/ : Moteur de correspondance et de comptage
- extraction/ : Lecture des formats .docx, .tmx et .xlsx
- discovery.py : Association des fichiers source/cible
- report.py : Rapport texte (templates Jinja2)
- runner.py : Orchestration d'un run complet

Usage minimal :
    >>> from glossary_compliance import Glossary, ComplianceChecker, DocumentPair
    >>>
    >>> glossary = Glossary.load([("shelter", "refugio/albergue")])
    >>> pair = DocumentPair.from_texts(["the shelter"], ["el refugio"])
    >>> ComplianceChecker(glossary).check(pair).verified_count
    1

Version: 0.1.0
"""

from .glossary import Glossary, GlossaryEntry, GlossaryLoadIssue
from .segment import TextSegment, DocumentPair, DocumentPairRef
from .compliance import (
    normalize_markup_text,
    TermMatcher,
    CountPair,
    ComplianceChecker,
    ComplianceReport,
    CorpusAggregator,
    CorpusTotals,
    PairOutcome,
)
from .discovery import discover_document_pairs
from .runner import ComplianceRun
from .exceptions import (
    GlossaryComplianceError,
    GlossarySourceUnavailable,
    TargetDocumentMissing,
    DegenerateDocumentPair,
    DocumentExtractionError,
    UnsupportedDocumentType,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Glossaire
    "Glossary",
    "GlossaryEntry",
    "GlossaryLoadIssue",
    # Documents
    "TextSegment",
    "DocumentPair",
    "DocumentPairRef",
    "discover_document_pairs",
    # Moteur
    "normalize_markup_text",
    "TermMatcher",
    "CountPair",
    "ComplianceChecker",
    "ComplianceReport",
    "CorpusAggregator",
    "CorpusTotals",
    "PairOutcome",
    "ComplianceRun",
    # Erreurs
    "GlossaryComplianceError",
    "GlossarySourceUnavailable",
    "TargetDocumentMissing",
    "DegenerateDocumentPair",
    "DocumentExtractionError",
    "UnsupportedDocumentType",
]
