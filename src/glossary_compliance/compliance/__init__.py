"""
Moteur de conformité terminologique.

Organisation :
- normalizer.py : nettoyage des segments balisés
- matcher.py : recherche des termes (frontières de mot)
- count_pair.py : compteurs source/cible d'une entrée
- checker.py : vérification d'une paire de documents
- aggregator.py : totaux sur l'ensemble du corpus
"""

from .normalizer import normalize_markup_text
from .matcher import TermMatcher, occurs_in, count_occurrences
from .count_pair import CountPair
from .checker import ComplianceChecker, ComplianceReport, EntryResult
from .aggregator import CorpusAggregator, CorpusTotals, PairOutcome

__all__ = [
    "normalize_markup_text",
    "TermMatcher",
    "occurs_in",
    "count_occurrences",
    "CountPair",
    "ComplianceChecker",
    "ComplianceReport",
    "EntryResult",
    "CorpusAggregator",
    "CorpusTotals",
    "PairOutcome",
]
