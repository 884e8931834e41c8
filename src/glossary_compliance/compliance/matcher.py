"""
Recherche des termes du glossaire dans un segment de texte.

Deux modes, tous deux ancrés sur des frontières de mot :
- côté source : présence seulement, sensible à la casse
- côté cible : nombre d'occurrences, insensible à la casse

Une frontière de mot est une transition entre un caractère de mot (\\w) ou
un trait d'union et tout autre caractère : "treatment" n'est pas trouvé dans
"pre-treatment".

Les ancres ne demandent pas que le terme commence ou finisse lui-même par un
caractère de mot, contrairement à \\b : "U.S." est trouvé dans "U.S. policy"
(avec \\b, le "." final suivi d'un espace n'offre aucune frontière).

Par défaut le terme est inséré tel quel dans le motif, sans échappement :
"C.V." correspond donc aussi à "CxVx". TermMatcher(escape_terms=True)
recherche le terme littéralement.
"""

import re
from functools import lru_cache

from ..config import Matching
from ..logger import get_logger

logger = get_logger(__name__)

WORD_START = r"(?<![\w-])"
WORD_END = r"(?![\w-])"


@lru_cache(maxsize=4096)
def _compile(term: str, ignore_case: bool, escape: bool) -> re.Pattern:
    flags = re.IGNORECASE if ignore_case else 0
    body = re.escape(term) if escape else term
    try:
        return re.compile(f"{WORD_START}(?:{body}){WORD_END}", flags)
    except re.error as e:
        logger.warning(
            f"Glossary term '{term}' is not a valid pattern ({e}), matching it literally"
        )
        return re.compile(f"{WORD_START}{re.escape(term)}{WORD_END}", flags)


def word_pattern(term: str, ignore_case: bool = False, escape: bool = False) -> re.Pattern:
    """Motif compilé (et mis en cache) pour un terme entouré de frontières de mot."""
    return _compile(term, ignore_case, escape)


class TermMatcher:
    """
    Applique les règles de correspondance du glossaire.

    Example:
        >>> matcher = TermMatcher()
        >>> matcher.occurs_in("the treatment plan", "treatment")
        True
        >>> matcher.occurs_in("pre-treatment", "treatment")
        False
        >>> matcher.count_occurrences("Tratamiento y tratamiento", "tratamiento")
        2
    """

    def __init__(self, escape_terms: bool = Matching.escape_terms):
        self.escape_terms = escape_terms

    def occurs_in(self, text: str, term: str) -> bool:
        """Indique si le terme apparaît comme mot entier (casse respectée)."""
        return word_pattern(term, escape=self.escape_terms).search(text) is not None

    def count_occurrences(self, text: str, alternative: str) -> int:
        """Compte les occurrences non chevauchantes, sans tenir compte de la casse."""
        pattern = word_pattern(alternative, ignore_case=True, escape=self.escape_terms)
        return sum(1 for _ in pattern.finditer(text))


_default_matcher = TermMatcher()


def occurs_in(text: str, term: str) -> bool:
    return _default_matcher.occurs_in(text, term)


def count_occurrences(text: str, alternative: str) -> int:
    return _default_matcher.count_occurrences(text, alternative)
