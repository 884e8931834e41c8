"""
Glossaire de référence pour la vérification terminologique.

Le glossaire associe chaque terme source (sensible à la casse, tel que saisi)
à une ou plusieurs traductions acceptées. Il est construit une seule fois à
partir des lignes du classeur puis utilisé en lecture seule pendant tout le run.

Règles de chargement :
- Cellule source ou cible vide → ligne malformée, signalée puis ignorée
- Terme déjà présent → doublon signalé, la première occurrence est conservée
- Champ cible "refugio / albergue" → alternatives ("refugio", "albergue")
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Literal, Optional, Sequence

from .logger import get_logger

logger = get_logger(__name__)

ALTERNATIVE_SEPARATOR = "/"

GlossaryRow = Sequence[Optional[str]]


@dataclass(frozen=True)
class GlossaryEntry:
    """
    Entrée immuable du glossaire.

    Attributes:
        source_term: Terme dans la langue source (clé unique)
        target_alternatives: Traductions acceptées, dans l'ordre du classeur
    """

    source_term: str
    target_alternatives: tuple[str, ...]

    def __post_init__(self):
        if not self.source_term:
            raise ValueError("Glossary entry requires a non-empty source term")
        if not any(self.target_alternatives):
            raise ValueError(
                f"Glossary entry '{self.source_term}' requires at least one translation"
            )

    @classmethod
    def from_raw(cls, source_term: str, raw_target: str) -> "GlossaryEntry":
        """Construit une entrée depuis le champ cible brut "alt1/alt2"."""
        return cls(source_term.strip(), split_alternatives(raw_target))

    @property
    def display_target(self) -> str:
        return ALTERNATIVE_SEPARATOR.join(self.target_alternatives)


@dataclass(frozen=True)
class GlossaryLoadIssue:
    """Problème non bloquant rencontré pendant le chargement."""

    kind: Literal["malformed", "duplicate"]
    row_number: int
    source_cell: Optional[str]
    target_cell: Optional[str]

    def __str__(self) -> str:
        if self.kind == "duplicate":
            return f"Duplicate glossary entry: {self.source_cell} - {self.target_cell}"
        return (
            f"Something went wrong with glossary entry in row {self.row_number}: "
            f"Either source or target are empty."
        )


def split_alternatives(raw_target: str) -> tuple[str, ...]:
    """Découpe le champ cible brut sur "/" et supprime les morceaux vides."""
    return tuple(
        piece.strip()
        for piece in raw_target.split(ALTERNATIVE_SEPARATOR)
        if piece.strip()
    )


def _clean_cell(value: object) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class Glossary:
    """
    Dictionnaire ordonné terme source → GlossaryEntry.

    Example:
        >>> glossary = Glossary.load([("shelter", "refugio/albergue")])
        >>> glossary["shelter"].target_alternatives
        ('refugio', 'albergue')
    """

    def __init__(
        self,
        entries: Iterable[GlossaryEntry] = (),
        issues: Iterable[GlossaryLoadIssue] = (),
    ):
        self._entries: dict[str, GlossaryEntry] = {}
        for entry in entries:
            self._entries.setdefault(entry.source_term, entry)
        self.issues: list[GlossaryLoadIssue] = list(issues)

    # =========================================================================
    # Chargement
    # =========================================================================

    @classmethod
    def load(cls, rows: Iterable[GlossaryRow]) -> "Glossary":
        """
        Construit le glossaire depuis des lignes (cellule source, cellule cible).

        La première cellule non vide d'une ligne fournit le terme source, la
        cellule non vide suivante le champ cible brut. Les lignes entièrement
        vides sont ignorées sans avertissement.

        Args:
            rows: Lignes du classeur, dans l'ordre

        Returns:
            Glossaire chargé ; les problèmes rencontrés sont dans `issues`
        """
        glossary = cls()

        for row_number, row in enumerate(rows, start=1):
            cells = [_clean_cell(cell) for cell in row]
            if not any(cells):
                continue

            filled = [cell for cell in cells if cell]
            source = filled[0]
            target = filled[1] if len(filled) > 1 else None

            if target is None:
                glossary._record_issue(
                    GlossaryLoadIssue("malformed", row_number, source, None)
                )
                continue

            if not split_alternatives(target):
                glossary._record_issue(
                    GlossaryLoadIssue("malformed", row_number, source, target)
                )
                continue

            if source in glossary._entries:
                glossary._record_issue(
                    GlossaryLoadIssue("duplicate", row_number, source, target)
                )
                continue

            entry = GlossaryEntry.from_raw(source, target)
            glossary._entries[source] = entry

        logger.info(f"{len(glossary)} glossary entries read.")
        return glossary

    @classmethod
    def from_spreadsheet(cls, path: Path) -> "Glossary":
        """
        Charge le glossaire depuis un classeur (colonnes A et B).

        Raises:
            GlossarySourceUnavailable: Si le classeur ne peut pas être ouvert
        """
        from .extraction.spreadsheet import load_glossary_rows

        return cls.load(load_glossary_rows(path))

    def _record_issue(self, issue: GlossaryLoadIssue) -> None:
        logger.warning(str(issue))
        self.issues.append(issue)

    # =========================================================================
    # Accès en lecture
    # =========================================================================

    def __getitem__(self, source_term: str) -> GlossaryEntry:
        return self._entries[source_term]

    def __contains__(self, source_term: object) -> bool:
        return source_term in self._entries

    def __iter__(self) -> Iterator[GlossaryEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, source_term: str) -> Optional[GlossaryEntry]:
        return self._entries.get(source_term)

    def terms(self) -> list[str]:
        return list(self._entries)
