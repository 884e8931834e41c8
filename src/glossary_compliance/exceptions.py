"""
Exceptions spécifiques à la vérification de conformité terminologique.

Seule GlossarySourceUnavailable interrompt un run. Les autres exceptions
concernent une paire de documents : elles sont consignées dans le rapport
et le traitement continue avec la paire suivante.
"""

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class GlossaryComplianceError(Exception):
    """Classe de base de toutes les erreurs du package."""


class GlossarySourceUnavailable(GlossaryComplianceError):
    """
    Le classeur du glossaire ne peut pas être ouvert.

    Attributes:
        path: Chemin du classeur demandé
        reason: Cause technique (fichier absent, format invalide, ...)
    """

    def __init__(self, path: PathLike, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Glossary source {self.path} cannot be opened: {reason}")


class DocumentPairError(GlossaryComplianceError):
    """Erreur récupérable limitée à une paire de documents."""

    def report_line(self) -> str:
        return f"ERROR: {self}"


class TargetDocumentMissing(DocumentPairError):
    """
    Le document cible d'une paire est introuvable.

    Attributes:
        source_path: Document source de la paire
        target_path: Chemin cible attendu
    """

    def __init__(self, source_path: PathLike, target_path: PathLike):
        self.source_path = Path(source_path)
        self.target_path = Path(target_path)
        super().__init__(f"Target file {self.target_path} not found.")


class DegenerateDocumentPair(DocumentPairError):
    """Source et cible désignent le même document."""

    def __init__(self, path: PathLike):
        self.path = Path(path)
        super().__init__(
            f"Source and target resolve to the same document {self.path}."
        )


class DocumentExtractionError(DocumentPairError):
    """Un document existe mais son contenu ne peut pas être extrait."""

    def __init__(self, path: PathLike, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot extract text from {self.path}: {reason}")


class UnsupportedDocumentType(GlossaryComplianceError):
    """Aucun extracteur n'est enregistré pour ce type de fichier."""

    def __init__(self, path: PathLike, suffix: str):
        self.path = Path(path)
        self.suffix = suffix
        super().__init__(f"Unsupported document type '{suffix}': {self.path}")
