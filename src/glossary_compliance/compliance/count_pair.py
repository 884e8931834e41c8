from dataclasses import dataclass


@dataclass
class CountPair:
    """Occurrences d'une entrée du glossaire côté source et côté cible."""

    source_count: int = 0
    target_count: int = 0

    @property
    def satisfied(self) -> bool:
        return self.source_count <= self.target_count
