"""
Écriture du rapport de conformité.

Le rapport est un fichier texte : horodatage, avertissements du glossaire,
une section par paire de documents (mismatchs puis bilan), les erreurs
récupérables, et la ligne de totaux du corpus. Les sections sont rendues
par des templates Jinja2 (voir templates/).
"""

import os
import subprocess
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .compliance.aggregator import CorpusTotals, PairOutcome
from .config import Report
from .logger import get_logger

logger = get_logger(__name__)


class ReportRenderer:
    """
    Rendu des sections du rapport depuis les templates Jinja2.

    Example:
        >>> renderer = ReportRenderer()
        >>> renderer.render_summary(CorpusTotals(3, 1))
        'Total hits: 3\\tTotal misses: 1'
    """

    def __init__(self, template_dir: str = Report.template_dir):
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def render(self, template_name: str, **kwargs) -> str:
        template = self.env.get_template(template_name)
        return template.render(**kwargs).rstrip("\n")

    def render_header(self, timestamp: datetime) -> str:
        return self.render(Report.Header_Template, timestamp=timestamp)

    def render_pair(self, outcome: PairOutcome) -> str:
        return self.render(Report.Pair_Section_Template, outcome=outcome)

    def render_summary(self, totals: CorpusTotals) -> str:
        return self.render(Report.Summary_Template, totals=totals)


class ReportWriter:
    """
    Fichier de rapport, réécrit au début de chaque run puis complété ligne à ligne.

    Attributes:
        path: Chemin du fichier de rapport
    """

    def __init__(
        self,
        path: Union[str, Path] = Report.filename,
        renderer: Optional[ReportRenderer] = None,
        timestamp: Optional[datetime] = None,
    ):
        self.path = Path(path)
        self.renderer = renderer or ReportRenderer()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        header = self.renderer.render_header(timestamp or datetime.now())
        self.path.write_text(header + "\n", encoding="utf-8")

    def write_line(self, text: str) -> None:
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(text + "\n")

    def write_pair(self, outcome: PairOutcome) -> None:
        self.write_line(self.renderer.render_pair(outcome))

    def write_summary(self, totals: CorpusTotals) -> None:
        self.write_line(self.renderer.render_summary(totals))

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def show(self) -> None:
        """Ouvre le rapport avec l'application par défaut du système."""
        target = str(self.path.resolve())
        try:
            if sys.platform.startswith("win"):
                os.startfile(target)  # type: ignore[attr-defined]
            elif sys.platform == "darwin":
                subprocess.run(["open", target], check=False)
            else:
                subprocess.run(["xdg-open", target], check=False)
        except OSError as e:
            logger.warning(f"Cannot open report {target}: {e}")
