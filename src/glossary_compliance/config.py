import logging
import os

from dotenv import load_dotenv

load_dotenv()


class ConfigBase:
    # Attribut de classe pour le singleton
    _instance = None
    _locked: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def lock(self):
        if not self._locked:
            self._locked = True

    def __setattr__(self, name, value):
        if getattr(self, "_locked", False):
            raise AttributeError("Configuration is locked")
        super().__setattr__(name, value)


class Logger_Level(ConfigBase):
    level: int = logging.INFO
    console_level: int = logging.WARNING
    file_level: int = logging.DEBUG


class Pairing(ConfigBase):
    # Marqueurs de langue dans les noms de fichiers (ex: guide_EN.docx → guide_ES.docx)
    source_marker: str = os.getenv("GLOSSARY_SOURCE_MARKER", "_EN.")
    target_marker: str = os.getenv("GLOSSARY_TARGET_MARKER", "_ES.")


class Report(ConfigBase):
    filename: str = os.getenv("GLOSSARY_REPORT_FILE", "report.txt")
    template_dir: str = os.path.join(os.path.dirname(__file__), "templates")
    Header_Template: str = "header.jinja"
    Pair_Section_Template: str = "pair_section.jinja"
    Summary_Template: str = "summary.jinja"


class Matching(ConfigBase):
    # False = termes insérés tels quels dans le motif (comportement historique)
    escape_terms: bool = False


def lock_config():
    """Verrouille la configuration pour empêcher les modifications ultérieures."""
    Logger_Level().lock()
    Pairing().lock()
    Report().lock()
    Matching().lock()
