"""
Point d'entrée en ligne de commande.

Usage :
    glossary-compliance ROOT GLOSSARY [--report report.txt] [--open]

GLOSSARY est relatif à ROOT s'il n'est pas absolu.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import Matching, Pairing, Report, lock_config
from .exceptions import GlossarySourceUnavailable
from .logger import get_logger
from .runner import ComplianceRun

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glossary-compliance",
        description="Check Word documents and translation memories for glossary compliance",
    )
    parser.add_argument("root", type=Path, help="Corpus folder")
    parser.add_argument("glossary", type=Path, help="Glossary workbook (.xlsx), relative to ROOT")
    parser.add_argument("--report", type=Path, default=Path(Report.filename))
    parser.add_argument("--source-marker", default=Pairing.source_marker)
    parser.add_argument("--target-marker", default=Pairing.target_marker)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument(
        "--escape-terms",
        action="store_true",
        default=Matching.escape_terms,
        help="Match glossary terms literally instead of as patterns",
    )
    parser.add_argument("--open", action="store_true", help="Open the report when done")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Lance la vérification ; retourne le code de sortie."""
    parser = build_parser()
    args = parser.parse_args(argv)
    # Configuration figée pour la durée du run
    lock_config()

    print("Check Word docs for glossary compliance")
    if not args.root.is_dir():
        print(f"ERROR: Please provide a folder path as argument ({args.root} is not a folder).", file=sys.stderr)
        return 1

    glossary_path = args.glossary if args.glossary.is_absolute() else args.root / args.glossary

    run = ComplianceRun(
        root=args.root,
        glossary_path=glossary_path,
        report_path=args.report,
        source_marker=args.source_marker,
        target_marker=args.target_marker,
        escape_terms=args.escape_terms,
        max_workers=max(1, args.workers),
        show_progress=True,
    )

    try:
        totals = run.execute()
    except GlossarySourceUnavailable as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"Total hits: {totals.total_hits}\tTotal misses: {totals.total_misses}")
    if args.open and run.report is not None:
        run.report.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
