"""Run the combo coverage engine on a title/subtitle pair and print the result."""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import settings
from models.schemas import ComboAuditRequest
from services.combo_engine import CapacityExceeded, analyze_combos, select_top_combos

logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Audit keyword combo coverage for app metadata")
    parser.add_argument("--title", required=True)
    parser.add_argument("--subtitle", default="")
    parser.add_argument("--keywords", default="", help="Comma or space separated keyword field")
    parser.add_argument("--brand", default=None, help="Brand name used to derive brand aliases")
    parser.add_argument("--competitor", action="append", default=[], help="Competitor alias (repeatable)")
    parser.add_argument("--rule-set", default=None, help="Rule set name, e.g. language_learning")
    parser.add_argument("--no-cross", action="store_true", help="Only keep single-element combos")
    parser.add_argument("--top", type=int, default=0, help="Only print the N highest priority combos")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    request = ComboAuditRequest(
        title=args.title,
        subtitle=args.subtitle,
        keywords=args.keywords,
        brand_name=args.brand,
        competitor_aliases=args.competitor,
        rule_set=args.rule_set,
        include_cross_element=not args.no_cross,
    )

    try:
        result = analyze_combos(request, settings)
    except CapacityExceeded as exc:
        logger.error(f"Too many keywords to audit: {exc}")
        return 1

    if args.top > 0:
        print(select_top_combos(result.combos, limit=args.top).model_dump_json(indent=2))
    else:
        print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
