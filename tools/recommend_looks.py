from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

from components.product_catalog import load_catalog
from components.profile_builder import build_preference_profile
from config import configure_logging, get_settings
from scoring.recommendation_engine import (
    build_recommendation_response,
    generate_looks,
    make_rng,
    regenerate_looks,
)


class AnswersError(ValueError):
    pass


def load_answers(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Answers file not found: {path}")
    answers = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(answers, dict):
        raise AnswersError("Answers must be a JSON object of quiz fields.")
    return answers


def run(
    answers: Dict[str, Any],
    catalog_path: Optional[Path],
    exclude: List[str],
    regenerate: bool,
    seed: Optional[int],
    base_dir: Path = PROJECT_ROOT,
) -> Dict[str, Any]:
    profile = build_preference_profile(answers)
    catalog, chosen_path = load_catalog(base_dir, override=catalog_path)
    rng = make_rng(seed)

    if regenerate:
        result = regenerate_looks(profile, catalog, exclude, rng=rng)
        response = build_recommendation_response(profile, result.looks, len(catalog))
        response["exclusion"] = sorted(result.exclusion)
        response["pool_reset"] = result.pool_reset
    else:
        looks = generate_looks(profile, catalog, frozenset(exclude), rng=rng)
        response = build_recommendation_response(profile, looks, len(catalog))

    response["catalog_source"] = chosen_path.name
    return response


def main() -> None:
    load_dotenv(PROJECT_ROOT / ".env")
    parser = argparse.ArgumentParser(description="Recommend outfit looks from quiz answers.")
    parser.add_argument("--answers", required=True, help="JSON file with quiz answers")
    parser.add_argument("--catalog", default=None, help="Catalog JSON (defaults to data/)")
    parser.add_argument("--exclude", nargs="*", default=[], help="Product ids already shown")
    parser.add_argument("--regenerate", action="store_true",
                        help="Treat --exclude as previously shown ids and reset the pool if exhausted")
    parser.add_argument("--seed", type=int, default=None, help="Tie-break jitter seed")
    args = parser.parse_args()

    configure_logging()
    settings = get_settings()
    catalog_arg = args.catalog or settings.catalog_path or None

    response = run(
        answers=load_answers(Path(args.answers)),
        catalog_path=Path(catalog_arg) if catalog_arg else None,
        exclude=args.exclude,
        regenerate=args.regenerate,
        seed=args.seed,
    )
    print(json.dumps(response, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
