import argparse
import json
import re
import sys
from typing import List, Tuple

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

# a JSON string value: opening quote after a colon, closing quote before "," or "}"
_STRING_VALUE = re.compile(r'(:\s*")(.*?)("\s*[,}])')


def repair_production_companies(raw: str) -> str:
    repaired = _STRING_VALUE.sub(lambda m: m.group(1) + m.group(2).replace('"', "'") + m.group(3), raw)
    return repaired.replace("\\xa0", "")


def is_valid_json(raw: str) -> bool:
    try:
        json.loads(raw)
    except ValueError:
        return False
    return True


def find_invalid_rows(engine: Engine) -> List[Tuple[int, str]]:
    with engine.connect() as conn:
        rows = conn.execute(
            text('SELECT "movieId", "productionCompanies" FROM movies WHERE json_valid("productionCompanies") = 0')
        )
        return [(row[0], row[1]) for row in rows]


def fix_production_companies(engine: Engine, dry_run: bool) -> int:
    updated = 0
    rows = find_invalid_rows(engine)
    with engine.begin() as conn:
        for movie_id, raw in rows:
            repaired = repair_production_companies(raw)
            if not is_valid_json(repaired):
                print(f"Row {movie_id} is still invalid after repair, skipping", file=sys.stderr)
                continue
            if dry_run:
                print(f"Would update row {movie_id} with new JSON")
            else:
                conn.execute(
                    text('UPDATE movies SET "productionCompanies" = :value WHERE "movieId" = :movie_id'),
                    {"value": repaired, "movie_id": movie_id},
                )
                print(f"Updated row {movie_id} with new JSON")
            updated += 1
    return updated


def main() -> None:
    parser = argparse.ArgumentParser(description="Repair invalid productionCompanies JSON in the movies database")
    parser.add_argument("--database_url", type=str, default="sqlite:///db/movies.db")
    parser.add_argument("--dry_run", action="store_true")
    args = parser.parse_args()

    engine = create_engine(args.database_url)
    try:
        count = fix_production_companies(engine, args.dry_run)
    except Exception as e:
        print(f"Failed to repair movies: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        engine.dispose()
    print(f"{count} rows repaired")


if __name__ == "__main__":
    main()
