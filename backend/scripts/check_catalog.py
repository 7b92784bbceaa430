#!/usr/bin/env python3
"""
Validate a pedal catalog JSON file before shipping it.

Loads the file exactly the way the app does at startup (so duplicate slugs,
unknown types/lines and negative prices fail here first) and prints a summary.

Usage:
    python scripts/check_catalog.py --file app/data/pedals.json
"""
import argparse
import os
import sys
from collections import Counter

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.catalog import DEFAULT_CATALOG_PATH, CatalogError, load_catalog
from app.config import settings
from app.repositories.pedal_repo import PedalRepository
from app.utils.money import format_price


def summarize(path: str, use_env_prices: bool = False) -> int:
    overrides = settings.STRIPE_PRICE_IDS if use_env_prices else None
    try:
        catalog = load_catalog(path, price_overrides=overrides)
    except CatalogError as e:
        print("Catalog invalid:", e)
        return 1

    repo = PedalRepository(catalog)
    statuses = Counter(p.status.value for p in repo.get_all())
    print(f"Pedals: {len(catalog)}")
    for status, n in sorted(statuses.items()):
        print(f"  {status}: {n}")
    print("Filter types:", ", ".join(t.value for t in repo.available_types()) or "-")

    eligible = [p for p in repo.available() if p.checkout_eligible]
    missing = [p for p in repo.available() if not p.checkout_eligible]
    print("Checkout eligible:")
    for p in eligible:
        print(f"  {p.slug} {format_price(p.price_cents)} -> {p.stripe_price_id}")
    if missing:
        print("Available but missing a stripe price id:")
        for p in missing:
            print(f"  {p.slug}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", default=str(DEFAULT_CATALOG_PATH), help="Path to the pedal catalog json")
    parser.add_argument("--env-prices", action="store_true", help="Apply STRIPE_PRICE_IDS from the environment")
    args = parser.parse_args()
    sys.exit(summarize(args.file, use_env_prices=args.env_prices))
