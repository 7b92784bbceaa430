import json
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from pydantic import ValidationError

from app.config import settings
from app.models.pedal import Pedal
from app.utils.logging import get_logger

log = get_logger("catalog")

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "pedals.json"


class CatalogError(Exception):
    pass


class PedalCatalog:
    """
    Read-only, explicitly constructed set of pedals.

    Insertion order is kept and is the order every query returns results in.
    """

    def __init__(self, pedals: Iterable[Pedal]):
        items = tuple(pedals)
        seen = set()
        for p in items:
            if p.slug in seen:
                raise CatalogError(f"Duplicate slug in catalog: {p.slug}")
            seen.add(p.slug)
        self._pedals: Tuple[Pedal, ...] = items

    def get_all(self) -> Tuple[Pedal, ...]:
        return self._pedals

    def __len__(self):
        return len(self._pedals)

    def __iter__(self):
        return iter(self._pedals)


def _entries_from(data) -> list:
    if isinstance(data, dict) and isinstance(data.get("items"), list):
        return data["items"]
    if isinstance(data, list):
        return data
    raise CatalogError("Catalog must be a list of pedals or an object with an 'items' list")


def load_catalog(path=None, price_overrides: Optional[Dict[str, str]] = None) -> PedalCatalog:
    """
    Build a PedalCatalog from a JSON file.

    price_overrides maps slug -> stripe price id and wins over the file,
    so per-environment price references never have to be committed.
    """
    path = Path(path or DEFAULT_CATALOG_PATH)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise CatalogError(f"Catalog file not found: {path}")
    except json.JSONDecodeError as e:
        raise CatalogError(f"Failed to parse catalog JSON from {path}: {e}")

    overrides = dict(price_overrides or {})
    pedals = []
    for i, entry in enumerate(_entries_from(data)):
        if not isinstance(entry, dict):
            raise CatalogError(f"Catalog entry #{i} is not an object")
        slug = entry.get("slug")
        if isinstance(slug, str) and slug in overrides:
            entry = {**entry, "stripe_price_id": overrides.pop(slug)}
        try:
            pedals.append(Pedal.model_validate(entry))
        except ValidationError as e:
            raise CatalogError(f"Invalid catalog entry #{i} ({slug}): {e}")

    for slug in overrides:
        log.warning("price override for unknown slug %s ignored", slug)

    catalog = PedalCatalog(pedals)
    log.info("loaded %d pedals from %s", len(catalog), path)
    return catalog


_catalog: Optional[PedalCatalog] = None


def init_catalog(path=None) -> PedalCatalog:
    """Load the process-wide catalog once at startup."""
    global _catalog
    _catalog = load_catalog(
        path or settings.CATALOG_PATH, price_overrides=settings.STRIPE_PRICE_IDS
    )
    return _catalog


def get_catalog() -> PedalCatalog:
    if _catalog is None:
        return init_catalog()
    return _catalog
