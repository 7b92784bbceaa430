import pytest

from app.catalog import PedalCatalog
from app.models.pedal import Pedal


def _pedal(slug, **overrides):
    data = {
        "slug": slug,
        "name": slug.replace("-", " ").title(),
        "price_cents": 10000,
        "status": "available",
        "image_url": f"/{slug}.png",
        "type": "Overdrive",
    }
    data.update(overrides)
    return Pedal.model_validate(data)


@pytest.fixture
def make_pedal():
    return _pedal


@pytest.fixture
def catalog():
    # insertion order matters: queries return pedals in this order
    return PedalCatalog([
        _pedal("tree-fiddy", stripe_price_id="price_tree", tags=["Overdrive", "One-off"]),
        _pedal("son-of-a-b", type="Fuzz", product_line="Tarot", stripe_price_id="price_sob", tags=["Overdrive", "Tarot"]),
        _pedal("super-dolt", product_line="Tarot", tags=["Overdrive", "Tarot"]),
        _pedal("hermit-fuzz", status="sold", type="Fuzz", product_line="Tarot", stripe_price_id="price_hermit"),
        _pedal("slow-moon", status="coming_soon", type="Delay", product_line="Limited", price_cents=17500, stripe_price_id="price_moon"),
    ])
