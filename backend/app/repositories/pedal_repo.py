from typing import List, Optional

from app.catalog import PedalCatalog
from app.models.pedal import (
    ALL_FILTER,
    Pedal,
    PedalFilter,
    PedalType,
    ProductLine,
    ProductStatus,
)


class PedalRepository:
    """
    Pure queries over a PedalCatalog.

    Results keep catalog order. A query with no match returns [] or None,
    it never raises; the caller decides whether that means a 404.
    """

    def __init__(self, catalog: PedalCatalog):
        self.catalog = catalog

    def get_all(self) -> List[Pedal]:
        return list(self.catalog.get_all())

    def by_status(self, status: ProductStatus) -> List[Pedal]:
        return [p for p in self.catalog if p.status == status]

    def available(self) -> List[Pedal]:
        return self.by_status(ProductStatus.AVAILABLE)

    def by_slug(self, slug: str) -> Optional[Pedal]:
        return next((p for p in self.catalog if p.slug == slug), None)

    def by_type(self, pedal_type: PedalType) -> List[Pedal]:
        return [p for p in self.catalog if p.type == pedal_type]

    def by_tag(self, tag: str) -> List[Pedal]:
        return [p for p in self.catalog if tag in p.tags]

    def by_product_line(self, line: ProductLine) -> List[Pedal]:
        return [p for p in self.catalog if p.product_line == line]

    def available_types(self) -> List[PedalType]:
        """Distinct types among available pedals, first-seen order."""
        seen: List[PedalType] = []
        for p in self.available():
            if p.type not in seen:
                seen.append(p.type)
        return seen

    def for_filter(self, filter_id: PedalFilter) -> List[Pedal]:
        available = self.available()
        if filter_id == ALL_FILTER:
            return available
        return [p for p in available if p.type == filter_id]

    def checkout_eligible(self, slug: str) -> Optional[Pedal]:
        p = self.by_slug(slug)
        if p is None or not p.checkout_eligible:
            return None
        return p
