from typing import List, Literal, Optional

from pydantic import BaseModel

from app.models.pedal import Pedal, PedalType, ProductLine, ProductStatus
from app.utils.money import format_price


class PedalOut(BaseModel):
    slug: str
    name: str
    price_cents: int
    price_formatted: str
    status: ProductStatus
    image_url: str
    hero_image_url: Optional[str] = None
    description_short: Optional[str] = None
    description_long: Optional[str] = None
    description_intro: Optional[str] = None
    description_bullets: List[str] = []
    description_outro: Optional[str] = None
    tags: List[str] = []
    type: PedalType
    product_line: Optional[ProductLine] = None
    checkout_eligible: bool

    @classmethod
    def from_pedal(cls, p: Pedal) -> "PedalOut":
        # stripe_price_id stays server-side
        return cls(
            **p.model_dump(exclude={"stripe_price_id"}),
            price_formatted=format_price(p.price_cents),
            checkout_eligible=p.checkout_eligible,
        )


class PedalsViewOut(BaseModel):
    kind: Literal["grid", "custom"]
    heading: str
    notice: Optional[str] = None
    filters: List[str] = []
    selected_filter: str
    pedals: List[PedalOut] = []
    empty: bool = False
    empty_message: Optional[str] = None
    recovery_url: Optional[str] = None
