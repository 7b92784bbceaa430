import enum
import re
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class _ParseableEnum(str, enum.Enum):
    @classmethod
    def parse(cls, raw: str):
        """
        Return the member whose value equals `raw` exactly.
        Raises ValueError for anything else so callers decide how to fall back.
        """
        for member in cls:
            if member.value == raw:
                return member
        raise ValueError(f"Unknown {cls.__name__}: {raw!r}")


class ProductStatus(_ParseableEnum):
    AVAILABLE = "available"
    SOLD = "sold"
    COMING_SOON = "coming_soon"


class ProductLine(_ParseableEnum):
    TAROT = "Tarot"
    LIMITED = "Limited"
    CUSTOM = "Custom"
    HANDWIRED = "Handwired"
    POINT_TO_POINT = "Point to Point"


class PedalType(_ParseableEnum):
    OVERDRIVE = "Overdrive"
    DISTORTION = "Distortion"
    FUZZ = "Fuzz"
    DELAY = "Delay"
    MODULATION = "Modulation"
    BOOST = "Boost"
    PREAMP = "Preamp"
    UTILITY = "Utility"
    BUFFERS = "Buffers"
    AMP_SIM = "Amp Sim"


ALL_FILTER = "All"

# either ALL_FILTER or a concrete pedal type
PedalFilter = Union[str, PedalType]


class Pedal(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    slug: str
    name: str = Field(..., min_length=1)
    price_cents: int = Field(..., ge=0)
    status: ProductStatus
    image_url: str
    hero_image_url: Optional[str] = None
    description_short: Optional[str] = None
    description_long: Optional[str] = None
    description_intro: Optional[str] = None
    description_bullets: Tuple[str, ...] = ()
    description_outro: Optional[str] = None
    tags: Tuple[str, ...] = ()
    type: PedalType
    product_line: Optional[ProductLine] = None
    stripe_price_id: Optional[str] = None

    @field_validator("slug")
    @classmethod
    def _slug_is_url_safe(cls, v: str) -> str:
        if not SLUG_RE.match(v):
            raise ValueError(f"slug must be lowercase and url-safe: {v!r}")
        return v

    @property
    def checkout_eligible(self) -> bool:
        return self.status == ProductStatus.AVAILABLE and bool(
            (self.stripe_price_id or "").strip()
        )

    def __repr__(self):
        return f"<Pedal slug={self.slug} name={self.name}>"
