from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict

from app.models.pedal import ALL_FILTER, Pedal, PedalFilter, PedalType, ProductLine
from app.repositories.pedal_repo import PedalRepository

PEDALS_URL = "/pedals"


class LineScope(BaseModel):
    """Product-line scope taken from the navigation parameter."""

    model_config = ConfigDict(frozen=True)
    kind: Literal["none", "line", "unknown"] = "none"
    line: Optional[ProductLine] = None
    raw: Optional[str] = None

    @classmethod
    def parse(cls, raw: Optional[str]) -> "LineScope":
        if not raw:
            return cls()
        try:
            return cls(kind="line", line=ProductLine.parse(raw))
        except ValueError:
            return cls(kind="unknown", raw=raw)


class PedalsView(BaseModel):
    kind: Literal["grid", "custom"]
    heading: str
    notice: Optional[str] = None
    filters: List[str] = []
    selected_filter: str = ALL_FILTER
    pedals: List[Pedal] = []
    empty: bool = False
    empty_message: Optional[str] = None
    recovery_url: Optional[str] = None


class PedalFilterController:
    """
    Tracks the selected type filter and product-line scope for one browsing
    session and derives what the pedal grid should show.

    Only the two selections are stored; the visible list is recomputed from
    the repository on every read.
    """

    def __init__(self, repo: PedalRepository):
        self.repo = repo
        self.selected_filter: PedalFilter = ALL_FILTER
        self.product_line_scope = LineScope()
        self._filter_notice: Optional[str] = None

    # --- transitions ---

    def set_filter(self, f: PedalFilter):
        """Select All or a pedal type. Raises ValueError for anything else."""
        if not isinstance(f, PedalType) and f != ALL_FILTER:
            f = PedalType.parse(f)
        self.selected_filter = f
        self._filter_notice = None

    def set_filter_param(self, raw: Optional[str]):
        """Apply an untrusted `type` parameter. Unknown types fall back to All."""
        if not raw or raw == ALL_FILTER:
            self.set_filter(ALL_FILTER)
            return
        try:
            self.set_filter(PedalType.parse(raw))
        except ValueError:
            self.set_filter(ALL_FILTER)
            self._filter_notice = (
                f"We don’t have “{raw}” pedals, so we’re showing every type instead."
            )

    def set_product_line_scope(self, raw: Optional[str]):
        self.product_line_scope = LineScope.parse(raw)

    def reset(self):
        self.set_filter(ALL_FILTER)
        self.product_line_scope = LineScope()

    # --- derived state ---

    @property
    def is_custom(self) -> bool:
        scope = self.product_line_scope
        return scope.kind == "line" and scope.line == ProductLine.CUSTOM

    @property
    def notice(self) -> Optional[str]:
        scope = self.product_line_scope
        notices = []
        if scope.kind == "unknown":
            notices.append(
                f"We don’t have a “{scope.raw}” product line yet, "
                "so we’re showing all pedals instead."
            )
        if self._filter_notice:
            notices.append(self._filter_notice)
        return " ".join(notices) or None

    def heading(self) -> str:
        scope = self.product_line_scope
        if scope.kind != "line":
            return "All Pedals"
        if scope.line == ProductLine.CUSTOM:
            return "Custom Orders"
        if scope.line == ProductLine.TAROT:
            return "Tarot Series"
        return f"{scope.line.value} Line"

    def base_pedals(self) -> List[Pedal]:
        scope = self.product_line_scope
        if scope.kind == "line":
            return self.repo.by_product_line(scope.line)
        return self.repo.available()

    def visible_pedals(self) -> List[Pedal]:
        base = self.base_pedals()
        if self.selected_filter == ALL_FILTER:
            return base
        allowed = {p.slug for p in self.repo.for_filter(self.selected_filter)}
        return [p for p in base if p.slug in allowed]

    def _empty_message(self) -> str:
        scope = self.product_line_scope
        if scope.kind == "line":
            return (
                f"No pedals are currently available in the {scope.line.value} line. "
                "Check back soon or browse all pedals."
            )
        return "No pedals are currently available. Check back soon or browse all pedals."

    def view(self) -> PedalsView:
        selected = _filter_label(self.selected_filter)
        if self.is_custom:
            # custom orders are a static page, not an empty grid
            return PedalsView(kind="custom", heading=self.heading(), selected_filter=selected)

        base = self.base_pedals()
        visible = self.visible_pedals()
        filters = [ALL_FILTER] + [t.value for t in self.repo.available_types()] if base else []
        empty = not visible
        return PedalsView(
            kind="grid",
            heading=self.heading(),
            notice=self.notice,
            filters=filters,
            selected_filter=selected,
            pedals=visible,
            empty=empty,
            empty_message=self._empty_message() if empty else None,
            recovery_url=PEDALS_URL if empty else None,
        )


def _filter_label(f: PedalFilter) -> str:
    return f.value if isinstance(f, PedalType) else str(f)
