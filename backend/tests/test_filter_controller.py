import pytest

from app.models.pedal import ALL_FILTER, PedalType, ProductLine
from app.repositories.pedal_repo import PedalRepository
from app.services.filter_service import LineScope, PedalFilterController


def slugs(pedals):
    return [p.slug for p in pedals]


def _controller(catalog):
    return PedalFilterController(PedalRepository(catalog))


def test_initial_state(catalog):
    c = _controller(catalog)
    assert c.selected_filter == ALL_FILTER
    assert c.product_line_scope == LineScope()
    view = c.view()
    assert view.kind == "grid"
    assert view.heading == "All Pedals"
    assert view.notice is None
    assert view.filters == ["All", "Overdrive", "Fuzz"]
    assert slugs(view.pedals) == ["tree-fiddy", "son-of-a-b", "super-dolt"]
    assert view.empty is False


def test_set_filter_narrows_without_touching_scope(catalog):
    c = _controller(catalog)
    c.set_product_line_scope("Tarot")
    c.set_filter(PedalType.FUZZ)
    assert c.product_line_scope.line == ProductLine.TAROT
    # hermit-fuzz is in the line but sold, so the type filter drops it
    assert slugs(c.visible_pedals()) == ["son-of-a-b"]
    c.set_filter(ALL_FILTER)
    assert slugs(c.visible_pedals()) == ["son-of-a-b", "super-dolt", "hermit-fuzz"]


def test_unknown_product_line_falls_back_to_available(catalog):
    c = _controller(catalog)
    c.set_product_line_scope("Boutique")
    repo = PedalRepository(catalog)
    assert c.product_line_scope.kind == "unknown"
    assert c.base_pedals() == repo.available()
    view = c.view()
    assert view.notice is not None
    assert "Boutique" in view.notice
    assert view.heading == "All Pedals"


def test_empty_product_line_exposes_empty_signal(catalog):
    c = _controller(catalog)
    c.set_product_line_scope("Handwired")
    view = c.view()
    assert view.kind == "grid"
    assert view.pedals == []
    assert view.empty is True
    assert "Handwired" in view.empty_message
    assert view.recovery_url == "/pedals"
    # nothing to filter, so no filter bar
    assert view.filters == []


def test_custom_line_is_its_own_variant(catalog):
    c = _controller(catalog)
    c.set_product_line_scope("Custom")
    view = c.view()
    assert view.kind == "custom"
    assert view.heading == "Custom Orders"
    assert view.empty is False


def test_line_headings(catalog):
    c = _controller(catalog)
    c.set_product_line_scope("Tarot")
    assert c.heading() == "Tarot Series"
    c.set_product_line_scope("Limited")
    assert c.heading() == "Limited Line"
    assert slugs(c.visible_pedals()) == ["slow-moon"]


def test_filter_param_parsing(catalog):
    c = _controller(catalog)
    c.set_filter_param("Fuzz")
    assert c.selected_filter == PedalType.FUZZ
    assert c.view().selected_filter == "Fuzz"
    c.set_filter_param("Wah")
    assert c.selected_filter == ALL_FILTER
    assert "Wah" in c.view().notice
    c.set_filter_param(None)
    assert c.view().notice is None


def test_filter_with_no_matches_is_empty(catalog):
    c = _controller(catalog)
    c.set_filter(PedalType.DELAY)
    view = c.view()
    assert view.empty is True
    assert view.empty_message.startswith("No pedals are currently available.")


def test_reset(catalog):
    c = _controller(catalog)
    c.set_product_line_scope("Tarot")
    c.set_filter(PedalType.FUZZ)
    c.reset()
    assert c.selected_filter == ALL_FILTER
    assert c.product_line_scope.kind == "none"


def test_set_filter_only_accepts_known_types(catalog):
    c = _controller(catalog)
    c.set_filter("Fuzz")
    assert c.selected_filter is PedalType.FUZZ
    with pytest.raises(ValueError):
        c.set_filter("Wah")
    # rejected value leaves the previous selection in place
    assert c.selected_filter is PedalType.FUZZ
    assert c.view().selected_filter == "Fuzz"


def test_unknown_line_and_type_notices_combined(catalog):
    c = _controller(catalog)
    c.set_product_line_scope("Boutique")
    c.set_filter_param("Wah")
    notice = c.view().notice
    assert "Boutique" in notice
    assert "Wah" in notice
