from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from typing import Optional
from app.catalog import PedalCatalog, get_catalog
from app.models.pedal import ALL_FILTER
from app.repositories.pedal_repo import PedalRepository
from app.schemas.pedal_schema import PedalOut, PedalsViewOut
from app.services.filter_service import PedalFilterController

router = APIRouter(tags=["pedals"])

@router.get("", summary="Pedal grid for a product line and type filter")
def list_pedals(
    product_line: Optional[str] = Query(None, alias="productLine", description="product line, e.g. Tarot"),
    pedal_type: Optional[str] = Query(None, alias="type", description="pedal type or All"),
    catalog: PedalCatalog = Depends(get_catalog),
):
    controller = PedalFilterController(PedalRepository(catalog))
    controller.set_product_line_scope(product_line)
    controller.set_filter_param(pedal_type)
    view = controller.view()
    return PedalsViewOut(
        **view.model_dump(exclude={"pedals"}),
        pedals=[PedalOut.from_pedal(p) for p in view.pedals],
    ).model_dump(mode="json")

@router.get("/types", summary="Filter buttons for available pedals")
def list_filters(catalog: PedalCatalog = Depends(get_catalog)):
    repo = PedalRepository(catalog)
    return {"filters": [ALL_FILTER] + [t.value for t in repo.available_types()]}

@router.get("/{slug}", summary="Get pedal by slug")
def get_pedal(slug: str, catalog: PedalCatalog = Depends(get_catalog)):
    p = PedalRepository(catalog).by_slug(slug)
    if not p:
        return JSONResponse({"error": "Pedal not found"}, status_code=404)
    return PedalOut.from_pedal(p).model_dump(mode="json")
