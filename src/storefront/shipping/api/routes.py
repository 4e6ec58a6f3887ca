"""Shipping region endpoints: public lookup and pricing, admin management."""

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from storefront.identity.session import require_admin
from storefront.shipping.api.schemas import (
    CalculateShippingRequest,
    CreateShippingRegionRequest,
    IdResponse,
    ShippingQuoteResponse,
    ShippingRegionResponse,
    StatusResponse,
    UpdateShippingRegionRequest,
)
from storefront.shipping.management import CreateShippingRegion, DeleteShippingRegion, UpdateShippingRegion
from storefront.shipping.pricing import (
    amount_until_free_shipping,
    calculate_shipping_cost,
    detect_region,
    resolve_region,
)
from storefront.shipping.region import ShippingRegion

shipping_router = APIRouter(prefix="/shipping", tags=["shipping"])
admin_shipping_router = APIRouter(
    prefix="/admin/shipping-regions", tags=["admin"], dependencies=[Depends(require_admin)]
)

_NO_REGION = "No shipping region found for country"


@shipping_router.get("/regions", response_model=list[ShippingRegionResponse])
async def list_regions() -> list[ShippingRegionResponse]:
    regions = current_domain.repository_for(ShippingRegion).list_regions(active_only=True)
    return [ShippingRegionResponse.from_region(r) for r in regions]


@shipping_router.get("/detect-region", response_model=ShippingRegionResponse)
async def detect(country: str) -> ShippingRegionResponse:
    region = detect_region(country)
    if region is None:
        raise HTTPException(status_code=404, detail=_NO_REGION)
    return ShippingRegionResponse.from_region(region)


@shipping_router.post("/calculate", response_model=ShippingQuoteResponse)
async def calculate(body: CalculateShippingRequest) -> ShippingQuoteResponse:
    region = resolve_region(region_id=body.region_id, country_code=body.country)
    if region is None:
        raise HTTPException(status_code=404, detail=_NO_REGION)

    cost = calculate_shipping_cost(region, body.subtotal)
    return ShippingQuoteResponse(
        region=ShippingRegionResponse.from_region(region),
        shipping_cost=cost,
        free_shipping=cost == 0,
        amount_until_free_shipping=amount_until_free_shipping(region, body.subtotal),
    )


# --- Admin ---


@admin_shipping_router.get("", response_model=list[ShippingRegionResponse])
async def admin_list_regions() -> list[ShippingRegionResponse]:
    regions = current_domain.repository_for(ShippingRegion).list_regions(active_only=False)
    return [ShippingRegionResponse.from_region(r) for r in regions]


@admin_shipping_router.post("", status_code=201, response_model=IdResponse)
async def create_region(body: CreateShippingRegionRequest) -> IdResponse:
    result = current_domain.process(CreateShippingRegion(**body.model_dump(exclude_none=True)), asynchronous=False)
    return IdResponse(id=result)


@admin_shipping_router.put("/{region_id}", response_model=StatusResponse)
async def update_region(region_id: str, body: UpdateShippingRegionRequest) -> StatusResponse:
    command = UpdateShippingRegion(region_id=region_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@admin_shipping_router.delete("/{region_id}", response_model=StatusResponse)
async def delete_region(region_id: str) -> StatusResponse:
    current_domain.process(DeleteShippingRegion(region_id=region_id), asynchronous=False)
    return StatusResponse()
