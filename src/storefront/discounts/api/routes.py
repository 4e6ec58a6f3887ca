"""Discount code administration."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.discounts.api.schemas import (
    CreateDiscountCodeRequest,
    DiscountCodeResponse,
    IdResponse,
    StatusResponse,
    UpdateDiscountCodeRequest,
)
from storefront.discounts.discount_code import DiscountCode
from storefront.discounts.management import CreateDiscountCode, DeleteDiscountCode, UpdateDiscountCode
from storefront.identity.session import require_admin

admin_discount_router = APIRouter(prefix="/admin/discounts", tags=["admin"], dependencies=[Depends(require_admin)])


@admin_discount_router.get("", response_model=list[DiscountCodeResponse])
async def list_discount_codes() -> list[DiscountCodeResponse]:
    codes = current_domain.repository_for(DiscountCode).list_codes()
    return [DiscountCodeResponse.model_validate(c) for c in codes]


@admin_discount_router.get("/{discount_code_id}", response_model=DiscountCodeResponse)
async def get_discount_code(discount_code_id: str) -> DiscountCodeResponse:
    return DiscountCodeResponse.model_validate(current_domain.repository_for(DiscountCode).get(discount_code_id))


@admin_discount_router.post("", status_code=201, response_model=IdResponse)
async def create_discount_code(body: CreateDiscountCodeRequest) -> IdResponse:
    result = current_domain.process(CreateDiscountCode(**body.model_dump(exclude_none=True)), asynchronous=False)
    return IdResponse(id=result)


@admin_discount_router.put("/{discount_code_id}", response_model=StatusResponse)
async def update_discount_code(discount_code_id: str, body: UpdateDiscountCodeRequest) -> StatusResponse:
    command = UpdateDiscountCode(discount_code_id=discount_code_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@admin_discount_router.delete("/{discount_code_id}", response_model=StatusResponse)
async def delete_discount_code(discount_code_id: str) -> StatusResponse:
    current_domain.process(DeleteDiscountCode(discount_code_id=discount_code_id), asynchronous=False)
    return StatusResponse()
