"""Cart endpoints. The cart belongs to the logged-in user, else to the ``X-Session-Id`` guest."""

from dataclasses import dataclass

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from storefront.cart.api.schemas import (
    AddToCartRequest,
    CartCountResponse,
    CartLineResponse,
    CartResponse,
    IdResponse,
    StatusResponse,
    UpdateCartItemRequest,
)
from storefront.cart.cart import ShoppingCart
from storefront.cart.management import AddToCart, ClearCart, RemoveCartItem, UpdateCartItem
from storefront.checkout.pricing import price_cart
from storefront.identity.session import guest_session_id, optional_user
from storefront.identity.user.user import User
from storefront.shared.money import round_money

cart_router = APIRouter(prefix="/cart", tags=["cart"])


@dataclass(frozen=True)
class CartOwner:
    user: User | None
    session_id: str | None

    @property
    def user_id(self) -> str | None:
        return str(self.user.id) if self.user else None

    @property
    def email(self) -> str | None:
        return self.user.email if self.user else None

    def owner_fields(self) -> dict:
        if self.user:
            return {"user_id": self.user_id}
        return {"session_id": self.session_id}

    def find_cart(self) -> ShoppingCart | None:
        return current_domain.repository_for(ShoppingCart).find_for_owner(**self.owner_fields())


async def cart_owner(
    user: User | None = Depends(optional_user),
    session_id: str | None = Depends(guest_session_id),
) -> CartOwner:
    if user is None and not session_id:
        raise HTTPException(status_code=400, detail="Session required")
    return CartOwner(user=user, session_id=session_id)


@cart_router.get("", response_model=CartResponse)
async def get_cart(owner: CartOwner = Depends(cart_owner)) -> CartResponse:
    lines = price_cart(owner.find_cart())
    return CartResponse(
        items=[CartLineResponse(**line) for line in lines],
        item_count=sum(line["quantity"] for line in lines),
        subtotal=round_money(sum(line["total"] for line in lines)),
    )


@cart_router.get("/count", response_model=CartCountResponse)
async def cart_count(owner: CartOwner = Depends(cart_owner)) -> CartCountResponse:
    cart = owner.find_cart()
    return CartCountResponse(count=cart.item_count if cart else 0)


@cart_router.post("/items", status_code=201, response_model=IdResponse)
async def add_item(body: AddToCartRequest, owner: CartOwner = Depends(cart_owner)) -> IdResponse:
    command = AddToCart(
        product_id=body.product_id,
        variant_id=body.variant_id,
        quantity=body.quantity,
        **owner.owner_fields(),
    )
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@cart_router.put("/items/{item_id}", response_model=StatusResponse)
async def update_item(
    item_id: str, body: UpdateCartItemRequest, owner: CartOwner = Depends(cart_owner)
) -> StatusResponse:
    command = UpdateCartItem(item_id=item_id, quantity=body.quantity, **owner.owner_fields())
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/items/{item_id}", response_model=StatusResponse)
async def remove_item(item_id: str, owner: CartOwner = Depends(cart_owner)) -> StatusResponse:
    current_domain.process(RemoveCartItem(item_id=item_id, **owner.owner_fields()), asynchronous=False)
    return StatusResponse()


@cart_router.delete("", response_model=StatusResponse)
async def clear_cart(owner: CartOwner = Depends(cart_owner)) -> StatusResponse:
    current_domain.process(ClearCart(**owner.owner_fields()), asynchronous=False)
    return StatusResponse()
