"""The logged-in shopper's wishlist."""

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.api.schemas import ProductSummaryResponse
from storefront.catalogue.product.product import Product
from storefront.identity.session import require_user
from storefront.identity.user.user import User
from storefront.wishlist.api.schemas import AddToWishlistRequest, IdResponse, StatusResponse, WishlistEntryResponse
from storefront.wishlist.management import AddToWishlist, RemoveFromWishlist
from storefront.wishlist.wishlist_item import WishlistItem

wishlist_router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@wishlist_router.get("", response_model=list[WishlistEntryResponse])
async def get_wishlist(user: User = Depends(require_user)) -> list[WishlistEntryResponse]:
    products = current_domain.repository_for(Product)
    entries = []
    for item in current_domain.repository_for(WishlistItem).for_user(str(user.id)):
        try:
            product = products.get(item.product_id)
        except ObjectNotFoundError:
            continue
        entries.append(
            WishlistEntryResponse(
                id=str(item.id),
                added_at=item.created_at,
                product=ProductSummaryResponse.model_validate(product),
            )
        )
    return entries


@wishlist_router.post("", status_code=201, response_model=IdResponse)
async def add_to_wishlist(body: AddToWishlistRequest, user: User = Depends(require_user)) -> IdResponse:
    command = AddToWishlist(user_id=str(user.id), product_id=body.product_id)
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@wishlist_router.delete("/{product_id}", response_model=StatusResponse)
async def remove_from_wishlist(product_id: str, user: User = Depends(require_user)) -> StatusResponse:
    current_domain.process(RemoveFromWishlist(user_id=str(user.id), product_id=product_id), asynchronous=False)
    return StatusResponse()
