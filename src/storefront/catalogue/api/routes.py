"""FastAPI endpoints for the catalogue: public browsing and admin management."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from protean.utils.globals import current_domain

from storefront.catalogue.api.schemas import (
    AddImageRequest,
    AutocompleteResponse,
    BulkProductRequest,
    BulkProductResponse,
    CategoryDetailResponse,
    CategoryResponse,
    ChangeProductStatusRequest,
    CountResponse,
    CreateCategoryRequest,
    CreateProductRequest,
    IdResponse,
    ProductListResponse,
    ProductResponse,
    ProductSummaryResponse,
    ReorderCategoriesRequest,
    ReorderImagesRequest,
    StatusResponse,
    UpdateCategoryRequest,
    UpdateProductRequest,
    VariantFields,
)
from storefront.catalogue.category.category import Category
from storefront.catalogue.category.management import (
    CreateCategory,
    DeleteCategory,
    ReorderCategories,
    UpdateCategory,
)
from storefront.catalogue.product.bulk import BulkUpdateProducts
from storefront.catalogue.product.creation import CreateProduct
from storefront.catalogue.product.details import UpdateProduct
from storefront.catalogue.product.images import AddProductImage, RemoveProductImage, ReorderProductImages
from storefront.catalogue.product.lifecycle import ChangeProductStatus, DeleteProduct
from storefront.catalogue.product.product import Product
from storefront.catalogue.product.variants import AddVariant, RemoveVariant, UpdateVariant
from storefront.identity.session import require_admin

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])
admin_product_router = APIRouter(prefix="/admin/products", tags=["admin"], dependencies=[Depends(require_admin)])
admin_category_router = APIRouter(prefix="/admin/categories", tags=["admin"], dependencies=[Depends(require_admin)])

SortLiteral = Literal["newest", "price_asc", "price_desc", "name"]


def _resolve_category_id(category: str | None) -> str | None:
    """Category filter accepts an id or a slug."""
    if not category:
        return None
    found = current_domain.repository_for(Category).find_by_slug(category)
    return str(found.id) if found else category


# --- Public product endpoints ---


@product_router.get("", response_model=ProductListResponse)
async def list_products(
    category: str | None = None,
    featured: bool | None = None,
    search: str | None = None,
    min_price: float | None = Query(default=None, ge=0),
    max_price: float | None = Query(default=None, ge=0),
    sort: SortLiteral = "newest",
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ProductListResponse:
    products = current_domain.repository_for(Product).search(
        category_id=_resolve_category_id(category),
        featured=featured,
        query=search,
        min_price=min_price,
        max_price=max_price,
        sort=sort,
    )
    page = products[offset : offset + limit]
    return ProductListResponse(
        products=[ProductSummaryResponse.model_validate(p) for p in page],
        total=len(products),
    )


@product_router.get("/count", response_model=CountResponse)
async def count_products() -> CountResponse:
    return CountResponse(count=current_domain.repository_for(Product).count())


@product_router.get("/autocomplete", response_model=AutocompleteResponse)
async def autocomplete(q: str = Query(min_length=1)) -> AutocompleteResponse:
    products = current_domain.repository_for(Product).autocomplete(q)
    return AutocompleteResponse(
        suggestions=[{"id": str(p.id), "name_en": p.name_en, "name_sv": p.name_sv, "slug": p.slug} for p in products]
    )


@product_router.get("/{slug}", response_model=ProductResponse)
async def get_product(slug: str) -> ProductResponse:
    product = current_domain.repository_for(Product).find_active_by_slug(slug)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductResponse.model_validate(product)


@product_router.get("/{slug}/related", response_model=list[ProductSummaryResponse])
async def related_products(slug: str, limit: int = Query(default=4, ge=1, le=12)) -> list[ProductSummaryResponse]:
    repo = current_domain.repository_for(Product)
    product = repo.find_active_by_slug(slug)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return [ProductSummaryResponse.model_validate(p) for p in repo.related(product, limit=limit)]


# --- Public category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category).list_ordered()
    return [CategoryResponse.model_validate(c) for c in categories]


@category_router.get("/{slug}", response_model=CategoryDetailResponse)
async def get_category(slug: str) -> CategoryDetailResponse:
    category = current_domain.repository_for(Category).find_by_slug(slug)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")

    products = current_domain.repository_for(Product).search(category_id=str(category.id))
    response = CategoryDetailResponse.model_validate(category)
    response.products = [ProductSummaryResponse.model_validate(p) for p in products]
    return response


# --- Admin product endpoints ---


@admin_product_router.get("", response_model=list[ProductSummaryResponse])
async def admin_list_products(
    status: Literal["draft", "active", "archived"] | None = None,
    search: str | None = None,
) -> list[ProductSummaryResponse]:
    products = current_domain.repository_for(Product).search(status=status, query=search)
    return [ProductSummaryResponse.model_validate(p) for p in products]


@admin_product_router.get("/{product_id}", response_model=ProductResponse)
async def admin_get_product(product_id: str) -> ProductResponse:
    return ProductResponse.model_validate(current_domain.repository_for(Product).get(product_id))


@admin_product_router.post("", status_code=201, response_model=IdResponse)
async def create_product(body: CreateProductRequest) -> IdResponse:
    result = current_domain.process(CreateProduct(**body.model_dump()), asynchronous=False)
    return IdResponse(id=result)


@admin_product_router.post("/bulk", response_model=BulkProductResponse)
async def bulk_update_products(body: BulkProductRequest) -> BulkProductResponse:
    if body.action == "featured":
        if not isinstance(body.value, bool):
            raise HTTPException(status_code=400, detail="Featured value must be a boolean")
        options = {"featured": body.value}
    elif body.action != "delete" and isinstance(body.value, bool):
        raise HTTPException(status_code=400, detail=f"A {body.action} action takes a text value")
    elif body.action == "status":
        options = {"status": body.value}
    elif body.action == "category":
        options = {"category_id": body.value or None}
    else:
        options = {}

    command = BulkUpdateProducts(product_ids=body.product_ids, action=body.action, **options)
    updated = current_domain.process(command, asynchronous=False)
    return BulkProductResponse(updated=updated, message=f"Updated {updated} product(s)")


@admin_product_router.put("/{product_id}", response_model=StatusResponse)
async def update_product(product_id: str, body: UpdateProductRequest) -> StatusResponse:
    command = UpdateProduct(product_id=product_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@admin_product_router.put("/{product_id}/status", response_model=StatusResponse)
async def change_product_status(product_id: str, body: ChangeProductStatusRequest) -> StatusResponse:
    current_domain.process(ChangeProductStatus(product_id=product_id, status=body.status), asynchronous=False)
    return StatusResponse()


@admin_product_router.delete("/{product_id}", response_model=StatusResponse)
async def delete_product(product_id: str) -> StatusResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


@admin_product_router.post("/{product_id}/variants", status_code=201, response_model=IdResponse)
async def add_variant(product_id: str, body: VariantFields) -> IdResponse:
    command = AddVariant(product_id=product_id, **body.model_dump(exclude_none=True))
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@admin_product_router.put("/{product_id}/variants/{variant_id}", response_model=StatusResponse)
async def update_variant(product_id: str, variant_id: str, body: VariantFields) -> StatusResponse:
    command = UpdateVariant(product_id=product_id, variant_id=variant_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@admin_product_router.delete("/{product_id}/variants/{variant_id}", response_model=StatusResponse)
async def remove_variant(product_id: str, variant_id: str) -> StatusResponse:
    current_domain.process(RemoveVariant(product_id=product_id, variant_id=variant_id), asynchronous=False)
    return StatusResponse()


@admin_product_router.post("/{product_id}/images", status_code=201, response_model=IdResponse)
async def add_image(product_id: str, body: AddImageRequest) -> IdResponse:
    command = AddProductImage(product_id=product_id, **body.model_dump(exclude_none=True))
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@admin_product_router.put("/{product_id}/images/order", response_model=StatusResponse)
async def reorder_images(product_id: str, body: ReorderImagesRequest) -> StatusResponse:
    current_domain.process(ReorderProductImages(product_id=product_id, image_ids=body.image_ids), asynchronous=False)
    return StatusResponse()


@admin_product_router.delete("/{product_id}/images/{image_id}", response_model=StatusResponse)
async def remove_image(product_id: str, image_id: str) -> StatusResponse:
    current_domain.process(RemoveProductImage(product_id=product_id, image_id=image_id), asynchronous=False)
    return StatusResponse()


# --- Admin category endpoints ---


@admin_category_router.post("", status_code=201, response_model=IdResponse)
async def create_category(body: CreateCategoryRequest) -> IdResponse:
    result = current_domain.process(CreateCategory(**body.model_dump(exclude_none=True)), asynchronous=False)
    return IdResponse(id=result)


@admin_category_router.put("/order", response_model=StatusResponse)
async def reorder_categories(body: ReorderCategoriesRequest) -> StatusResponse:
    current_domain.process(ReorderCategories(category_ids=body.category_ids), asynchronous=False)
    return StatusResponse()


@admin_category_router.put("/{category_id}", response_model=StatusResponse)
async def update_category(category_id: str, body: UpdateCategoryRequest) -> StatusResponse:
    command = UpdateCategory(category_id=category_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@admin_category_router.delete("/{category_id}", response_model=StatusResponse)
async def delete_category(category_id: str) -> StatusResponse:
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return StatusResponse()
