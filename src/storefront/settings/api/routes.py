"""Store settings endpoints (admin)."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.identity.session import require_admin
from storefront.settings.api.schemas import StoreSettingsResponse, UpdateStoreSettingsRequest
from storefront.settings.management import EnsureStoreSettings, UpdateStoreSettings
from storefront.settings.store_settings import StoreSettings

settings_router = APIRouter(prefix="/admin/settings", tags=["admin"], dependencies=[Depends(require_admin)])


def _current_settings() -> StoreSettings:
    settings_id = current_domain.process(EnsureStoreSettings(), asynchronous=False)
    return current_domain.repository_for(StoreSettings).get(settings_id)


@settings_router.get("", response_model=StoreSettingsResponse)
async def get_settings() -> StoreSettingsResponse:
    return StoreSettingsResponse.model_validate(_current_settings())


@settings_router.put("", response_model=StoreSettingsResponse)
async def update_settings(body: UpdateStoreSettingsRequest) -> StoreSettingsResponse:
    current_domain.process(UpdateStoreSettings(**body.model_dump(exclude_none=True)), asynchronous=False)
    return StoreSettingsResponse.model_validate(_current_settings())
