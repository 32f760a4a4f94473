from fastapi import APIRouter, Depends

from storefront.api import get_catalog
from storefront.core.config import settings
from storefront.storage.catalog import CatalogStore

router = APIRouter()


@router.get("/health")
def healthcheck(catalog: CatalogStore = Depends(get_catalog)) -> dict:
    return {"status": "ok", "environment": settings.environment, "destinations": len(catalog)}
