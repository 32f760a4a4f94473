from fastapi import HTTPException
from starlette.requests import HTTPConnection, Request

from storefront.storage.catalog import CatalogStore
from storefront.storage.repository import InMemoryDraftRepository


def get_catalog(connection: HTTPConnection) -> CatalogStore:
    catalog = getattr(connection.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=500, detail="Catalog not initialized")
    return catalog


def get_repository(request: Request) -> InMemoryDraftRepository:
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise HTTPException(status_code=500, detail="Repository not initialized")
    return repository
