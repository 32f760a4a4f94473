from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from storefront.models.domain import Destination
from storefront.storage.seed import DESTINATIONS


class CatalogStore:
    """Read-only destination catalog, loaded once at startup."""

    def __init__(self, destinations: Iterable[Destination] = DESTINATIONS) -> None:
        self._destinations: Tuple[Destination, ...] = tuple(destinations)
        self._by_id: Dict[int, Destination] = {}
        for destination in self._destinations:
            if destination.id in self._by_id:
                raise ValueError(f"Duplicate destination id {destination.id}")
            self._by_id[destination.id] = destination

    def get_by_id(self, destination_id: int) -> Optional[Destination]:
        return self._by_id.get(destination_id)

    def all(self) -> Tuple[Destination, ...]:
        return self._destinations

    def __len__(self) -> int:
        return len(self._destinations)
