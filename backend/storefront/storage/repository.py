from __future__ import annotations

from typing import Dict, Optional

from storefront.models.domain import BookingDraft


class InMemoryDraftRepository:
    """Booking drafts held in process memory only; nothing is persisted."""

    def __init__(self) -> None:
        self.drafts: Dict[str, BookingDraft] = {}

    def save_draft(self, draft: BookingDraft) -> BookingDraft:
        self.drafts[draft.draft_id] = draft
        return draft

    def get_draft(self, draft_id: str) -> Optional[BookingDraft]:
        return self.drafts.get(draft_id)
