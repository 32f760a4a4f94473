from storefront.models.domain import BookingDraft, BookingSelection
from storefront.storage.repository import InMemoryDraftRepository


def test_saved_draft_is_returned_by_id():
    repository = InMemoryDraftRepository()
    draft = BookingDraft(draft_id="d-1", selection=BookingSelection(destination_id=3))

    assert repository.save_draft(draft) is draft
    assert repository.get_draft("d-1") is draft
    assert repository.get_draft("d-2") is None


def test_saving_again_replaces_draft():
    repository = InMemoryDraftRepository()
    repository.save_draft(BookingDraft(draft_id="d-1", selection=BookingSelection(destination_id=3)))
    updated = BookingDraft(draft_id="d-1", selection=BookingSelection(destination_id=3, adults=4))
    repository.save_draft(updated)

    assert repository.get_draft("d-1").selection.adults == 4
    assert len(repository.drafts) == 1
