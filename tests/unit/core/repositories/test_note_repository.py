"""NoteRepository against an in-memory SQLite database."""

import uuid

import pytest

from notebox.core.repositories.note_repository import NoteRepository


@pytest.fixture
def repo(test_session):
    return NoteRepository(test_session)


async def _add(repo, user, title, content="body", pinned=False, tags=None):
    return await repo.create_note({
        "title": title,
        "content": content,
        "tags": tags if tags is not None else title.split(),
        "is_pinned": pinned,
        "user_id": user.id,
    })


async def test_create_note_roundtrips_tags(repo, test_user):
    note = await _add(repo, test_user, "Buy milk today")

    fetched = await repo.get_by_id_and_user(note.id, test_user.id)

    assert fetched is not None
    assert fetched.tags == ["Buy", "milk", "today"]
    assert fetched.is_pinned is False
    assert fetched.created_on is not None


async def test_get_by_id_and_user_scopes_to_owner(repo, test_user, other_user):
    note = await _add(repo, test_user, "mine")

    assert await repo.get_by_id_and_user(note.id, other_user.id) is None
    assert await repo.get_by_id_and_user(uuid.uuid4(), test_user.id) is None


async def test_update_note(repo, test_user, other_user):
    note = await _add(repo, test_user, "Old title", tags=["x"])

    assert await repo.update_note(note.id, other_user.id, {"title": "stolen"}) is None

    updated = await repo.update_note(note.id, test_user.id, {"title": "New Plan", "tags": ["New", "Plan"]})
    assert updated.title == "New Plan"
    assert updated.tags == ["New", "Plan"]


async def test_toggle_pinned(repo, test_user, other_user):
    note = await _add(repo, test_user, "pin me")

    assert await repo.toggle_pinned(note.id, other_user.id) is None
    assert (await repo.toggle_pinned(note.id, test_user.id)).is_pinned is True
    assert (await repo.toggle_pinned(note.id, test_user.id)).is_pinned is False


async def test_delete_note(repo, test_user, other_user):
    note = await _add(repo, test_user, "bye")

    assert await repo.delete_note(note.id, other_user.id) is False
    assert await repo.get_by_id_and_user(note.id, test_user.id) is not None

    assert await repo.delete_note(note.id, test_user.id) is True
    assert await repo.delete_note(note.id, test_user.id) is False


async def test_list_user_notes_pinned_first(repo, test_user, other_user):
    await _add(repo, test_user, "first")
    await _add(repo, test_user, "second", pinned=True)
    await _add(repo, test_user, "third")
    await _add(repo, other_user, "someone else", pinned=True)

    notes = await repo.list_user_notes(test_user.id)

    assert [n.title for n in notes] == ["second", "first", "third"]


async def test_search_is_case_insensitive_over_title_and_content(repo, test_user, other_user):
    await _add(repo, test_user, "Groceries", content="I need Milk")
    await _add(repo, test_user, "MILKSHAKE recipe", content="blend")
    await _add(repo, test_user, "Bakery", content="bread")
    await _add(repo, other_user, "milk", content="milk")

    found = await repo.search_notes(test_user.id, "milk")

    assert {n.title for n in found} == {"Groceries", "MILKSHAKE recipe"}


async def test_search_treats_wildcards_literally(repo, test_user):
    await _add(repo, test_user, "Discount", content="100% off")
    await _add(repo, test_user, "Other", content="100 apples")

    found = await repo.search_notes(test_user.id, "100%")

    assert [n.title for n in found] == ["Discount"]
