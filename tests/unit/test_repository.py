from __future__ import annotations

from quotebook.domain.models import Item, Status
from quotebook.repository.abstract import QuoteRepository
from quotebook.repository.memory import InMemoryQuoteRepository

SAVE_COUNT = 5


def test_satisfies_protocol(repository: InMemoryQuoteRepository):
    assert isinstance(repository, QuoteRepository)


def test_save_assigns_increasing_ids(repository: InMemoryQuoteRepository):
    ids = [repository.save(Item(title=f"q{i}")).id for i in range(SAVE_COUNT)]
    assert ids == list(range(1, SAVE_COUNT + 1))


def test_save_populates_callers_object(repository: InMemoryQuoteRepository):
    item = Item(title="mine")
    saved = repository.save(item)
    assert item.id == saved.id == 1


def test_find_by_id_round_trips_all_fields(repository, make_item):
    item = make_item(
        title="Full",
        description="text",
        author="Someone",
        category="misc",
        tags={"a", "b"},
        rating=3.5,
        favorite=True,
        status=Status.INACTIVE,
    )
    saved = repository.save(item)
    assert repository.find_by_id(saved.id) == saved


def test_find_by_id_missing_returns_none(repository):
    assert repository.find_by_id(42) is None


def test_save_with_existing_id_overwrites(repository):
    saved = repository.save(Item(title="before"))
    saved.title = "after"
    repository.save(saved)
    assert repository.count() == 1
    assert repository.find_by_id(saved.id).title == "after"


def test_overwrite_keeps_snapshot_position(repository):
    first = repository.save(Item(title="first"))
    repository.save(Item(title="second"))
    first.title = "first again"
    repository.save(first)
    assert [item.title for item in repository.find_all()] == ["first again", "second"]


def test_ids_never_reused_after_delete(repository):
    first = repository.save(Item(title="a"))
    repository.delete_by_id(first.id)
    assert repository.save(Item(title="b")).id == first.id + 1


def test_explicit_id_advances_sequence(repository):
    repository.save(Item(id=10, title="pinned"))
    assert repository.save(Item(title="next")).id == 11


def test_delete_by_id(repository):
    saved = repository.save(Item(title="gone"))
    repository.delete_by_id(saved.id)
    assert repository.find_by_id(saved.id) is None
    assert not repository.exists_by_id(saved.id)
    repository.delete_by_id(saved.id)  # no-op on missing id


def test_exists_and_count(repository):
    saved = repository.save(Item(title="here"))
    assert repository.exists_by_id(saved.id)
    assert not repository.exists_by_id(saved.id + 1)
    assert repository.count() == 1


def test_delete_all_resets_sequence(repository):
    repository.save_all([Item(title="a"), Item(title="b")])
    repository.delete_all()
    assert repository.count() == 0
    assert repository.save(Item(title="c")).id == 1


def test_save_all_returns_saved_in_order(repository):
    saved = repository.save_all([Item(title="a"), Item(title="b"), Item(title="c")])
    assert [(item.id, item.title) for item in saved] == [(1, "a"), (2, "b"), (3, "c")]


def test_find_all_is_isolated_copy(repository):
    repository.save(Item(title="original", tags={"x"}))
    snapshot = repository.find_all()
    snapshot[0].title = "mutated"
    snapshot[0].tags.add("y")
    snapshot.clear()

    stored = repository.find_all()
    assert len(stored) == 1
    assert stored[0].title == "original"
    assert stored[0].tags == {"x"}


def test_mutating_saved_input_does_not_touch_storage(repository):
    item = Item(title="original")
    repository.save(item)
    item.title = "changed later"
    assert repository.find_by_id(1).title == "original"


def test_find_by_id_returns_copy(repository):
    repository.save(Item(title="original"))
    fetched = repository.find_by_id(1)
    fetched.status = Status.ARCHIVED
    assert repository.find_by_id(1).status is Status.ACTIVE
