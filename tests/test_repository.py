from __future__ import annotations

from taskhub.infra.repository import InMemoryTaskRepository


def test_save_assigns_sequential_ids_and_defaults() -> None:
    repo = InMemoryTaskRepository()

    first = repo.save({"title": "One", "type": "simple", "completed": True})
    second = repo.save({"title": "Two", "type": "complex", "description": "d", "priority": "low"})

    assert (first.id, second.id) == ("1", "2")
    assert first.completed is False
    assert second.description == "d"
    assert second.priority == "low"
    assert [t.id for t in repo.find_all()] == ["1", "2"]


def test_missing_ids_are_reported_without_errors() -> None:
    repo = InMemoryTaskRepository()

    assert repo.find_by_id("9") is None
    assert repo.update("9", {"title": "x"}) is None
    assert repo.delete("9") is False


def test_update_keeps_identity_fields() -> None:
    repo = InMemoryTaskRepository()
    task = repo.save({"title": "One", "type": "simple"})

    updated = repo.update(task.id, {"title": "Uno", "id": "77", "created_at": None, "completed": True})

    assert updated.id == task.id
    assert updated.created_at == task.created_at
    assert updated.title == "Uno"
    assert updated.completed is True
    assert repo.find_by_id("77") is None


def test_restore_reinserts_record_and_protects_counter() -> None:
    repo = InMemoryTaskRepository()
    task = repo.save({"title": "One", "type": "simple"})
    repo.clear()

    repo.restore(task)
    fresh = repo.save({"title": "Two", "type": "simple"})

    assert repo.find_by_id(task.id) == task
    assert fresh.id == "2"


def test_clear_resets_store_and_ids() -> None:
    repo = InMemoryTaskRepository()
    repo.save({"title": "One", "type": "simple"})
    repo.save({"title": "Two", "type": "simple"})

    repo.clear()

    assert repo.find_all() == []
    assert repo.save({"title": "Three", "type": "simple"}).id == "1"
