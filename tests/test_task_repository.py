import pytest
from sqlalchemy import text

from models.records import TaskCreate, TaskUpdate
from services import base_repository
from services.context_codec import ContextDecodeError
from services.task_repository import TaskRepository

USER = "test-user-1"
OTHER_USER = "test-user-2"


@pytest.fixture()
def repo(session_factory):
    return TaskRepository(session_factory)


def _task(repo, user_id=USER, **fields):
    fields.setdefault("title", "Test Task")
    return repo.create(TaskCreate(user_id=user_id, **fields))


def test_create_and_retrieve(repo):
    created = _task(repo, description="Test Description")

    assert created.id
    assert created.status == "to_do"
    assert created.priority == "medium"
    assert created.is_completed is False

    retrieved = repo.get_by_id(created.id, USER)
    assert retrieved == created


def test_other_user_cannot_read(repo):
    created = _task(repo, user_id=OTHER_USER, title="Other User Task")
    assert repo.get_by_id(created.id, USER) is None


def test_context_roundtrip(repo):
    created = _task(repo, context=["deep_work", "phone"])
    assert created.context == ["deep_work", "phone"]
    assert repo.get_by_id(created.id, USER).context == ["deep_work", "phone"]


def test_missing_context_reads_as_empty(repo):
    created = _task(repo)
    assert repo.get_by_id(created.id, USER).context == []


def test_corrupt_context_surfaces_error(repo, engine):
    created = _task(repo)
    with engine.begin() as conn:
        conn.execute(text("UPDATE tasks_tasks SET context = 'deep_work' WHERE id = :id"), {"id": created.id})

    with pytest.raises(ContextDecodeError):
        repo.get_by_id(created.id, USER)


def test_update_applies_only_given_fields(repo, monkeypatch):
    created = _task(repo, title="Original Title", description="keep me", context=["phone"])
    monkeypatch.setattr(base_repository, "now_ts", lambda: created.updated_at + 60)

    updated = repo.update(created.id, USER, TaskUpdate(title="Updated Title", status="done"))

    assert updated.title == "Updated Title"
    assert updated.status == "done"
    assert updated.description == "keep me"
    assert updated.context == ["phone"]
    assert updated.created_at == created.created_at
    assert updated.updated_at == created.updated_at + 60


def test_update_reencodes_context_and_can_clear_fields(repo):
    created = _task(repo, description="gone soon", context=["phone"])

    updated = repo.update(created.id, USER, TaskUpdate(context=["admin", "errands"], description=None))

    assert updated.context == ["admin", "errands"]
    assert updated.description is None


def test_update_and_delete_under_wrong_owner(repo):
    created = _task(repo, title="Mine")

    assert repo.update(created.id, OTHER_USER, TaskUpdate(title="Stolen")) is None
    assert repo.delete(created.id, OTHER_USER) is False
    assert repo.get_by_id(created.id, USER) == created


def test_update_missing_returns_none(repo):
    assert repo.update("does-not-exist", USER, TaskUpdate(title="x")) is None


def test_delete(repo):
    created = _task(repo, title="To be deleted")
    assert repo.delete(created.id, USER) is True
    assert repo.get_by_id(created.id, USER) is None
    assert repo.delete(created.id, USER) is False


def test_list_for_user(repo):
    _task(repo, title="Task 1")
    _task(repo, title="Task 2")
    _task(repo, user_id=OTHER_USER, title="Other Task")

    tasks = repo.get_by_user_id(USER)
    assert len(tasks) == 2
    assert all(task.user_id == USER for task in tasks)
    assert len(repo.get_by_user_id(USER, limit=1)) == 1


def test_filters_by_project_and_area(repo):
    _task(repo, title="in project", project_id="p1")
    _task(repo, title="in area", area_id="a1")
    _task(repo, user_id=OTHER_USER, title="foreign", project_id="p1", area_id="a1")

    assert [t.title for t in repo.get_by_project_id("p1", USER)] == ["in project"]
    assert [t.title for t in repo.get_by_area_id("a1", USER)] == ["in area"]


@pytest.mark.parametrize("prior_status", ["to_do", "in_progress", "waiting", "archived", "done"])
def test_complete_task(repo, prior_status):
    created = _task(repo, status=prior_status)

    completed = repo.complete_task(created.id, USER)

    assert completed.is_completed is True
    assert completed.status == "done"


def test_complete_task_wrong_owner(repo):
    created = _task(repo)
    assert repo.complete_task(created.id, OTHER_USER) is None
    assert repo.get_by_id(created.id, USER).status == "to_do"


def test_count_by_status(repo):
    assert repo.count_by_status(USER, "done") == 0
    _task(repo, status="done", is_completed=True)
    _task(repo, status="done", is_completed=True)
    _task(repo, status="to_do")
    _task(repo, user_id=OTHER_USER, status="done", is_completed=True)

    assert repo.count_by_status(USER, "done") == 2
    assert repo.count_by_status(USER, "to_do") == 1


def test_todays_tasks_day_boundaries(repo):
    reference = 1_700_000_000
    start = (reference // 86400) * 86400

    _task(repo, title="due at midnight", due_date=start)
    _task(repo, title="planned late", do_date=start + 86399)
    _task(repo, title="due yesterday", due_date=start - 1)
    _task(repo, title="due tomorrow", due_date=start + 86400)
    _task(repo, title="undated")
    _task(repo, user_id=OTHER_USER, title="foreign", due_date=start)

    titles = {task.title for task in repo.get_todays_tasks(USER, reference)}
    assert titles == {"due at midnight", "planned late"}


def test_todays_tasks_not_hidden_by_older_rows(repo):
    reference = 1_700_000_000
    for index in range(5):
        _task(repo, title=f"old {index}", due_date=reference - 10 * 86400)
    _task(repo, title="today", due_date=reference)

    assert [t.title for t in repo.get_todays_tasks(USER, reference, limit=3)] == ["today"]


def test_search_title_and_description(repo):
    _task(repo, title="Buy MILK")
    _task(repo, title="Shopping", description="oat milk and bread")
    _task(repo, title="Unrelated")
    _task(repo, user_id=OTHER_USER, title="milk for them")

    found = repo.search_by_user_id(USER, "milk", 10)
    assert {t.title for t in found} == {"Buy MILK", "Shopping"}
    assert len(repo.search_by_user_id(USER, "milk", 1)) == 1


def test_search_treats_wildcards_literally(repo):
    _task(repo, title="100% done")
    _task(repo, title="1000 things")

    assert [t.title for t in repo.search_by_user_id(USER, "100%", 10)] == ["100% done"]
    assert repo.search_by_user_id(USER, "   ", 10) == []
