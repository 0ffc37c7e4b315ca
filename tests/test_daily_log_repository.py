import pytest

from models.records import DailyLogCreate, DailyLogUpdate
from services.daily_log_repository import DailyLogRepository

USER = "test-user-1"
OTHER_USER = "test-user-2"
DAY = 86400
NOW = 1_700_000_000


@pytest.fixture()
def repo(session_factory):
    return DailyLogRepository(session_factory)


def test_create_and_get_by_date(repo):
    created = repo.create(DailyLogCreate(user_id=USER, log_date=NOW, mood="great", sleep_hours=7.5))

    assert created.morning_routine is False
    assert created.evening_routine is False
    found = repo.get_by_date(USER, NOW)
    assert found == created
    assert found.sleep_hours == 7.5
    assert repo.get_by_date(OTHER_USER, NOW) is None


def test_update_by_date(repo):
    repo.create(DailyLogCreate(user_id=USER, log_date=NOW, notes="slow start"))

    assert repo.update(OTHER_USER, NOW, DailyLogUpdate(notes="not mine")) is None
    assert repo.get_by_date(USER, NOW).notes == "slow start"
    updated = repo.update(USER, NOW, DailyLogUpdate(morning_routine=True, mood="ok"))

    assert updated.morning_routine is True
    assert updated.mood == "ok"
    assert updated.notes == "slow start"
    assert repo.update(USER, NOW - DAY, DailyLogUpdate(mood="?")) is None


def test_delete_by_date(repo):
    created = repo.create(DailyLogCreate(user_id=USER, log_date=NOW, mood="calm", notes="keep"))

    assert repo.delete(OTHER_USER, NOW) is False
    assert repo.get_by_date(USER, NOW) == created
    assert repo.delete(USER, NOW) is True
    assert repo.get_by_date(USER, NOW) is None


def test_list_newest_first(repo):
    for offset in range(3):
        repo.create(DailyLogCreate(user_id=USER, log_date=NOW - offset * DAY))
    repo.create(DailyLogCreate(user_id=OTHER_USER, log_date=NOW))

    dates = [log.log_date for log in repo.get_by_user_id(USER)]
    assert dates == [NOW, NOW - DAY, NOW - 2 * DAY]
    assert len(repo.get_by_user_id(USER, limit=2)) == 2


def test_last_n_days_window(repo):
    for offset in range(10):
        repo.create(DailyLogCreate(user_id=USER, log_date=NOW - offset * DAY))

    logs = repo.get_last_n_days(USER, 3, now=NOW)

    assert [log.log_date for log in logs] == [NOW - offset * DAY for offset in range(4)]


def test_last_n_days_not_truncated_by_day_count(repo):
    # Several logs on the same recent days must all be returned.
    for offset in range(3):
        repo.create(DailyLogCreate(user_id=USER, log_date=NOW - offset * 3600))
        repo.create(DailyLogCreate(user_id=USER, log_date=NOW - offset * 3600 - 60))

    assert len(repo.get_last_n_days(USER, 1, now=NOW)) == 6


def test_search_notes_and_mood(repo):
    repo.create(DailyLogCreate(user_id=USER, log_date=NOW, notes="Ran 5k before work"))
    repo.create(DailyLogCreate(user_id=USER, log_date=NOW - DAY, mood="Tired"))
    repo.create(DailyLogCreate(user_id=USER, log_date=NOW - 2 * DAY, notes="quiet"))

    assert [log.log_date for log in repo.search_by_user_id(USER, "5K", 20)] == [NOW]
    assert [log.log_date for log in repo.search_by_user_id(USER, "tired", 20)] == [NOW - DAY]


def test_update_and_delete_cover_every_row_for_the_day(repo):
    repo.create(DailyLogCreate(user_id=USER, log_date=NOW, notes="a"))
    repo.create(DailyLogCreate(user_id=USER, log_date=NOW, notes="b"))
    repo.create(DailyLogCreate(user_id=OTHER_USER, log_date=NOW, notes="theirs"))

    updated = repo.update(USER, NOW, DailyLogUpdate(evening_routine=True))
    assert updated.evening_routine is True
    same_day = [log for log in repo.get_by_user_id(USER) if log.log_date == NOW]
    assert len(same_day) == 2
    assert all(log.evening_routine for log in same_day)

    assert repo.delete(USER, NOW) is True
    assert repo.get_by_date(USER, NOW) is None
    assert repo.get_by_date(OTHER_USER, NOW).notes == "theirs"
