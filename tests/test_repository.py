"""Generic repository operations and the child schema contract."""

import pytest

from tzscheduler.domain.children import ChildDelete, ChildUpsert
from tzscheduler.domain.participants.repository import ParticipantRepository
from tzscheduler.domain.schedules.repository import ScheduleRepository
from tzscheduler.models import generate_id, utcnow


@pytest.fixture
def repo(db):
    return ScheduleRepository(db)


def insert_schedule(repo, owner, name):
    now = utcnow()
    return repo.insert(
        id=generate_id(), owner_user_id=owner, name=name, created_at=now, updated_at=now
    )


class TestSqlRepository:
    def test_get_by_primary_key(self, repo):
        created = insert_schedule(repo, "user-alice", "Team sync")

        assert repo.get(created.id) is created
        assert repo.get("no-such-id") is None

    def test_find_one_and_count_filter_on_every_column(self, repo):
        insert_schedule(repo, "user-alice", "Team sync")
        insert_schedule(repo, "user-alice", "Standup")
        insert_schedule(repo, "user-bob", "Team sync")

        assert repo.count(owner_user_id="user-alice") == 2
        assert repo.count(owner_user_id="user-alice", name="Team sync") == 1
        assert repo.find_one(owner_user_id="user-bob").name == "Team sync"
        assert repo.find_one(owner_user_id="user-carol") is None

    def test_paginate_uses_default_order(self, repo):
        created = [insert_schedule(repo, "user-alice", f"S{i}") for i in range(5)]
        expected = sorted(created, key=lambda s: (s.created_at, s.id))

        page = repo.paginate(2, 2, owner_user_id="user-alice")

        assert [s.id for s in page] == [s.id for s in expected[2:4]]

    def test_update_and_delete_report_rows_affected(self, repo):
        created = insert_schedule(repo, "user-alice", "Team sync")

        assert repo.update_where({"name": "Renamed"}, id=created.id, owner_user_id="user-bob") == 0
        assert repo.update_where({"name": "Renamed"}, id=created.id) == 1
        assert repo.get(created.id).name == "Renamed"
        assert repo.delete_where(id=created.id) == 1
        assert repo.get(created.id) is None

    def test_unknown_filter_column(self, repo, db):
        with pytest.raises(AttributeError):
            repo.find(colour="blue")
        with pytest.raises(AttributeError):
            ParticipantRepository(db).count(nickname="K")


class TestChildSchemas:
    def test_bases_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            ChildUpsert(scheduleId="s-1")
        with pytest.raises(TypeError):
            ChildDelete(scheduleId="s-1")

    def test_subclass_must_provide_every_hook(self):
        class NameOnly(ChildUpsert):
            name: str

            def create_values(self):
                return {"name": self.name}

        with pytest.raises(TypeError):
            NameOnly(scheduleId="s-1", name="K")
