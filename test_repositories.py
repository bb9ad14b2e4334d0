# type: ignore
"""
Storage adapter tests — every backend must honour the same contract.
Run:  pytest test_repositories.py -v
"""
import json
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from employee_directory.core.config import Settings
from employee_directory.core.database import build_repository
from employee_directory.exceptions import ConflictError, StorageError
from employee_directory.repositories import (
    InMemoryEmployeeRepository, JsonFileEmployeeRepository, SqlEmployeeRepository,
)


def _fields(**overrides):
    base = {
        "name": "Ada", "position": "Engineer", "email": "ada@x.com",
        "department": "Engineering", "phone": "", "start_date": date(2024, 1, 2),
        "salary": 1000, "status": "active",
    }
    base.update(overrides)
    return base


def _sqlite_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture(params=["memory", "json", "sql"])
def repo(request, tmp_path):
    if request.param == "memory":
        return InMemoryEmployeeRepository()
    if request.param == "json":
        return JsonFileEmployeeRepository(str(tmp_path / "employees.json"))
    return SqlEmployeeRepository(_sqlite_engine())


# ═══════════════════════════════════════════════════════════════════════════
# SHARED CONTRACT
# ═══════════════════════════════════════════════════════════════════════════
class TestRepositoryContract:
    def test_create_assigns_id_and_created_at(self, repo):
        emp = repo.create(_fields())
        assert emp.id
        assert emp.created_at is not None
        assert emp.updated_at is None
        assert emp.start_date == date(2024, 1, 2)

    def test_ids_are_unique(self, repo):
        a = repo.create(_fields(email="a@x.com"))
        b = repo.create(_fields(email="b@x.com"))
        assert a.id != b.id

    def test_get_by_id(self, repo):
        emp = repo.create(_fields())
        found = repo.get_by_id(emp.id)
        assert found.email == "ada@x.com"
        assert repo.get_by_id("missing") is None

    def test_get_all_newest_first(self, repo):
        repo.create(_fields(email="old@x.com"))
        repo.create(_fields(email="new@x.com"))
        assert [e.email for e in repo.get_all()] == ["new@x.com", "old@x.com"]
        assert repo.count() == 2

    def test_update_merges_and_stamps(self, repo):
        emp = repo.create(_fields())
        updated = repo.update(emp.id, {"salary": 2000, "id": "hijack"})
        assert updated.id == emp.id
        assert updated.salary == 2000
        assert updated.name == "Ada"
        assert updated.updated_at is not None
        assert repo.get_by_id(emp.id).salary == 2000

    def test_update_missing_returns_none(self, repo):
        repo.create(_fields())
        assert repo.update("missing", {"salary": 1}) is None
        assert repo.count() == 1

    def test_delete_returns_snapshot(self, repo):
        emp = repo.create(_fields())
        removed = repo.delete(emp.id)
        assert removed.id == emp.id
        assert repo.get_by_id(emp.id) is None
        assert repo.delete(emp.id) is None

    def test_email_exists(self, repo):
        emp = repo.create(_fields())
        assert repo.email_exists("ada@x.com")
        assert not repo.email_exists("ada@x.com", exclude_id=emp.id)
        assert not repo.email_exists("other@x.com")

    def test_verify_connection(self, repo):
        repo.verify_connection()


# ═══════════════════════════════════════════════════════════════════════════
# BACKEND SPECIFICS
# ═══════════════════════════════════════════════════════════════════════════
class TestJsonFileRepository:
    def test_survives_reopen(self, tmp_path):
        path = str(tmp_path / "data" / "employees.json")
        first = JsonFileEmployeeRepository(path)
        emp = first.create(_fields())
        reopened = JsonFileEmployeeRepository(path)
        assert reopened.get_by_id(emp.id).email == "ada@x.com"

    def test_file_uses_camel_case(self, tmp_path):
        path = tmp_path / "employees.json"
        JsonFileEmployeeRepository(str(path)).create(_fields())
        stored = json.loads(path.read_text())
        assert stored[0]["startDate"] == "2024-01-02"
        assert "createdAt" in stored[0]

    def test_corrupt_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "employees.json"
        path.write_text("{not json")
        with pytest.raises(StorageError):
            JsonFileEmployeeRepository(str(path)).get_all()

    def test_missing_file_is_empty(self, tmp_path):
        assert JsonFileEmployeeRepository(str(tmp_path / "none.json")).get_all() == []


class TestSqlRepository:
    def test_unique_email_enforced_by_table(self):
        repo = SqlEmployeeRepository(_sqlite_engine())
        repo.create(_fields())
        with pytest.raises(ConflictError):
            repo.create(_fields(name="Other"))
        assert repo.count() == 1

    def test_update_into_taken_email_conflicts(self):
        repo = SqlEmployeeRepository(_sqlite_engine())
        repo.create(_fields(email="one@x.com"))
        two = repo.create(_fields(email="two@x.com"))
        with pytest.raises(ConflictError):
            repo.update(two.id, {"email": "one@x.com"})

    def test_out_of_range_salary_is_storage_error(self):
        repo = SqlEmployeeRepository(_sqlite_engine())
        with pytest.raises(StorageError):
            repo.create(_fields(salary=10 ** 20))
        emp = repo.create(_fields())
        with pytest.raises(StorageError):
            repo.update(emp.id, {"salary": 10 ** 20})
        assert repo.get_by_id(emp.id).salary == 1000


class TestBuildRepository:
    @pytest.mark.parametrize("backend,cls", [
        ("memory", InMemoryEmployeeRepository),
        ("json", JsonFileEmployeeRepository),
    ])
    def test_selects_backend(self, backend, cls, tmp_path):
        config = Settings()
        config.STORAGE_BACKEND = backend
        config.DATA_FILE = str(tmp_path / "employees.json")
        assert isinstance(build_repository(config), cls)

    def test_sql_backend(self, tmp_path):
        config = Settings()
        config.STORAGE_BACKEND = "sql"
        config.DATABASE_URL = f"sqlite:///{tmp_path / 'employees.db'}"
        repo = build_repository(config)
        assert isinstance(repo, SqlEmployeeRepository)
        repo.dispose()

    def test_unknown_backend(self):
        config = Settings()
        config.STORAGE_BACKEND = "redis"
        with pytest.raises(ValueError):
            build_repository(config)
