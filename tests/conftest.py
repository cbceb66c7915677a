from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

import main
from core import ids
from projects import repository as project_repository
from reports import repository as report_repository


class FakeStore:
    """
    In-memory stand-in for the two repositories.

    Mirrors the database contract: sequential ids, dense renumbering after a
    delete, project renumbering cascading to reports, and reports of a
    deleted project losing their reference.
    """

    def __init__(self) -> None:
        self.projects: dict[int, dict[str, Any]] = {}
        self.reports: dict[int, dict[str, Any]] = {}
        self.writes = 0

    # projects

    async def list_projects(self) -> list[dict[str, Any]]:
        return [dict(self.projects[k]) for k in sorted(self.projects)]

    async def get_project(self, project_id: int) -> dict[str, Any] | None:
        row = self.projects.get(project_id)
        return dict(row) if row is not None else None

    async def project_exists(self, project_id: int) -> bool:
        return project_id in self.projects

    async def create_project(self, *, name: str, description: str) -> dict[str, Any]:
        new_id = max(self.projects, default=0) + 1
        self.projects[new_id] = {"id": new_id, "name": name, "description": description}
        self.writes += 1
        return dict(self.projects[new_id])

    async def update_project(self, project_id: int, changes: dict[str, Any]) -> dict[str, Any] | None:
        row = self.projects.get(project_id)
        if row is None:
            return None
        row.update(changes)
        self.writes += 1
        return dict(row)

    async def delete_project(self, project_id: int) -> int:
        if self.projects.pop(project_id, None) is None:
            return 0
        self.writes += 1
        for report in self.reports.values():
            if report["project_id"] == project_id:
                report["project_id"] = None
        moves = dict(ids.dense_renumbering(self.projects))
        self.projects = self._renumbered(self.projects, moves)
        for report in self.reports.values():
            if report["project_id"] in moves:
                report["project_id"] = moves[report["project_id"]]
        return 1

    # reports

    async def list_reports(self) -> list[dict[str, Any]]:
        return [dict(self.reports[k]) for k in sorted(self.reports)]

    async def get_report(self, report_id: int) -> dict[str, Any] | None:
        row = self.reports.get(report_id)
        return dict(row) if row is not None else None

    async def list_reports_by_project(self, project_id: int) -> list[dict[str, Any]]:
        return [dict(self.reports[k]) for k in sorted(self.reports) if self.reports[k]["project_id"] == project_id]

    async def create_report(self, *, text: str, project_id: int) -> dict[str, Any] | None:
        if project_id not in self.projects:
            return None
        new_id = max(self.reports, default=0) + 1
        self.reports[new_id] = {"id": new_id, "text": text, "project_id": project_id}
        self.writes += 1
        return dict(self.reports[new_id])

    async def update_report(self, report_id: int, changes: dict[str, Any]) -> dict[str, Any] | None:
        row = self.reports.get(report_id)
        if row is None:
            return None
        row.update(changes)
        self.writes += 1
        return dict(row)

    async def delete_report(self, report_id: int) -> int:
        if self.reports.pop(report_id, None) is None:
            return 0
        self.writes += 1
        self.reports = self._renumbered(self.reports, dict(ids.dense_renumbering(self.reports)))
        return 1

    @staticmethod
    def _renumbered(rows: dict[int, dict[str, Any]], moves: dict[int, int]) -> dict[int, dict[str, Any]]:
        result = {}
        for old_id, row in rows.items():
            new_id = moves.get(old_id, old_id)
            result[new_id] = {**row, "id": new_id}
        return result


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("API_TOKEN", raising=False)


@pytest.fixture
def store(monkeypatch) -> FakeStore:
    fake = FakeStore()
    for name in (
        "list_projects",
        "get_project",
        "project_exists",
        "create_project",
        "update_project",
        "delete_project",
    ):
        monkeypatch.setattr(project_repository, name, getattr(fake, name))
    for name in (
        "list_reports",
        "get_report",
        "list_reports_by_project",
        "create_report",
        "update_report",
        "delete_report",
    ):
        monkeypatch.setattr(report_repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def client(store) -> TestClient:
    # Not used as a context manager: the lifespan (DB pool) stays off.
    return TestClient(main.app)


@pytest.fixture
def make_project(client):
    def _make(name: str, description: str = "") -> str:
        resp = client.post("/createproject", json={"name": name, "description": description})
        assert resp.status_code == 201, resp.text
        return resp.json()["result"]["id"]

    return _make


@pytest.fixture
def make_report(client):
    def _make(text: str, project_id: str) -> str:
        resp = client.post("/createreport", json={"text": text, "projectId": project_id})
        assert resp.status_code == 201, resp.text
        return resp.json()["result"]["id"]

    return _make
