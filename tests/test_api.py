"""Tests for the FastAPI routes."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from hellohealth.api.routes import DEFAULT_PAGE, load_page
from hellohealth.api.server import create_app
from hellohealth.health.checker import CompositeChecker
from hellohealth.health.report import Status


@pytest.fixture
def root_checker(fixed_checker) -> CompositeChecker:
    group = CompositeChecker()
    group.add_checker("Google", fixed_checker(Status.UP, code=200))

    root = CompositeChecker()
    root.add_checker("Go", fixed_checker(Status.UP, code=200))
    root.add_checker("Big Companies", group)
    return root


@pytest.fixture
def client(root_checker: CompositeChecker, tmp_path: Path) -> TestClient:
    return TestClient(create_app(checker=root_checker, data_dir=str(tmp_path)))


class TestHealthRoute:
    def test_all_up(self, client: TestClient) -> None:
        resp = client.get("/health/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/json")
        assert resp.json() == {
            "Go": {"code": 200, "status": "UP"},
            "Big Companies": {
                "Google": {"code": 200, "status": "UP"},
                "status": "UP",
            },
            "status": "UP",
        }

    def test_without_trailing_slash(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "UP"

    def test_down_is_503(self, root_checker, fixed_checker, tmp_path: Path) -> None:
        root_checker.add_checker("MySQL", fixed_checker(
            Status.DOWN, error="Access denied for user",
        ))
        client = TestClient(create_app(checker=root_checker, data_dir=str(tmp_path)))

        resp = client.get("/health/")
        assert resp.status_code == 503
        data = resp.json()
        assert data["status"] == "DOWN"
        assert data["MySQL"] == {"error": "Access denied for user", "status": "DOWN"}
        assert data["Go"]["status"] == "UP"

    def test_out_of_service_child_is_503(self, fixed_checker, tmp_path: Path) -> None:
        root = CompositeChecker()
        root.add_checker("maintenance", fixed_checker(Status.OUT_OF_SERVICE))
        client = TestClient(create_app(checker=root, data_dir=str(tmp_path)))

        resp = client.get("/health/")
        assert resp.status_code == 503
        assert resp.json()["maintenance"] == {"status": "OUT OF SERVICE"}

    def test_empty_checker(self, tmp_path: Path) -> None:
        client = TestClient(create_app(data_dir=str(tmp_path)))
        resp = client.get("/health/")
        assert resp.status_code == 200
        assert resp.json() == {"status": "UP"}

    def test_extra_info(self, root_checker, tmp_path: Path) -> None:
        root_checker.add_info("version", "0.1.0")
        client = TestClient(create_app(checker=root_checker, data_dir=str(tmp_path)))
        assert client.get("/health/").json()["version"] == "0.1.0"

    def test_lifespan(self, root_checker, tmp_path: Path) -> None:
        with TestClient(create_app(checker=root_checker, data_dir=str(tmp_path))) as client:
            assert client.get("/health/").status_code == 200


class TestPageRoutes:
    def test_index_default(self, client: TestClient) -> None:
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert resp.text == DEFAULT_PAGE

    def test_index_from_data_dir(self, root_checker, tmp_path: Path) -> None:
        (tmp_path / "index.html").write_text("<h1>custom</h1>", encoding="utf-8")
        client = TestClient(create_app(checker=root_checker, data_dir=str(tmp_path)))
        assert client.get("/").text == "<h1>custom</h1>"

    def test_hello_name(self, client: TestClient) -> None:
        resp = client.get("/world")
        assert resp.status_code == 200
        assert "hello world!" in resp.text
        assert "<title>hello world</title>" in resp.text

    def test_hello_name_escaped(self, client: TestClient) -> None:
        resp = client.get("/%3Cb%3E")
        assert "&lt;b&gt;" in resp.text
        assert "<b>" not in resp.text

    def test_nested_path_echoed(self, client: TestClient) -> None:
        resp = client.get("/a/b")
        assert resp.status_code == 200
        assert "hello a/b!" in resp.text

    def test_health_not_shadowed_by_pages(self, client: TestClient) -> None:
        assert client.get("/health").json()["status"] == "UP"


class TestLoadPage:
    def test_reads_file(self, tmp_path: Path) -> None:
        (tmp_path / "page.html").write_text("hi", encoding="utf-8")
        assert load_page("page.html", tmp_path) == "hi"

    def test_missing_falls_back(self, tmp_path: Path) -> None:
        assert load_page("missing.html", tmp_path) == DEFAULT_PAGE
