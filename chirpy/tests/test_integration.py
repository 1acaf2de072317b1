from __future__ import annotations

import uuid
from pathlib import Path

import pytest
from flask import Flask
from sqlalchemy import create_engine, inspect

from chirpy.app import create_app
from chirpy.infrastructure.container import Container
from chirpy.infrastructure.db import ENGINE, Base
from chirpy.infrastructure.db import models  # noqa: F401


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def container(tmp_path: Path) -> Container:
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "logo.txt").write_text("chirpy logo")
    return Container(assets_dir=assets)


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container)


def _create_user(client, email: str) -> dict:
    response = client.post("/api/users", json={"email": email})
    assert response.status_code == 201
    return response.get_json()


def _create_chirp(client, body: str, user_id: str) -> dict:
    response = client.post("/api/chirps", json={"body": body, "user_id": user_id})
    assert response.status_code == 201
    return response.get_json()


def test_healthz(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/api/healthz")

    assert response.status_code == 200
    assert response.get_data(as_text=True) == "OK"


def test_duplicate_email_conflicts(app: Flask, container: Container) -> None:
    with app.test_client() as client:
        user = _create_user(client, "alice@example.com")
        duplicate = client.post("/api/users", json={"email": "alice@example.com"})

    assert user["email"] == "alice@example.com"
    assert uuid.UUID(user["id"])
    assert user["created_at"] == user["updated_at"]
    assert duplicate.status_code == 409
    assert duplicate.get_json() == {"error": "Email already exists"}
    assert container.user_repository.count() == 1


def test_created_chirp_is_moderated_and_retrievable(app: Flask) -> None:
    with app.test_client() as client:
        user = _create_user(client, "alice@example.com")
        created = _create_chirp(
            client,
            "I hear Mastodon is kinda like Twitter, minus the sharbert and fornax",
            user["id"],
        )
        fetched = client.get(f"/api/chirps/{created['id']}")

    assert created["body"] == "I hear Mastodon is kinda like Twitter, minus the **** and ****"
    assert created["user_id"] == user["id"]
    assert created["created_at"] == created["updated_at"]
    assert fetched.status_code == 200
    assert fetched.mimetype == "application/json"
    assert fetched.get_json() == created


def test_get_unknown_chirp_returns_404(app: Flask) -> None:
    with app.test_client() as client:
        unknown = client.get(f"/api/chirps/{uuid.uuid4()}")
        malformed = client.get("/api/chirps/not-a-uuid")

    assert unknown.status_code == 404
    assert unknown.get_json() == {"error": "Chirp not found"}
    assert malformed.status_code == 404


def test_list_chirps_in_creation_order(app: Flask) -> None:
    with app.test_client() as client:
        empty = client.get("/api/chirps")
        user_id = str(uuid.uuid4())
        first = _create_chirp(client, "first", user_id)
        second = _create_chirp(client, "second", user_id)
        listed = client.get("/api/chirps")

    assert empty.get_json() == []
    assert listed.status_code == 200
    assert listed.get_json() == [first, second]


def test_chirp_for_unknown_user_is_accepted(app: Flask) -> None:
    with app.test_client() as client:
        chirp = _create_chirp(client, "nobody wrote this", str(uuid.uuid4()))

    assert chirp["body"] == "nobody wrote this"


def test_invalid_chirps_are_rejected(app: Flask) -> None:
    user_id = str(uuid.uuid4())
    with app.test_client() as client:
        too_long = client.post("/api/chirps", json={"body": "a" * 141, "user_id": user_id})
        empty = client.post("/api/chirps", json={"body": "", "user_id": user_id})
        malformed = client.post(
            "/api/chirps", data="{oops", content_type="application/json"
        )
        listed = client.get("/api/chirps")

    assert too_long.status_code == 400
    assert too_long.get_json() == {"error": "Chirp is too long"}
    assert empty.status_code == 400
    assert empty.get_json() == {"error": "Chirp cannot be empty"}
    assert malformed.status_code == 400
    assert malformed.get_json() == {"error": "Invalid request"}
    assert listed.get_json() == []


def test_whitespace_only_chirp_is_stored_empty(app: Flask) -> None:
    with app.test_client() as client:
        chirp = _create_chirp(client, "    ", str(uuid.uuid4()))

    assert chirp["body"] == ""


def test_reset_clears_visits_and_users(app: Flask, container: Container) -> None:
    with app.test_client() as client:
        _create_user(client, "alice@example.com")
        _create_user(client, "bob@example.com")
        client.get("/app")
        client.get("/app/assets/logo.txt")
        client.get("/app/assets/logo.txt")
        before = client.get("/admin/metrics")
        reset = client.post("/admin/reset")
        after = client.get("/admin/metrics")
        again = client.post("/api/users", json={"email": "alice@example.com"})

    assert "Chirpy has been visited 3 times!" in before.get_data(as_text=True)
    assert reset.status_code == 200
    assert "Chirpy has been visited 0 times!" in after.get_data(as_text=True)
    assert again.status_code == 201
    assert container.user_repository.count() == 1


def test_reset_keeps_chirps(app: Flask, container: Container) -> None:
    with app.test_client() as client:
        chirp = _create_chirp(client, "still here", str(uuid.uuid4()))
        client.post("/admin/reset")
        listed = client.get("/api/chirps")

    assert listed.get_json() == [chirp]
    assert container.user_repository.count() == 0


def test_injected_engine_gets_schema_and_data(tmp_path: Path) -> None:
    engine = create_engine(f"sqlite:///{tmp_path / 'injected.db'}")
    injected = Container(engine=engine, assets_dir=tmp_path)
    try:
        app = create_app(injected)
        with app.test_client() as client:
            _create_user(client, "alice@example.com")

        assert inspect(engine).has_table("users")
        assert inspect(engine).has_table("chirps")
        assert injected.user_repository.count() == 1
        assert Container().user_repository.count() == 0
    finally:
        injected.session_factory.remove()
        engine.dispose()
