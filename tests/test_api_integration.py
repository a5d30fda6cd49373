from __future__ import annotations

import uuid


def _new_user(client, password: str = "04234") -> dict:
    email = f"{uuid.uuid4().hex[:12]}@example.com"
    response = client.post("/api/users", json={"email": email, "password": password})
    assert response.status_code == 201
    return response.json()


def test_healthz_is_plain_ok(client):
    response = client.get("/api/healthz")
    assert response.status_code == 200
    assert response.text == "OK"
    assert response.headers["content-type"].startswith("text/plain")


def test_validate_chirp_returns_cleaned_body(client):
    response = client.post("/api/validate_chirp", json={"body": "This is a kerfuffle opinion I need to share with the world"})
    assert response.status_code == 200
    assert response.json() == {"cleaned_body": "This is a **** opinion I need to share with the world"}


def test_validate_chirp_too_long(client):
    response = client.post("/api/validate_chirp", json={"body": "x" * 141})
    assert response.status_code == 400
    assert response.json() == {"error": "Chirp is too long"}


def test_undecodable_body_uses_error_envelope(client):
    response = client.post("/api/validate_chirp", json={"text": "missing body field"})
    assert response.status_code == 422
    assert response.json() == {"error": "Couldn't decode parameters"}


def test_create_user_returns_public_record(client):
    user = _new_user(client)
    assert set(user) == {"id", "created_at", "updated_at", "email"}
    uuid.UUID(user["id"])


def test_duplicate_email_is_rejected(client):
    user = _new_user(client)
    response = client.post("/api/users", json={"email": user["email"], "password": "other"})
    assert response.status_code == 409
    assert response.json() == {"error": "Couldn't create user"}


def test_login_returns_user_record(client):
    user = _new_user(client, password="hunter2")
    response = client.post("/api/login", json={"email": user["email"], "password": "hunter2"})
    assert response.status_code == 200
    assert response.json() == user


def test_login_with_wrong_password_is_unauthorized(client):
    user = _new_user(client, password="hunter2")
    response = client.post("/api/login", json={"email": user["email"], "password": "hunter3"})
    assert response.status_code == 401
    assert response.json() == {"error": "Incorrect email or password"}


def test_create_list_and_get_chirp(client):
    user = _new_user(client)
    created = client.post(
        "/api/chirps",
        json={"body": "Sharbert is a fornax word", "user_id": user["id"]},
    )
    assert created.status_code == 201
    chirp = created.json()
    assert chirp["body"] == "**** is a **** word"
    assert chirp["user_id"] == user["id"]

    listed = client.get("/api/chirps")
    assert listed.status_code == 200
    assert chirp["id"] in [c["id"] for c in listed.json()]

    fetched = client.get(f"/api/chirps/{chirp['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == chirp


def test_chirps_are_listed_oldest_first(client):
    user = _new_user(client)
    first = client.post("/api/chirps", json={"body": "first", "user_id": user["id"]}).json()
    second = client.post("/api/chirps", json={"body": "second", "user_id": user["id"]}).json()
    ids = [c["id"] for c in client.get("/api/chirps").json()]
    assert ids.index(first["id"]) < ids.index(second["id"])


def test_create_chirp_too_long_is_not_persisted(client):
    user = _new_user(client)
    before = len(client.get("/api/chirps").json())
    response = client.post("/api/chirps", json={"body": "y" * 141, "user_id": user["id"]})
    assert response.status_code == 400
    assert response.json() == {"error": "Chirp is too long"}
    assert len(client.get("/api/chirps").json()) == before


def test_create_chirp_for_unknown_user(client):
    response = client.post("/api/chirps", json={"body": "orphan", "user_id": str(uuid.uuid4())})
    assert response.status_code == 400
    assert response.json() == {"error": "Couldn't create chirp"}


def test_get_chirp_invalid_id(client):
    response = client.get("/api/chirps/not-a-uuid")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid chirp ID"}


def test_get_chirp_missing(client):
    response = client.get(f"/api/chirps/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json() == {"error": "Couldn't get chirp"}


def test_validate_chirp_with_unpaired_surrogate_escape(client):
    response = client.post(
        "/api/validate_chirp",
        content=b'{"body": "\\ud800 kerfuffle"}',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json() == {"cleaned_body": "\ufffd ****"}


def test_create_chirp_with_unpaired_surrogate_escape(client):
    user = _new_user(client)
    payload = '{"body": "Fornax \\udfff", "user_id": "%s"}' % user["id"]
    response = client.post("/api/chirps", content=payload.encode(), headers={"content-type": "application/json"})
    assert response.status_code == 201
    assert response.json()["body"] == "**** \ufffd"


def test_unknown_api_route_uses_error_envelope(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_wrong_method_uses_error_envelope(client):
    response = client.delete("/api/chirps")
    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}
    assert "allow" in response.headers


def test_missing_static_file_uses_error_envelope(client):
    response = client.get("/app/missing.txt")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
