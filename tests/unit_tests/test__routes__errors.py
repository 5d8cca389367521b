import pytest
from fastapi import status
from fastapi.testclient import TestClient

TEST_FILE_NAME = "test.txt"


# names a client can put in the path but the storage directory can never hold
UNSTORABLE_NAMES = ["a%5Cb.txt", "bad%00name", "%2E%2E", "%2E"]


@pytest.mark.parametrize("name", ["never-created.txt", *UNSTORABLE_NAMES])
@pytest.mark.parametrize(
    "method, expected_message",
    [
        ("get", "Archivo no encontrado"),
        ("delete", "El archivo no existe"),
        ("put", "El archivo no existe"),
        ("patch", "El archivo no existe"),
    ],
)
def test__unknown_file__returns_404(client: TestClient, storage_dir, method, expected_message, name):
    kwargs = {"json": {"content": "boo"}} if method in ("put", "patch") else {}

    response = client.request(method.upper(), f"/files/{name}", **kwargs)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": expected_message}
    assert list(storage_dir.iterdir()) == []


@pytest.mark.parametrize("path", ["/files/a/b.txt", "/nowhere"])
def test__unmatched_route__returns_message_envelope(client: TestClient, path):
    response = client.get(path)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Not Found"}


def test__unsupported_method__returns_message_envelope(client: TestClient):
    response = client.post("/files/a.txt", json={"content": "x"})

    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert response.json() == {"message": "Method Not Allowed"}
    assert "allow" in response.headers


def test__get_missing_file__message(client: TestClient):
    response = client.get("/files/missing.txt")

    assert response.json() == {"message": "Archivo no encontrado"}


def test__delete_missing_file__message(client: TestClient):
    response = client.delete("/files/missing.txt")

    assert response.json() == {"message": "El archivo no existe"}


def test__create_existing_file__returns_409_and_keeps_content(client: TestClient):
    client.post("/files", json={"filename": TEST_FILE_NAME, "content": "first"})

    response = client.post("/files", json={"filename": TEST_FILE_NAME, "content": "second"})

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json() == {"message": "El archivo ya existe"}
    assert client.get(f"/files/{TEST_FILE_NAME}").json()["content"] == "first"


@pytest.mark.parametrize("method", ["put", "patch"])
def test__update_missing_file__returns_404_and_creates_nothing(client: TestClient, storage_dir, method):
    response = getattr(client, method)("/files/ghost.txt", json={"content": "boo"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "El archivo no existe"}
    assert not (storage_dir / "ghost.txt").exists()
    assert client.get("/files").json()["content"] == []


@pytest.mark.parametrize(
    "body, missing_field",
    [
        ({"content": "hello"}, "filename"),
        ({"filename": TEST_FILE_NAME}, "content"),
        ({}, "filename"),
    ],
)
def test__create_file__missing_fields__returns_422(client: TestClient, storage_dir, body, missing_field):
    response = client.post("/files", json=body)

    assert response.status_code == 422
    data = response.json()
    assert data["message"] == "Los datos proporcionados no son válidos"
    assert missing_field in data["errors"]
    assert "content" not in data
    assert list(storage_dir.iterdir()) == []


@pytest.mark.parametrize(
    "body",
    [
        {"filename": TEST_FILE_NAME, "content": 123},
        {"filename": 42, "content": "hello"},
        {"filename": TEST_FILE_NAME, "content": ""},
        {"filename": "   ", "content": "hello"},
        {"filename": TEST_FILE_NAME, "content": None},
        {"filename": "../escape.txt", "content": "hello"},
        {"filename": "nested/file.txt", "content": "hello"},
    ],
)
def test__create_file__invalid_fields__returns_422(client: TestClient, storage_dir, body):
    response = client.post("/files", json=body)

    assert response.status_code == 422
    assert list(storage_dir.iterdir()) == []
    assert not (storage_dir.parent / "escape.txt").exists()


def test__create_file__without_json_body__returns_422(client: TestClient):
    response = client.post("/files", content=b"not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 422


@pytest.mark.parametrize("body", [{}, {"content": ""}, {"content": 5}, {"other": "x"}])
def test__update_file__invalid_content__returns_422_and_keeps_file(client: TestClient, body):
    client.post("/files", json={"filename": TEST_FILE_NAME, "content": "original"})

    response = client.put(f"/files/{TEST_FILE_NAME}", json=body)

    assert response.status_code == 422
    assert "content" in response.json()["errors"]
    assert client.get(f"/files/{TEST_FILE_NAME}").json()["content"] == "original"


def test__update_missing_file_without_content__validation_wins(client: TestClient):
    response = client.put("/files/ghost.txt", json={})

    assert response.status_code == 422


def test__unreadable_file__returns_500_envelope(client: TestClient, storage_dir):
    (storage_dir / "binary.bin").write_bytes(b"\xff\xfe\x00\x80")

    response = client.get("/files/binary.bin")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"message": "Error interno del servidor"}
