from __future__ import annotations

from fastapi.testclient import TestClient


def test_hello(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "Hello world!"


def test_echo_returns_body(client: TestClient) -> None:
    response = client.post("/echo", content=b"ping \xc3\xa9")

    assert response.status_code == 200
    assert response.content == b"ping \xc3\xa9"


def test_echo_empty_body(client: TestClient) -> None:
    response = client.post("/echo")

    assert response.status_code == 200
    assert response.text == ""


def test_hey(client: TestClient) -> None:
    response = client.get("/hey/bob")

    assert response.status_code == 200
    assert response.text == "Hey there! bob"
