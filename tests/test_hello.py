import pytest

from crowjourney.hello import create_app, main


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "Hello, World from Crow!"


def test_greet_value(client):
    resp = client.get("/alice")
    assert resp.get_data(as_text=True) == "Hello, World! alice"


def test_users_get(client):
    resp = client.get("/users")
    assert resp.get_data(as_text=True) == "method get passé"


def test_users_post_with_admin(client):
    resp = client.post("/users?admin=yes")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "method post passé yes"


def test_users_other_method(client):
    assert client.delete("/users").status_code == 405


def test_nested_path_not_found(client):
    assert client.get("/a/b").status_code == 404


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit):
        main(["--port", "x"])