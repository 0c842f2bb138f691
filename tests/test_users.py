import pytest

from crowjourney.users import (
    User,
    UserNotFound,
    UserStore,
    create_app,
    default_users,
    main,
)


@pytest.fixture
def client():
    app = create_app(UserStore(default_users()))
    app.config["TESTING"] = True
    return app.test_client()


def test_user_json_round_trip():
    user = User(5, "Ann", "ann@example.com")
    assert User.from_json(user.to_json()) == user


def test_from_json_missing_key():
    with pytest.raises(KeyError):
        User.from_json({"id": 1, "name": "Ann"})


def test_default_users():
    users = default_users()
    assert [u.email for u in users] == ["john.doe@example.com", "jane.doe@example.com"]


def test_next_id_empty_store():
    assert UserStore([]).next_id() == 1


def test_next_id_reuses_after_deleting_highest():
    store = UserStore(default_users())
    added = store.add("Ann", "ann@example.com")
    assert added.id == 3
    store.delete(added.id)
    assert store.next_id() == added.id


def test_find_missing_raises():
    with pytest.raises(UserNotFound):
        UserStore(default_users()).find(10)


def test_update_partial():
    store = UserStore(default_users())
    user = store.update(1, email="jd@example.com")
    assert user.name == "John Doe"
    assert store.find(1).email == "jd@example.com"


def test_list_users(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    assert [u["name"] for u in resp.get_json()] == ["John Doe", "Jane Doe"]


def test_list_users_format(client):
    text = client.get("/users").get_data(as_text=True)
    assert text.startswith('[\n  {\n    "email": "john.doe@example.com"')


def test_create_user(client):
    resp = client.post("/users", json={"name": "Ann", "email": "ann@example.com"})
    assert resp.status_code == 201
    assert resp.get_json() == {"id": 3, "name": "Ann", "email": "ann@example.com"}
    assert len(client.get("/users").get_json()) == 3


def test_create_user_missing_field(client):
    resp = client.post("/users", json={"name": "Ann"})
    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "Name and email are required"


def test_create_user_invalid_json(client):
    resp = client.post("/users", data="{oops")
    assert resp.status_code == 400
    assert resp.get_data(as_text=True).startswith("Invalid JSON: ")


def test_create_user_non_string_name(client):
    resp = client.post("/users", json={"name": 1, "email": "ann@example.com"})
    assert resp.status_code == 400
    assert resp.get_data(as_text=True).startswith("Invalid JSON: ")


def test_get_user(client):
    resp = client.get("/users/2")
    assert resp.status_code == 200
    assert resp.get_json()["email"] == "jane.doe@example.com"


def test_get_missing_user(client):
    resp = client.get("/users/99")
    assert resp.status_code == 404
    assert resp.get_data(as_text=True) == "User not found"


def test_update_user(client):
    resp = client.put("/users/1", json={"name": "Johnny"})
    assert resp.status_code == 200
    assert resp.get_json() == {"id": 1, "name": "Johnny", "email": "john.doe@example.com"}


def test_update_missing_user(client):
    assert client.put("/users/99", json={"name": "X"}).status_code == 404


def test_update_invalid_json(client):
    resp = client.put("/users/1", data="bad")
    assert resp.status_code == 400
    assert resp.get_data(as_text=True).startswith("Invalid JSON: ")


def test_delete_user(client):
    resp = client.delete("/users/1")
    assert resp.status_code == 204
    assert resp.get_data() == b""
    assert client.get("/users/1").status_code == 404


def test_delete_missing_user(client):
    resp = client.delete("/users/99")
    assert resp.status_code == 404
    assert resp.get_data(as_text=True) == "User not found"


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit):
        main(["--port", "x"])