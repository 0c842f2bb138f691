"""In-memory user directory served over HTTP."""

from __future__ import annotations

import argparse
import json
import threading
from dataclasses import dataclass
from typing import Any, Iterable

from flask import Flask, Response, request

DEFAULT_PORT = 9080


@dataclass
class User:
    """A user record."""

    id: int
    name: str
    email: str

    def to_json(self) -> dict[str, Any]:
        """Return the user as a JSON-ready mapping."""
        return {"id": self.id, "name": self.name, "email": self.email}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "User":
        """Build a user from a mapping with id, name and email."""
        return cls(id=data["id"], name=data["name"], email=data["email"])


class UserNotFound(LookupError):
    """Raised when no user carries the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


def default_users() -> list[User]:
    """Return the users the server starts with."""
    return [
        User(1, "John Doe", "john.doe@example.com"),
        User(2, "Jane Doe", "jane.doe@example.com"),
    ]


class UserStore:
    """Thread-safe in-memory collection of users."""

    def __init__(self, users: Iterable[User] | None = None) -> None:
        self._users = list(users) if users is not None else default_users()
        self._lock = threading.RLock()

    def all(self) -> list[User]:
        """Return every user in insertion order."""
        with self._lock:
            return list(self._users)

    def next_id(self) -> int:
        """Return one more than the highest id in use, or 1 when empty."""
        with self._lock:
            return max((user.id for user in self._users), default=0) + 1

    def find(self, user_id: int) -> User:
        """Return the user with the given id."""
        with self._lock:
            for user in self._users:
                if user.id == user_id:
                    return user
        raise UserNotFound(user_id)

    def add(self, name: str, email: str) -> User:
        """Store a new user and return it."""
        with self._lock:
            user = User(self.next_id(), name, email)
            self._users.append(user)
            return user

    def update(
        self, user_id: int, name: str | None = None, email: str | None = None
    ) -> User:
        """Change the given fields of a user; fields left as None stay as they are."""
        with self._lock:
            user = self.find(user_id)
            if name is not None:
                user.name = name
            if email is not None:
                user.email = email
            return user

    def delete(self, user_id: int) -> User:
        """Remove a user and return it."""
        with self._lock:
            user = self.find(user_id)
            self._users.remove(user)
            return user


class _PayloadError(ValueError):
    pass


def _json_response(payload: Any, status: int = 200) -> Response:
    body = json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
    return Response(body, status=status, mimetype="application/json")


def _text_response(text: str, status: int) -> Response:
    return Response(text, status=status, mimetype="text/plain")


def _has(payload: Any, key: str) -> bool:
    return isinstance(payload, dict) and key in payload


def _string_field(payload: dict[str, Any], key: str) -> str:
    value = payload[key]
    if not isinstance(value, str):
        raise _PayloadError(
            f"{key} must be a string, but is {type(value).__name__}"
        )
    return value


def _read_json() -> Any:
    return json.loads(request.get_data(as_text=True))


def create_app(store: UserStore | None = None) -> Flask:
    """Build the user API application around a store."""
    users = store if store is not None else UserStore()
    app = Flask(__name__)

    @app.get("/users")
    def list_users() -> Response:
        return _json_response([user.to_json() for user in users.all()])

    @app.post("/users")
    def create_user() -> Response:
        try:
            payload = _read_json()
            if not (_has(payload, "name") and _has(payload, "email")):
                return _text_response("Name and email are required", 400)
            name = _string_field(payload, "name")
            email = _string_field(payload, "email")
        except ValueError as exc:
            return _text_response(f"Invalid JSON: {exc}", 400)
        return _json_response(users.add(name, email).to_json(), 201)

    @app.get("/users/<int(signed=True):user_id>")
    def get_user(user_id: int) -> Response:
        try:
            return _json_response(users.find(user_id).to_json())
        except UserNotFound:
            return _text_response("User not found", 404)

    @app.put("/users/<int(signed=True):user_id>")
    def update_user(user_id: int) -> Response:
        try:
            users.find(user_id)
        except UserNotFound:
            return _text_response("User not found", 404)
        try:
            payload = _read_json()
            name = _string_field(payload, "name") if _has(payload, "name") else None
            email = (
                _string_field(payload, "email") if _has(payload, "email") else None
            )
        except ValueError as exc:
            return _text_response(f"Invalid JSON: {exc}", 400)
        try:
            user = users.update(user_id, name, email)
        except UserNotFound:
            return _text_response("User not found", 404)
        return _json_response(user.to_json())

    @app.delete("/users/<int(signed=True):user_id>")
    def delete_user(user_id: int) -> Response:
        try:
            users.delete(user_id)
        except UserNotFound:
            return _text_response("User not found", 404)
        return Response(status=204)

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the user API server."""
    parser = argparse.ArgumentParser(
        prog="crowjourney-users", description="Serve the user directory API."
    )
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port, threaded=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())