"""In-memory book catalogue served over HTTP."""

from __future__ import annotations

import argparse
import json
import threading
from dataclasses import dataclass
from typing import Any, Iterable

from flask import Flask, Response, request

DEFAULT_PORT = 8080


@dataclass
class Book:
    """A single catalogue entry."""

    id: int
    title: str
    author: str

    def to_dict(self) -> dict[str, Any]:
        """Return the book as a JSON-ready mapping."""
        return {"id": self.id, "title": self.title, "author": self.author}


class BookNotFound(LookupError):
    """Raised when no book carries the requested id."""

    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book not found: {book_id}")
        self.book_id = book_id


def default_books() -> list[Book]:
    """Return the catalogue the server starts with."""
    return [
        Book(1, "The Hitchhiker's Guide to the Galaxy", "Douglas Adams"),
        Book(2, "Pride and Prejudice", "Jane Austen"),
    ]


class BookStore:
    """Thread-safe in-memory collection of books with increasing ids."""

    def __init__(self, books: Iterable[Book] | None = None) -> None:
        self._books = list(books) if books is not None else default_books()
        self._next_id = max((book.id for book in self._books), default=0) + 1
        self._lock = threading.Lock()

    def all(self) -> list[Book]:
        """Return every book in insertion order."""
        with self._lock:
            return list(self._books)

    def _find(self, book_id: int) -> Book:
        for book in self._books:
            if book.id == book_id:
                return book
        raise BookNotFound(book_id)

    def get(self, book_id: int) -> Book:
        """Return the book with the given id."""
        with self._lock:
            return self._find(book_id)

    def add(self, title: str, author: str) -> Book:
        """Store a new book under the next free id and return it."""
        with self._lock:
            book = Book(self._next_id, title, author)
            self._next_id += 1
            self._books.append(book)
            return book

    def update(
        self, book_id: int, title: str | None = None, author: str | None = None
    ) -> Book:
        """Change the given fields of a book; fields left as None stay as they are."""
        with self._lock:
            book = self._find(book_id)
            if title is not None:
                book.title = title
            if author is not None:
                book.author = author
            return book

    def delete(self, book_id: int) -> Book:
        """Remove a book and return it."""
        with self._lock:
            book = self._find(book_id)
            self._books.remove(book)
            return book


class _PayloadError(ValueError):
    pass


def _json_response(payload: Any, status: int = 200) -> Response:
    body = json.dumps(payload, indent=4, sort_keys=True, ensure_ascii=False)
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


def create_app(store: BookStore | None = None) -> Flask:
    """Build the book API application around a store."""
    books = store if store is not None else BookStore()
    app = Flask(__name__)

    @app.route("/books", methods=["GET", "POST"])
    def book_collection() -> Response:
        if request.method == "GET":
            return _json_response([book.to_dict() for book in books.all()])
        try:
            payload = _read_json()
            if not (_has(payload, "title") and _has(payload, "author")):
                return _text_response(
                    "Missing required fields: title and author", 400
                )
            title = _string_field(payload, "title")
            author = _string_field(payload, "author")
        except ValueError as exc:
            return _text_response(f"Invalid JSON: {exc}", 400)
        book = books.add(title, author)
        return _json_response(
            {"message": "Book added successfully", "book": book.to_dict()}, 201
        )

    @app.route(
        "/books/<int(signed=True):book_id>", methods=["GET", "PUT", "DELETE"]
    )
    def book_item(book_id: int) -> Response:
        try:
            book = books.get(book_id)
        except BookNotFound:
            return _text_response("Book not found", 404)

        if request.method == "GET":
            return _json_response(book.to_dict())

        if request.method == "PUT":
            try:
                payload = _read_json()
                title = (
                    _string_field(payload, "title")
                    if _has(payload, "title")
                    else None
                )
                author = (
                    _string_field(payload, "author")
                    if _has(payload, "author")
                    else None
                )
            except ValueError as exc:
                return _text_response(f"Invalid JSON: {exc}", 400)
            try:
                book = books.update(book_id, title, author)
            except BookNotFound:
                return _text_response("Book not found", 404)
            return _json_response(
                {"message": "Book updated successfully", "book": book.to_dict()}
            )

        try:
            books.delete(book_id)
        except BookNotFound:
            return _text_response("Book not found", 404)
        return _json_response(
            {"message": "Book deleted successfully", "id": book_id}
        )

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the book API server."""
    parser = argparse.ArgumentParser(
        prog="crowjourney-books", description="Serve the book catalogue API."
    )
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    print(f"Server starting on http://localhost:{args.port}", flush=True)
    create_app().run(host=args.host, port=args.port, threaded=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())