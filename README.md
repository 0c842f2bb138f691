# crowjourney

This package provides three small HTTP services built on Flask. The book and
user services keep their data in memory. Their data returns to its starting
state each time a service restarts.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Commands

Each command takes `--host` and `--port`. The default host is `0.0.0.0`.

| Command           | Module                | Default port |
|-------------------|-----------------------|--------------|
| `book-api-server` | `crowjourney.books`   | 8080         |
| `user-app`        | `crowjourney.users`   | 9080         |
| `hello-server`    | `crowjourney.hello`   | 9080         |

```
book-api-server --port 8080
```

## Book API

The catalogue holds two books at startup. A new book gets the next id in a
rising sequence. With the starting catalogue that sequence begins at 3.
Deleting a book does not make its id available again.

| Method | Path          | Behaviour                                                          |
|--------|---------------|--------------------------------------------------------------------|
| GET    | `/books`      | Returns all books as a JSON array.                                 |
| POST   | `/books`      | Creates a book from `{"title", "author"}` and returns 201 with `{"message", "book"}`. |
| GET    | `/books/<id>` | Returns one book, or 404 `Book not found`.                         |
| PUT    | `/books/<id>` | Updates `title` and/or `author` and returns `{"message", "book"}`.  |
| DELETE | `/books/<id>` | Removes the book and returns `{"message", "id"}`.                  |

Responses are JSON, indented by four spaces, with sorted keys. If the body is
not valid JSON, or if a field is not a string, the response is 400 with a
message that starts with `Invalid JSON: `. A POST that lacks either field gets
400 `Missing required fields: title and author`.

## User API

The directory holds two users at startup. A new user gets an id one higher
than the highest id in use, or 1 when the directory is empty.

| Method | Path          | Behaviour                                                  |
|--------|---------------|------------------------------------------------------------|
| GET    | `/users`      | Returns all users as a JSON array.                         |
| POST   | `/users`      | Creates a user from `{"name", "email"}` and returns 201.   |
| GET    | `/users/<id>` | Returns one user, or 404 `User not found`.                 |
| PUT    | `/users/<id>` | Updates `name` and/or `email` and returns the user.        |
| DELETE | `/users/<id>` | Removes the user and returns 204 with no content.          |

Responses are JSON, indented by two spaces, with sorted keys. A POST that
lacks either field gets 400 `Name and email are required`. If the body is not
valid JSON, the response is 400 with a message that starts with `Invalid JSON: `.

## Greeting server

- `GET /` returns `Hello, World from Crow!`.
- `GET /<name>` returns `Hello, World! <name>`.
- `GET /users` returns `method get passé`.
- `POST /users?admin=<value>` returns `method post passé <value>`.

## Use from Python

Each module provides `create_app`, which returns a Flask application. The
books and users modules also provide the stores `BookStore` and `UserStore`,
along with the dataclasses `Book` and `User`. A store raises `BookNotFound`
or `UserNotFound` when an id is unknown.

```python
from crowjourney.books import BookStore, create_app, default_books

store = BookStore(default_books())
store.add("Dune", "Frank Herbert")

client = create_app(store).test_client()
print(client.get("/books").get_json())
```

## Limitations

- The services do not persist data. Nothing is written to disk or to a
  database.
- The services have no authentication or access control.