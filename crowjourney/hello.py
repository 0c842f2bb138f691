"""Minimal greeting server."""

from __future__ import annotations

import argparse

from flask import Flask, Response, request

DEFAULT_PORT = 9080


def create_app() -> Flask:
    """Build the greeting application."""
    app = Flask(__name__)

    @app.route("/")
    def index() -> str:
        return "Hello, World from Crow!"

    @app.route("/<value>")
    def greet(value: str) -> str:
        return "Hello, World! " + value

    @app.route("/users", methods=["GET", "POST"])
    def users() -> Response:
        if request.method == "POST":
            admin = request.args.get("admin", "")
            return Response("method post passé " + admin, mimetype="text/plain")
        return Response("method get passé", mimetype="text/plain")

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the greeting server."""
    parser = argparse.ArgumentParser(
        prog="crowjourney-hello", description="Serve greeting routes."
    )
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port, threaded=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())