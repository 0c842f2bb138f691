[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crowjourney"
version = "1.0.0"
description = "Small in-memory JSON HTTP services for books and users, plus a greeting server"
requires-python = ">=3.10"
keywords = ["http", "rest", "json", "flask", "crud", "server"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
book-api-server = "crowjourney.books:main"
hello-server = "crowjourney.hello:main"
user-app = "crowjourney.users:main"

[tool.hatch.build.targets.wheel]
packages = ["crowjourney"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
