import os

# Must be set before aws_xray_sdk is imported by the handler modules.
os.environ.setdefault("AWS_XRAY_SDK_ENABLED", "false")
os.environ.setdefault("AWS_XRAY_CONTEXT_MISSING", "LOG_ERROR")

import json
from types import SimpleNamespace

import pytest

from lambdas.add_movie import index
from lambdas.add_movie.config import DEFAULT_SCHEMA_PATH, Settings
from lambdas.add_movie.validation import MovieValidator, load_validator


class FakeTable:
    def __init__(self, key="id", error=None):
        self.key = key
        self.error = error
        self.items = {}
        self.put_calls = []

    def put_item(self, Item):
        self.put_calls.append(Item)
        if self.error is not None:
            raise self.error
        self.items[Item[self.key]] = Item
        return {"ResponseMetadata": {"HTTPStatusCode": 200}}


@pytest.fixture
def schema_document():
    with open(DEFAULT_SCHEMA_PATH, encoding="utf-8") as schema_file:
        return json.load(schema_file)


@pytest.fixture
def movie_validator():
    return load_validator(DEFAULT_SCHEMA_PATH, "Movie")


@pytest.fixture
def title_year_validator():
    document = {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "definitions": {
            "Movie": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "year": {"type": "integer"},
                },
                "required": ["title", "year"],
            }
        },
    }
    return MovieValidator(document, "Movie")


@pytest.fixture
def settings():
    return Settings(table_name="Movies", region="eu-west-1")


@pytest.fixture
def table():
    return FakeTable()


@pytest.fixture
def deps(settings, table, movie_validator):
    return index.Dependencies(settings=settings, table=table, validator=movie_validator)


@pytest.fixture
def install_deps(monkeypatch, deps):
    monkeypatch.setattr(index, "_dependencies", deps)
    return deps


@pytest.fixture
def lambda_context():
    return SimpleNamespace(aws_request_id="c6af9ac6-7b61-11e6-9a41-93e8deadbeef")


def _make_event(body=None, **extra):
    event = {"httpMethod": "POST", "path": "/movies", "requestContext": {}}
    if body is not None:
        event["body"] = body if isinstance(body, str) else json.dumps(body)
    event.update(extra)
    return event


@pytest.fixture
def make_event():
    return _make_event


@pytest.fixture
def title_table():
    return FakeTable(key="title")
