# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from aws_xray_sdk.core import patch_all

# Patch all supported libraries
patch_all()

import base64
import json
from dataclasses import dataclass
from typing import Any, Optional

from .config import Settings
from .logs import log_event, logger
from .responses import Created, Failed, Invalid, MissingBody, Outcome, error_detail, to_response
from .store import MoviesTable, put_movie, to_item
from .validation import MovieValidator, load_validator


@dataclass(frozen=True)
class Dependencies:
    settings: Settings
    table: Any
    validator: MovieValidator


# Built on the first invocation and reused for the lifetime of the process.
_dependencies: Optional[Dependencies] = None


def build_dependencies(settings: Settings) -> Dependencies:
    logger.setLevel(settings.log_level)
    validator = load_validator(settings.schema_path, settings.schema_definition)
    table = MoviesTable(settings.table_name, settings.region)
    return Dependencies(settings=settings, table=table, validator=validator)


def dependencies() -> Dependencies:
    global _dependencies
    if _dependencies is None:
        _dependencies = build_dependencies(Settings.from_env())
    return _dependencies


def read_body(event):
    raw = event.get("body")
    if raw and event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")
    return raw


def _reject_constant(name):
    raise ValueError(f"Invalid JSON value: {name}")


def parse_body(raw):
    # NaN and Infinity are not JSON.
    return json.loads(raw, parse_constant=_reject_constant)


def is_missing(body) -> bool:
    # Same notion of "no body" as a falsy JSON value: null, false, 0 or "".
    return body in (None, False, 0, "")


def add_movie(event, deps: Dependencies) -> Outcome:
    """Validate the event body and write it to the movies table.

    Returns the outcome for missing and invalid bodies. Parse and store
    errors are raised to the caller.
    """
    raw = read_body(event)
    if not raw:
        return MissingBody()

    body = parse_body(raw)
    if is_missing(body):
        return MissingBody()

    if not deps.validator.is_valid(body):
        return Invalid(schema=deps.validator.schema,
                       errors=deps.validator.error_messages(body))

    item = to_item(body)
    put_movie(deps.table, item)
    return Created(item=item)


def _log_outcome(outcome, request_id, table_name):
    if isinstance(outcome, Created):
        log_event("INFO", "Movie added",
                  request_id=request_id,
                  table_name=table_name,
                  item_id=outcome.item.get("id") if isinstance(outcome.item, dict) else None,
                  result="success")
    elif isinstance(outcome, MissingBody):
        log_event("WARNING", "Request without body",
                  request_id=request_id)
    elif isinstance(outcome, Invalid):
        log_event("WARNING", "Body does not match the schema",
                  request_id=request_id,
                  validation_errors=outcome.errors)
    else:
        log_event("ERROR", "Request failed",
                  request_id=request_id,
                  table_name=table_name,
                  error_type=type(outcome.error).__name__,
                  error=error_detail(outcome.error))


def handler(event, context):
    request_id = getattr(context, "aws_request_id", None)
    table_name = None
    try:
        log_event("INFO", "Processing request",
                  request_id=request_id,
                  event=event)
        deps = dependencies()
        table_name = deps.settings.table_name
        outcome = add_movie(event, deps)
    except Exception as error:
        outcome = Failed(error)

    _log_outcome(outcome, request_id, table_name)
    return to_response(outcome)
