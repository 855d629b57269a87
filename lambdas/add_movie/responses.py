# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from botocore.exceptions import ClientError

HEADERS = {"content-type": "application/json"}

MISSING_BODY_MESSAGE = "Missing request body"
INVALID_BODY_MESSAGE = "Incorrect type. Must match the Movie schema"
CREATED_MESSAGE = "Movie added"


@dataclass(frozen=True)
class Created:
    item: Any


@dataclass(frozen=True)
class MissingBody:
    pass


@dataclass(frozen=True)
class Invalid:
    schema: Dict[str, Any]
    errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Failed:
    error: BaseException


Outcome = Union[Created, MissingBody, Invalid, Failed]


def error_detail(error: BaseException) -> Dict[str, Any]:
    detail = {"name": type(error).__name__, "message": str(error)}
    if isinstance(error, ClientError):
        detail["code"] = error.response.get("Error", {}).get("Code")
    return detail


def build_response(status_code, payload):
    return {
        "statusCode": status_code,
        "headers": dict(HEADERS),
        "body": json.dumps(payload),
    }


def to_response(outcome: Outcome):
    if isinstance(outcome, Created):
        return build_response(201, {"message": CREATED_MESSAGE})
    if isinstance(outcome, MissingBody):
        return build_response(500, {"message": MISSING_BODY_MESSAGE})
    if isinstance(outcome, Invalid):
        return build_response(500, {"message": INVALID_BODY_MESSAGE, "schema": outcome.schema})
    if isinstance(outcome, Failed):
        return build_response(500, {"error": error_detail(outcome.error)})
    raise TypeError(f"Unknown outcome: {outcome!r}")
