# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import json

from jsonschema import Draft7Validator
from jsonschema.validators import validator_for

from .logs import log_event


class MovieValidator:
    """Validates request bodies against one definition of a schema document.

    The document is checked against its meta-schema when the validator is
    built. References inside the definition resolve against the whole
    document, so ``{"$ref": "#/definitions/..."}`` works as it does in the
    generated ``types.schema.json``.
    """

    def __init__(self, document, definition="Movie"):
        validator_cls = validator_for(document, default=Draft7Validator)
        validator_cls.check_schema(document)

        self.definition = definition
        self.schema = document.get("definitions", {}).get(definition)
        if self.schema is None:
            log_event("WARNING", "Schema definition not found, accepting any body",
                      definition=definition)
            self.schema = {}
            self._validator = validator_cls({})
        else:
            self._validator = validator_cls(
                {**document, "$ref": f"#/definitions/{definition}"}
            )

    def is_valid(self, instance) -> bool:
        return self._validator.is_valid(instance)

    def error_messages(self, instance):
        messages = []
        for error in self._validator.iter_errors(instance):
            location = "/".join(str(part) for part in error.absolute_path) or "<body>"
            messages.append(f"{location}: {error.message}")
        return messages


def load_validator(path, definition="Movie") -> MovieValidator:
    with open(path, encoding="utf-8") as schema_file:
        document = json.load(schema_file)
    return MovieValidator(document, definition)
