# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "shared" / "types.schema.json"
DEFAULT_SCHEMA_DEFINITION = "Movie"


@dataclass(frozen=True)
class Settings:
    table_name: Optional[str]
    region: Optional[str]
    schema_path: Path = DEFAULT_SCHEMA_PATH
    schema_definition: str = DEFAULT_SCHEMA_DEFINITION
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Read settings from the process environment.

        TABLE_NAME and REGION are not checked here; a missing value shows up
        as an error from DynamoDB on the first write.
        """
        env = os.environ if environ is None else environ
        return cls(
            table_name=env.get("TABLE_NAME"),
            region=env.get("REGION") or None,
            schema_path=Path(env.get("SCHEMA_PATH") or DEFAULT_SCHEMA_PATH),
            schema_definition=env.get("SCHEMA_DEFINITION") or DEFAULT_SCHEMA_DEFINITION,
            log_level=_log_level(env.get("LOG_LEVEL")),
        )


def _log_level(value):
    level = (value or "INFO").upper()
    # getLevelName returns a string for names it does not know.
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level
