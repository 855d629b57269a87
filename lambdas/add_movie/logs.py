# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import json
import logging
from datetime import datetime, timezone

SERVICE_NAME = "add-movie"

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def log_event(level, message, **kwargs):
    """Log structured JSON events for operational monitoring"""
    log_entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "level": level,
        "message": message,
        "service": SERVICE_NAME,
        **kwargs
    }
    logger.log(logging.getLevelName(level), json.dumps(log_entry, default=str))
