# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from decimal import Decimal

import boto3
from aws_xray_sdk.core import xray_recorder


def create_table(table_name, region=None):
    dynamodb = boto3.resource("dynamodb", region_name=region)
    return dynamodb.Table(table_name)


class MoviesTable:
    """DynamoDB table resource created on the first write.

    A missing table name or region only fails the write path, not requests
    that never reach the store.
    """

    def __init__(self, name, region=None):
        self.name = name
        self.region = region
        self._table = None

    def put_item(self, **kwargs):
        if self._table is None:
            self._table = create_table(self.name, self.region)
        return self._table.put_item(**kwargs)


def to_item(value):
    # The boto3 resource layer does not accept float.
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {key: to_item(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_item(item) for item in value]
    return value


@xray_recorder.capture("put_movie")
def put_movie(table, item):
    # Single write, no condition: an existing item with the same key is replaced.
    return table.put_item(Item=item)
