#!/usr/bin/env python3
# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import aws_cdk as cdk

from stacks.movies_api_stack import MoviesApiStack

app = cdk.App()
MoviesApiStack(app, "MoviesApiStack")

app.synth()
