# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from aws_cdk import (
    BundlingOptions,
    Stack,
    aws_dynamodb as dynamodb_,
    aws_lambda as lambda_,
    aws_apigateway as apigw_,
    aws_cloudwatch as cloudwatch_,
    aws_logs as logs_,
    Duration,
    RemovalPolicy,
)
from constructs import Construct

TABLE_NAME = "Movies"


class MoviesApiStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Create DynamoDb Table
        movies_table = dynamodb_.Table(
            self,
            TABLE_NAME,
            partition_key=dynamodb_.Attribute(
                name="id", type=dynamodb_.AttributeType.NUMBER
            ),
            billing_mode=dynamodb_.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,
        )

        # Create the Lambda function to receive the request.
        # jsonschema and aws-xray-sdk are not in the runtime, so they are bundled.
        add_movie_fn = lambda_.Function(
            self,
            "AddMovieFn",
            runtime=lambda_.Runtime.PYTHON_3_12,
            code=lambda_.Code.from_asset(
                "lambdas",
                bundling=BundlingOptions(
                    image=lambda_.Runtime.PYTHON_3_12.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output && cp -au . /asset-output",
                    ],
                ),
            ),
            handler="add_movie.index.handler",
            memory_size=128,
            timeout=Duration.seconds(10),
            tracing=lambda_.Tracing.ACTIVE,
            log_retention=logs_.RetentionDays.SIX_MONTHS,
            environment={
                "TABLE_NAME": movies_table.table_name,
                "REGION": self.region,
            },
        )

        # grant permission to lambda to write to movies table
        movies_table.grant_write_data(add_movie_fn)

        # API Gateway Access Logs Log Group
        api_log_group = logs_.LogGroup(
            self,
            "ApiGatewayAccessLogs",
            retention=logs_.RetentionDays.SIX_MONTHS,
            removal_policy=RemovalPolicy.DESTROY,
        )

        # Create API Gateway
        api = apigw_.RestApi(
            self,
            "MoviesApi",
            description="Movies API",
            deploy_options=apigw_.StageOptions(
                stage_name="dev",
                tracing_enabled=True,
                access_log_destination=apigw_.LogGroupLogDestination(api_log_group),
                access_log_format=apigw_.AccessLogFormat.json_with_standard_fields(
                    caller=True,
                    http_method=True,
                    ip=True,
                    protocol=True,
                    request_time=True,
                    resource_path=True,
                    response_length=True,
                    status=True,
                    user=True,
                ),
            ),
            default_cors_preflight_options=apigw_.CorsOptions(
                allow_headers=["Content-Type", "X-Amz-Date"],
                allow_methods=["OPTIONS", "POST"],
                allow_origins=["*"],
            ),
        )

        movies_endpoint = api.root.add_resource("movies")
        movies_endpoint.add_method(
            "POST", apigw_.LambdaIntegration(add_movie_fn, proxy=True)
        )

        # CloudWatch Alarms
        cloudwatch_.Alarm(
            self,
            "AddMovieErrorAlarm",
            metric=add_movie_fn.metric_errors(),
            threshold=1,
            evaluation_periods=1,
            alarm_description="Alert when the add-movie function errors",
        )
