import os

from aws_cdk import (
    aws_lambda as lambda_,
    aws_dynamodb as dynamodb,
    aws_logs as logs,
    RemovalPolicy,
)
from constructs import Construct
from infrastructure.errors import ConfigurationError

TABLE_ENV_VAR = "TRANSACTIONS_TABLE"

RUNTIME = lambda_.Runtime.PROVIDED_AL2023
MEMORY_SIZE_MIB = 256
HANDLER = "my_rust_binary"
# Output of `cargo lambda build`, relative to the cdk/ directory
ARTIFACT_PATH = "../target/lambda"


class TransactionsFunction(Construct):
    """
    A Construct that deploys the pre-built Rust binary as a Lambda function
    with read/write access to an existing transactions table.
    """
    def __init__(self, scope: Construct, construct_id: str = "TransactionsFunction", *,
                 transactions_table: dynamodb.ITable) -> None:
        if transactions_table is None:
            raise ConfigurationError("transactions_table is required")

        # Nothing may be registered under scope until the table checks out
        table_name = getattr(transactions_table, "table_name", None)
        if table_name is None or not callable(getattr(transactions_table, "grant_read_write_data", None)):
            raise ConfigurationError(
                f"transactions_table must be a DynamoDB table, got {type(transactions_table).__name__}"
            )

        super().__init__(scope, construct_id)

        self.table = transactions_table

        self.function = lambda_.Function(
            self,
            "Function",
            runtime=RUNTIME,
            handler=HANDLER,
            code=lambda_.Code.from_asset(os.path.join(os.getcwd(), ARTIFACT_PATH)),
            memory_size=MEMORY_SIZE_MIB,
            environment={
                TABLE_ENV_VAR: table_name,
            },
        )

        # Claim the function's default log group so retention is managed here
        self.log_group = logs.LogGroup(
            self,
            "LogGroup",
            log_group_name=f"/aws/lambda/{self.function.function_name}",
            retention=logs.RetentionDays.ONE_WEEK,
            removal_policy=RemovalPolicy.DESTROY,
        )

        # Grant function permissions to the table
        transactions_table.grant_read_write_data(self.function)
