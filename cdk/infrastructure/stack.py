from aws_cdk import (
    Stack,
    aws_dynamodb as dynamodb,
    RemovalPolicy,
    CfnOutput,
)
from constructs import Construct
from infrastructure.construct import TransactionsFunction

class TransactionsStack(Stack):
    """
    Stack that owns the transactions table and the Rust function bound to it.
    """
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # 1. DynamoDB Table
        self.transactions_table = dynamodb.Table(
            self, "TransactionsTable",
            partition_key=dynamodb.Attribute(name="user_id", type=dynamodb.AttributeType.STRING),
            sort_key=dynamodb.Attribute(name="todo_id", type=dynamodb.AttributeType.STRING),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY, # For dev/test
        )

        # 2. Rust Lambda
        self.transactions_fn = TransactionsFunction(
            self, "TransactionsFunction",
            transactions_table=self.transactions_table,
        )

        # Outputs
        CfnOutput(self, "TransactionsTableName", value=self.transactions_table.table_name)
        CfnOutput(self, "TransactionsFunctionName", value=self.transactions_fn.function.function_name)
