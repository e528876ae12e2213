#!/usr/bin/env python3
import os
import aws_cdk as cdk
from infrastructure.stack import TransactionsStack

app = cdk.App()

TransactionsStack(
    app,
    app.node.try_get_context("stackName") or "TransactionsStack",
    env=cdk.Environment(
        account=os.getenv("CDK_DEFAULT_ACCOUNT"),
        region=os.getenv("CDK_DEFAULT_REGION"),
    ),
)

app.synth()
