import boto3
import os
import sys
from botocore.exceptions import ClientError

STACK_NAME = "TransactionsStack"

# Substrings of CDK output keys -> env var names the Rust binary reads
OUTPUT_ENV_VARS = {
    "TransactionsTableName": "TRANSACTIONS_TABLE",
}


def collect_env(outputs, region):
    config = {}
    for o in outputs:
        key = o['OutputKey']
        # CDK generates unique IDs in output keys, so we check for substring
        for fragment, env_var in OUTPUT_ENV_VARS.items():
            if fragment in key:
                config[env_var] = o['OutputValue']

    if not config:
        return {}

    config["AWS_REGION"] = region or "us-east-1"
    return config


def main(stack_name=STACK_NAME, env_path=None):
    cfn = boto3.client('cloudformation')

    print(f"Fetching outputs for stack: {stack_name}...")
    try:
        response = cfn.describe_stacks(StackName=stack_name)
    except ClientError as e:
        print(f"Error fetching stack {stack_name}: {e}")
        print("Please ensure the stack is deployed and the name is correct.")
        return 1

    outputs = response['Stacks'][0].get('Outputs', [])
    config = collect_env(outputs, boto3.session.Session().region_name)

    if not config:
        print("No relevant outputs found. Is the stack deployed?")
        return 1

    if env_path is None:
        env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")

    env_content = "\n".join([f"{k}={v}" for k, v in config.items()]) + "\n"

    print(f"Writing config to {env_path}...")
    with open(env_path, "w") as f:
        f.write(env_content)

    print("Done!")
    print("Next steps:")
    print("1. cargo lambda watch --env-file .env")
    return 0

if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
