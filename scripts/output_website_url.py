#!/usr/bin/env python3
"""Print the website URL of a deployed static website stack."""

import argparse
import sys

import boto3
from botocore.exceptions import ClientError

OUTPUT_KEY = "WebsiteURL"


class StackOutputError(Exception):
  """Raised when a stack or one of its outputs cannot be found."""


def get_stack_output(
  stack_name: str,
  output_key: str = OUTPUT_KEY,
  region: str = "us-east-1",
) -> str:
  """Read a single output value from a CloudFormation stack.

  Args:
    stack_name: The CDK stack name (e.g., 'CdkS3WebsiteStack')
    output_key: Output logical ID
    region: AWS region

  Returns:
    The output value

  Raises:
    StackOutputError: If the stack does not exist or lacks the output
  """
  cloudformation = boto3.client("cloudformation", region_name=region)

  try:
    response = cloudformation.describe_stacks(StackName=stack_name)
  except ClientError as e:
    if e.response["Error"]["Code"] == "ValidationError":
      raise StackOutputError(f"Stack not found: {stack_name}") from e
    raise

  stacks = response.get("Stacks", [])
  if not stacks:
    raise StackOutputError(f"Stack not found: {stack_name}")

  for output in stacks[0].get("Outputs", []):
    if output["OutputKey"] == output_key:
      return str(output["OutputValue"])

  raise StackOutputError(f"Stack {stack_name} has no output named {output_key}")


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Print the website URL of a deployed static website stack"
  )
  parser.add_argument(
    "stack_name",
    help="CDK stack name (e.g., CdkS3WebsiteStack)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )
  parser.add_argument(
    "--output-key",
    default=OUTPUT_KEY,
    help=f"Stack output to print (default: {OUTPUT_KEY})",
  )

  args = parser.parse_args()

  try:
    url = get_stack_output(args.stack_name, args.output_key, args.region)
  except Exception as e:
    print(f"Error retrieving stack output: {e}", file=sys.stderr)
    sys.exit(1)

  print(url)


if __name__ == "__main__":
  main()
