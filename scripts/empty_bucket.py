#!/usr/bin/env python3
"""Empty a website bucket so `cdk destroy` can delete it.

Only needed when the bucket was deployed without auto_delete_objects;
CloudFormation refuses to delete a bucket that still holds objects.
"""

import argparse
import sys
from collections.abc import Iterator
from typing import Any

import boto3

# DeleteObjects accepts at most 1000 keys per request
BATCH_SIZE = 1000


def _object_versions(s3: Any, bucket_name: str) -> Iterator[dict[str, str]]:
  """Yield every object version and delete marker in the bucket."""
  paginator = s3.get_paginator("list_object_versions")
  for page in paginator.paginate(Bucket=bucket_name):
    for item in page.get("Versions", []) + page.get("DeleteMarkers", []):
      yield {"Key": item["Key"], "VersionId": item["VersionId"]}


def empty_bucket(bucket_name: str, region: str = "us-east-1", dry_run: bool = False) -> int:
  """Delete all objects, versions and delete markers from a bucket.

  Args:
    bucket_name: Name of the bucket to empty
    region: AWS region
    dry_run: Only count what would be deleted

  Returns:
    Number of object versions deleted (or that would be deleted)

  Raises:
    RuntimeError: If S3 reports per-object delete errors
  """
  s3 = boto3.client("s3", region_name=region)

  count = 0
  batch: list[dict[str, str]] = []
  for obj in _object_versions(s3, bucket_name):
    batch.append(obj)
    if len(batch) == BATCH_SIZE:
      count += _delete_batch(s3, bucket_name, batch, dry_run)
      batch = []
  if batch:
    count += _delete_batch(s3, bucket_name, batch, dry_run)

  return count


def _delete_batch(s3: Any, bucket_name: str, batch: list[dict[str, str]], dry_run: bool) -> int:
  if dry_run:
    return len(batch)

  response = s3.delete_objects(
    Bucket=bucket_name,
    Delete={"Objects": batch, "Quiet": True},
  )
  errors = response.get("Errors", [])
  if errors:
    first = errors[0]
    raise RuntimeError(
      f"Failed to delete {len(errors)} objects from {bucket_name}: "
      f"{first.get('Key')}: {first.get('Message')}"
    )
  return len(batch)


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(description="Empty a website bucket before teardown")
  parser.add_argument(
    "bucket_name",
    help="Bucket name (see the BucketName stack output)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )
  parser.add_argument(
    "--dry-run",
    action="store_true",
    help="Count objects without deleting them",
  )
  args = parser.parse_args()

  try:
    count = empty_bucket(args.bucket_name, args.region, args.dry_run)
  except Exception as e:
    print(f"Error emptying bucket: {e}", file=sys.stderr)
    sys.exit(1)

  if args.dry_run:
    print(f"Would delete {count} objects from {args.bucket_name}")
  else:
    print(f"✓ Deleted {count} objects from {args.bucket_name}")


if __name__ == "__main__":
  main()
