"""S3 bucket for static website hosting."""

from aws_cdk import aws_s3 as s3
from constructs import Construct

from ..config import BucketConfig, PublicAccessBlock


def to_block_public_access(block: PublicAccessBlock | None) -> s3.BlockPublicAccess | None:
  if block is None:
    return None
  return s3.BlockPublicAccess(
    block_public_acls=block.block_public_acls,
    ignore_public_acls=block.ignore_public_acls,
    block_public_policy=block.block_public_policy,
    restrict_public_buckets=block.restrict_public_buckets,
  )


class WebsiteBucket(Construct):
  """S3 bucket configured for static website hosting.

  The configuration is validated before the bucket is declared, so an
  inconsistent public access setup fails synthesis with a ConfigError.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    config: BucketConfig,
  ) -> None:
    super().__init__(scope, id)

    config.validate()

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=config.bucket_name,
      website_index_document=config.index_document,
      website_error_document=config.error_document,
      public_read_access=config.public_read_access,
      block_public_access=to_block_public_access(config.block_public_access),
      removal_policy=config.removal_policy,
      auto_delete_objects=config.cleans_up_objects,
    )
