"""Composite construct for an S3 hosted static website."""

from constructs import Construct

from ..config import BucketConfig, DeploymentConfig
from .deployment import WebsiteDeployment
from .storage import WebsiteBucket


class StaticWebsite(Construct):
  """Static website hosted directly from S3.

  Creates:
  - S3 bucket with website hosting enabled
  - Bucket deployment uploading the local asset tree
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_config: BucketConfig,
    deployment_config: DeploymentConfig,
  ) -> None:
    super().__init__(scope, id)

    deployment_config.validate(bucket_config)

    self.bucket = WebsiteBucket(self, bucket_config.id, config=bucket_config)

    self.deployment = WebsiteDeployment(
      self,
      deployment_config.id,
      bucket=self.bucket.bucket,
      source=deployment_config.source,
      destination_key_prefix=deployment_config.destination_key_prefix,
      prune=deployment_config.prune,
      retain_on_delete=deployment_config.retain_on_delete,
    )
