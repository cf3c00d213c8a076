"""CDK stack for a single S3 hosted website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from website_infra.cdk_constructs import StaticWebsite
from website_infra.config import WebsiteConfig


class StaticWebsiteStack(cdk.Stack):
  """Stack for a single static website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    website_config: WebsiteConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.site = StaticWebsite(
      self,
      "Site",
      bucket_config=website_config.bucket,
      deployment_config=website_config.deployment,
    )
    bucket = self.site.bucket.bucket

    # Outputs live on the stack so their keys stay stable
    cdk.CfnOutput(
      self,
      "WebsiteURL",
      value=bucket.bucket_website_url,
      description="S3 website endpoint URL",
    )
    cdk.CfnOutput(
      self,
      "BucketName",
      value=bucket.bucket_name,
      description="S3 bucket name",
    )

    cdk.Tags.of(self).add("Project", "static-website")
    for key, value in website_config.tags.items():
      cdk.Tags.of(self).add(key, value)
