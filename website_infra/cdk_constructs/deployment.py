"""Asset deployment of the local website tree into the bucket."""

from pathlib import Path

from aws_cdk import Stack
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct

from ..config import ConfigError


class WebsiteDeployment(Construct):
  """Uploads a directory into a bucket declared in the same stack."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    source: Path,
    destination_key_prefix: str | None = None,
    prune: bool = True,
    retain_on_delete: bool = False,
  ) -> None:
    super().__init__(scope, id)

    if Stack.of(bucket).node.path != Stack.of(self).node.path:
      raise ConfigError(
        f"Deployment '{id}' must target a bucket declared in stack "
        f"'{Stack.of(self).stack_name}', got one from '{Stack.of(bucket).stack_name}'"
      )
    if not Path(source).is_dir():
      raise ConfigError(f"Deployment '{id}' source directory not found: {source}")

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "Deployment",
      sources=[s3_deploy.Source.asset(str(source))],
      destination_bucket=bucket,
      destination_key_prefix=destination_key_prefix,
      prune=prune,
      retain_on_delete=retain_on_delete,
    )
