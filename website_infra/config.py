"""Configuration loader for static website stacks."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy


class ConfigError(ValueError):
  """Raised when a website configuration is invalid or inconsistent."""


REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}


@dataclass(frozen=True)
class PublicAccessBlock:
  """The four S3 public access block flags."""

  block_public_acls: bool = True
  ignore_public_acls: bool = True
  block_public_policy: bool = True
  restrict_public_buckets: bool = True

  @classmethod
  def block_all(cls) -> "PublicAccessBlock":
    return cls()

  @classmethod
  def block_acls(cls) -> "PublicAccessBlock":
    """Block ACL based access but allow a public bucket policy."""
    return cls(
      block_public_acls=True,
      ignore_public_acls=True,
      block_public_policy=False,
      restrict_public_buckets=False,
    )

  @classmethod
  def none(cls) -> "PublicAccessBlock":
    return cls(
      block_public_acls=False,
      ignore_public_acls=False,
      block_public_policy=False,
      restrict_public_buckets=False,
    )

  @classmethod
  def from_value(cls, value: str | dict[str, Any]) -> "PublicAccessBlock":
    """Build from a preset name or a mapping of flags.

    Flags missing from a mapping default to True, like S3 itself.
    """
    if isinstance(value, str):
      presets = {
        "block_all": cls.block_all,
        "block_acls": cls.block_acls,
        "none": cls.none,
      }
      preset = presets.get(value.lower())
      if preset is None:
        raise ConfigError(
          f"Unknown block_public_access preset '{value}' "
          f"(expected one of: {', '.join(presets)})"
        )
      return preset()

    if isinstance(value, dict):
      unknown = set(value) - set(cls.__dataclass_fields__)
      if unknown:
        raise ConfigError(
          f"Unknown block_public_access flags: {', '.join(sorted(unknown))}"
        )
      return cls(
        **{k: _flag(value, k, "block_public_access", nullable=False) for k in value}
      )

    raise ConfigError(
      f"block_public_access must be a preset name or a mapping, got {type(value).__name__}"
    )

  def blocking_flags(self) -> list[str]:
    """Flags that stop a public bucket policy from granting read access."""
    flags = []
    if self.block_public_policy:
      flags.append("block_public_policy")
    if self.restrict_public_buckets:
      flags.append("restrict_public_buckets")
    return flags


@dataclass
class BucketConfig:
  """Configuration for the website bucket."""

  id: str = "WebsiteBucket"
  bucket_name: str | None = None
  index_document: str = "index.html"
  error_document: str | None = None
  public_read_access: bool = True
  block_public_access: PublicAccessBlock | None = field(
    default_factory=PublicAccessBlock.block_acls
  )
  removal_policy: RemovalPolicy = RemovalPolicy.DESTROY
  auto_delete_objects: bool | None = None

  @property
  def cleans_up_objects(self) -> bool:
    """Whether objects are emptied automatically when the stack is destroyed."""
    if self.auto_delete_objects is None:
      return self.removal_policy == RemovalPolicy.DESTROY
    return self.auto_delete_objects

  def validate(self) -> None:
    """Check that the public access and cleanup settings agree.

    Raises:
      ConfigError: If public read is requested while the access block
        disallows it, or auto-delete is requested on a kept bucket
    """
    if self.public_read_access:
      if self.block_public_access is None:
        raise ConfigError(
          f"Bucket '{self.id}' requests public_read_access but leaves "
          "block_public_access unset; S3 blocks public policies by default. "
          "Use 'block_acls' or 'none'."
        )
      blocking = self.block_public_access.blocking_flags()
      if blocking:
        raise ConfigError(
          f"Bucket '{self.id}' requests public_read_access but "
          f"block_public_access sets {', '.join(blocking)}. "
          "Set them to false or use the 'block_acls' preset."
        )

    if self.auto_delete_objects and self.removal_policy != RemovalPolicy.DESTROY:
      raise ConfigError(
        f"Bucket '{self.id}' sets auto_delete_objects but its removal_policy "
        "is not destroy"
      )


@dataclass
class DeploymentConfig:
  """Configuration for uploading the asset tree into the bucket."""

  source: Path
  destination: str
  id: str = "DeployWebsite"
  destination_key_prefix: str | None = None
  prune: bool = True
  retain_on_delete: bool = False

  def validate(self, bucket: BucketConfig) -> None:
    """Check the deployment against the bucket declared in the same stack."""
    if self.destination != bucket.id:
      raise ConfigError(
        f"Deployment '{self.id}' targets bucket '{self.destination}', "
        f"but the stack declares bucket '{bucket.id}'"
      )
    if not self.source.is_dir():
      raise ConfigError(
        f"Deployment '{self.id}' source directory not found: {self.source}"
      )


@dataclass
class WebsiteConfig:
  """Configuration for a single website stack."""

  name: str
  bucket: BucketConfig
  deployment: DeploymentConfig
  region: str = "us-east-1"
  account: str | None = None
  description: str | None = None
  tags: dict[str, str] = field(default_factory=dict)

  def validate(self) -> None:
    self.bucket.validate()
    self.deployment.validate(self.bucket)


@dataclass
class Config:
  """Multi-website configuration."""

  websites: list[WebsiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "website.yaml") -> "Config":
    """Load and validate configuration from a YAML file.

    Relative deployment sources resolve against the file's directory.
    """
    path = Path(path)
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    _require_mapping(data, f"Configuration file {path}")
    defaults = _require_mapping(data.get("defaults") or {}, "defaults")
    website_entries = data.get("websites") or []
    if not isinstance(website_entries, list):
      raise ConfigError(
        f"websites must be a list, got {type(website_entries).__name__}"
      )
    base_dir = path.resolve().parent
    websites: list[WebsiteConfig] = []

    for index, website_data in enumerate(website_entries):
      _require_mapping(website_data, f"websites[{index}]")
      # Merge defaults with website-specific config
      merged = {**defaults, **website_data}
      website = _parse_website(merged, base_dir)
      website.validate()
      websites.append(website)

    names = [w.name for w in websites]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
      raise ConfigError(f"Duplicate website names: {', '.join(duplicates)}")

    return cls(websites=websites)


def parse_removal_policy(value: str) -> RemovalPolicy:
  policy = REMOVAL_POLICIES.get(str(value).lower())
  if policy is None:
    raise ConfigError(
      f"Unknown removal_policy '{value}' "
      f"(expected one of: {', '.join(REMOVAL_POLICIES)})"
    )
  return policy


def _require_mapping(value: Any, what: str) -> dict[str, Any]:
  if not isinstance(value, dict):
    raise ConfigError(f"{what} must be a mapping, got {type(value).__name__}")
  return value


def _flag(
  data: dict[str, Any],
  key: str,
  context: str,
  default: Any = None,
  nullable: bool = True,
) -> Any:
  """Read a boolean flag, rejecting quoted values like "false"."""
  value = data.get(key, default)
  if value is None and nullable:
    return value
  if not isinstance(value, bool):
    raise ConfigError(
      f"{context} field '{key}' must be true or false, got {value!r}"
    )
  return value


def _parse_bucket(data: dict[str, Any]) -> BucketConfig:
  bucket = BucketConfig(
    id=data.get("id", "WebsiteBucket"),
    bucket_name=data.get("bucket_name"),
    index_document=data.get("index_document", "index.html"),
    error_document=data.get("error_document"),
    public_read_access=_flag(data, "public_read_access", "bucket", True, nullable=False),
    removal_policy=parse_removal_policy(data.get("removal_policy", "destroy")),
    auto_delete_objects=_flag(data, "auto_delete_objects", "bucket"),
  )

  # An explicit null leaves the access block unset
  if "block_public_access" in data:
    value = data["block_public_access"]
    bucket.block_public_access = (
      None if value is None else PublicAccessBlock.from_value(value)
    )

  return bucket


def _parse_website(data: dict[str, Any], base_dir: Path) -> WebsiteConfig:
  if not data.get("name"):
    raise ConfigError("Website entry is missing required field 'name'")

  bucket = _parse_bucket(_require_mapping(data.get("bucket") or {}, "bucket"))

  deployment_data = _require_mapping(data.get("deployment") or {}, "deployment")
  source = Path(deployment_data.get("source", "website"))
  if not source.is_absolute():
    source = base_dir / source

  deployment = DeploymentConfig(
    id=deployment_data.get("id", "DeployWebsite"),
    source=source,
    destination=deployment_data.get("destination", bucket.id),
    destination_key_prefix=deployment_data.get("destination_key_prefix"),
    prune=_flag(deployment_data, "prune", "deployment", True, nullable=False),
    retain_on_delete=_flag(
      deployment_data, "retain_on_delete", "deployment", False, nullable=False
    ),
  )

  return WebsiteConfig(
    name=data["name"],
    bucket=bucket,
    deployment=deployment,
    region=data.get("region", "us-east-1"),
    account=data.get("account"),
    description=data.get("description"),
    tags={str(k): str(v) for k, v in (data.get("tags") or {}).items()},
  )
