"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import aws_cdk as cdk
import pytest

from website_infra.config import BucketConfig, DeploymentConfig, WebsiteConfig


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=cdk.Environment(region="us-east-1"))


@pytest.fixture
def website_dir(tmp_path: Path) -> Path:
  """Create a small asset tree to deploy."""
  site = tmp_path / "website"
  site.mkdir()
  (site / "index.html").write_text("<h1>Hello</h1>\n")
  (site / "error.html").write_text("<h1>404</h1>\n")
  return site


@pytest.fixture
def website_config(website_dir: Path) -> WebsiteConfig:
  """A publicly readable website that cleans up after itself."""
  return WebsiteConfig(
    name="TestWebsite",
    bucket=BucketConfig(id="SiteBucket", error_document="error.html"),
    deployment=DeploymentConfig(source=website_dir, destination="SiteBucket"),
  )
