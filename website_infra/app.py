#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import os
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk

from website_infra.config import Config
from website_infra.stacks import StaticWebsiteStack


def build_app(app: cdk.App, config: Config) -> list[StaticWebsiteStack]:
  """Create a stack for each configured website."""
  stacks = []
  for website in config.websites:
    stacks.append(
      StaticWebsiteStack(
        app,
        website.name,
        website_config=website,
        env=cdk.Environment(
          account=website.account or os.environ.get("CDK_DEFAULT_ACCOUNT"),
          region=website.region,
        ),
        description=website.description or f"Static website hosted on S3: {website.name}",
      )
    )
  return stacks


def main() -> None:
  """Create CDK app with one stack per configured website."""
  app = cdk.App()

  config_path = app.node.try_get_context("config") or "website.yaml"
  config = Config.from_yaml(Path(config_path))

  build_app(app, config)

  app.synth()


if __name__ == "__main__":
  main()
