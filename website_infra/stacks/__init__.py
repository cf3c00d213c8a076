"""CDK stacks for static website infrastructure."""

from .site_stack import StaticWebsiteStack

__all__ = ["StaticWebsiteStack"]
