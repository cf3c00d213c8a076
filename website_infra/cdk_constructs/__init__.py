"""CDK constructs for static website infrastructure."""

from .deployment import WebsiteDeployment
from .static_site import StaticWebsite
from .storage import WebsiteBucket

__all__ = [
  "StaticWebsite",
  "WebsiteBucket",
  "WebsiteDeployment",
]
