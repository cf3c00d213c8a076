"""CDK infrastructure for an S3 hosted static website."""
