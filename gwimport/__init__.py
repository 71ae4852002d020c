"""API Gateway import resolver for Serverless service documents."""

__version__ = "0.1.0"
