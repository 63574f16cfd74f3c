"""lambdapush — build, zip and push a Go function to AWS Lambda."""

__version__ = "0.1.0"
