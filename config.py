# Configuration for the contact form handler and client.

# Set these in your Lambda environment variables (or via Terraform/CloudFormation):

# Variable	Example
# DYNAMODB_TABLE_NAME	PortfolioContactSubmissions
# SNS_TOPIC_ARN	arn:aws:sns:us-east-1:123456789012:portfolio-contact
# ALLOWED_ORIGIN	https://www.example.com

# The browser-side controller only needs the endpoint:

# CONTACT_ENDPOINT_URL	https://abc123.execute-api.us-east-1.amazonaws.com/prod/contact
# CONTACT_TIMEOUT	10   (optional, seconds)

import os
from dataclasses import dataclass
from typing import Optional


class ConfigError(Exception):
    """Raised when a required environment variable is missing."""


def _require(environ, *names):
    missing = [name for name in names if not environ.get(name)]
    if missing:
        raise ConfigError(f"Missing required environment variable(s): {', '.join(missing)}")
    return [environ[name] for name in names]


@dataclass(frozen=True)
class HandlerConfig:
    table_name: str
    topic_arn: str
    allowed_origin: str

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        table_name, topic_arn, allowed_origin = _require(
            environ, "DYNAMODB_TABLE_NAME", "SNS_TOPIC_ARN", "ALLOWED_ORIGIN"
        )
        return cls(table_name=table_name, topic_arn=topic_arn, allowed_origin=allowed_origin)


@dataclass(frozen=True)
class ClientConfig:
    endpoint_url: str
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        (endpoint_url,) = _require(environ, "CONTACT_ENDPOINT_URL")
        timeout = environ.get("CONTACT_TIMEOUT")
        try:
            return cls(endpoint_url=endpoint_url, timeout=float(timeout) if timeout else None)
        except ValueError:
            raise ConfigError(f"CONTACT_TIMEOUT must be a number of seconds, got {timeout!r}")
