from datetime import datetime, timezone

import pytest

from config import ClientConfig, ConfigError, HandlerConfig
from submissions import utc_timestamp


def test_handler_config_from_env():
    config = HandlerConfig.from_env(
        {"DYNAMODB_TABLE_NAME": "t", "SNS_TOPIC_ARN": "arn", "ALLOWED_ORIGIN": "https://site"}
    )
    assert config == HandlerConfig("t", "arn", "https://site")


def test_handler_config_names_missing_variables():
    with pytest.raises(ConfigError) as excinfo:
        HandlerConfig.from_env({"DYNAMODB_TABLE_NAME": "t"})
    assert "SNS_TOPIC_ARN" in str(excinfo.value)
    assert "ALLOWED_ORIGIN" in str(excinfo.value)


def test_client_config_timeout_is_optional():
    assert ClientConfig.from_env({"CONTACT_ENDPOINT_URL": "https://api/contact"}).timeout is None
    config = ClientConfig.from_env({"CONTACT_ENDPOINT_URL": "https://api/contact", "CONTACT_TIMEOUT": "2.5"})
    assert config.timeout == 2.5


def test_client_config_rejects_bad_timeout():
    with pytest.raises(ConfigError):
        ClientConfig.from_env({"CONTACT_ENDPOINT_URL": "https://api/contact", "CONTACT_TIMEOUT": "soon"})


def test_timestamp_is_utc_iso_with_millis():
    now = datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
    assert utc_timestamp(now) == "2024-05-01T12:00:00.123Z"
