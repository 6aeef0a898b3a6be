from unittest.mock import MagicMock

import pytest

from api_events import SubmissionHandler
from aws_databases import SubmissionStore
from aws_messages import SubmissionNotifier
from config import HandlerConfig

ORIGIN = "https://portfolio.example.com"
TOPIC_ARN = "arn:aws:sns:us-east-1:123456789012:portfolio-contact"


class FakeTable:
    """In-memory stand-in for a boto3 DynamoDB Table."""

    def __init__(self):
        self.items = {}
        self.put_calls = []

    def put_item(self, Item, **kwargs):
        self.put_calls.append((Item, kwargs))
        self.items[Item["submissionId"]] = dict(Item)
        return {}

    def get_item(self, Key):
        item = self.items.get(Key["submissionId"])
        return {"Item": item} if item else {}


@pytest.fixture
def config():
    return HandlerConfig(table_name="Submissions", topic_arn=TOPIC_ARN, allowed_origin=ORIGIN)


@pytest.fixture
def table():
    return FakeTable()


@pytest.fixture
def sns():
    client = MagicMock()
    client.publish.return_value = {"MessageId": "msg-1"}
    return client


@pytest.fixture
def handler(config, table, sns):
    return SubmissionHandler(
        config,
        SubmissionStore(table),
        SubmissionNotifier(sns, TOPIC_ARN),
        id_factory=lambda: "sub-123",
        clock=lambda: "2024-05-01T12:00:00.000Z",
    )
