import logging

import boto3

from submissions import Submission

logger = logging.getLogger(__name__)


class SubmissionStore:
    """Contact form submissions kept in a DynamoDB table, keyed by submissionId."""

    def __init__(self, table):
        self.table = table

    @classmethod
    def from_config(cls, config):
        dynamodb = boto3.resource("dynamodb")
        return cls(dynamodb.Table(config.table_name))

    def put(self, submission: Submission):
        item = submission.to_item()
        logger.info("🧾 Writing submission %s to DynamoDB...", submission.submission_id)
        # Records are never overwritten; a colliding id fails the write.
        self.table.put_item(
            Item=item,
            ConditionExpression="attribute_not_exists(submissionId)",
        )
        logger.info("Successfully wrote to DynamoDB: %s", item)

    def get(self, submission_id):
        response = self.table.get_item(Key={"submissionId": submission_id})
        item = response.get("Item")
        return Submission.from_item(item) if item else None


# DynamoDB Table Setup

# The table only needs a string partition key:

# aws dynamodb create-table \
#   --table-name PortfolioContactSubmissions \
#   --attribute-definitions AttributeName=submissionId,AttributeType=S \
#   --key-schema AttributeName=submissionId,KeyType=HASH \
#   --billing-mode PAY_PER_REQUEST

# Stored item:

# {
#   "submissionId": "5d1c0c1e-8f0a-4a59-9d7b-0b8f3f2f9e11",
#   "timestamp": "2024-05-01T12:00:00.123Z",
#   "name": "Ada",
#   "email": "ada@example.com",
#   "phone": "N/A",
#   "message": "Hello",
#   "ipAddress": "203.0.113.7"
# }

# The Lambda role needs dynamodb:PutItem (and dynamodb:GetItem to read records back).
