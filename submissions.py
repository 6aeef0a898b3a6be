import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

NOT_AVAILABLE = "N/A"
REQUIRED_FIELDS = ("name", "email", "message")
REQUIRED_MESSAGE = "Name, email, and message are required."


def new_submission_id() -> str:
    return str(uuid.uuid4())


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.123Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Submission:
    submission_id: str
    timestamp: str
    name: str
    email: str
    message: str
    phone: str = NOT_AVAILABLE
    source_address: str = NOT_AVAILABLE

    def to_item(self) -> dict:
        """DynamoDB item for this submission (partition key: submissionId)."""
        return {
            "submissionId": self.submission_id,
            "timestamp": self.timestamp,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "message": self.message,
            "ipAddress": self.source_address,
        }

    @classmethod
    def from_item(cls, item: dict) -> "Submission":
        return cls(
            submission_id=item["submissionId"],
            timestamp=item["timestamp"],
            name=item["name"],
            email=item["email"],
            message=item["message"],
            phone=item.get("phone") or NOT_AVAILABLE,
            source_address=item.get("ipAddress") or NOT_AVAILABLE,
        )


def missing_fields(form_data) -> list:
    """Required fields that are absent or empty in a parsed request body."""
    if not isinstance(form_data, dict):
        return list(REQUIRED_FIELDS)
    return [field for field in REQUIRED_FIELDS if not form_data.get(field)]


# --- Handler results ---
# The handler decides on one of these; api_events.to_response turns it into
# an API Gateway response.


@dataclass(frozen=True)
class Accepted:
    submission: Submission


@dataclass(frozen=True)
class ValidationFailure:
    message: str


@dataclass(frozen=True)
class InternalError:
    error: str


Result = Union[Accepted, ValidationFailure, InternalError]
