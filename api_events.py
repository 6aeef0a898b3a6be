# API Gateway Trigger — Portfolio Contact Form

# Use case: Accept contact form submissions from the portfolio site with no servers.

# Example Event:

# A POST request hits /contact with {"name": ..., "email": ..., "phone": ..., "message": ...}
# (browsers send an OPTIONS pre-flight first because the site lives on another origin).

import base64
import json
import logging
import os

from aws_databases import SubmissionStore
from aws_messages import SubmissionNotifier
from config import HandlerConfig
from submissions import (
    NOT_AVAILABLE,
    REQUIRED_MESSAGE,
    Accepted,
    InternalError,
    Submission,
    ValidationFailure,
    missing_fields,
    new_submission_id,
    utc_timestamp,
)

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "POST,OPTIONS"
ALLOWED_HEADERS = "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token"
FAILURE_MESSAGE = "Failed to submit form."


def cors_headers(origin):
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


def json_response(status, payload, origin):
    headers = cors_headers(origin)
    headers["Content-Type"] = "application/json"
    return {"statusCode": status, "headers": headers, "body": json.dumps(payload)}


def request_method(event):
    # REST API (v1) payloads carry httpMethod, HTTP API (v2) payloads requestContext.http.method
    method = event.get("httpMethod")
    if not method:
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method")
    return (method or "").upper()


def source_ip(event):
    context = event.get("requestContext") or {}
    ip = (context.get("identity") or {}).get("sourceIp") or (context.get("http") or {}).get("sourceIp")
    return ip or NOT_AVAILABLE


def parse_body(event):
    body = event.get("body")
    if event.get("isBase64Encoded") and body is not None:
        body = base64.b64decode(body).decode("utf-8")
    return json.loads(body)


class SubmissionHandler:
    """Validates, stores and announces one contact form submission per request."""

    def __init__(self, config, store, notifier, id_factory=None, clock=None):
        self.config = config
        self.store = store
        self.notifier = notifier
        self.id_factory = id_factory or new_submission_id
        self.clock = clock or utc_timestamp

    def handle(self, event):
        if request_method(event) == "OPTIONS":
            logger.info("Received OPTIONS request. Sending CORS preflight headers.")
            return self.preflight_response()
        return self.to_response(self.process(event))

    def preflight_response(self):
        # 204 carries no Content-Type
        return {"statusCode": 204, "headers": cors_headers(self.config.allowed_origin), "body": ""}

    def process(self, event):
        try:
            form_data = parse_body(event)

            missing = missing_fields(form_data)
            if missing:
                logger.info("Rejected submission, missing: %s", ", ".join(missing))
                return ValidationFailure(REQUIRED_MESSAGE)

            submission = Submission(
                submission_id=self.id_factory(),
                timestamp=self.clock(),
                name=form_data["name"],
                email=form_data["email"],
                message=form_data["message"],
                phone=form_data.get("phone") or NOT_AVAILABLE,
                source_address=source_ip(event),
            )
            logger.info("📨 Contact form submission from %s (%s)", submission.name, submission.email)

            self.store.put(submission)
            self.notifier.publish(submission)
            return Accepted(submission)

        except Exception as e:
            logger.exception("❌ Error processing form submission: %s", e)
            return InternalError(str(e))

    def to_response(self, result):
        if isinstance(result, Accepted):
            status, payload = 200, {
                "message": "Form submitted successfully!",
                "submissionId": result.submission.submission_id,
            }
        elif isinstance(result, ValidationFailure):
            status, payload = 400, {"message": result.message}
        else:
            status, payload = 500, {"message": FAILURE_MESSAGE, "error": result.error}

        return json_response(status, payload, self.config.allowed_origin)


_handler = None


def get_handler():
    global _handler
    if _handler is None:
        config = HandlerConfig.from_env()
        _handler = SubmissionHandler(
            config,
            SubmissionStore.from_config(config),
            SubmissionNotifier.from_config(config),
        )
    return _handler


def lambda_handler(event, context):
    logging.getLogger().setLevel(logging.INFO)
    try:
        handler = get_handler()
    except Exception as e:
        logger.exception("❌ Could not set up the contact form handler: %s", e)
        return json_response(
            500,
            {"message": FAILURE_MESSAGE, "error": str(e)},
            os.environ.get("ALLOWED_ORIGIN", ""),
        )
    return handler.handle(event)


# Testing Locally

# sam local invoke "ContactFormFunction" -e event.json

# Example event.json:

# {
#   "httpMethod": "POST",
#   "body": "{\"name\": \"Ada\", \"email\": \"ada@example.com\", \"message\": \"Hello\"}",
#   "requestContext": {"identity": {"sourceIp": "203.0.113.7"}}
# }
