# SNS Notification — New Submission Alert

# Use case: Tell the site owner a contact form was submitted.

# Subscribe an email address (or SMS number) to the topic and every
# submission arrives as one message.

import logging
import re

import boto3

logger = logging.getLogger(__name__)

SUBJECT_LIMIT = 99  # SNS wants fewer than 100 characters
CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def clean_subject(text):
    # SNS rejects subjects with line breaks or control characters
    return CONTROL_CHARS.sub(" ", text)[:SUBJECT_LIMIT]


def format_notification(submission):
    subject = f"New Portfolio Contact Form Submission ({submission.name})"
    message = (
        "New Contact Form Submission!\n\n"
        f"Name: {submission.name}\n"
        f"Email: {submission.email}\n"
        f"Phone: {submission.phone}\n"
        f"Message: {submission.message}\n"
        f"Timestamp: {submission.timestamp}\n"
        f"Submission ID: {submission.submission_id}\n"
        f"Source IP: {submission.source_address}"
    )
    return clean_subject(subject), message


class SubmissionNotifier:
    def __init__(self, sns_client, topic_arn):
        self.sns = sns_client
        self.topic_arn = topic_arn

    @classmethod
    def from_config(cls, config):
        return cls(boto3.client("sns"), config.topic_arn)

    def publish(self, submission):
        subject, message = format_notification(submission)
        response = self.sns.publish(TopicArn=self.topic_arn, Subject=subject, Message=message)
        logger.info("📦 Published submission %s to SNS.", submission.submission_id)
        return response["MessageId"]


# Real use:

# Email the owner on every submission

# Fan out to Slack/Chat via an HTTPS subscription

# The Lambda role needs sns:Publish on the topic.
