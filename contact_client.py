# Contact Form Controller

# Use case: Collect the four contact fields from a form view, validate them,
# post them as JSON to the contact endpoint and report the outcome back.

# The view is anything implementing FormView (a browser binding, a TUI or a test double).

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import requests

logger = logging.getLogger(__name__)

FIELDS = ("name", "email", "phone", "message")

SUCCESS_MESSAGE = "Thank you for your message! We will get back to you soon."
CONNECTION_MESSAGE = "There was a problem sending your message. Please check your internet connection."


class FormStatus(enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    DONE = "done"


class FormView(Protocol):
    def value(self, field: str) -> str: ...

    def is_required(self, field: str) -> bool: ...

    def focus(self, field: str) -> None: ...

    def show_message(self, text: str, error: bool = False) -> None: ...

    def clear_message(self) -> None: ...

    def reset(self) -> None: ...

    # Disable the submit button and show the spinner while SUBMITTING
    def render_status(self, status: FormStatus) -> None: ...


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


# First failing field, checked in form order, or None
def validate_fields(values: dict, phone_required: bool = False) -> Optional[FieldError]:
    if not values["name"]:
        return FieldError("name", "Please enter your name")
    email = values["email"]
    if not email or "@" not in email or "." not in email:
        return FieldError("email", "Please enter a valid email address")
    if phone_required and not values["phone"]:
        return FieldError("phone", "Please enter your phone number")
    if not values["message"]:
        return FieldError("message", "Please enter your message")
    return None


def error_message(response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        text = data.get("message") or data.get("error")
        if text:
            return str(text)
    return f"Request failed with status {response.status_code}"


class ContactFormController:
    def __init__(self, view: FormView, config, session: Optional[requests.Session] = None):
        self.view = view
        self.config = config
        self.session = session or requests.Session()
        self.status = FormStatus.IDLE

    def _set_status(self, status: FormStatus):
        self.status = status
        self.view.render_status(status)

    def collect(self) -> dict:
        return {field: (self.view.value(field) or "").strip() for field in FIELDS}

    def submit(self, event=None) -> bool:
        # True only when the server accepted the submission
        if event is not None:
            event.prevent_default()

        values = self.collect()
        failure = validate_fields(values, phone_required=self.view.is_required("phone"))
        if failure:
            self.view.show_message(failure.message, error=True)
            self.view.focus(failure.field)
            return False

        self._set_status(FormStatus.SUBMITTING)
        self.view.clear_message()
        try:
            return self._send(values)
        finally:
            self._set_status(FormStatus.DONE)

    def _send(self, values: dict) -> bool:
        try:
            response = self.session.post(
                self.config.endpoint_url,
                json=values,
                headers={"Content-Type": "application/json", "Accept": "application/json"},
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            logger.error("Network or other error: %s", e)
            self.view.show_message(CONNECTION_MESSAGE, error=True)
            return False

        if 200 <= response.status_code < 300:
            self.view.show_message(SUCCESS_MESSAGE)
            self.view.reset()
            return True

        text = error_message(response)
        logger.warning("Form submission error (%s): %s", response.status_code, text)
        self.view.show_message(text, error=True)
        return False
