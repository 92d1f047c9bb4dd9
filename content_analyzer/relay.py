"""
Relay between the demo form and the external analysis webhook.

The webhook does the actual SEO analysis. This module validates the form
submission, forwards it under a deadline and classifies whatever comes back.
"""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import httpx

from content_analyzer import config
from content_analyzer.models import AnalysisRequest, AnalysisResponse

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Content URL and Target Keyword are required."
GENERIC_FAILURE_MESSAGE = "Failed to run analysis. Please try again."
UNEXPECTED_FORMAT_MESSAGE = "Unexpected response format from analysis service."


class RelayError(Exception):
    """Base exception for relay failures. Carries the HTTP status to reply with."""
    status_code = 500

    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE):
        super().__init__(message)
        self.message = message


class MissingFieldsError(RelayError):
    """URL or target keyword missing or blank."""
    status_code = 400

    def __init__(self, message: str = REQUIRED_FIELDS_MESSAGE):
        super().__init__(message)


class AnalysisTimeoutError(RelayError):
    """The webhook did not answer before the deadline."""
    status_code = 408


class UpstreamError(RelayError):
    """The webhook answered with an error status or an unreadable body."""
    status_code = 502


class TransportError(RelayError):
    """The webhook could not be reached."""
    status_code = 500


def _reject_constant(token: str):
    # NaN and Infinity are not JSON and cannot be sent back to the browser
    raise ValueError(f"Non-standard JSON constant: {token}")


def describe_timeout(seconds: float) -> str:
    """Human wording for a deadline, e.g. 120 -> '2 minutes'."""
    if seconds >= 60 and seconds % 60 == 0:
        minutes = int(seconds // 60)
        return f"{minutes} minute{'s' if minutes != 1 else ''}"
    return f"{seconds:g} seconds"


class WebhookRelay:
    """
    Forwards analysis requests to the webhook and normalizes the outcome.

    Attributes:
        webhook_url: URL the request is POSTed to
        timeout: deadline in seconds for the whole outbound call
        user: placeholder identity block sent with every request
    """

    def __init__(
        self,
        webhook_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user: Optional[Dict[str, str]] = None,
    ):
        self.webhook_url = webhook_url or config.WEBHOOK_URL
        self.timeout = timeout if timeout is not None else config.ANALYSIS_TIMEOUT_SECONDS
        self.user = user or {"id": config.DEMO_USER_ID, "email": config.DEMO_USER_EMAIL}
        self.headers = {"Content-Type": "application/json"}

    @property
    def timeout_message(self) -> str:
        return (
            f"Analysis timed out after {describe_timeout(self.timeout)}. "
            "Please try again with a simpler URL."
        )

    def build_payload(self, request: AnalysisRequest) -> Dict[str, Any]:
        """Fixed-shape webhook body. Raises MissingFieldsError on blank required fields."""
        if request.missing_required():
            raise MissingFieldsError()
        return {
            "inputs": request.to_webhook_inputs(),
            "user": dict(self.user),
            "credentials": {},
        }

    async def analyze(self, request: AnalysisRequest, request_id: str = "-") -> AnalysisResponse:
        """
        Run one analysis through the webhook.

        Args:
            request: The submitted form fields
            request_id: Tag used to correlate log lines

        Returns:
            The webhook's decoded JSON payload, untouched.

        Raises:
            MissingFieldsError: url or targetKeyword blank; the webhook is not called
            AnalysisTimeoutError: no answer before the deadline
            UpstreamError: error status or unreadable body from the webhook
            TransportError: network-level failure
        """
        payload = self.build_payload(request)
        logger.info(f"[{request_id}] Forwarding analysis for {payload['inputs']['content.url']} to webhook")

        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                response = await asyncio.wait_for(
                    client.post(self.webhook_url, json=payload, headers=self.headers),
                    timeout=self.timeout,
                )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning(f"[{request_id}] Webhook call exceeded {self.timeout:g}s deadline")
            raise AnalysisTimeoutError(self.timeout_message)
        except httpx.RequestError as e:
            logger.error(f"[{request_id}] Network error calling webhook: {e}")
            raise TransportError(str(e) or GENERIC_FAILURE_MESSAGE)

        return self._parse_response(response, request_id)

    def _parse_response(self, response: httpx.Response, request_id: str) -> AnalysisResponse:
        """Classify the webhook reply and decode its body."""
        if not response.is_success:
            logger.error(f"[{request_id}] Webhook error response ({response.status_code}): {response.text}")
            raise UpstreamError(
                f"Analysis service returned an error ({response.status_code}). Please try again."
            )

        content_type = response.headers.get("content-type", "")
        try:
            data = json.loads(response.text, parse_constant=_reject_constant)
        except ValueError:
            logger.error(
                f"[{request_id}] Could not decode webhook body (content-type '{content_type}'): {response.text[:500]}"
            )
            raise UpstreamError(UNEXPECTED_FORMAT_MESSAGE)

        if "application/json" not in content_type:
            # Misconfigured webhook nodes sometimes send JSON as text/plain
            logger.warning(f"[{request_id}] Webhook sent JSON with content-type '{content_type}'")
        logger.info(f"[{request_id}] Webhook analysis received")
        return data
