"""
Response envelope handling.

Every endpoint answers with either ``{"success": true, "data": ...}`` or
``{"success": false, "error": {"code", "message"}, "creditsRefunded"?,
"creditsRemaining"?}``. Only ``success`` tells the two apart.
"""

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from pydantic import ValidationError as PydanticValidationError

from crawlkit.core.exceptions import ResponseParseError, create_error_from_response


class ApiErrorDetail(BaseModel):
    """The ``error`` object of a failure envelope."""

    code: str = "UNKNOWN"
    message: str = "An unknown error occurred"


class ApiFailureEnvelope(BaseModel):
    """
    Failure side of the envelope.

    Credit fields stay None when absent and are never coerced: a boolean or
    numeric string fails validation.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    error: ApiErrorDetail | None = None
    credits_refunded: StrictInt | StrictFloat | None = Field(default=None, alias="creditsRefunded")
    credits_remaining: StrictInt | StrictFloat | None = Field(default=None, alias="creditsRemaining")


def unwrap_envelope(response: httpx.Response) -> Any:
    """
    Return the payload of a success envelope or raise the classified error.

    The ``data`` member is returned as parsed, without any shape checks.

    Args:
        response: Response returned by the transport

    Returns:
        The envelope's ``data`` member

    Raises:
        ResponseParseError: Body is not JSON, not an object, or a malformed
                            failure envelope. Carries the response's status,
                            even when that status is 2xx.
        APIError: The classified failure reported by the API
    """
    status = response.status_code

    try:
        payload = response.json()
    except ValueError as e:
        raise ResponseParseError(status) from e

    if not isinstance(payload, dict):
        raise ResponseParseError(status)

    if payload.get("success") is True:
        return payload.get("data")

    try:
        failure = ApiFailureEnvelope.model_validate(payload)
    except PydanticValidationError as e:
        raise ResponseParseError(status) from e

    detail = failure.error or ApiErrorDetail()
    raise create_error_from_response(
        detail.code,
        detail.message,
        status,
        failure.credits_refunded,
        failure.credits_remaining,
    )
