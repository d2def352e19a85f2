"""
Standardized API response utilities.

This module turns core ``ServiceResponse`` envelopes and transport errors
into the JSON bodies every endpoint returns:

    {"success": true, "message": "...", "data": ...}
    {"success": false, "error": {"message": "...", "code": "..."}}
"""

from typing import Any, Dict, Optional
from fastapi import status
from fastapi.responses import JSONResponse

from src.schemas.response import ServiceResponse


def success_response(
    data: Any = None,
    message: Optional[str] = None
) -> Dict[str, Any]:
    """
    Create a standardized success response.

    Args:
        data: The response data
        message: Optional success message

    Returns:
        Dict with standardized success response format
    """
    response = {"success": True}

    if message:
        response["message"] = message

    if data is not None:
        response["data"] = data

    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Create a standardized error response.

    Args:
        message: Error message
        code: Optional error code
        details: Optional additional error details

    Returns:
        Dict with standardized error response format
    """
    error = {"message": message}

    if code:
        error["code"] = code

    if details:
        error["details"] = details

    return {
        "success": False,
        "error": error
    }


def envelope_response(
    envelope: ServiceResponse,
    success_status: int = status.HTTP_200_OK
) -> JSONResponse:
    """
    Convert a core envelope into a JSONResponse.

    Failures whose message reports a missing entity map to 404, every other
    failure to 400.

    Args:
        envelope: Outcome returned by a repository or service
        success_status: HTTP status for a successful outcome

    Returns:
        JSONResponse with standardized format
    """
    if envelope.success:
        payload = envelope.model_dump(mode="json")
        return JSONResponse(
            content=success_response(payload["data"], payload["message"]),
            status_code=success_status
        )

    if "not found" in envelope.message.lower():
        return JSONResponse(
            content=error_response(envelope.message, code="not_found"),
            status_code=status.HTTP_404_NOT_FOUND
        )

    return JSONResponse(
        content=error_response(envelope.message, code="request_failed"),
        status_code=status.HTTP_400_BAD_REQUEST
    )
