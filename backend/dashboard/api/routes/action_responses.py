"""Action Responses — ActionResult -> HTTP response.

Invariants:
    - Redirect -> 303 See Other with Location (form POST -> GET listing)
    - Ok -> 200 with the handler body
    - Failure -> {"message", "errors"?, "code"} with status chosen by Failure.code
"""

from fastapi import status
from fastapi.responses import JSONResponse, RedirectResponse, Response

from dashboard.core.action_result import ActionResult, Failure, Ok, Redirect
from dashboard.core.domain_types import FailureCode

_STATUS_BY_CODE: dict[FailureCode, int] = {
    FailureCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    FailureCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    FailureCode.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureCode.ACTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    FailureCode.SIGN_IN_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_response(result: ActionResult) -> Response:
    """Translate a handler result into the response the client sees."""
    match result:
        case Redirect(target=target):
            return RedirectResponse(target, status_code=status.HTTP_303_SEE_OTHER)
        case Ok(body=body):
            return JSONResponse(body)
        case Failure(code=code):
            return JSONResponse(
                status_code=_STATUS_BY_CODE[code],
                content={**result.to_state(), "code": code.value},
            )
