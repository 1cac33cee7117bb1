"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns.
These simplify error raising across services by eliminating the need to
specify status codes at each call site.

Usage:
    from app.utils.exceptions import NotFoundError
    raise NotFoundError("Car not found")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (car, manufacturer, price) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class UpstreamError(HTTPException):
    """502 Bad Gateway 예외 — 외부 서비스 호출 실패 시 사용.

    502 Bad Gateway exception.
    Returned when the pricing or maps service cannot be reached or answers
    with an error status or a malformed body.

    Args:
        detail: 오류 메시지 (Error message, default: "Upstream service unavailable")
    """

    def __init__(self, detail: str = "Upstream service unavailable") -> None:
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)
