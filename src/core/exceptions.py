from typing import Optional, Dict, Any


class AppError(Exception):
    status_code: int = 500

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class BadRequestError(AppError):
    status_code = 400


class ValidationFailedError(AppError):
    status_code = 400


class UnauthorizedError(AppError):
    status_code = 401


class NotFoundError(AppError):
    status_code = 404


class NewsNotFoundError(NotFoundError):
    def __init__(self, news_id: int):
        super().__init__(
            message="News not found",
            error_code="NEWS_NOT_FOUND",
            details={"news_id": news_id}
        )


class InternalError(AppError):
    status_code = 500
