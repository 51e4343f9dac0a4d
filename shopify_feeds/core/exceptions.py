"""
Custom exceptions for Shopify Feeds
"""

from typing import Optional, Dict, Any


class FeedsException(Exception):
    """Base exception for all Shopify Feeds errors"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/API responses"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
            "exception_type": self.__class__.__name__,
        }


class ConfigurationError(FeedsException):
    """Raised when there's a configuration error"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[dict] = None,
        cause: Optional[Exception] = None,
    ):
        config_details = {"config_key": config_key}
        if details:
            config_details.update(details)
        super().__init__(message, "CONFIG_ERROR", config_details, cause)
        self.config_key = config_key


class EnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing"""

    def __init__(
        self,
        var_name: str,
        details: Optional[dict] = None,
        cause: Optional[Exception] = None,
    ):
        env_details = {"missing_variable": var_name}
        if details:
            env_details.update(details)
        super().__init__(
            message=f"Missing {var_name}",
            config_key=var_name,
            details=env_details,
            cause=cause,
        )


class UpstreamError(FeedsException):
    """Raised when the Shopify Admin API call fails or returns no data"""

    status_code = 502

    def __init__(
        self,
        message: str,
        body: Optional[str] = None,
        upstream_status: Optional[int] = None,
        details: Optional[dict] = None,
        cause: Optional[Exception] = None,
    ):
        upstream_details = {"upstream_status": upstream_status, "body": body}
        if details:
            upstream_details.update(details)
        super().__init__(message, "UPSTREAM_ERROR", upstream_details, cause)
        self.body = body
        self.upstream_status = upstream_status


class PaginationLimitError(UpstreamError):
    """Raised when the upstream keeps reporting more pages past the page cap"""

    def __init__(self, max_pages: int, fetched_items: int = 0):
        super().__init__(
            f"Pagination stopped after {max_pages} pages, upstream still reports hasNextPage",
            details={"max_pages": max_pages, "fetched_items": fetched_items},
        )
        self.error_code = "PAGINATION_LIMIT"
        self.max_pages = max_pages
