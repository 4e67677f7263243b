"""
Exceptions raised by the Portfolio API.

Handlers and repositories raise these; ``main`` turns them into JSON
responses with the matching status code.
"""

from typing import Optional, Any, Dict


class PortfolioError(Exception):
    """Base exception for all portfolio errors"""

    status_code = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "details": self.details
        }


# ============================================
# Authentication
# ============================================

class AuthenticationError(PortfolioError):
    """Caller is not authenticated as admin"""

    status_code = 401

    def __init__(self, message: str = "Not authenticated", code: str = "AUTH_FAILED"):
        super().__init__(message, code=code)


class InvalidCredentialsError(AuthenticationError):
    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class InvalidTokenError(AuthenticationError):
    def __init__(self):
        super().__init__("Invalid token", code="INVALID_TOKEN")


class TokenExpiredError(AuthenticationError):
    def __init__(self):
        super().__init__("Token has expired", code="TOKEN_EXPIRED")


# ============================================
# Validation
# ============================================

class ValidationError(PortfolioError):
    """Payload failed schema validation"""

    status_code = 400

    def __init__(self, message: str = "Validation error", errors: Optional[list] = None):
        super().__init__(message, code="VALIDATION_ERROR", details={"errors": errors or []})

    @classmethod
    def from_pydantic(cls, exc) -> "ValidationError":
        errors = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
                "message": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        summary = "; ".join(
            f"{e['field']}: {e['message']}" if e["field"] else e["message"] for e in errors
        )
        return cls(f"Validation error: {summary}" if summary else "Validation error", errors)


# ============================================
# Resources (404)
# ============================================

class ResourceNotFoundError(PortfolioError):
    status_code = 404

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found",
            code=f"{resource_type.upper()}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class CommentNotFoundError(ResourceNotFoundError):
    def __init__(self, comment_id: str):
        super().__init__("Comment", comment_id)


# ============================================
# Infrastructure
# ============================================

class DatabaseUnavailableError(PortfolioError):
    status_code = 503

    def __init__(self):
        super().__init__("Database not available", code="DATABASE_UNAVAILABLE")
