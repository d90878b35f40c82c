"""Error and result types shared by the data access layer and routes."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError


# PostgREST code for "JSON object requested, multiple (or no) rows returned"
NOT_SINGLE_ROW_CODE = "PGRST116"


class ConfigurationError(Exception):
    """Raised when required settings are missing."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(
            "Missing required environment variables: " + ", ".join(self.missing)
        )


class DatabaseError(Exception):
    """A fault reported by the database service."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details if details is not None else {"message": message, "code": code}

    @classmethod
    def from_api_error(cls, error: APIError) -> "DatabaseError":
        """
        Translate a PostgREST API error, keeping every field it carries.

        Args:
            error: Error raised by the Supabase query builder

        Returns:
            DatabaseError instance
        """
        message = error.message or str(error)
        details = {
            "message": message,
            "code": error.code,
            "details": error.details,
            "hint": error.hint,
        }
        return cls(message, code=error.code, details=details)

    @classmethod
    def not_single(cls, count: int) -> "DatabaseError":
        """Error for a result that should have held exactly one row."""
        message = "JSON object requested, multiple (or no) rows returned"
        return cls(
            message,
            code=NOT_SINGLE_ROW_CODE,
            details={
                "message": message,
                "code": NOT_SINGLE_ROW_CODE,
                "details": f"The result contains {count} rows",
                "hint": None,
            }
        )


@dataclass
class QueryResult:
    """Outcome of a single database round trip."""

    data: Any = None
    error: Optional[DatabaseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
