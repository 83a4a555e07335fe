"""
Domain exceptions for reports app.

Exception Hierarchy:
    ReportServiceError (base)
    └── InvalidMonthError
"""


class ReportServiceError(Exception):
    """Base exception for all report service errors."""

    pass


class InvalidMonthError(ReportServiceError):
    """
    Raised when the report month is not in YYYY-MM format.

    Example:
        raise InvalidMonthError("Invalid month: '2024-13'. Use YYYY-MM")
    """

    pass
