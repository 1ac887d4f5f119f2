"""
Railway-Oriented Programming primitives.

    from railway import Result, ErrorCode

    def non_empty(name: str) -> Result[str]:
        if not name:
            return Result.failure(ErrorCode.VALIDATION_ERROR, "name must not be empty")
        return Result.success(name)
"""

from railway.assertions import ResultAssertions
from railway.failure import ErrorCode, FailureDescription
from railway.result import Failure, Result, Success

__all__ = [
    "Result",
    "Success",
    "Failure",
    "ErrorCode",
    "FailureDescription",
    "ResultAssertions",
]

__version__ = "1.1.0"
