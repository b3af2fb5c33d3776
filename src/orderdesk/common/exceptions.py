"""Error kinds raised by the service layer.

Each kind is an HTTPException with a fixed status code, so services can raise
them directly and FastAPI renders them without extra handlers:

- ValidationError: missing or malformed input (400)
- NotFoundError: a referenced id does not exist (404)
- EmptyResultError: a valid report query matched nothing (404)
- ConstraintViolationError: the store refused a write because of dependent rows
  or a broken reference (409)
"""

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    def __init__(self, detail: str = "Invalid request."):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Not found."):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class EmptyResultError(NotFoundError):
    """A report query that legitimately matched zero rows."""


class ConstraintViolationError(HTTPException):
    def __init__(self, detail: str = "Constraint violation."):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
