# services/exceptions.py

from fastapi import Request, status
from fastapi.responses import JSONResponse


class DomainError(Exception):
    """Base for every error the domain services raise on purpose."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    pass


class NotFound(DomainError):
    pass


class ConflictOrIllegalOperation(DomainError):
    pass


class PersistenceFailure(DomainError):
    pass


STATUS_CODES = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    ConflictOrIllegalOperation: status.HTTP_409_CONFLICT,
    PersistenceFailure: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(exc: DomainError) -> int:
    for error_type, code in STATUS_CODES.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(status_code=status_code_for(exc), content={"error": exc.message})
