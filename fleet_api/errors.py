# fleet_api/errors.py
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

def create_error_response(message: str, details: Optional[str] = None) -> Dict[str, Any]:
    """Create a detailed error response"""
    return {
        "message": message,
        "details": details if details else message
    }

class FleetError(Exception):
    """Base class of every error the API turns into an HTTP response."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> Optional[Dict[str, Any]]:
        return create_error_response(self.message, self.details)

class AuthMissing(FleetError):
    def __init__(self):
        super().__init__("No token provided.")

    def to_body(self):
        return {"success": False, "message": self.message}

class AuthInvalid(FleetError):
    def __init__(self, reason: str, strict: bool = False):
        super().__init__(f"Failed to authenticate token. {reason}")
        self.strict = strict

    def to_body(self):
        return {"success": False, "message": self.message}

class ValidationFailed(FleetError):
    """Document failed schema validation.

    ``errors`` is None when the caller must answer with an empty body.
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.errors = errors

    @classmethod
    def from_pydantic(cls, resource: str, exc: ValidationError, with_body: bool = True):
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return cls(f"{resource} validation failed", errors if with_body else None)

    def to_body(self):
        if self.errors is None:
            return None
        body = create_error_response(
            self.message,
            "; ".join(f"{err['field']}: {err['message']}" for err in self.errors),
        )
        body["errors"] = self.errors
        return body

class NotFound(FleetError):
    pass

class StoreFailure(FleetError):
    pass

def status_for(exc: Exception) -> int:
    """Map an error of the taxonomy to the HTTP status it is answered with."""
    if isinstance(exc, AuthMissing):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, AuthInvalid):
        return status.HTTP_401_UNAUTHORIZED if exc.strict else status.HTTP_200_OK
    if isinstance(exc, ValidationFailed):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotFound):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR

def error_response(exc: Exception) -> Response:
    status_code = status_for(exc)
    if isinstance(exc, FleetError):
        body = exc.to_body()
    else:
        body = create_error_response("Database operation failed", str(exc))
    if body is None:
        return Response(status_code=status_code)
    return JSONResponse(status_code=status_code, content=body)

async def fleet_error_handler(request: Request, exc: FleetError) -> Response:
    if isinstance(exc, StoreFailure):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.details)
    return error_response(exc)

async def store_error_handler(request: Request, exc: PyMongoError) -> Response:
    logger.error("%s %s failed in the database", request.method, request.url.path, exc_info=exc)
    return error_response(exc)

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FleetError, fleet_error_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
