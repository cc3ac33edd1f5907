"""
Application exceptions and error response shaping.
"""
from typing import Any, Dict, List

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.logging import logger


class DepartmentLookupError(LookupError):
    """Raised when an operation requires a department that does not exist.

    Nothing in the application handles this error, so a request that hits it
    ends with a generic server error.
    """

    def __init__(self, department_id: int):
        self.department_id = department_id
        super().__init__(f"No department present with id: {department_id}")


class DepartmentValidationError(ValueError):
    """Raised when an update would leave a department breaking its field rules."""

    def __init__(self, department_id: int, errors: List[Dict[str, Any]]):
        self.department_id = department_id
        self.errors = errors
        super().__init__(f"Update of department {department_id} violates {len(errors)} constraint(s)")


def format_violations(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error entries into field/message/type records."""
    violations = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        violations.append({
            "field": ".".join(location) or "body",
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        })
    return violations


def violations_response(request: Request, errors: List[Dict[str, Any]]) -> JSONResponse:
    """Return every failed constraint in a single 400 response."""
    violations = format_violations(errors)
    logger.warning(
        f"Validation failed for {request.method} {request.url.path}: "
        f"{[v['field'] for v in violations]}"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Validation Failed",
            "message": f"{len(violations)} constraint(s) violated",
            "violations": violations,
        },
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return violations_response(request, exc.errors())


async def department_validation_exception_handler(request: Request, exc: DepartmentValidationError) -> JSONResponse:
    return violations_response(request, exc.errors)
