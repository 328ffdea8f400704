from fastapi import HTTPException
from fastapi.responses import JSONResponse
from typing import Optional, Any


class AppHttpException(HTTPException):
    """HTTPException con cuerpo enriquecido: detail, solution y errors."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        solution: Optional[str] = None,
        errors: Optional[Any] = None,
    ):
        content = {
            "detail": detail,
        }
        if solution:
            content["solution"] = solution
        if errors:
            content["errors"] = errors

        super().__init__(status_code=status_code, detail=detail)
        self.solution = solution
        self.errors = errors
        self.content = content

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.content)
