from typing import Dict, List

from fastapi.responses import JSONResponse


def unprocessable_entity(
    errors: Dict[str, List[str]],
    message: str = "validation errors while handling request"
) -> JSONResponse:
    """422 response carrying the field-error mapping as ``data``"""
    return JSONResponse(
        status_code=422,
        content={"status": "error", "message": message, "data": dict(errors)}
    )

def bad_request(message: str) -> JSONResponse:
    """400 response for payloads that cannot be decoded into a request"""
    return JSONResponse(
        status_code=400,
        content={"status": "error", "message": message}
    )
