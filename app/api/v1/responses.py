from fastapi.responses import JSONResponse

from app.api.v1.schemas import ErrorResponseSchema
from app.application.exceptions import SchedulingError

ERROR_STATUS_CODES = {
    "bad_request": 400,
    "out_of_hours": 400,
    "slot_taken": 409,
    "not_found": 404,
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponseSchema(message=message).model_dump(),
    )


def scheduling_error_response(error: SchedulingError) -> JSONResponse:
    return error_response(ERROR_STATUS_CODES.get(error.kind, 500), str(error))
