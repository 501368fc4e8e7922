import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from quiz_admin.core.exceptions import QuizAdminError

logger = logging.getLogger('api')

INTERNAL_ERROR = "Internal server error"


def error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


async def quiz_admin_error_handler(request: Request, exc: QuizAdminError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return error_response(exc.status_code, INTERNAL_ERROR)
    return error_response(exc.status_code, exc.message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} raised {type(exc).__name__}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QuizAdminError, quiz_admin_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
