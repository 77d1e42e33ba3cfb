import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


class ServiceError(Exception):
    status_code = 500
    message = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = 400
    message = "Solicitud inválida"


class InvalidCredentials(ServiceError):
    status_code = 401
    message = "Credenciales incorrectas"


class NotFound(ServiceError):
    status_code = 404
    message = "Recurso no encontrado"


class PayloadTooLarge(ServiceError):
    status_code = 413
    message = "Cuerpo de la petición demasiado grande"


class RateLimited(ServiceError):
    status_code = 429
    message = "Demasiadas peticiones, intenta más tarde"


class ServerMisconfigured(ServiceError):
    message = "Configuración del servidor inválida"


class StoreError(ServiceError):
    pass


def error_response(error: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return error_response(exc)


async def _store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Error en %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(StoreError())


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [
        ".".join(str(part) for part in error["loc"][1:])
        for error in exc.errors()
        if error.get("type") != "json_invalid"
    ]
    fields = [field for field in fields if field]
    message = "Campos inválidos: " + ", ".join(fields) if fields else "Cuerpo de la petición inválido"
    return error_response(ValidationError(message))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(SQLAlchemyError, _store_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
