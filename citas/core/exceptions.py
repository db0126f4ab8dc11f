from fastapi import HTTPException, status

# Store exceptions
class StoreError(Exception):
    """Base class for persistence failures."""

class StoreUnavailable(StoreError):
    """The database file cannot be opened or does not answer."""

class SchemaError(StoreError):
    """The citas table cannot be created or verified."""

class InsertFailed(StoreError):
    """A cita could not be written, or its id could not be read back."""

# Request exceptions
class DecodeError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Error al decodificar JSON: {detail}",
        )

class ValidationError(HTTPException):
    def __init__(self, detail: str = "Faltan campos obligatorios (nombres, apellidos, fecha_cita)"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )

class MethodNotAllowed(HTTPException):
    def __init__(self, allowed: str = "POST"):
        super().__init__(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            detail="Método no permitido",
            headers={"Allow": allowed},
        )
