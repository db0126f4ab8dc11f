from fastapi import Depends, Request
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session
import json

from ..core.database import get_db
from ..core.exceptions import DecodeError
from ..schemas.cita import CitaCreate
from ..services.cita_repository import CitaRepository
from ..services.notification_service import NotificationService

def _describe(exc: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )

async def read_cita(request: Request) -> CitaCreate:
    """Decode the request body into a CitaCreate.

    Anything that is not a JSON object with correctly typed fields raises
    DecodeError. Required-field checks happen in the endpoint.
    """
    body = await request.body()
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise DecodeError(str(e))

    if not isinstance(payload, dict):
        raise DecodeError(f"se esperaba un objeto JSON, se recibió {type(payload).__name__}")

    try:
        return CitaCreate.model_validate(payload)
    except PydanticValidationError as e:
        raise DecodeError(_describe(e))

def get_cita_repository(db: Session = Depends(get_db)) -> CitaRepository:
    return CitaRepository(db)

def get_notifier(request: Request) -> NotificationService:
    return request.app.state.notifier
