from fastapi import APIRouter, Depends, HTTPException, status
import logging

from ...api.deps import read_cita, get_cita_repository, get_notifier
from ...core.exceptions import InsertFailed, MethodNotAllowed, ValidationError
from ...schemas.cita import CitaCreate, CitaResponse, CitaCreatedResponse
from ...services.cita_repository import CitaRepository
from ...services.notification_service import NotificationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cita", tags=["Citas"])

@router.post("", response_model=CitaCreatedResponse)
def create_cita(
    cita: CitaCreate = Depends(read_cita),
    repo: CitaRepository = Depends(get_cita_repository),
    notifier: NotificationService = Depends(get_notifier),
):
    """Book a new cita."""
    if cita.missing_required():
        raise ValidationError()

    try:
        new_id = repo.insert(cita)
    except InsertFailed as e:
        logger.error(f"Error adding cita to the database: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error interno del servidor al guardar la cita"
        )

    saved = CitaResponse(id=new_id, **dict(cita))
    logger.info(f"Cita booked, ID: {new_id}")

    notifier.send_confirmation(saved)

    return CitaCreatedResponse(
        message="Cita agendada con éxito",
        id=new_id,
        cita=saved,
    )

# Without this, other methods would fall through to the static files mount
@router.api_route(
    "",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def cita_method_not_allowed():
    raise MethodNotAllowed()
