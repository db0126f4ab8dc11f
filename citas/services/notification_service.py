import logging

from ..schemas.cita import CitaResponse, format_fecha

logger = logging.getLogger(__name__)

def render_confirmation(cita: CitaResponse) -> str:
    """Plain-text body of the booking confirmation."""
    fecha = format_fecha(cita.fecha_cita) if cita.fecha_cita else ""
    return (
        "Nueva cita agendada:\n"
        "\n"
        f"Trámite: {cita.tramite}\n"
        f"Institución: {cita.institucion}\n"
        f"Nombres: {cita.nombres}\n"
        f"Apellidos: {cita.apellidos}\n"
        f"Teléfono: {cita.telefono}\n"
        f"Correo electrónico: {cita.correo_electronico}\n"
        f"Cédula: {cita.cedula}\n"
        f"Dirección: {cita.direccion}\n"
        f"Fecha: {fecha}\n"
    )

class NotificationService:
    """Records booking confirmations.

    There is no mail transport; the rendered message goes to the log.
    """

    def __init__(self, sender: str):
        self.sender = sender

    def send_confirmation(self, cita: CitaResponse) -> bool:
        if not cita.correo_electronico:
            logger.info(f"Cita {cita.id} has no e-mail address, confirmation skipped")
            return False

        body = render_confirmation(cita)
        logger.info(
            f"Confirmation for cita {cita.id} from {self.sender} "
            f"to {cita.correo_electronico}:\n{body}"
        )
        return True
