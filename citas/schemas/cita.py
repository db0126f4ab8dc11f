from pydantic import BaseModel, AwareDatetime, field_validator, field_serializer
from datetime import datetime, timezone
import re
from typing import Optional

# Timestamp treated as "not provided"
ZERO_FECHA = datetime(1, 1, 1, tzinfo=timezone.utc)

RFC3339_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})"
)

def format_fecha(value: datetime) -> str:
    """Render an aware datetime as RFC 3339, with UTC written as 'Z'."""
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text

def parse_fecha(text: str) -> datetime:
    """Parse the RFC 3339 text produced by format_fecha."""
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)

class CitaBase(BaseModel):
    tramite: str = ""
    institucion: str = ""
    nombres: str = ""
    apellidos: str = ""
    telefono: str = ""
    correo_electronico: str = ""
    cedula: str = ""
    direccion: str = ""
    fecha_cita: Optional[AwareDatetime] = None

    @field_validator(
        "tramite", "institucion", "nombres", "apellidos", "telefono",
        "correo_electronico", "cedula", "direccion",
        mode="before",
    )
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v

    @field_serializer("fecha_cita")
    def serialize_fecha(self, value: Optional[datetime]) -> Optional[str]:
        return format_fecha(value) if value is not None else None

class CitaCreate(CitaBase):
    """Inbound booking request. Any client-supplied id is ignored."""

    @field_validator("fecha_cita", mode="before")
    @classmethod
    def rfc3339_text(cls, v):
        # Only RFC 3339 text on the wire; no epochs, no space separator
        if v is None:
            return v
        if not isinstance(v, str) or not RFC3339_PATTERN.fullmatch(v):
            raise ValueError("se esperaba una fecha RFC 3339, p. ej. 2025-06-15T09:30:00-05:00")
        return v

    def missing_required(self) -> bool:
        """Only nombres, apellidos and fecha_cita are enforced here."""
        return (
            not self.nombres
            or not self.apellidos
            or self.fecha_cita is None
            or self.fecha_cita == ZERO_FECHA
        )

class CitaResponse(CitaBase):
    id: int

class CitaCreatedResponse(BaseModel):
    message: str
    id: int
    cita: CitaResponse
