from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional

from ..core.exceptions import InsertFailed
from ..models.cita import Cita
from ..schemas.cita import CitaCreate, format_fecha

class CitaRepository:
    def __init__(self, db: Session):
        self.db = db

    def insert(self, cita: CitaCreate) -> int:
        """Persist a new cita and return the id assigned by the store.

        Values travel as bound parameters; nothing is formatted into SQL.
        Raises InsertFailed on any write error. There are no retries.
        """
        row = Cita(
            tramite=cita.tramite,
            institucion=cita.institucion,
            nombres=cita.nombres,
            apellidos=cita.apellidos,
            telefono=cita.telefono,
            correo_electronico=cita.correo_electronico,
            cedula=cita.cedula,
            direccion=cita.direccion,
            fecha_cita=format_fecha(cita.fecha_cita) if cita.fecha_cita is not None else None,
        )

        try:
            self.db.add(row)
            self.db.flush()
            new_id = row.id
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise InsertFailed(f"error al insertar cita: {e}") from e

        if new_id is None:
            raise InsertFailed("error al obtener el ID de la última inserción")

        return new_id

    def get(self, cita_id: int) -> Optional[Cita]:
        """Read a stored row back, or None."""
        return self.db.get(Cita, cita_id)
