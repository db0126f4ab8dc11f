from sqlalchemy import Column, Integer, Text

from ..core.database import Base

class Cita(Base):
    __tablename__ = "citas"
    # AUTOINCREMENT so ids are never reused after a delete
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Procedure
    tramite = Column(Text, nullable=False)
    institucion = Column(Text, nullable=False)

    # Applicant
    nombres = Column(Text, nullable=False)
    apellidos = Column(Text, nullable=False)
    telefono = Column(Text, nullable=False)
    correo_electronico = Column(Text, nullable=False)
    cedula = Column(Text, nullable=False)
    direccion = Column(Text, nullable=False)

    # RFC 3339 text, see citas.schemas.cita.format_fecha
    fecha_cita = Column(Text, nullable=False)

    def __repr__(self):
        return f"<Cita(id={self.id}, nombres='{self.nombres} {self.apellidos}', fecha='{self.fecha_cita}')>"
