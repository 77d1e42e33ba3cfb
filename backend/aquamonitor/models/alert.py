from sqlalchemy import Boolean, Column, Date, Float, Integer, Text, Time

from aquamonitor.core.database import Base


class Alert(Base):
    __tablename__ = "alertas"

    id = Column(Integer, primary_key=True, index=True)
    fecha_alerta = Column(Date, nullable=False)
    hora_alerta = Column(Time, nullable=False)
    comentarios = Column(Text, nullable=True)
    ph_valor = Column(Float, nullable=True)
    luz_detectada = Column(Boolean, nullable=True)
    temperatura = Column(Float, nullable=True)

    def __repr__(self) -> str:
        return f"<Alert(fecha={self.fecha_alerta}, hora={self.hora_alerta})>"
