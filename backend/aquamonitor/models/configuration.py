from sqlalchemy import Column, Float, Integer

from aquamonitor.core.database import Base


class Configuration(Base):
    __tablename__ = "configuraciones"

    id = Column(Integer, primary_key=True, index=True)
    ph_min = Column(Float, nullable=True)
    ph_max = Column(Float, nullable=True)
    temperatura_min = Column(Float, nullable=True)
    temperatura_max = Column(Float, nullable=True)
    agitacion_recomendada = Column(Float, nullable=True)
    intervalo = Column(Integer, nullable=True)  # polling interval, seconds

    def __repr__(self) -> str:
        return (
            f"<Configuration(id={self.id}, ph={self.ph_min}-{self.ph_max}, "
            f"temp={self.temperatura_min}-{self.temperatura_max}, intervalo={self.intervalo})>"
        )
