"""
Database models and schemas for water test readings.
The ORM model backs the relational store; the Pydantic models are shared by
the normalizer, both storage backends, and the API responses.
"""
from sqlalchemy import Column, Integer, Float, Text
from sqlalchemy.orm import declarative_base
from pydantic import BaseModel, Field
from typing import List

Base = declarative_base()


# SQLAlchemy ORM Model
class WaterTestORM(Base):
    __tablename__ = "water_tests"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    test_date = Column("testDate", Text, nullable=False)
    chlorine = Column(Float, nullable=False)
    ph = Column(Float, nullable=False)
    acid_demand = Column("acidDemand", Integer)
    total_alkalinity = Column("totalAlkalinity", Integer)


# Pydantic Models for payloads and API responses
class Measurement(BaseModel):
    """One water test reading, as normalized from a webhook payload"""
    test_date: str = Field("", alias="testDate")
    chlorine: float = 0.0
    ph: float = 0.0
    acid_demand: int = Field(0, alias="acidDemand")
    total_alkalinity: int = Field(0, alias="totalAlkalinity")

    class Config:
        populate_by_name = True
        frozen = True


class StoredMeasurement(Measurement):
    """Measurement read back from the relational store, with its assigned id"""
    id: int


class ReadingsResponse(BaseModel):
    readings: List[StoredMeasurement]


class MessageResponse(BaseModel):
    message: str
