"""
SQLite storage for water test readings.
Uses SQLAlchemy ORM for all database access.
"""
from typing import List

from sqlalchemy import create_engine, func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from pool_readings.config import logger, TABLE_EXISTS_SQL
from pool_readings.models import Base, Measurement, StoredMeasurement, WaterTestORM
from pool_readings.storage.base import StorageBackend, StorageError


class RelationalBackend(StorageBackend):
    """
    Stores each reading as one row of the water_tests table.
    The database assigns ids; readings are never updated or deleted.
    """
    name = "sqlite"
    supports_listing = True

    def __init__(self, db_path):
        self.db_path = db_path
        # Sync endpoints run in a threadpool, so pooled connections cross threads
        self.engine = create_engine(
            f"sqlite:///{db_path}",
            connect_args={"check_same_thread": False},
            pool_pre_ping=True,
        )
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def initialize(self):
        """Create the water_tests table if it is missing, otherwise report how many readings it holds"""
        try:
            with self.engine.connect() as conn:
                table_exists = conn.execute(text(TABLE_EXISTS_SQL)).scalar() > 0
            if not table_exists:
                Base.metadata.create_all(bind=self.engine)
                logger.info("water_tests table was created")
            else:
                logger.info(f"water_tests table already exists (readingsCount={self.count()})")
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to initialize water_tests table: {e}") from e

    def store(self, measurement: Measurement) -> None:
        db = self.SessionLocal()
        try:
            db.add(WaterTestORM(
                test_date=measurement.test_date,
                chlorine=measurement.chlorine,
                ph=measurement.ph,
                acid_demand=measurement.acid_demand,
                total_alkalinity=measurement.total_alkalinity,
            ))
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(f"Failed to insert reading: {e}") from e
        finally:
            db.close()

    def list_all(self) -> List[StoredMeasurement]:
        db = self.SessionLocal()
        try:
            rows = db.query(WaterTestORM).order_by(WaterTestORM.id.asc()).all()
            return [
                StoredMeasurement(
                    id=row.id,
                    test_date=row.test_date,
                    chlorine=row.chlorine,
                    ph=row.ph,
                    acid_demand=row.acid_demand or 0,
                    total_alkalinity=row.total_alkalinity or 0,
                )
                for row in rows
            ]
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to retrieve readings: {e}") from e
        finally:
            db.close()

    def count(self) -> int:
        db = self.SessionLocal()
        try:
            return db.query(func.count(WaterTestORM.id)).scalar()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to count readings: {e}") from e
        finally:
            db.close()

    def close(self):
        self.engine.dispose()
