# mainstreet_admin/db/session.py

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from mainstreet_admin.core.config import settings
import logging

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

logging.info(f"Creating database engine for dialect: {settings.DATABASE_URL.split(':', 1)[0]}")
engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# Dependency to get DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
