# mainstreet_admin/db/init_db.py

import logging
from typing import Optional
from sqlalchemy.orm import Session
from mainstreet_admin.core.config import settings
from mainstreet_admin.core.security import hash_password
from mainstreet_admin.db.session import Base, SessionLocal, engine
from mainstreet_admin.models.user import User
import mainstreet_admin.models  # noqa: F401  registers every table on Base.metadata

logger = logging.getLogger(__name__)

def create_tables() -> None:
    # Create tables if they don't exist yet
    Base.metadata.create_all(bind=engine)

def ensure_admin_user(db: Session, email: Optional[str], password: Optional[str]) -> Optional[User]:
    """Create the admin account if it is configured and missing. Safe to call repeatedly."""
    if not email or not password:
        logger.info("No initial admin configured, skipping admin seeding")
        return None

    existing_admin = db.query(User).filter(User.email == email).first()
    if existing_admin:
        logger.info(f"Admin user already exists: {email}")
        return existing_admin

    logger.info(f"Creating admin user {email}")
    admin = User(email=email, password=hash_password(password), role="admin")
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin

def init_db() -> None:
    create_tables()
    db = SessionLocal()
    try:
        ensure_admin_user(db, settings.FIRST_ADMIN_EMAIL, settings.FIRST_ADMIN_PASSWORD)
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
