# reset_db.py
import logging

from app.challenges.service import seed_default_challenges
from app.core.database import Base, SessionLocal, engine

logger = logging.getLogger(__name__)


def reset_database():
    logger.warning("Dropping all tables...")
    Base.metadata.drop_all(bind=engine)

    logger.info("Recreating tables...")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_default_challenges(db)
    finally:
        db.close()
    logger.info("Tables recreated successfully.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    reset_database()
