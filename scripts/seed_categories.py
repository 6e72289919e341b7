"""Insert the default suggestion categories into an empty database."""

import sys
import os

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from suggestion_box.infrastructure.database import Base, SessionLocal, engine
from suggestion_box.application.services.category_service import seed_default_categories
from suggestion_box.core.exceptions import ConflictException
from suggestion_box.domain.models.category import Category
from suggestion_box.infrastructure.repositories.category_repository import SQLAlchemyCategoryRepository
import suggestion_box.main  # noqa: F401  registers every model on Base


def seed() -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        created = seed_default_categories(SQLAlchemyCategoryRepository(db, Category))
        print(f"Created {created} default categories.")
    except ConflictException as e:
        print(e.message)
    finally:
        db.close()


if __name__ == "__main__":
    seed()
