"""Create (or promote) a local admin account.

Usage: python scripts/create_admin.py <email> <password> [name]
"""

import sys
import os

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from suggestion_box.infrastructure.database import Base, SessionLocal, engine
from suggestion_box.application.services.auth_service import create_user, get_user_by_email, hash_password
from suggestion_box.domain.models.user import ROLE_ADMIN
import suggestion_box.main  # noqa: F401  registers every model on Base


def create_admin(email: str, password: str, name: str = "Admin User") -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        user = get_user_by_email(db, email)
        if user:
            user.role = ROLE_ADMIN
            user.password_hash = hash_password(password)
            db.commit()
            print(f"Existing user {user.email} promoted to admin.")
            return

        user = create_user(db, name=name, email=email, password=password, role=ROLE_ADMIN)
        print(f"Admin user created: {user.email}")
    except Exception as e:
        db.rollback()
        print(f"Error creating admin user: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print(__doc__)
        sys.exit(1)
    create_admin(sys.argv[1], sys.argv[2], *sys.argv[3:4])
