"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from suggestion_box.domain.models.category import Category
from suggestion_box.domain.models.comment import Comment
from suggestion_box.domain.models.suggestion import Suggestion
from suggestion_box.domain.models.user import User
from suggestion_box.domain.repositories.category_repository import CategoryRepository
from suggestion_box.domain.repositories.comment_repository import CommentRepository
from suggestion_box.domain.repositories.suggestion_repository import SuggestionRepository
from suggestion_box.domain.repositories.upvote_repository import UpvoteRepository
from suggestion_box.domain.repositories.user_repository import UserRepository
from suggestion_box.infrastructure.database import get_db
from suggestion_box.infrastructure.repositories.category_repository import SQLAlchemyCategoryRepository
from suggestion_box.infrastructure.repositories.comment_repository import SQLAlchemyCommentRepository
from suggestion_box.infrastructure.repositories.suggestion_repository import SQLAlchemySuggestionRepository
from suggestion_box.infrastructure.repositories.upvote_repository import SQLAlchemyUpvoteRepository
from suggestion_box.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_suggestion_repository(db: Session = Depends(get_db)) -> SuggestionRepository:
    """Get suggestion repository instance."""
    return SQLAlchemySuggestionRepository(db, Suggestion)


def get_upvote_repository(db: Session = Depends(get_db)) -> UpvoteRepository:
    """Get upvote repository instance."""
    return SQLAlchemyUpvoteRepository(db)


def get_comment_repository(db: Session = Depends(get_db)) -> CommentRepository:
    """Get comment repository instance."""
    return SQLAlchemyCommentRepository(db, Comment)


def get_category_repository(db: Session = Depends(get_db)) -> CategoryRepository:
    """Get category repository instance."""
    return SQLAlchemyCategoryRepository(db, Category)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)
