"""Category service — admin-managed categories for suggestions."""

from typing import List

import structlog

from suggestion_box.core.exceptions import ConflictException, EntityNotFoundException
from suggestion_box.domain.models.category import Category
from suggestion_box.domain.repositories.category_repository import CategoryRepository
from suggestion_box.domain.repositories.suggestion_repository import SuggestionRepository
from suggestion_box.domain.schemas.category import CategoryCreate, CategoryUpdate

logger = structlog.get_logger(__name__)

DEFAULT_CATEGORIES = [
    {"name": "General", "description": "General suggestions and feedback", "color": "#6B7280"},
    {"name": "Feature Request", "description": "New features and functionality requests", "color": "#3B82F6"},
    {"name": "Bug Report", "description": "Issues and bugs that need to be fixed", "color": "#EF4444"},
    {"name": "Improvement", "description": "Improvements to existing features", "color": "#10B981"},
    {"name": "UI/UX", "description": "User interface and experience improvements", "color": "#8B5CF6"},
    {"name": "Performance", "description": "Performance and optimization suggestions", "color": "#F59E0B"},
]


def list_categories(repo: CategoryRepository) -> List[Category]:
    return repo.list_by_name()


def get_category(repo: CategoryRepository, category_id: int) -> Category:
    category = repo.get_by_id(category_id)
    if category is None:
        raise EntityNotFoundException("Category not found")
    return category


def create_category(repo: CategoryRepository, data: CategoryCreate) -> Category:
    if repo.get_by_name(data.name):
        raise ConflictException("Category with this name already exists")

    category = repo.save_unique(Category(**data.model_dump(exclude_none=True)))
    if category is None:
        raise ConflictException("Category with this name already exists")
    logger.info("Category created", category_id=category.id, name=category.name)
    return category


def update_category(repo: CategoryRepository, category_id: int, data: CategoryUpdate) -> Category:
    category = get_category(repo, category_id)

    if data.name and data.name != category.name:
        existing = repo.get_by_name(data.name)
        if existing and existing.id != category_id:
            raise ConflictException("Category with this name already exists")

    for field, value in data.model_dump(exclude_none=True).items():
        setattr(category, field, value)
    if repo.save_unique(category) is None:
        raise ConflictException("Category with this name already exists")
    logger.info("Category updated", category_id=category_id)
    return category


def delete_category(
    repo: CategoryRepository,
    suggestion_repo: SuggestionRepository,
    category_id: int,
) -> None:
    """Delete a category; suggestions using it become uncategorized."""
    get_category(repo, category_id)

    detached = suggestion_repo.clear_category(category_id)
    repo.delete(category_id)
    logger.info("Category deleted", category_id=category_id, suggestions_uncategorized=detached)


def seed_default_categories(repo: CategoryRepository) -> int:
    """Insert the default category set into an empty table."""
    if repo.count() > 0:
        raise ConflictException(
            "Categories already exist. Delete existing categories first if you want to reseed."
        )

    for values in DEFAULT_CATEGORIES:
        repo.create({**values, "is_active": True})

    logger.info("Default categories seeded", count=len(DEFAULT_CATEGORIES))
    return len(DEFAULT_CATEGORIES)
