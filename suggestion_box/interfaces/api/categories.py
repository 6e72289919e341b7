"""Categories API routes — list, fetch, create, update, delete."""

from fastapi import APIRouter, Depends, status

from suggestion_box.application.services.category_service import (
    create_category,
    delete_category,
    get_category,
    list_categories,
    update_category,
)
from suggestion_box.domain.models.user import User
from suggestion_box.domain.repositories.category_repository import CategoryRepository
from suggestion_box.domain.repositories.suggestion_repository import SuggestionRepository
from suggestion_box.domain.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from suggestion_box.interfaces.api.deps import get_current_user, require_admin
from suggestion_box.interfaces.deps import get_category_repository, get_suggestion_repository

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryRead])
def list_all(
    repo: CategoryRepository = Depends(get_category_repository),
    user: User = Depends(get_current_user),
):
    return list_categories(repo)


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create(
    body: CategoryCreate,
    repo: CategoryRepository = Depends(get_category_repository),
    admin: User = Depends(require_admin),
):
    return create_category(repo, body)


@router.get("/{category_id}", response_model=CategoryRead)
def get_one(
    category_id: int,
    repo: CategoryRepository = Depends(get_category_repository),
    user: User = Depends(get_current_user),
):
    return get_category(repo, category_id)


@router.put("/{category_id}", response_model=CategoryRead)
def update(
    category_id: int,
    body: CategoryUpdate,
    repo: CategoryRepository = Depends(get_category_repository),
    admin: User = Depends(require_admin),
):
    return update_category(repo, category_id, body)


@router.delete("/{category_id}")
def delete(
    category_id: int,
    repo: CategoryRepository = Depends(get_category_repository),
    suggestion_repo: SuggestionRepository = Depends(get_suggestion_repository),
    admin: User = Depends(require_admin),
):
    delete_category(repo, suggestion_repo, category_id)
    return {"message": "Category deleted successfully"}
