"""Admin API routes — maintenance actions."""

from fastapi import APIRouter, Depends, status

from suggestion_box.application.services.category_service import seed_default_categories
from suggestion_box.domain.models.user import User
from suggestion_box.domain.repositories.category_repository import CategoryRepository
from suggestion_box.interfaces.api.deps import require_admin
from suggestion_box.interfaces.deps import get_category_repository

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.post("/seed-categories", status_code=status.HTTP_201_CREATED)
def seed_categories(
    repo: CategoryRepository = Depends(get_category_repository),
    admin: User = Depends(require_admin),
):
    created = seed_default_categories(repo)
    return {"message": "Default categories created successfully", "categories": created}
