"""
Menu endpoints.
"""
import uuid
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.models import FOOD_CATEGORIES
from innkeeper.db.repositories import dining as dining_repo
from innkeeper.api.deps import require_roles, RESTAURANT_ROLES

router = APIRouter(tags=["food"])


@router.get("/", response_model=Dict[str, List[schemas.Food]])
def list_food(db: Session = Depends(get_db)):
    """Menu grouped by category; items in unknown categories are left out."""
    grouped: Dict[str, list] = {category: [] for category in FOOD_CATEGORIES}
    for food in dining_repo.list_foods(db):
        if food.category in grouped:
            grouped[food.category].append(food)
    return grouped


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.SuccessResponse)
def create_food(
    payload: schemas.FoodCreate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*RESTAURANT_ROLES)),
):
    dining_repo.create_food(db, **payload.model_dump())
    return schemas.SuccessResponse()


@router.put("/{category}/{food_id}", response_model=schemas.SuccessResponse)
def update_food(
    category: str,
    food_id: uuid.UUID,
    payload: schemas.FoodUpdate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*RESTAURANT_ROLES)),
):
    """Update an item addressed by its current category; the body may move it."""
    food = dining_repo.get_food(db, food_id)
    if food is None or food.category != category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Food item not found.")
    dining_repo.update_food(db, food, **payload.model_dump())
    return schemas.SuccessResponse()
