"""
Carousel combo endpoints for the guest menu banner.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import models, schemas
from innkeeper.db.repositories import dining as dining_repo
from innkeeper.api.deps import require_roles, RESTAURANT_ROLES

router = APIRouter(tags=["carousel"])


def _get_or_404(db: Session, combo_id: uuid.UUID) -> models.CarouselCombo:
    combo = dining_repo.get_combo(db, combo_id)
    if combo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Combo not found")
    return combo


@router.get("/combos", response_model=List[schemas.CarouselCombo])
def list_combos(db: Session = Depends(get_db)):
    return dining_repo.list_active_combos(db)


@router.get("/combos/{combo_id}", response_model=schemas.CarouselCombo)
def get_combo(combo_id: uuid.UUID, db: Session = Depends(get_db)):
    return _get_or_404(db, combo_id)


@router.post("/combos", status_code=status.HTTP_201_CREATED, response_model=schemas.CarouselCombo)
def create_combo(
    payload: schemas.CarouselComboCreate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*RESTAURANT_ROLES)),
):
    data = payload.model_dump()
    return dining_repo.create_combo(db, **data)


@router.put("/combos/{combo_id}", response_model=schemas.CarouselCombo)
def update_combo(
    combo_id: uuid.UUID,
    payload: schemas.CarouselComboUpdate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*RESTAURANT_ROLES)),
):
    combo = _get_or_404(db, combo_id)
    # Null leaves a field unchanged; so does a blank title/img/price
    changes = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
    for key in ("title", "img", "price"):
        if not changes.get(key):
            changes.pop(key, None)
    return dining_repo.update_combo(db, combo, **changes)


@router.delete("/combos/{combo_id}", response_model=schemas.ComboDeleted)
def delete_combo(
    combo_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*RESTAURANT_ROLES)),
):
    combo = _get_or_404(db, combo_id)
    combo = dining_repo.update_combo(db, combo, active=False)
    return schemas.ComboDeleted(combo=combo)
