"""
Restaurant analytics endpoint.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.repositories import dining as dining_repo
from innkeeper.api.deps import require_roles, RESTAURANT_ROLES
from innkeeper.services import analytics_service

router = APIRouter(tags=["analytics"])


@router.get("/summary", response_model=schemas.OrderAnalysisReport)
def order_summary(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*RESTAURANT_ROLES)),
):
    """Analyse all orders using current catalog names."""
    orders = [
        {"room_number": o.room_number, "checked_out_at": o.checked_out_at, "items": list(o.items or [])}
        for o in dining_repo.list_orders(db)
    ]
    foods = [
        {"name": f.name, "img": f.img, "price": f.price, "category": f.category}
        for f in dining_repo.list_foods(db)
    ]
    report = analytics_service.generate_order_analysis_summary(
        analytics_service.map_order_item_names(orders, foods)
    )
    analytics_service.build_recommendations(report["summary"], report["analysis"])
    return report
