import uuid
from datetime import datetime
from typing import Optional, List, Dict, Any, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator

from innkeeper.db.models.dining import COMBO_CATEGORIES


ComboCategory = Literal[COMBO_CATEGORIES]


class FoodBase(BaseModel):
    name: str = Field(min_length=1)
    price: float = Field(gt=0)
    category: str = Field(min_length=1)
    img: str = Field(min_length=1)
    details: Optional[str] = None


class FoodCreate(FoodBase):
    pass


class FoodUpdate(FoodBase):
    pass


class Food(FoodBase):
    id: uuid.UUID
    model_config = ConfigDict(from_attributes=True)


class SuccessResponse(BaseModel):
    success: bool = True


class ComboItem(BaseModel):
    name: str = Field(min_length=1)
    category: ComboCategory
    qty: int = Field(default=1, ge=1)


def _require_all_categories(items: List[ComboItem]) -> List[ComboItem]:
    present = {item.category for item in items}
    if not set(COMBO_CATEGORIES) <= present:
        raise ValueError('Combo must include at least one meal, snack, beverage, and dessert')
    return items


class CarouselComboCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = ''
    price: float = Field(gt=0)
    img: str = Field(min_length=1)
    items: List[ComboItem]

    @field_validator('items')
    @classmethod
    def _covers_categories(cls, v):
        return _require_all_categories(v)


class CarouselComboUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    img: Optional[str] = None
    items: Optional[List[ComboItem]] = None
    active: Optional[bool] = None

    @field_validator('items')
    @classmethod
    def _covers_categories(cls, v):
        if v is None:
            return v
        return _require_all_categories(v)


class CarouselCombo(BaseModel):
    id: uuid.UUID
    title: str
    description: str
    price: float
    img: str
    items: List[ComboItem]
    active: bool
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ComboDeleted(BaseModel):
    message: str = 'Combo deleted successfully'
    combo: CarouselCombo


class ComboComponent(BaseModel):
    name: str
    category: Optional[str] = None
    qty: int = 1
    img: Optional[str] = None
    price: Optional[float] = None


class CartItem(BaseModel):
    name: str = Field(min_length=1)
    img: Optional[str] = None
    category: Optional[str] = None
    price: float = Field(ge=0)
    quantity: int = Field(default=1, ge=1)
    added_at: Optional[datetime] = None
    combo_contents: Optional[List[ComboComponent]] = None


class CartItemsReplace(BaseModel):
    items: List[CartItem] = Field(default_factory=list)


class CartQuantityUpdate(BaseModel):
    quantity: int = Field(ge=1)


class Cart(BaseModel):
    id: Optional[uuid.UUID] = None
    room_number: str
    items: List[CartItem] = Field(default_factory=list)
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class Order(BaseModel):
    id: uuid.UUID
    room_number: str
    items: List[CartItem]
    checked_out_at: datetime
    status: str
    delivered_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class CheckoutResult(BaseModel):
    message: str = 'Order placed'
    order: Order


class Billing(BaseModel):
    id: uuid.UUID
    order_id: uuid.UUID
    room_number: str
    items: List[CartItem]
    checked_out_at: Optional[datetime] = None
    delivered_at: datetime
    total_price: float
    model_config = ConfigDict(from_attributes=True)


class UpsellSuggestion(BaseModel):
    id: Optional[uuid.UUID] = None
    name: str
    category: str
    price: float
    img: Optional[str] = None


class UpsellResponse(BaseModel):
    upsell_heading: str
    upsell_message: str
    recommendations: List[UpsellSuggestion]
