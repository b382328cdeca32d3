from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class Pairing(BaseModel):
    pairing: str
    frequency: int


class OrderSummary(BaseModel):
    total_orders: int = 0
    total_items_ordered: int = 0
    item_frequency: Dict[str, int] = Field(default_factory=dict)
    items_by_day: Dict[str, int] = Field(default_factory=dict)
    items_by_room: Dict[str, int] = Field(default_factory=dict)
    common_pairings: List[Pairing] = Field(default_factory=list)


class PeakDay(BaseModel):
    date: str
    order_count: int


class FrequentItem(BaseModel):
    name: str
    order_count: int
    days_ordered: int
    rooms_ordered: int


class ActiveRoom(BaseModel):
    room_number: str
    total_orders: int


class CommonPairing(BaseModel):
    items: str
    frequency: int


class LowPerformer(BaseModel):
    name: str
    order_count: int


class OrderAnalysis(BaseModel):
    peak_ordering_days: List[PeakDay] = Field(default_factory=list)
    most_frequent_items: List[FrequentItem] = Field(default_factory=list)
    most_active_rooms: List[ActiveRoom] = Field(default_factory=list)
    most_common_pairings: List[CommonPairing] = Field(default_factory=list)
    patterns: List[str] = Field(default_factory=list)
    low_performers: List[LowPerformer] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class OrderAnalysisReport(BaseModel):
    summary: OrderSummary
    analysis: OrderAnalysis
    raw_analysis: str
    generated_at: Optional[datetime] = None
