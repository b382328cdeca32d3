"""
Order analytics.

Aggregates checked-out orders into item frequencies, peak days, active rooms
and item pairings for the restaurant dashboard, and derives upsell
suggestions for a cart at checkout.
"""
from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime, UTC
from itertools import combinations
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from innkeeper.db.models import as_utc

logger = logging.getLogger(__name__)

UNKNOWN_DATE = "unknown-date"
UNKNOWN_ROOM = "unknown-room"
NO_DATA_MESSAGE = "No order data available for analysis."

TOP_ITEMS = 10
TOP_DAYS = 5
TOP_ROOMS = 5
TOP_PAIRINGS = 8
LOW_PERFORMERS = 10

UPSELL_HEADING = "You Might Have Forgotten Something!"
UPSELL_DEFAULT_MESSAGE = "Complete your order"
UPSELL_CATEGORIES = ("beverages", "desserts")
UPSELL_LIMIT = 4


def _empty_report() -> Dict[str, Any]:
    return {
        "summary": {
            "total_orders": 0,
            "total_items_ordered": 0,
            "item_frequency": {},
            "items_by_day": {},
            "items_by_room": {},
            "common_pairings": [],
        },
        "analysis": {
            "peak_ordering_days": [],
            "most_frequent_items": [],
            "most_active_rooms": [],
            "most_common_pairings": [],
            "patterns": [],
            "low_performers": [],
            "recommendations": [],
        },
        "raw_analysis": NO_DATA_MESSAGE,
        "generated_at": None,
    }


def _order_date(value: Any) -> str:
    if not value:
        return UNKNOWN_DATE
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return UNKNOWN_DATE
    if not isinstance(value, datetime):
        return UNKNOWN_DATE
    return as_utc(value).date().isoformat()


def _item_names(items: Iterable[Optional[Mapping[str, Any]]]) -> List[str]:
    """Names counted for an order; combo components replace the combo itself."""
    names: List[str] = []
    for item in items:
        if not item:
            continue
        components = item.get("combo_contents")
        if isinstance(components, list) and components:
            names.extend(c["name"] for c in components if c and c.get("name"))
        elif item.get("name"):
            names.append(item["name"])
    # dict preserves first-seen order
    return list(dict.fromkeys(names))


def _top(counter: Mapping[str, int], n: Optional[int] = None) -> List[tuple]:
    ranked = sorted(counter.items(), key=lambda kv: kv[1], reverse=True)
    return ranked if n is None else ranked[:n]


def generate_order_analysis_summary(orders: Optional[Sequence[Optional[Mapping[str, Any]]]]) -> Dict[str, Any]:
    """Aggregate orders into the dashboard summary/analysis report.

    Each order is a mapping with ``room_number``, ``checked_out_at`` and
    ``items``. Orders without items still count toward ``total_orders`` but
    contribute nothing else. Ranking ties keep first-seen order.
    """
    if not orders:
        return _empty_report()

    item_frequency: Counter = Counter()
    items_by_day: Dict[str, List[str]] = {}
    items_by_room: Dict[str, List[str]] = {}
    pairings: Counter = Counter()
    day_orders: Counter = Counter()
    room_orders: Counter = Counter()

    for order in orders:
        if not order or not order.get("items"):
            continue
        order_date = _order_date(order.get("checked_out_at"))
        room_number = order.get("room_number") or UNKNOWN_ROOM

        day_orders[order_date] += 1
        room_orders[room_number] += 1

        names = _item_names(order["items"])
        for name in names:
            item_frequency[name] += 1
            days = items_by_day.setdefault(name, [])
            if order_date not in days:
                days.append(order_date)
            rooms = items_by_room.setdefault(name, [])
            if room_number not in rooms:
                rooms.append(room_number)

        for a, b in combinations(names, 2):
            pairings[" + ".join(sorted((a, b)))] += 1

    ranked_items = _top(item_frequency)
    ranked_pairings = _top(pairings, TOP_PAIRINGS)

    summary = {
        "total_orders": len(orders),
        "total_items_ordered": sum(item_frequency.values()),
        "item_frequency": dict(ranked_items),
        "items_by_day": {name: len(days) for name, days in items_by_day.items()},
        "items_by_room": {name: len(rooms) for name, rooms in items_by_room.items()},
        "common_pairings": [{"pairing": p, "frequency": c} for p, c in ranked_pairings],
    }

    low_performers = sorted(
        ({"name": name, "order_count": count} for name, count in ranked_items),
        key=lambda entry: entry["order_count"],
    )[:LOW_PERFORMERS]

    analysis = {
        "peak_ordering_days": [{"date": d, "order_count": c} for d, c in _top(day_orders, TOP_DAYS)],
        "most_frequent_items": [
            {
                "name": name,
                "order_count": count,
                "days_ordered": len(items_by_day.get(name, [])),
                "rooms_ordered": len(items_by_room.get(name, [])),
            }
            for name, count in ranked_items[:TOP_ITEMS]
        ],
        "most_active_rooms": [{"room_number": r, "total_orders": c} for r, c in _top(room_orders, TOP_ROOMS)],
        "most_common_pairings": [{"items": p, "frequency": c} for p, c in ranked_pairings],
        "patterns": [],
        "low_performers": low_performers,
        "recommendations": [],
    }

    return {
        "summary": summary,
        "analysis": analysis,
        "raw_analysis": f"Summary generated for {summary['total_orders']} orders.",
        "generated_at": datetime.now(UTC),
    }


def build_recommendations(summary: Dict[str, Any], analysis: Dict[str, Any]) -> Dict[str, Any]:
    """Fill ``analysis["patterns"]`` and ``analysis["recommendations"]`` with short hints."""
    patterns: List[str] = []
    recommendations: List[str] = []

    if analysis["peak_ordering_days"]:
        peak = analysis["peak_ordering_days"][0]
        patterns.append(f"Busiest day: {peak['date']} with {peak['order_count']} orders.")
        recommendations.append(f"Schedule extra kitchen staff for days like {peak['date']}.")
    if analysis["most_active_rooms"]:
        room = analysis["most_active_rooms"][0]
        patterns.append(f"Most active room: {room['room_number']} with {room['total_orders']} orders.")
    if analysis["most_frequent_items"]:
        top = analysis["most_frequent_items"][0]
        patterns.append(
            f"Top item: {top['name']} in {top['order_count']} orders across {top['rooms_ordered']} rooms."
        )
    if analysis["most_common_pairings"]:
        pairing = analysis["most_common_pairings"][0]
        recommendations.append(
            f"Offer {pairing['items']} as a combo; ordered together {pairing['frequency']} times."
        )

    # Only meaningful once the menu is larger than the top-item list
    if len(summary["item_frequency"]) > TOP_ITEMS:
        slow = [entry["name"] for entry in analysis["low_performers"] if entry["order_count"] == 1]
        if slow:
            recommendations.append(f"Review low performers ordered only once: {', '.join(slow)}.")

    analysis["patterns"] = patterns
    analysis["recommendations"] = recommendations
    return analysis


def map_order_item_names(orders: Sequence[Mapping[str, Any]], foods: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Rename historical order items to the current catalog names.

    Match order: exact case-insensitive name, then image URL, then a unique
    price+category match; otherwise the stored name is kept. Combo components
    are renamed the same way. Input orders are not modified.
    """
    by_name: Dict[str, Mapping[str, Any]] = {}
    by_img: Dict[str, Mapping[str, Any]] = {}
    by_price_category: Dict[str, List[Mapping[str, Any]]] = {}
    for food in foods:
        if not food:
            continue
        if food.get("img"):
            by_img[food["img"]] = food
        by_price_category.setdefault(_price_category_key(food), []).append(food)
        if food.get("name"):
            by_name[str(food["name"]).lower()] = food

    def map_name(raw: Mapping[str, Any]) -> Optional[str]:
        name = raw.get("name")
        if not name:
            return name
        name = str(name)
        match = by_name.get(name.lower())
        if match:
            return match["name"]
        if raw.get("img") and raw["img"] in by_img:
            return by_img[raw["img"]]["name"]
        candidates = by_price_category.get(_price_category_key(raw), [])
        if len(candidates) == 1:
            return candidates[0]["name"]
        return name

    mapped: List[Dict[str, Any]] = []
    for order in orders:
        if not order or not order.get("items"):
            mapped.append(dict(order) if order else order)
            continue
        new_items = []
        for item in order["items"]:
            if not item:
                new_items.append(item)
                continue
            copy = dict(item)
            components = copy.get("combo_contents")
            if isinstance(components, list) and components:
                copy["combo_contents"] = [
                    {**(c or {}), "name": map_name(c or {})} for c in components
                ]
            copy["name"] = map_name(copy)
            new_items.append(copy)
        mapped.append({**order, "items": new_items})
    return mapped


def _price_category_key(entry: Mapping[str, Any]) -> str:
    price = entry.get("price")
    if price in (None, "", 0):
        price_part = ""
    else:
        value = float(price)
        price_part = str(int(value)) if value.is_integer() else repr(value)
    return f"{price_part}|{str(entry.get('category') or '').lower()}"


def build_checkout_upsell(cart_items: Sequence[Mapping[str, Any]], foods: Sequence[Mapping[str, Any]]) -> Dict[str, Any]:
    """Suggest beverages and desserts the cart does not already contain.

    Cheapest first, at most ``UPSELL_LIMIT`` suggestions.
    """
    in_cart = set()
    for item in cart_items or []:
        if item.get("name"):
            in_cart.add(str(item["name"]).lower())
        for component in item.get("combo_contents") or []:
            if component and component.get("name"):
                in_cart.add(str(component["name"]).lower())

    candidates = [
        food for food in foods
        if food.get("category") in UPSELL_CATEGORIES and str(food.get("name", "")).lower() not in in_cart
    ]
    candidates.sort(key=lambda f: (float(f.get("price") or 0), str(f.get("name", ""))))
    picks = candidates[:UPSELL_LIMIT]

    categories = {food["category"] for food in picks}
    if categories == {"beverages", "desserts"}:
        message = "Add a drink or a sweet treat to complete your order."
    elif categories == {"beverages"}:
        message = "Add a drink to go with your meal."
    elif categories == {"desserts"}:
        message = "Finish your meal with something sweet."
    else:
        message = UPSELL_DEFAULT_MESSAGE

    return {
        "upsell_heading": UPSELL_HEADING,
        "upsell_message": message,
        "recommendations": [
            {
                "id": food.get("id"),
                "name": food["name"],
                "category": food["category"],
                "price": float(food.get("price") or 0),
                "img": food.get("img"),
            }
            for food in picks
        ],
    }
