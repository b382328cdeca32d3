"""
Tests for order analytics aggregation, catalog name mapping and checkout upsell.
"""
from datetime import datetime, timezone

from innkeeper.services import analytics_service
from innkeeper.services.analytics_service import (
    generate_order_analysis_summary,
    build_recommendations,
    map_order_item_names,
    build_checkout_upsell,
)


def _orders():
    return [
        {
            "room_number": "101",
            "checked_out_at": datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc),
            "items": [{"name": "Burger"}, {"name": "Coke"}],
        },
        {
            "room_number": "102",
            "checked_out_at": "2025-01-01T12:00:00Z",
            "items": [{"name": "Burger"}, {"name": "Fries"}, {"name": "Coke"}],
        },
        {
            "room_number": "101",
            "checked_out_at": datetime(2025, 1, 2, 8, 30, tzinfo=timezone.utc),
            "items": [
                {"name": "Breakfast Combo", "combo_contents": [{"name": "Pancakes"}, {"name": "Coffee"}]},
                {"name": "Burger"},
            ],
        },
        {"room_number": None, "checked_out_at": None, "items": []},
    ]


class TestGenerateOrderAnalysisSummary:
    def test_empty_input_returns_zeroed_report(self):
        for empty in (None, []):
            report = generate_order_analysis_summary(empty)
            assert report["summary"]["total_orders"] == 0
            assert report["summary"]["total_items_ordered"] == 0
            assert report["summary"]["item_frequency"] == {}
            assert report["analysis"]["most_frequent_items"] == []
            assert report["raw_analysis"] == "No order data available for analysis."

    def test_counts_items_days_and_rooms(self):
        report = generate_order_analysis_summary(_orders())
        summary = report["summary"]

        # Empty orders still count toward the total
        assert summary["total_orders"] == 4
        assert summary["total_items_ordered"] == 8
        assert list(summary["item_frequency"].items()) == [
            ("Burger", 3),
            ("Coke", 2),
            ("Fries", 1),
            ("Pancakes", 1),
            ("Coffee", 1),
        ]
        assert summary["items_by_day"]["Burger"] == 2
        assert summary["items_by_day"]["Coke"] == 1
        assert summary["items_by_room"]["Burger"] == 2
        assert summary["items_by_room"]["Pancakes"] == 1
        assert report["raw_analysis"] == "Summary generated for 4 orders."
        assert report["generated_at"] is not None

    def test_combo_components_replace_the_combo(self):
        report = generate_order_analysis_summary(_orders())
        assert "Breakfast Combo" not in report["summary"]["item_frequency"]
        assert report["summary"]["item_frequency"]["Pancakes"] == 1

    def test_duplicate_items_in_one_order_count_once(self):
        orders = [{"room_number": "7", "checked_out_at": None, "items": [{"name": "Tea"}, {"name": "Tea"}]}]
        report = generate_order_analysis_summary(orders)
        assert report["summary"]["item_frequency"] == {"Tea": 1}
        assert report["summary"]["common_pairings"] == []
        assert report["analysis"]["peak_ordering_days"] == [{"date": "unknown-date", "order_count": 1}]

    def test_pairings_are_sorted_and_ranked(self):
        report = generate_order_analysis_summary(_orders())
        pairings = report["summary"]["common_pairings"]
        assert pairings[0] == {"pairing": "Burger + Coke", "frequency": 2}
        assert {p["pairing"] for p in pairings} == {
            "Burger + Coke",
            "Burger + Fries",
            "Coke + Fries",
            "Coffee + Pancakes",
            "Burger + Pancakes",
            "Burger + Coffee",
        }
        assert report["analysis"]["most_common_pairings"][0] == {"items": "Burger + Coke", "frequency": 2}

    def test_analysis_rankings(self):
        analysis = generate_order_analysis_summary(_orders())["analysis"]
        assert analysis["peak_ordering_days"] == [
            {"date": "2025-01-01", "order_count": 2},
            {"date": "2025-01-02", "order_count": 1},
        ]
        assert analysis["most_active_rooms"] == [
            {"room_number": "101", "total_orders": 2},
            {"room_number": "102", "total_orders": 1},
        ]
        assert analysis["most_frequent_items"][0] == {
            "name": "Burger",
            "order_count": 3,
            "days_ordered": 2,
            "rooms_ordered": 2,
        }
        assert [e["name"] for e in analysis["low_performers"]] == ["Fries", "Pancakes", "Coffee", "Coke", "Burger"]

    def test_missing_room_uses_placeholder(self):
        orders = [{"checked_out_at": None, "items": [{"name": "Soup"}]}]
        analysis = generate_order_analysis_summary(orders)["analysis"]
        assert analysis["most_active_rooms"] == [{"room_number": "unknown-room", "total_orders": 1}]

    def test_top_lists_are_capped(self):
        orders = [
            {"room_number": str(n), "checked_out_at": None, "items": [{"name": f"Dish {n}"}]}
            for n in range(15)
        ]
        analysis = generate_order_analysis_summary(orders)["analysis"]
        assert len(analysis["most_frequent_items"]) == analytics_service.TOP_ITEMS
        assert len(analysis["most_active_rooms"]) == analytics_service.TOP_ROOMS
        assert len(analysis["low_performers"]) == analytics_service.LOW_PERFORMERS


class TestBuildRecommendations:
    def test_fills_patterns_and_recommendations(self):
        report = generate_order_analysis_summary(_orders())
        analysis = build_recommendations(report["summary"], report["analysis"])
        assert analysis is report["analysis"]
        assert analysis["patterns"][0] == "Busiest day: 2025-01-01 with 2 orders."
        assert any("Burger + Coke" in r for r in analysis["recommendations"])
        # Small menus do not flag low performers
        assert not any(r.startswith("Review low performers") for r in analysis["recommendations"])

    def test_low_performers_flagged_on_larger_menus(self):
        orders = [
            {"room_number": "1", "checked_out_at": None, "items": [{"name": f"Dish {n}"}]}
            for n in range(12)
        ]
        report = generate_order_analysis_summary(orders)
        analysis = build_recommendations(report["summary"], report["analysis"])
        assert any(r.startswith("Review low performers") for r in analysis["recommendations"])

    def test_empty_report_has_no_hints(self):
        report = generate_order_analysis_summary([])
        analysis = build_recommendations(report["summary"], report["analysis"])
        assert analysis["patterns"] == []
        assert analysis["recommendations"] == []


class TestMapOrderItemNames:
    FOODS = [
        {"name": "Cheeseburger", "img": "burger.png", "price": 250, "category": "lunch"},
        {"name": "Iced Tea", "img": "tea.png", "price": 80, "category": "beverages"},
        {"name": "Lemonade", "img": "lemon.png", "price": 80, "category": "beverages"},
    ]

    def _map(self, item):
        orders = [{"room_number": "1", "items": [item]}]
        return map_order_item_names(orders, self.FOODS)[0]["items"][0]["name"]

    def test_case_insensitive_name_match(self):
        assert self._map({"name": "cheeseburger"}) == "Cheeseburger"

    def test_image_match(self):
        assert self._map({"name": "Old Burger", "img": "burger.png"}) == "Cheeseburger"

    def test_unique_price_and_category_match(self):
        assert self._map({"name": "Legacy", "price": 250.0, "category": "Lunch"}) == "Cheeseburger"

    def test_ambiguous_price_match_keeps_name(self):
        assert self._map({"name": "Old Tea", "price": 80, "category": "beverages"}) == "Old Tea"

    def test_combo_components_are_mapped_and_input_untouched(self):
        item = {"name": "Combo", "combo_contents": [{"name": "ICED TEA"}, {"name": "Mystery"}]}
        orders = [{"room_number": "1", "items": [item]}]
        mapped = map_order_item_names(orders, self.FOODS)
        assert [c["name"] for c in mapped[0]["items"][0]["combo_contents"]] == ["Iced Tea", "Mystery"]
        assert item["combo_contents"][0]["name"] == "ICED TEA"


class TestCheckoutUpsell:
    FOODS = [
        {"name": "Coke", "category": "beverages", "price": 50, "img": "coke.png"},
        {"name": "Cake", "category": "desserts", "price": 120, "img": "cake.png"},
        {"name": "Tea", "category": "beverages", "price": 40, "img": "tea.png"},
        {"name": "Pie", "category": "desserts", "price": 90, "img": "pie.png"},
        {"name": "Juice", "category": "beverages", "price": 60, "img": "juice.png"},
        {"name": "Burger", "category": "lunch", "price": 200, "img": "burger.png"},
    ]

    def test_suggests_cheapest_missing_drinks_and_desserts(self):
        result = build_checkout_upsell([{"name": "Tea", "price": 40, "quantity": 1}], self.FOODS)
        assert result["upsell_heading"] == "You Might Have Forgotten Something!"
        assert [r["name"] for r in result["recommendations"]] == ["Coke", "Juice", "Pie", "Cake"]
        assert result["upsell_message"] == "Add a drink or a sweet treat to complete your order."

    def test_combo_contents_count_as_in_cart(self):
        cart = [{"name": "Combo", "price": 300, "combo_contents": [{"name": "Coke"}, {"name": "Pie"}]}]
        names = [r["name"] for r in build_checkout_upsell(cart, self.FOODS)["recommendations"]]
        assert "Coke" not in names and "Pie" not in names

    def test_no_candidates_uses_default_message(self):
        result = build_checkout_upsell([], [])
        assert result["recommendations"] == []
        assert result["upsell_message"] == "Complete your order"
