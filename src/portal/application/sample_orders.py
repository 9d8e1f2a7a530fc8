"""Demonstration orders used to populate an empty portal."""

from __future__ import annotations

from portal.domain.model.order import LineItem, OrderDraft, serialize_items


def sample_order_drafts() -> list[OrderDraft]:
    """Return the four canned orders, ORD-2024-001 through ORD-2024-004."""

    return [
        OrderDraft(
            order_number="ORD-2024-001",
            distributor_name="Metro Grocery Supply",
            order_date="2024-12-01",
            delivery_date="2024-12-08",
            status="Confirmed",
            total_amount=15750.50,
            items=serialize_items([
                LineItem("Organic Apples", 200, "lbs", 2.50),
                LineItem("Fresh Milk", 100, "gallons", 4.25),
                LineItem("Whole Wheat Bread", 150, "loaves", 3.50),
            ]),
        ),
        OrderDraft(
            order_number="ORD-2024-002",
            distributor_name="Fresh Market Distributors",
            order_date="2024-12-02",
            delivery_date="2024-12-09",
            status="Shipped",
            total_amount=22450.75,
            items=serialize_items([
                LineItem("Fresh Vegetables Mix", 500, "lbs", 3.00),
                LineItem("Orange Juice", 80, "gallons", 6.50),
                LineItem("Greek Yogurt", 200, "units", 1.99),
            ]),
        ),
        OrderDraft(
            order_number="ORD-2024-003",
            distributor_name="Sunrise Foods Inc",
            order_date="2024-12-03",
            delivery_date="2024-12-10",
            status="Pending",
            total_amount=8900.00,
            items=serialize_items([
                LineItem("Premium Coffee Beans", 50, "lbs", 12.00),
                LineItem("Organic Honey", 30, "jars", 8.50),
                LineItem("Maple Syrup", 40, "bottles", 15.00),
            ]),
        ),
        OrderDraft(
            order_number="ORD-2024-004",
            distributor_name="Valley Fresh Produce",
            order_date="2024-12-04",
            delivery_date="2024-12-11",
            status="Delivered",
            total_amount=31200.25,
            items=serialize_items([
                LineItem("Fresh Strawberries", 300, "lbs", 4.50),
                LineItem("Organic Lettuce", 250, "heads", 2.25),
                LineItem("Cherry Tomatoes", 180, "lbs", 3.75),
            ]),
        ),
    ]
