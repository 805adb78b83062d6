"""Payloads handed to the cart, try-on and share collaborators.

The engine never talks to those services; these helpers only shape a Look
into what each one consumes.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from scoring.looks import Look

MAX_TRY_ON_ITEMS = 4


def cart_lines(look: Look) -> List[Dict[str, Any]]:
    return [
        {"product_id": item.product_id, "price": item.price, "quantity": 1}
        for item in look.items
    ]


def cart_notification(
    look: Look,
    action_type: str = "add_all",
    customer_name: Optional[str] = None,
    customer_email: Optional[str] = None,
    session_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Admin notification body sent when a shopper adds a look to the cart."""
    return {
        "type": "ai_dresser_cart",
        "data": {
            "customerName": customer_name or "Guest",
            "customerEmail": customer_email or "Not provided",
            "lookName": look.name,
            "lookNumber": look.look_number,
            "items": [
                {"name": item.product_name, "brand": item.brand, "price": item.price}
                for item in look.items
            ],
            "totalPrice": look.total_price,
            "actionType": action_type,
            "source": "AI Dresser",
            "sessionId": session_id,
        },
    }


def try_on_items(look: Look) -> List[Tuple[str, str, str]]:
    """(name, category, image_url) per item, capped at what the try-on model accepts."""
    return [
        (item.product_name, item.category, item.image_url)
        for item in look.items[:MAX_TRY_ON_ITEMS]
    ]


def _format_price(amount: float) -> str:
    return f"₱{amount:,.0f}"


def share_summary(look: Look, share_url: str, store_name: str = "America Brands Bazaar") -> Dict[str, str]:
    lines = ", ".join(f"{i.product_name} - {_format_price(i.price)}" for i in look.items)
    message = (
        f"Check out this {look.name} from {store_name}! {lines} "
        f"Total: {_format_price(look.total_price)} {share_url}"
    )
    preview = message if len(message) <= 100 else message[:100] + "..."
    return {"look_name": look.name, "message": message, "message_preview": preview, "url": share_url}
