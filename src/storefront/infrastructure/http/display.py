"""Display metadata for the web shop page.

Emoji and category are presentation only; the catalog knows nothing about
them. Unknown ids get a generic box in the default category.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Display:
    emoji: str
    category: str


DEFAULT_DISPLAY = Display("📦", "electronics")

DISPLAY_BY_PRODUCT_ID: dict[int, Display] = {
    1: Display("💻", "electronics"),
    2: Display("📱", "electronics"),
    3: Display("🎧", "audio"),
    4: Display("📷", "cameras"),
    5: Display("⌚", "accessories"),
    6: Display("⌨️", "accessories"),
    7: Display("🖱️", "accessories"),
    8: Display("🖥️", "electronics"),
    9: Display("📱", "electronics"),
    10: Display("🔊", "audio"),
    11: Display("📹", "cameras"),
    12: Display("🎤", "audio"),
}


def display_for(product_id: int) -> Display:
    return DISPLAY_BY_PRODUCT_ID.get(product_id, DEFAULT_DISPLAY)
