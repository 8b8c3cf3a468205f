"""Base-bar price estimate."""

from __future__ import annotations

from dataclasses import dataclass

from ..entities import WardrobeConfiguration

PRICE_PER_UNIT = 100 / 2
LIST_PRICE_MARKUP = 1.2


@dataclass(frozen=True)
class PriceEstimate:
    """Displayed price with its crossed-out list price."""

    price: float
    original_price: float

    @property
    def discount_percentage(self) -> int:
        if self.original_price <= 0:
            return 0
        return round((self.original_price - self.price) / self.original_price * 100)


def estimate_price(config: WardrobeConfiguration) -> PriceEstimate:
    """Estimate the price from each section's footprint and the base bar height.

    Example:
        A linear 60x60 wardrobe with a 7cm base bar:
        0.6 * 0.6 * 50 * 7 = 126.0
    """
    total = sum(
        (section.width / 100) * (section.depth / 100) * PRICE_PER_UNIT * config.base_bar_height
        for section in config.sections.values()
    )
    price = round(total, 2)
    return PriceEstimate(price=price, original_price=round(price * LIST_PRICE_MARKUP, 2))
