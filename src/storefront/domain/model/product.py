"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: the admin console adds, edits and deletes them. Carts and
orders hold copies, so catalog edits never reach a purchase already made.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

MIN_RATING = 0.0
MAX_RATING = 5.0


class Category(Enum):
    SAAS = "SaaS Software"
    TRADING_BOTS = "Trading Bots"
    TEMPLATES = "Web Templates"
    DIGITAL_ASSETS = "Digital Assets"
    CYBERSECURITY = "Cybersecurity"
    ECOMMERCE_DEV = "E-commerce Dev"

    @staticmethod
    def parse(raw: str) -> Category:
        """Accept either the display value or the member name."""
        for member in Category:
            if raw in (member.value, member.name) or raw.lower() == member.value.lower():
                return member
        raise ValidationError(f"Unknown category: {raw!r}")


class BillingModel(Enum):
    SUBSCRIPTION = "Subscription"
    ONE_TIME = "One-time"
    SERVICE = "Service"

    @property
    def price_suffix(self) -> str:
        return _PRICE_SUFFIX[self]

    @property
    def call_to_action(self) -> str:
        return _CALL_TO_ACTION[self]

    @staticmethod
    def parse(raw: str) -> BillingModel:
        for member in BillingModel:
            if raw in (member.value, member.name):
                return member
        raise ValidationError(f"Unknown billing model: {raw!r}")


# One entry per member; tests assert the tables stay exhaustive.
_PRICE_SUFFIX = {
    BillingModel.SUBSCRIPTION: "/mo",
    BillingModel.ONE_TIME: "",
    BillingModel.SERVICE: "",
}

_CALL_TO_ACTION = {
    BillingModel.SUBSCRIPTION: "Activate Sub",
    BillingModel.ONE_TIME: "Instant Access",
    BillingModel.SERVICE: "Book Delivery",
}


def _validate_rating(rating: float) -> None:
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValidationError(
            f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}"
        )


@dataclass
class Product:
    """A purchasable item in the catalog.

    This is an aggregate root. Kept as a mutable dataclass because admin
    edits are a legitimate mutation on the aggregate; everything that must
    not follow those edits takes a ``snapshot()``.
    """

    id: str
    name: str
    category: Category
    price: Money
    description: str = ""
    image: str = ""
    rating: float = 0.0
    specs: list[str] = field(default_factory=list)
    billing_model: BillingModel = BillingModel.ONE_TIME
    disclaimer: str | None = None

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("Product ID is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        _validate_rating(self.rating)

    @property
    def display_price(self) -> str:
        return f"{self.price}{self.billing_model.price_suffix}"

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect carts or orders: they hold snapshots.
        """
        self.price = new_price

    def update_details(
        self,
        name: str | None = None,
        description: str | None = None,
        category: Category | None = None,
        rating: float | None = None,
        image: str | None = None,
        specs: list[str] | None = None,
        billing_model: BillingModel | None = None,
        disclaimer: str | None = None,
    ) -> None:
        """Apply the non-price admin edits that were supplied."""
        if name is not None:
            if not name.strip():
                raise ValidationError("Product name is required")
            self.name = name.strip()
        if rating is not None:
            _validate_rating(rating)
            self.rating = rating
        if description is not None:
            self.description = description
        if category is not None:
            self.category = category
        if image is not None:
            self.image = image
        if specs is not None:
            self.specs = list(specs)
        if billing_model is not None:
            self.billing_model = billing_model
        if disclaimer is not None:
            self.disclaimer = disclaimer or None

    def matches_text(self, query: str) -> bool:
        """Case-insensitive substring match on name or description."""
        q = query.lower()
        return q in self.name.lower() or q in self.description.lower()

    def snapshot(self) -> Product:
        return copy.deepcopy(self)
