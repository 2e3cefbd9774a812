"""Shopping list models."""

from dataclasses import dataclass

_PER_HUNDRED_UNITS = {"g", "ml"}


@dataclass(frozen=True)
class Ingredient:
    """An ingredient quantity with its unit price."""

    name: str
    amount: float
    unit: str
    price: float

    @property
    def cost(self) -> float:
        """Return the cost; gram and millilitre prices are per 100."""
        if self.unit in _PER_HUNDRED_UNITS:
            return self.price * self.amount / 100
        return self.price * self.amount

    def describe(self) -> str:
        """Return a short quantity label."""
        return f"{self.name} ({self.amount:g} {self.unit})"


@dataclass(frozen=True)
class ShoppingList:
    """Ingredients needed for the meals planned on a date."""

    date: str
    ingredients: list[Ingredient]
    missing_recipes: list[str]
    total_cost: float
