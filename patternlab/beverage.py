"""Beverages whose description and price grow as toppings are added."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence

COFFEE_PRICE = 20000.0
TEA_PRICE = 15000.0


@dataclass
class Beverage:
    """A drink with its current description and price."""

    description: str
    price: float


def plain_coffee() -> Beverage:
    """Return a new plain coffee."""
    return Beverage("Plain Coffee", COFFEE_PRICE)


def plain_tea() -> Beverage:
    """Return a new plain tea."""
    return Beverage("Plain Tea", TEA_PRICE)


class Topping:
    """Adds one ingredient to a beverage each time it is applied."""

    name: ClassVar[str] = ""
    cost: ClassVar[float] = 0.0

    def __init__(self, beverage: Beverage) -> None:
        self.beverage = beverage

    def apply(self) -> Beverage:
        """Add the ingredient to the description and its cost to the price."""
        self.beverage.description += f", {self.name}"
        self.beverage.price += self.cost
        return self.beverage


class MilkDecorator(Topping):
    """Adds milk."""

    name = "Milk"
    cost = 5000.0


class SugarDecorator(Topping):
    """Adds sugar."""

    name = "Sugar"
    cost = 2000.0


class PearlsDecorator(Topping):
    """Adds pearls."""

    name = "Pearls"
    cost = 3000.0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the beverage ordering demonstration."""
    del argv
    coffee = plain_coffee()
    print(f"Description: {coffee.description}")
    print(f"Price: {coffee.price:.2f}đ\n")

    MilkDecorator(coffee).apply()
    SugarDecorator(coffee).apply()

    print(f"Updated Description: {coffee.description}")
    print(f"Updated Price: {coffee.price:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())