"""Open/Closed: add behavior by adding code, not by editing working code."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DiscountPolicy(ABC):
    @abstractmethod
    def apply(self, price: float) -> float:
        """Return the discounted price."""


class NoDiscount(DiscountPolicy):
    def apply(self, price: float) -> float:
        return price


class SeasonalDiscount(DiscountPolicy):
    def __init__(self, percent: float) -> None:
        self.percent = percent

    def apply(self, price: float) -> float:
        return price * (1 - self.percent / 100)


class LoyaltyDiscount(DiscountPolicy):
    """Added later without touching ``PriceCalculator``."""

    def __init__(self, amount_off: float) -> None:
        self.amount_off = amount_off

    def apply(self, price: float) -> float:
        return max(price - self.amount_off, 0.0)


class PriceCalculator:
    def __init__(self, policy: DiscountPolicy) -> None:
        self.policy = policy

    def final_price(self, price: float) -> float:
        return round(self.policy.apply(price), 2)


def demo() -> None:
    policies: list[DiscountPolicy] = [NoDiscount(), SeasonalDiscount(20), LoyaltyDiscount(15)]
    for policy in policies:
        calculator = PriceCalculator(policy)
        print(f"{type(policy).__name__}: {calculator.final_price(100):.2f}")
