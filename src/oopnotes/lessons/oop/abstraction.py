"""Abstraction: callers depend on a capability contract, not an implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PaymentProcessor(ABC):
    """Anything that can take a payment."""

    @abstractmethod
    def pay(self, amount: float) -> str:
        """Charge *amount* and return a receipt line."""


class CreditCardProcessor(PaymentProcessor):
    def __init__(self, card_number: str) -> None:
        self._card_number = card_number

    def pay(self, amount: float) -> str:
        return f"Charged {amount:.2f} to card ending {self._card_number[-4:]}"


class PayPalProcessor(PaymentProcessor):
    def __init__(self, email: str) -> None:
        self._email = email

    def pay(self, amount: float) -> str:
        return f"Sent {amount:.2f} via PayPal account {self._email}"


def checkout(processor: PaymentProcessor, amount: float) -> str:
    """Only knows that *processor* can ``pay``."""
    return processor.pay(amount)


def demo() -> None:
    for processor in (
        CreditCardProcessor("4111111111111111"),
        PayPalProcessor("alice@example.com"),
    ):
        print(checkout(processor, 25))
    try:
        PaymentProcessor()  # type: ignore[abstract]
    except TypeError:
        print("PaymentProcessor is abstract and cannot be instantiated")
