"""Interface Segregation: clients shouldn't depend on methods they don't use."""

from __future__ import annotations

from abc import ABC, abstractmethod


class IPayment(ABC):
    """Fat interface: every payment type must support everything."""

    @abstractmethod
    def pay(self, amount: float) -> str: ...

    @abstractmethod
    def refund(self, amount: float) -> str: ...

    @abstractmethod
    def schedule(self, amount: float, day: str) -> str: ...


class Payable(ABC):
    @abstractmethod
    def pay(self, amount: float) -> str: ...


class Refundable(ABC):
    @abstractmethod
    def refund(self, amount: float) -> str: ...


class CashPayment(Payable):
    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} in cash"


class CardPayment(Payable, Refundable):
    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} by card"

    def refund(self, amount: float) -> str:
        return f"Refunded {amount:.2f} to card"


def process_refund(method: Refundable, amount: float) -> str:
    return method.refund(amount)


def demo() -> None:
    cash = CashPayment()
    card = CardPayment()
    print(cash.pay(10))
    print(card.pay(30))
    print(process_refund(card, 30))
    print(f"Cash supports refunds: {isinstance(cash, Refundable)}")
    print(f"Fat interface methods: {', '.join(sorted(IPayment.__abstractmethods__))}")
