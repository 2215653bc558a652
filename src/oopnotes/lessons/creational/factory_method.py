"""Factory Method: subclasses decide which concrete product to create."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CreditCard(ABC):
    card_type: str
    credit_limit: int
    annual_fee: int

    def summary(self) -> str:
        return f"{self.card_type} card: limit {self.credit_limit}, annual fee {self.annual_fee}"


class PlatinumCard(CreditCard):
    card_type = "Platinum"
    credit_limit = 50_000
    annual_fee = 500


class MoneyBackCard(CreditCard):
    card_type = "MoneyBack"
    credit_limit = 15_000
    annual_fee = 0


class CreditCardFactory(ABC):
    @abstractmethod
    def create_card(self) -> CreditCard:
        """The factory method."""

    def issue(self, holder: str) -> str:
        card = self.create_card()
        return f"Issued to {holder}: {card.summary()}"


class PlatinumFactory(CreditCardFactory):
    def create_card(self) -> CreditCard:
        return PlatinumCard()


class MoneyBackFactory(CreditCardFactory):
    def create_card(self) -> CreditCard:
        return MoneyBackCard()


FACTORIES: dict[str, type[CreditCardFactory]] = {
    "platinum": PlatinumFactory,
    "moneyback": MoneyBackFactory,
}


def issue_card(factory: CreditCardFactory, holder: str) -> str:
    """Client code: works with any factory, never names a card class."""
    return factory.issue(holder)


def factory_for(card_type: str) -> CreditCardFactory:
    try:
        return FACTORIES[card_type.lower()]()
    except KeyError:
        raise ValueError(f"Unknown card type: {card_type}") from None


def demo() -> None:
    for card_type in ("platinum", "moneyback"):
        print(issue_card(factory_for(card_type), "Alice"))
    try:
        factory_for("titanium")
    except ValueError as exc:
        print(exc)
