"""Encapsulation: internal state is private and only changes through methods.

``BankAccount`` keeps its balance behind a read-only property so the
"balance never goes negative" rule can't be bypassed. ``User`` accepts a
password through a validating setter and only ever stores its hash.
"""

from __future__ import annotations

import hashlib


class InsufficientFundsError(Exception):
    """Raised when a withdrawal would overdraw the account."""


class BankAccount:
    """Account whose balance can only change through deposit/withdraw."""

    def __init__(self, owner: str, balance: int = 0) -> None:
        if balance < 0:
            raise ValueError("Opening balance cannot be negative")
        self.owner = owner
        self.__balance = balance

    @property
    def balance(self) -> int:
        return self.__balance

    def deposit(self, amount: int) -> None:
        if amount <= 0:
            raise ValueError("Deposit amount must be positive")
        self.__balance += amount

    def withdraw(self, amount: int) -> None:
        if amount <= 0:
            raise ValueError("Withdrawal amount must be positive")
        if amount > self.__balance:
            raise InsufficientFundsError(
                f"cannot withdraw {amount}, balance is {self.__balance}"
            )
        self.__balance -= amount


MIN_PASSWORD_LENGTH = 8


class User:
    """User whose password is write-only and stored hashed."""

    def __init__(self, username: str) -> None:
        self.username = username
        self._password_hash: str | None = None

    @property
    def password(self) -> str:
        raise AttributeError("password is write-only")

    @password.setter
    def password(self, value: str) -> None:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        self._password_hash = hashlib.sha256(value.encode("utf-8")).hexdigest()

    def check_password(self, value: str) -> bool:
        if self._password_hash is None:
            return False
        return hashlib.sha256(value.encode("utf-8")).hexdigest() == self._password_hash


def demo() -> None:
    account = BankAccount("Alice", 100)
    account.deposit(50)
    print(f"Balance after deposit: {account.balance}")
    try:
        account.withdraw(500)
    except InsufficientFundsError as exc:
        print(f"Withdrawal rejected: {exc}")
    print(f"Balance is unchanged: {account.balance}")

    user = User("bob")
    try:
        user.password = "abc"
    except ValueError as exc:
        print(f"Password rejected: {exc}")
    user.password = "correct-horse"
    print(f"Password accepted: {user.check_password('correct-horse')}")
