"""Dependency Inversion: high-level policy depends on abstractions.

``NotificationService`` never imports an email or SMS client. It is
handed a ``MessageSender`` at construction time, so swapping the channel
(or a test double) needs no change to the service.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class MessageSender(ABC):
    @abstractmethod
    def send(self, recipient: str, message: str) -> str: ...


class EmailSender(MessageSender):
    def send(self, recipient: str, message: str) -> str:
        return f"email to {recipient}: {message}"


class SmsSender(MessageSender):
    def send(self, recipient: str, message: str) -> str:
        return f"sms to {recipient}: {message}"


class RecordingSender(MessageSender):
    """Test double that remembers what it was asked to send."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def send(self, recipient: str, message: str) -> str:
        self.sent.append((recipient, message))
        return f"recorded message for {recipient}"


class NotificationService:
    def __init__(self, sender: MessageSender) -> None:
        self._sender = sender

    def notify_order_shipped(self, recipient: str, order_id: str) -> str:
        return self._sender.send(recipient, f"order {order_id} has shipped")


def demo() -> None:
    print(NotificationService(EmailSender()).notify_order_shipped("alice@example.com", "A-17"))
    print(NotificationService(SmsSender()).notify_order_shipped("+15550100", "A-18"))

    recorder = RecordingSender()
    print(NotificationService(recorder).notify_order_shipped("bob", "A-19"))
    print(f"Recorded sends: {len(recorder.sent)}")
