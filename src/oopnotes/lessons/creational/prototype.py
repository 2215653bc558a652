"""Prototype: create new objects by cloning a configured instance."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field


@dataclass
class Document:
    title: str
    styles: dict[str, str] = field(default_factory=dict)
    sections: list[str] = field(default_factory=list)

    def clone(self, **overrides: object) -> Document:
        """Deep copy, so the clone's nested containers are its own."""
        duplicate = copy.deepcopy(self)
        for name, value in overrides.items():
            setattr(duplicate, name, value)
        return duplicate


class PrototypeRegistry:
    def __init__(self) -> None:
        self._prototypes: dict[str, Document] = {}

    def register(self, name: str, prototype: Document) -> None:
        self._prototypes[name] = prototype

    def create(self, name: str, **overrides: object) -> Document:
        try:
            prototype = self._prototypes[name]
        except KeyError:
            raise KeyError(f"No prototype registered as {name!r}") from None
        return prototype.clone(**overrides)


def demo() -> None:
    template = Document("Invoice", styles={"font": "Inter"}, sections=["header", "items"])
    registry = PrototypeRegistry()
    registry.register("invoice", template)

    invoice = registry.create("invoice", title="Invoice #42")
    invoice.sections.append("totals")
    print(f"{invoice.title}: {', '.join(invoice.sections)}")
    print(f"{template.title}: {', '.join(template.sections)}")

    shallow = copy.copy(template)
    shallow.sections.append("notes")
    print(f"Shallow copy leaked into template: {'notes' in template.sections}")

    try:
        registry.create("receipt")
    except KeyError as exc:
        print(f"Lookup failed: {exc.args[0]}")
