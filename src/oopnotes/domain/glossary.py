"""Glossary of the terms the notes rely on."""

from __future__ import annotations

import difflib
from dataclasses import dataclass


@dataclass(frozen=True)
class GlossaryEntry:
    term: str
    definition: str
    topic_id: str | None = None


GLOSSARY: tuple[GlossaryEntry, ...] = (
    GlossaryEntry(
        "Encapsulation",
        "Restricting direct access to an object's internal state, exposing only "
        "controlled operations.",
        "encapsulation",
    ),
    GlossaryEntry(
        "Abstraction",
        "Exposing a capability contract while hiding its implementation.",
        "abstraction",
    ),
    GlossaryEntry(
        "Inheritance",
        "A derived type reusing and optionally overriding behavior of a base type.",
        "inheritance",
    ),
    GlossaryEntry(
        "Polymorphism",
        "One operation name resolved to different behavior depending on the invoking type, "
        "at compile time (overloading) or run time (overriding).",
        "polymorphism",
    ),
    GlossaryEntry(
        "SOLID",
        "Five cohesion/coupling guidelines: Single Responsibility, Open/Closed, Liskov "
        "Substitution, Interface Segregation, Dependency Inversion.",
        "solid-overview",
    ),
    GlossaryEntry(
        "Single Responsibility",
        "A class should have one, and only one, reason to change.",
        "single-responsibility",
    ),
    GlossaryEntry(
        "Open/Closed",
        "Software entities should be open for extension but closed for modification.",
        "open-closed",
    ),
    GlossaryEntry(
        "Liskov Substitution",
        "Objects of a subtype must be usable anywhere the base type is expected.",
        "liskov-substitution",
    ),
    GlossaryEntry(
        "Interface Segregation",
        "Clients should not be forced to depend on methods they do not use.",
        "interface-segregation",
    ),
    GlossaryEntry(
        "Dependency Inversion",
        "High-level and low-level modules should both depend on abstractions.",
        "dependency-inversion",
    ),
    GlossaryEntry(
        "Creational pattern",
        "A design template governing how object instances are constructed (Singleton, "
        "Factory Method, Abstract Factory, Prototype, Builder).",
        "creational-overview",
    ),
    GlossaryEntry(
        "Singleton",
        "Ensures a class has exactly one instance and provides a global access point to it.",
        "singleton",
    ),
    GlossaryEntry(
        "Factory Method",
        "Lets subclasses decide which concrete class a creation method instantiates.",
        "factory-method",
    ),
    GlossaryEntry(
        "Abstract Factory",
        "Creates families of related objects without naming their concrete classes.",
        "abstract-factory",
    ),
    GlossaryEntry(
        "Prototype",
        "Creates new objects by cloning a configured instance.",
        "prototype",
    ),
    GlossaryEntry(
        "Builder",
        "Separates step-by-step construction of a complex object from its representation.",
        "builder",
    ),
)


def _key(term: str) -> str:
    for sep in ("-", "_", "/"):
        term = term.replace(sep, " ")
    return " ".join(term.lower().split())


_INDEX: dict[str, GlossaryEntry] = {_key(entry.term): entry for entry in GLOSSARY}


def lookup(term: str) -> GlossaryEntry:
    """Case-insensitive lookup, tolerant of hyphen, underscore and slash spelling.

    A trailing "principle" or "pattern" is ignored, so
    ``"dependency-inversion principle"`` finds "Dependency Inversion".
    """
    key = _key(term)
    if key in _INDEX:
        return _INDEX[key]
    for suffix in (" principle", " pattern"):
        if key.endswith(suffix) and key[: -len(suffix)] in _INDEX:
            return _INDEX[key[: -len(suffix)]]
    raise KeyError(term)


def suggest(term: str, *, limit: int = 3) -> list[str]:
    """Glossary terms that look like *term*."""
    matches = difflib.get_close_matches(_key(term), list(_INDEX), n=limit)
    return [_INDEX[m].term for m in matches]
