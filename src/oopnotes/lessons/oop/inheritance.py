"""Inheritance: a derived type reuses and selectively overrides its base."""

from __future__ import annotations


class Animal:
    def __init__(self, name: str) -> None:
        self.name = name

    def speak(self) -> str:
        return "..."

    def describe(self) -> str:
        return f"{self.name} says {self.speak()}"


class Dog(Animal):
    def speak(self) -> str:
        return "Woof"

    def describe(self) -> str:
        return f"{super().describe()} and wags its tail"


class Cat(Animal):
    def speak(self) -> str:
        return "Meow"


def demo() -> None:
    for animal in (Animal("Generic animal"), Dog("Rex"), Cat("Tom")):
        print(animal.describe())
    print(f"Dog is an Animal: {issubclass(Dog, Animal)}")
    print(f"Method resolution order: {' -> '.join(c.__name__ for c in Dog.__mro__)}")
