"""Liskov Substitution: a subtype must work wherever its base type is expected.

The ``Naive*`` classes show the classic violation: every bird can ``fly``
until an ostrich shows up and throws. The corrected hierarchy only
promises flight where flight exists.
"""

from __future__ import annotations


class NaiveBird:
    def fly(self) -> str:
        return "flap flap"


class NaiveSparrow(NaiveBird):
    pass


class NaiveOstrich(NaiveBird):
    def fly(self) -> str:
        raise NotImplementedError("ostriches can't fly")


class Bird:
    def __init__(self, name: str) -> None:
        self.name = name

    def eat(self) -> str:
        return f"{self.name} is eating"


class FlyingBird(Bird):
    def fly(self) -> str:
        return f"{self.name} is flying"


class Sparrow(FlyingBird):
    pass


class Ostrich(Bird):
    def run(self) -> str:
        return f"{self.name} is running"


def let_it_fly(bird: FlyingBird) -> str:
    return bird.fly()


def demo() -> None:
    for naive_bird in (NaiveSparrow(), NaiveOstrich()):
        try:
            print(f"{type(naive_bird).__name__}: {naive_bird.fly()}")
        except NotImplementedError as exc:
            print(f"{type(naive_bird).__name__}: broke the contract ({exc})")

    sparrow = Sparrow("Sparrow")
    ostrich = Ostrich("Ostrich")
    print(let_it_fly(sparrow))
    print(ostrich.run())
    for bird in (sparrow, ostrich):
        print(bird.eat())
    print(f"Ostrich is a FlyingBird: {isinstance(ostrich, FlyingBird)}")
