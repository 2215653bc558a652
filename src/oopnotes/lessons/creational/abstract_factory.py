"""Abstract Factory: create families of related objects that belong together."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Button(ABC):
    @abstractmethod
    def render(self) -> str: ...


class Checkbox(ABC):
    @abstractmethod
    def render(self) -> str: ...


class LightButton(Button):
    def render(self) -> str:
        return "[ OK ] (light)"


class LightCheckbox(Checkbox):
    def render(self) -> str:
        return "[x] remember me (light)"


class DarkButton(Button):
    def render(self) -> str:
        return "[ OK ] (dark)"


class DarkCheckbox(Checkbox):
    def render(self) -> str:
        return "[x] remember me (dark)"


class UIFactory(ABC):
    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox: ...


class LightThemeFactory(UIFactory):
    def create_button(self) -> Button:
        return LightButton()

    def create_checkbox(self) -> Checkbox:
        return LightCheckbox()


class DarkThemeFactory(UIFactory):
    def create_button(self) -> Button:
        return DarkButton()

    def create_checkbox(self) -> Checkbox:
        return DarkCheckbox()


def render_login_form(factory: UIFactory) -> list[str]:
    return [factory.create_checkbox().render(), factory.create_button().render()]


def demo() -> None:
    for name, factory in (("light", LightThemeFactory()), ("dark", DarkThemeFactory())):
        print(f"{name} theme:")
        for line in render_login_form(factory):
            print(f"  {line}")
