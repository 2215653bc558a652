"""Tests for the creational pattern lessons."""

from __future__ import annotations

import threading
from collections.abc import Generator

import pytest

from oopnotes.lessons.creational import (
    abstract_factory,
    builder,
    factory_method,
    prototype,
    singleton,
)


class TestSingleton:
    @pytest.fixture(autouse=True)
    def _reset(self) -> Generator[None]:
        singleton.AppConfig.reset()
        yield
        singleton.AppConfig.reset()

    def test_same_instance_and_shared_state(self) -> None:
        first = singleton.AppConfig()
        first.set("debug", True)
        second = singleton.AppConfig()
        assert first is second
        assert second.get("debug") is True

    def test_repeated_construction_keeps_state(self) -> None:
        singleton.AppConfig().set("k", 1)
        assert singleton.AppConfig().get("k") == 1

    def test_concurrent_first_access(self) -> None:
        barrier = threading.Barrier(8)
        instances: list[singleton.AppConfig] = []
        lock = threading.Lock()

        def create() -> None:
            barrier.wait()
            obj = singleton.AppConfig()
            with lock:
                instances.append(obj)

        threads = [threading.Thread(target=create) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len({id(obj) for obj in instances}) == 1

    def test_reset_gives_fresh_instance(self) -> None:
        first = singleton.AppConfig()
        singleton.AppConfig.reset()
        assert singleton.AppConfig() is not first


class TestFactoryMethod:
    def test_concrete_factories_pick_product(self) -> None:
        assert isinstance(
            factory_method.PlatinumFactory().create_card(), factory_method.PlatinumCard
        )
        assert isinstance(
            factory_method.MoneyBackFactory().create_card(), factory_method.MoneyBackCard
        )

    def test_client_only_knows_the_factory(self) -> None:
        class GoldCard(factory_method.CreditCard):
            card_type = "Gold"
            credit_limit = 1
            annual_fee = 2

        class GoldFactory(factory_method.CreditCardFactory):
            def create_card(self) -> factory_method.CreditCard:
                return GoldCard()

        assert factory_method.issue_card(GoldFactory(), "Bo") == (
            "Issued to Bo: Gold card: limit 1, annual fee 2"
        )

    def test_factory_lookup_is_case_insensitive(self) -> None:
        assert isinstance(factory_method.factory_for("PLATINUM"), factory_method.PlatinumFactory)

    def test_unknown_card_type(self) -> None:
        with pytest.raises(ValueError, match="titanium"):
            factory_method.factory_for("titanium")


class TestAbstractFactory:
    @pytest.mark.parametrize(
        ("factory", "theme"),
        [
            (abstract_factory.LightThemeFactory(), "light"),
            (abstract_factory.DarkThemeFactory(), "dark"),
        ],
    )
    def test_family_is_consistent(self, factory: abstract_factory.UIFactory, theme: str) -> None:
        rendered = abstract_factory.render_login_form(factory)
        assert all(line.endswith(f"({theme})") for line in rendered)


class TestPrototype:
    def test_clone_is_deep(self) -> None:
        original = prototype.Document("Doc", styles={"font": "A"}, sections=["one"])
        clone = original.clone(title="Copy")
        clone.sections.append("two")
        clone.styles["font"] = "B"
        assert original.sections == ["one"]
        assert original.styles == {"font": "A"}
        assert clone.title == "Copy"

    def test_registry_unknown_name(self) -> None:
        with pytest.raises(KeyError):
            prototype.PrototypeRegistry().create("missing")


class TestBuilder:
    def test_fluent_build(self) -> None:
        computer = (
            builder.ComputerBuilder().cpu("CPU").memory(8).add_storage("SSD").gpu("GPU").build()
        )
        assert computer == builder.Computer("CPU", 8, ("SSD",), "GPU")

    def test_missing_parts(self) -> None:
        with pytest.raises(ValueError, match="cpu, memory"):
            builder.ComputerBuilder().build()

    def test_names_only_the_missing_part(self) -> None:
        with pytest.raises(ValueError, match="missing: memory$"):
            builder.ComputerBuilder().cpu("CPU").build()

    def test_product_is_immutable(self) -> None:
        computer = builder.ComputerDirector().office_pc(builder.ComputerBuilder())
        with pytest.raises(AttributeError):
            computer.cpu = "other"  # type: ignore[misc]
