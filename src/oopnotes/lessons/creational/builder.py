"""Builder: assemble a complex object step by step, validate once at the end."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self


@dataclass(frozen=True)
class Computer:
    cpu: str
    memory_gb: int
    storage: tuple[str, ...] = ()
    gpu: str | None = None

    def describe(self) -> str:
        parts = [self.cpu, f"{self.memory_gb}GB RAM"]
        parts.extend(self.storage)
        if self.gpu:
            parts.append(self.gpu)
        return ", ".join(parts)


@dataclass
class ComputerBuilder:
    _cpu: str | None = None
    _memory_gb: int | None = None
    _storage: list[str] = field(default_factory=list)
    _gpu: str | None = None

    def cpu(self, model: str) -> Self:
        self._cpu = model
        return self

    def memory(self, gigabytes: int) -> Self:
        self._memory_gb = gigabytes
        return self

    def add_storage(self, drive: str) -> Self:
        self._storage.append(drive)
        return self

    def gpu(self, model: str) -> Self:
        self._gpu = model
        return self

    def build(self) -> Computer:
        cpu, memory_gb = self._cpu, self._memory_gb
        if not cpu or not memory_gb:
            missing = [name for name, value in (("cpu", cpu), ("memory", memory_gb)) if not value]
            raise ValueError(f"Cannot build computer, missing: {', '.join(missing)}")
        return Computer(
            cpu=cpu,
            memory_gb=memory_gb,
            storage=tuple(self._storage),
            gpu=self._gpu,
        )


class ComputerDirector:
    """Knows the recipes; the builder knows the steps."""

    def office_pc(self, builder: ComputerBuilder) -> Computer:
        return builder.cpu("4-core CPU").memory(16).add_storage("512GB SSD").build()

    def gaming_rig(self, builder: ComputerBuilder) -> Computer:
        return (
            builder.cpu("16-core CPU")
            .memory(64)
            .add_storage("2TB NVMe")
            .add_storage("4TB HDD")
            .gpu("RTX GPU")
            .build()
        )


def demo() -> None:
    director = ComputerDirector()
    print(f"Office: {director.office_pc(ComputerBuilder()).describe()}")
    print(f"Gaming: {director.gaming_rig(ComputerBuilder()).describe()}")
    try:
        ComputerBuilder().cpu("2-core CPU").build()
    except ValueError as exc:
        print(exc)
