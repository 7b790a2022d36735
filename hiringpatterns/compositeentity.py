"""Composite entity: one object wraps several entities and reads and writes them together."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Entity:
    """A single piece of stored data."""

    data: str = ""


@dataclass
class CompositeEntity:
    """Holds two entities and treats them as one."""

    first: Entity = field(default_factory=Entity)
    second: Entity = field(default_factory=Entity)

    def set_data(self, data1: str, data2: str) -> None:
        self.first.data = data1
        self.second.data = data2

    def get_data(self) -> list[str]:
        return [self.first.data, self.second.data]


@dataclass
class Client:
    """Works with the composite entity only."""

    composite: CompositeEntity = field(default_factory=CompositeEntity)

    def set_data(self, data1: str, data2: str) -> None:
        self.composite.set_data(data1, data2)

    def get_data(self) -> list[str]:
        return self.composite.get_data()


def _show(values: list[str]) -> str:
    return "[" + " ".join(values) + "]"


def main(argv=None) -> int:
    client = Client()
    client.set_data("hello", "world")
    print(_show(client.get_data()))
    client.set_data("first", "second")
    print(_show(client.get_data()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())