"""Memento: back up a paper's content and restore any earlier backup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Memento:
    """One saved state of the content."""

    content: str


@dataclass
class Originator:
    """The content being written."""

    content: str = ""

    def save(self) -> Memento:
        return Memento(self.content)

    def restore(self, memento: Memento) -> None:
        self.content = memento.content


@dataclass
class CareTaker:
    """Keeps backups in the order they were taken."""

    mementos: list[Memento] = field(default_factory=list)

    def add(self, memento: Memento) -> None:
        self.mementos.append(memento)

    def get(self, index: int) -> Optional[Memento]:
        """Return backup number index, or None if there is no such backup yet."""
        if index < 0:
            raise IndexError(f"negative backup index {index}")
        if index >= len(self.mementos):
            return None
        return self.mementos[index]


def main(argv=None) -> int:
    care_taker = CareTaker()
    originator = Originator()
    originator.content = "第一次写入数据"
    care_taker.add(originator.save())
    originator.content = "第二次写入数据"
    care_taker.add(originator.save())

    originator.restore(care_taker.get(1))
    print("第二次备份的数据：" + originator.content)
    originator.restore(care_taker.get(0))
    print("第一次备份的数据：" + originator.content)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())