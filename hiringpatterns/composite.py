"""Composite: employees and their subordinates form a tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Employee:
    """An employee with the people who report to them."""

    name: str
    age: int
    subordinates: list["Employee"] = field(default_factory=list)

    def add_subordinate(self, employee: "Employee") -> None:
        self.subordinates.append(employee)

    def __iter__(self) -> Iterator["Employee"]:
        """Walk this employee and everyone below, depth first."""
        yield self
        for subordinate in self.subordinates:
            yield from subordinate

    def description(self) -> list[str]:
        """Introduce this employee and every subordinate, depth first."""
        return [f"我的名字是 {e.name}，我今年 {e.age} 岁" for e in self]


def main(argv=None) -> int:
    people = [
        Employee("张三", 30),
        Employee("张四", 29),
        Employee("张五", 28),
        Employee("张六", 27),
        Employee("张七", 26),
        Employee("张八", 25),
        Employee("张九", 24),
    ]
    boss, left, right, *rest = people
    boss.add_subordinate(left)
    boss.add_subordinate(right)
    left.add_subordinate(rest[0])
    left.add_subordinate(rest[1])
    right.add_subordinate(rest[2])
    right.add_subordinate(rest[3])

    for line in boss.description():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())