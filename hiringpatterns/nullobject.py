"""Null object: a menu lookup returns a stand-in food instead of nothing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Union


class Food(Protocol):
    """A dish on the menu, or the stand-in for a missing one."""

    name: str

    def is_nil(self) -> bool: ...


@dataclass(frozen=True)
class RealFood:
    """A dish that exists."""

    name: str

    def is_nil(self) -> bool:
        return False


@dataclass(frozen=True)
class NullFood:
    """The dish returned when the menu has no match."""

    name: str = "菜品不存在"

    def is_nil(self) -> bool:
        return True


@dataclass
class Menu:
    """A list of dishes searchable by name."""

    foods: list[Food] = field(default_factory=list)

    def add(self, food: Food) -> None:
        self.foods.append(food)

    def get_food(self, name: str) -> Union[Food, NullFood]:
        """Return the first dish with this name, or a NullFood."""
        return next((food for food in self.foods if food.name == name), NullFood())


def get_menu() -> Menu:
    """Return the sample menu."""
    menu = Menu()
    for name in ("小米", "牛肉", "面"):
        menu.add(RealFood(name))
    return menu


def main(argv=None) -> int:
    menu = get_menu()
    print(menu.get_food("牛肉").name)
    print(menu.get_food("百事可乐").name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())