"""Observer: every sales channel hears about a price change at once."""

from __future__ import annotations

from typing import Protocol


class Observer(Protocol):
    """Something told when the price changes."""

    def update(self) -> str: ...


class Subject:
    """The item whose price is watched."""

    def __init__(self) -> None:
        self.observers: list[Observer] = []
        self.price = 0

    def attach(self, observer: Observer) -> None:
        self.observers.append(observer)

    def update(self, price: int) -> list[str]:
        """Set the price and return what each observer reports."""
        self.price = price
        return self.notify_observers()

    def notify_observers(self) -> list[str]:
        return [observer.update() for observer in self.observers]


class _Channel:
    def __init__(self, subject: Subject) -> None:
        self.subject = subject


class Phone(_Channel):
    """The mobile channel."""

    def update(self) -> str:
        return f"手机端当前价格是：{self.subject.price}"


class Computer(_Channel):
    """The desktop channel."""

    def update(self) -> str:
        return f"电脑端当前价格是：{self.subject.price}"


class Restaurant(_Channel):
    """The shop-front channel."""

    def update(self) -> str:
        return f"店面端当前价格是：{self.subject.price}"


def main(argv=None) -> int:
    subject = Subject()
    for channel in (Phone, Computer, Restaurant):
        subject.attach(channel(subject))
    for price in (15, 17):
        for line in subject.update(price):
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())