"""Service locator: look controllers up by name, caching each one once built."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Union


class Controller(Protocol):
    """A named request handler."""

    name: str

    def handle(self, request: str) -> str: ...


class Controller01:
    """The controller named "controller01"."""

    name = "controller01"

    def handle(self, request: str) -> str:
        return f"Controller01 handle {request}"


class Controller02:
    """The controller named "controller02"."""

    name = "controller02"

    def handle(self, request: str) -> str:
        return f"Controller02 handle {request}"


@dataclass
class Cache:
    """Controllers already built, found by name."""

    controllers: list[Controller] = field(default_factory=list)

    def get_controller(self, name: str) -> Optional[Controller]:
        return next((c for c in self.controllers if c.name == name), None)

    def add_controller(self, controller: Controller) -> None:
        self.controllers.append(controller)


class ControllerFactory:
    """Builds Controller01 for "controller01" and Controller02 for any other name."""

    def get_controller(self, name: str) -> Union[Controller01, Controller02]:
        if name == "controller01":
            return Controller01()
        return Controller02()


@dataclass
class Locator:
    """Serves controllers from the cache, building and caching them on a miss."""

    factory: ControllerFactory = field(default_factory=ControllerFactory)
    cache: Cache = field(default_factory=Cache)

    def get_controller(self, name: str) -> Controller:
        cached = self.cache.get_controller(name)
        if cached is not None:
            return cached
        controller = self.factory.get_controller(name)
        self.cache.add_controller(controller)
        return controller


def main(argv=None) -> int:
    locator = Locator()
    print(locator.get_controller("controller01").handle("hello"))
    print(locator.get_controller("controller02").handle("hello"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())