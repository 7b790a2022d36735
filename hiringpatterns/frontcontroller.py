"""Front controller: every request passes one entry point before it is dispatched."""

from __future__ import annotations

from dataclasses import dataclass, field


class Controller01:
    """Handles requests for "controller01"."""

    def handle(self) -> str:
        return "Controller01 handle"


class Controller02:
    """Handles every other request."""

    def handle(self) -> str:
        return "Controller02 handle"


@dataclass
class Dispatcher:
    """Routes a request to its controller."""

    controller01: Controller01 = field(default_factory=Controller01)
    controller02: Controller02 = field(default_factory=Controller02)

    def dispatch(self, request: str) -> str:
        if request == "controller01":
            return self.controller01.handle()
        return self.controller02.handle()


@dataclass
class FrontController:
    """Intercepts each request, then hands it to the dispatcher."""

    dispatcher: Dispatcher = field(default_factory=Dispatcher)

    def intercept(self) -> str:
        return "Front intercept"

    def dispatch_request(self, request: str) -> list[str]:
        """Return the interception notice followed by the controller's reply."""
        return [self.intercept(), self.dispatcher.dispatch(request)]


def main(argv=None) -> int:
    front = FrontController()
    for request in ("controller01", "controller02"):
        for line in front.dispatch_request(request):
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())