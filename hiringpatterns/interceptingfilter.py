"""Intercepting filter: a request runs through every filter before the controller handles it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class RequestFilter(Protocol):
    """Looks at a request before the controller does."""

    def execute(self, request: str) -> str: ...


class Controller:
    """The target that finally handles the request."""

    def handle(self) -> str:
        return "Controller handle"


class Hello:
    """Notes whether the request is "hello"."""

    def execute(self, request: str) -> str:
        if request == "hello":
            return "这个请求是 hello"
        return "这个请求不是 hello"


class World:
    """Notes whether the request is "world"."""

    def execute(self, request: str) -> str:
        if request == "world":
            return "这个请求是 world"
        return "这个请求不是 world"


@dataclass
class FilterChain:
    """Runs the filters in the order added, then the controller."""

    filters: list[RequestFilter] = field(default_factory=list)
    controller: Controller = field(default_factory=Controller)

    def add_filter(self, request_filter: RequestFilter) -> None:
        self.filters.append(request_filter)

    def execute(self, request: str) -> list[str]:
        results = [f.execute(request) for f in self.filters]
        results.append(self.controller.handle())
        return results


@dataclass
class FilterManager:
    """Owns the filter chain."""

    chain: FilterChain = field(default_factory=FilterChain)

    def add_filter(self, request_filter: RequestFilter) -> None:
        self.chain.add_filter(request_filter)

    def execute(self, request: str) -> list[str]:
        return self.chain.execute(request)


@dataclass
class Client:
    """Sends requests through the filter manager."""

    manager: FilterManager = field(default_factory=FilterManager)

    def add_filter(self, request_filter: RequestFilter) -> None:
        self.manager.add_filter(request_filter)

    def send_request(self, request: str) -> list[str]:
        return self.manager.execute(request)


def main(argv=None) -> int:
    client = Client()
    client.add_filter(Hello())
    client.add_filter(World())
    for line in client.send_request("hello"):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())