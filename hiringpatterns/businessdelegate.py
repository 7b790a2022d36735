"""Business delegate: clients reach back-office services by keyword alone."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol


class Service(Protocol):
    """A back-office service."""

    def do_processing(self) -> str: ...


class ITService:
    """The IT department's service."""

    def do_processing(self) -> str:
        return "我们提供 IT 相关服务"


class HRService:
    """The HR department's service."""

    def do_processing(self) -> str:
        return "我们负责提供人力薪资相关服务"


class LookUp:
    """Finds the service registered under a keyword."""

    _SERVICES = {"it": ITService, "hr": HRService}

    def get_service(self, name: str) -> Optional[Service]:
        kind = self._SERVICES.get(name)
        return kind() if kind else None


@dataclass
class Delegate:
    """Runs the task of whichever service its type names."""

    service_type: str = ""
    lookup: LookUp = field(default_factory=LookUp)

    def do_task(self) -> str:
        service = self.lookup.get_service(self.service_type)
        if service is None:
            raise LookupError(f"no service of type {self.service_type!r}")
        return service.do_processing()


@dataclass
class Client:
    """Asks its delegate to do the work."""

    delegate: Delegate

    def do_task(self) -> str:
        return self.delegate.do_task()


def main(argv=None) -> int:
    delegate = Delegate()
    delegate.service_type = "it"
    print(Client(delegate).do_task())

    delegate.service_type = "hr"
    print(Client(delegate).do_task())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())