"""Facade: a department assistant fronts the IT and HR support teams."""

from __future__ import annotations

from dataclasses import dataclass, field


class ITDepartment:
    """IT support."""

    def support(self) -> str:
        return "我们是 IT 部门，我们负责提供 IT 相关的服务"


class HRDepartment:
    """Human resources support."""

    def support(self) -> str:
        return "我们是 HR，我们提供人力相关服务"


@dataclass
class Assistant:
    """The single contact through which a department reaches support."""

    it: ITDepartment = field(default_factory=ITDepartment)
    hr: HRDepartment = field(default_factory=HRDepartment)

    def it_support(self) -> str:
        return self.it.support()

    def hr_support(self) -> str:
        return self.hr.support()


def main(argv=None) -> int:
    assistant = Assistant()
    print(assistant.it_support())
    print(assistant.hr_support())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())