"""Factory: invite a candidate by the name of their profession."""

from __future__ import annotations

from typing import Optional, Union


class Programmer:
    """A programmer candidate."""

    def about_myself(self) -> str:
        return "我是一名程序员"


class Salesman:
    """A sales candidate."""

    def about_myself(self) -> str:
        return "我是一名销售"


class CandidateFactory:
    """Builds a candidate for a profession name, or None if unknown."""

    _KINDS = {"programmer": Programmer, "salesman": Salesman}

    def get_candidate(self, name: str) -> Optional[Union[Programmer, Salesman]]:
        kind = self._KINDS.get(name)
        return kind() if kind else None


def main(argv=None) -> int:
    factory = CandidateFactory()
    for profession in ("programmer", "salesman"):
        print(factory.get_candidate(profession).about_myself())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())