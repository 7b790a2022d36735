"""Filter: narrow a list of candidates by age or by expected salary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Candidate:
    """A candidate; gender is "male" or "female" when known."""

    gender: str = ""
    age: int = 0
    salary: int = 0
    experience: int = 0


class Young:
    """Keeps candidates aged 35 or under."""

    MAX_AGE = 35

    def filter(self, candidates: Iterable[Candidate]) -> list[Candidate]:
        return [c for c in candidates if c.age <= self.MAX_AGE]


class Cheap:
    """Keeps candidates asking 5000 or less."""

    MAX_SALARY = 5000

    def filter(self, candidates: Iterable[Candidate]) -> list[Candidate]:
        return [c for c in candidates if c.salary <= self.MAX_SALARY]


def main(argv=None) -> int:
    candidates = [
        Candidate(age=25, salary=8000, experience=5),
        Candidate(age=45, salary=8000, experience=5),
        Candidate(age=25, salary=3000, experience=5),
        Candidate(age=25, salary=10000, experience=5),
        Candidate(age=50, salary=5000, experience=5),
        Candidate(age=25, salary=5000, experience=5),
    ]
    print("young:")
    print(Young().filter(candidates))
    print("cheap:")
    print(Cheap().filter(candidates))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())