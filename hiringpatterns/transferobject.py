"""Transfer object: plain employee records passed in and out of a staff list."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass
class Employee:
    """A plain employee record."""

    name: str
    salary: int


@dataclass
class EmployeeList:
    """Keeps copies of the employee records handed to it."""

    employees: list[Employee] = field(default_factory=list)

    def add(self, employee: Employee) -> None:
        self.employees.append(replace(employee))

    def fire(self, employee: Employee) -> None:
        """Remove the first employee with the same name, if any."""
        for position, existing in enumerate(self.employees):
            if existing.name == employee.name:
                del self.employees[position]
                return

    def show(self) -> list[str]:
        return [f"姓名：{e.name}，薪资：{e.salary}" for e in self.employees]


def main(argv=None) -> int:
    staff = EmployeeList()
    staff.add(Employee("张三", 5000))
    staff.add(Employee("李四", 6000))
    for line in staff.show():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())