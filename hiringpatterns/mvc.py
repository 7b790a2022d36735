"""Model-view-controller: show and update an employee's details."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Employee:
    """The model: an employee and their salary."""

    name: str
    salary: int


class View:
    """Renders an employee's details."""

    def show(self, name: str, salary: int) -> str:
        return f"这名员工的姓名是 {name}，薪资是 {salary}"


@dataclass
class Controller:
    """Updates the model and asks the view to render it."""

    view: View
    employee: Employee

    def update_employee_salary(self, salary: int) -> None:
        self.employee.salary = salary

    def show(self) -> str:
        return self.view.show(self.employee.name, self.employee.salary)


def main(argv=None) -> int:
    controller = Controller(View(), Employee("张三", 5000))
    print(controller.show())
    controller.update_employee_salary(10000)
    print(controller.show())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())