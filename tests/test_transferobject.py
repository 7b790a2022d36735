from hiringpatterns.transferobject import Employee, EmployeeList, main


def test_show_format():
    staff = EmployeeList()
    staff.add(Employee("张三", 5000))
    assert staff.show() == ["姓名：张三，薪资：5000"]


def test_add_stores_a_copy():
    record = Employee("a", 1)
    staff = EmployeeList()
    staff.add(record)
    record.salary = 99
    assert staff.employees == [Employee("a", 1)]


def test_fire_removes_first_match_only():
    staff = EmployeeList()
    for employee in (Employee("a", 1), Employee("b", 2), Employee("a", 3)):
        staff.add(employee)
    staff.fire(Employee("a", 0))
    assert staff.employees == [Employee("b", 2), Employee("a", 3)]


def test_fire_unknown_leaves_list():
    staff = EmployeeList()
    staff.add(Employee("a", 1))
    staff.fire(Employee("z", 1))
    assert staff.employees == [Employee("a", 1)]


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "姓名：张三，薪资：5000",
        "姓名：李四，薪资：6000",
    ]