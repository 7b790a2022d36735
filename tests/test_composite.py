import pytest

from hiringpatterns.composite import Employee, main


@pytest.fixture
def tree():
    boss = Employee("张三", 30)
    left = Employee("张四", 29)
    right = Employee("张五", 28)
    boss.add_subordinate(left)
    boss.add_subordinate(right)
    left.add_subordinate(Employee("张六", 27))
    left.add_subordinate(Employee("张七", 26))
    right.add_subordinate(Employee("张八", 25))
    right.add_subordinate(Employee("张九", 24))
    return boss


def test_add_subordinate_keeps_order():
    boss = Employee("a", 40)
    first, second = Employee("b", 30), Employee("c", 20)
    boss.add_subordinate(first)
    boss.add_subordinate(second)
    assert boss.subordinates == [first, second]


def test_walk_is_depth_first(tree):
    names = [e.name for e in tree]
    assert names == ["张三", "张四", "张六", "张七", "张五", "张八", "张九"]


def test_description_has_one_line_per_employee(tree):
    lines = tree.description()
    assert len(lines) == 7
    for line, employee in zip(lines, tree):
        assert line.startswith("我的名字是 ")
        assert employee.name in line
        assert str(employee.age) in line


def test_leaf_describes_only_itself():
    leaf = Employee("张九", 24)
    assert len(leaf.description()) == 1
    assert "张九" in leaf.description()[0]


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    assert "张三" in lines[0]
    assert "张六" in lines[2]