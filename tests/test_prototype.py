from hiringpatterns.prototype import Resume, main


def test_clone_equal_but_distinct():
    original = Resume(name="张三", mobile="123")
    copied = original.clone()
    assert copied == original
    assert copied is not original


def test_changing_clone_leaves_original():
    original = Resume(name="张三", mobile="123")
    copied = original.clone()
    copied.name = "李四"
    copied.mobile = "456"
    assert original == Resume(name="张三", mobile="123")
    assert copied == Resume(name="李四", mobile="456")


def test_defaults_are_empty():
    resume = Resume()
    assert (resume.name, resume.mobile) == ("", "")


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == ["张三", "123", "李四", "456"]