from hiringpatterns.command import Interviewer, Pass, Reject, main


def test_pass_message():
    assert Pass(Interviewer("张三")).execute() == "张三 先生/女士，恭喜您通过我们的面试。"


def test_reject_message():
    assert Reject(Interviewer("李四")).execute() == "李四 先生/女士，很遗憾您没有通过我们的面试。"


def test_messages_start_with_name():
    person = Interviewer("王五")
    for command in (Pass(person), Reject(person)):
        assert command.execute().startswith("王五 先生/女士")


def test_pass_and_reject_differ():
    person = Interviewer("王五")
    assert Pass(person).execute() != Reject(person).execute()
    assert "恭喜" in Pass(person).execute()
    assert "遗憾" in Reject(person).execute()


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("张三")
    assert lines[1].startswith("李四")