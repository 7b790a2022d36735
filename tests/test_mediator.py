from hiringpatterns.mediator import Candidate, Sales, Talents, Technology, main


def test_talents_message():
    result = Talents().show_candidate(Candidate("张三", "销售"))
    assert result == "这名候选人的姓名是 张三，职业是 销售。"


def test_departments_forward_to_shared_pool():
    talents = Talents()
    candidate = Candidate("李四", "程序员")
    expected = talents.show_candidate(candidate)
    assert Sales(talents).show_candidate(candidate) == expected
    assert Technology(talents).show_candidate(candidate) == expected


def test_departments_share_the_pool_object():
    talents = Talents()
    assert Sales(talents).talents is Technology(talents).talents


def test_message_contains_name_and_career():
    result = Sales().show_candidate(Candidate("王五", "会计"))
    assert "王五" in result
    assert "会计" in result


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert "张三" in lines[0]
    assert "程序员" in lines[1]