from hiringpatterns.nullobject import Menu, NullFood, RealFood, get_menu, main


def test_existing_food_is_returned_itself():
    menu = Menu()
    beef = RealFood("牛肉")
    menu.add(beef)
    found = menu.get_food("牛肉")
    assert found is beef
    assert found.is_nil() is False


def test_missing_food_gives_null_object():
    found = get_menu().get_food("百事可乐")
    assert isinstance(found, NullFood)
    assert found.is_nil() is True
    assert found.name == "菜品不存在"


def test_empty_menu_gives_null_object():
    assert Menu().get_food("面").is_nil() is True


def test_first_match_wins():
    menu = Menu()
    first = RealFood("面")
    menu.add(first)
    menu.add(RealFood("面"))
    assert menu.get_food("面") is first


def test_sample_menu_contents():
    menu = get_menu()
    assert [food.name for food in menu.foods] == ["小米", "牛肉", "面"]
    assert all(not food.is_nil() for food in menu.foods)


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == ["牛肉", "菜品不存在"]