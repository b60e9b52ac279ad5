import pytest

from tileforge.input import Input


@pytest.fixture
def pressed():
    return set()


@pytest.fixture
def handler(pressed):
    inp = Input(lambda code: code in pressed)
    inp.add_mapping("Left", 10)
    inp.add_mapping("Left", 11)
    inp.add_mapping("Right", 20)
    return inp


def test_unknown_name_is_never_active(handler, pressed):
    pressed.update({10, 11, 20})
    handler.update()
    assert handler.is_key_pressed("Jump") is False
    assert handler.is_key_down("Jump") is False
    assert handler.is_key_up("Jump") is False


def test_any_bound_code_presses_the_name(handler, pressed):
    pressed.add(11)
    handler.update()
    assert handler.is_key_pressed("Left") is True
    assert handler.is_key_pressed("Right") is False


def test_down_only_in_first_frame(handler, pressed):
    pressed.add(10)
    handler.update()
    assert handler.is_key_down("Left") is True
    handler.update()
    assert handler.is_key_down("Left") is False
    assert handler.is_key_pressed("Left") is True


def test_up_only_in_release_frame(handler, pressed):
    pressed.add(20)
    handler.update()
    assert handler.is_key_up("Right") is False
    pressed.clear()
    handler.update()
    assert handler.is_key_up("Right") is True
    assert handler.is_key_pressed("Right") is False
    handler.update()
    assert handler.is_key_up("Right") is False


def test_nothing_pressed_before_first_update(handler, pressed):
    pressed.add(10)
    assert handler.is_key_pressed("Left") is False


def test_last_added_name_is_sampled(handler, pressed):
    handler.add_mapping("Esc", 99)
    pressed.add(99)
    handler.update()
    assert handler.is_key_pressed("Esc") is True


def test_too_many_names_rejected():
    inp = Input(lambda code: False)
    for code in range(31):
        inp.add_mapping(f"key{code}", code)
    with pytest.raises(ValueError):
        inp.add_mapping("one_more", 1000)


def test_instances_are_independent(pressed):
    first = Input(lambda code: code in pressed)
    second = Input(lambda code: code in pressed)
    first.add_mapping("A", 1)
    second.add_mapping("B", 2)
    pressed.add(2)
    first.update()
    second.update()
    assert first.is_key_pressed("A") is False
    assert second.is_key_pressed("B") is True