import pytest

from atspikit.role import Role, UnknownRoleError

HIGHEST_ROLE_VALUE = 129


def test_from_int_matches_representation():
    for role_num in range(1, HIGHEST_ROLE_VALUE + 1):
        role = Role.from_int(role_num)
        assert int(role) == role_num
        assert Role(role_num) is role


def test_from_int_zero_is_invalid():
    assert Role.from_int(0) is Role.INVALID


def test_output_of_role_name():
    assert Role.INVALID.readable_name() == "invalid"
    assert Role.PUSH_BUTTON_MENU.readable_name() == "push button menu"


@pytest.mark.parametrize(
    ("number", "name"),
    [
        (1, "accelerator label"),
        (25, "html container"),
        (43, "button"),
        (59, "tearoff menu item"),
        (63, "tool bar"),
        (77, "editbar"),
        (80, "chart"),
        (89, "input method window"),
        (116, "static"),
        (128, "suggestion"),
    ],
)
def test_pinned_readable_names(number, name):
    assert Role.from_int(number).readable_name() == name


def test_str_is_readable_name():
    check_menu_item = Role.from_int(8)
    assert str(check_menu_item) == "check menu item"
    assert str(check_menu_item) == check_menu_item.readable_name()
    assert f"{Role.from_int(95)}" == "document web"


def test_all_roles_present_and_names_unique():
    roles = [Role.from_int(number) for number in range(HIGHEST_ROLE_VALUE + 1)]
    assert roles == list(Role)
    assert len({r.readable_name() for r in roles}) == len(roles)


@pytest.mark.parametrize("value", [130, 1000, -1, 2**32])
def test_unknown_role_raises(value):
    with pytest.raises(UnknownRoleError) as info:
        Role.from_int(value)
    assert info.value.value == value


def test_unknown_role_error_is_value_error():
    with pytest.raises(ValueError):
        Role.from_int(130)


def test_from_int_rejects_non_int():
    with pytest.raises(TypeError):
        Role.from_int("43")
    with pytest.raises(TypeError):
        Role.from_int(True)