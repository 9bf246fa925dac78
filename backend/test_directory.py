import pytest

from room_booking.directory import UserDirectory
from room_booking.errors import RejectionReason, UserNotFoundError


def test_default_directory():
    directory = UserDirectory()
    assignment = directory.get_user_assignment("user123")
    assert (assignment.location, assignment.floor) == ("FPT Tower", "10")


def test_custom_assignments():
    directory = UserDirectory({"alice": {"location": "Duy Tân", "floor": "4"}})
    assert directory.get_user_assignment("alice").floor == "4"
    with pytest.raises(UserNotFoundError):
        directory.get_user_assignment("ToanLM1")


def test_unknown_user():
    with pytest.raises(UserNotFoundError) as exc_info:
        UserDirectory().get_user_assignment("ghost")
    assert exc_info.value.reason is RejectionReason.USER_NOT_FOUND
    assert exc_info.value.username == "ghost"
    assert exc_info.value.status_code == 404
