from room_booking.errors import (
    USER_MESSAGES,
    BookingError,
    BookingRejected,
    CatalogLookupError,
    RejectionReason,
)


def test_all_reasons_have_user_message():
    for reason in RejectionReason:
        assert reason in USER_MESSAGES


def test_default_message_and_payload():
    err = CatalogLookupError(RejectionReason.UNKNOWN_FLOOR)
    assert err.status_code == 400
    assert err.to_dict() == {
        "error": "Invalid or missing floor parameter for the specified location",
        "code": "UnknownFloor",
    }


def test_message_override():
    err = BookingRejected(RejectionReason.MISSING_FIELDS, "Missing everything")
    assert str(err) == "Missing everything"
    assert isinstance(err, BookingError)
