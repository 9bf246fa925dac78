import logging

from .directory import UserDirectory
from .errors import BookingError
from .models import BookingConfirmation, BookingIntent, UserAssignment, ValidatedBooking
from .validator import CatalogValidator

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self, validator: CatalogValidator, directory: UserDirectory):
        self.validator = validator
        self.directory = directory

    def book_room(self, intent: BookingIntent) -> BookingConfirmation:
        """Validate a booking and return a confirmation. Nothing is stored."""
        try:
            booking = self.validator.validate_booking(intent)
        except BookingError as exc:
            logger.info("Booking rejected (%s): %s", exc.reason.value, intent.model_dump())
            raise

        logger.info(
            "Successful booking: user=%s location=%s floor=%s room=%s time_slot=%s",
            booking.username or "-",
            booking.location,
            booking.floor,
            booking.room,
            booking.time_slot,
        )
        return BookingConfirmation(success=True, message=self._confirmation_message(booking))

    def get_user_location(self, username: str) -> UserAssignment:
        return self.directory.get_user_assignment(username)

    @staticmethod
    def _confirmation_message(booking: ValidatedBooking) -> str:
        message = (
            f"Successfully booked {booking.room} on floor {booking.floor} "
            f"at {booking.location} for {booking.time_slot}"
        )
        if booking.username:
            message += f" for user {booking.username}"
        return message
