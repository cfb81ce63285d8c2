"""Library – subject prefix and event facts."""
from typing import Final

DOMAIN: Final = "library"
ID_FIELD: Final = "libraryId"

LIBRARY_CREATED: Final = "library-created"
BOOK_ADDED: Final = "book-added"
MEMBER_REGISTERED: Final = "member-registered"
BOOK_BORROWED: Final = "book-borrowed"
BOOK_RETURNED: Final = "book-returned"
BOOK_RESERVED: Final = "book-reserved"
RESERVATION_CANCELLED: Final = "reservation-cancelled"
