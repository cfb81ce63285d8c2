"""Library domain – books, members, loans and reservations."""
from eventfold.domains.library.commands import HANDLERS, command_handlers
from eventfold.domains.library.projection import (
    LIBRARY_FOLD,
    Book,
    BookStatus,
    LibraryState,
    LoanRecord,
    Member,
    is_book_overdue,
    library_projection,
    member_loans,
    overdue_books,
)

__all__ = [
    "Book",
    "BookStatus",
    "HANDLERS",
    "LIBRARY_FOLD",
    "LibraryState",
    "LoanRecord",
    "Member",
    "command_handlers",
    "is_book_overdue",
    "library_projection",
    "member_loans",
    "overdue_books",
]
