"""Library – books, members and the library fold.

A loan lives in two places: on the book (borrower, due date) and on the
member (active loan ids, then a history record once returned).
"""
from __future__ import annotations

import dataclasses
import enum
from datetime import datetime
from typing import Any, Mapping

from eventfold.application.event_sourcing import EventContext, EventStore, Fold, Projection
from eventfold.domains.library import events
from eventfold.kernel.time import parse_iso


class BookStatus(enum.StrEnum):
    AVAILABLE = "available"
    BORROWED = "borrowed"
    RESERVED = "reserved"


@dataclasses.dataclass
class Book:
    book_id: str
    title: str
    author: str
    category: str
    added_at: str
    isbn: str | None = None
    status: BookStatus = BookStatus.AVAILABLE
    borrowed_by: str | None = None
    borrowed_at: str | None = None
    due_date: str | None = None
    reserved_by: str | None = None


@dataclasses.dataclass
class LoanRecord:
    book_id: str
    borrowed_at: str | None
    returned_at: str


@dataclasses.dataclass
class Member:
    member_id: str
    name: str
    registered_at: str
    email: str | None = None
    current_loans: list[str] = dataclasses.field(default_factory=list)
    loan_history: list[LoanRecord] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class LibraryState:
    library_id: str
    name: str = ""
    address: str | None = None
    books: list[Book] = dataclasses.field(default_factory=list)
    members: list[Member] = dataclasses.field(default_factory=list)
    total_books: int = 0
    available_books: int = 0
    total_members: int = 0
    created_at: str = ""

    def find_book(self, book_id: str) -> Book | None:
        return next((b for b in self.books if b.book_id == book_id), None)

    def find_member(self, member_id: str) -> Member | None:
        return next((m for m in self.members if m.member_id == member_id), None)


def is_book_overdue(book: Book, now: datetime) -> bool:
    if book.status is not BookStatus.BORROWED or book.due_date is None:
        return False
    return parse_iso(book.due_date) < now


def overdue_books(state: LibraryState, now: datetime) -> list[Book]:
    return [b for b in state.books if is_book_overdue(b, now)]


def member_loans(state: LibraryState, member_id: str) -> list[Book]:
    """Books currently lent to *member_id*; empty for an unknown member."""
    member = state.find_member(member_id)
    if member is None:
        return []
    return [b for b in state.books if b.book_id in member.current_loans]


def _created(state: LibraryState, data: Mapping[str, Any]) -> None:
    state.name = data["name"]
    state.address = data.get("address")
    state.created_at = data["createdAt"]


def _book_added(state: LibraryState, data: Mapping[str, Any]) -> None:
    state.books.append(
        Book(
            book_id=data["bookId"],
            isbn=data.get("isbn"),
            title=data["title"],
            author=data["author"],
            category=data["category"],
            added_at=data["addedAt"],
        )
    )


def _member_registered(state: LibraryState, data: Mapping[str, Any]) -> None:
    state.members.append(
        Member(
            member_id=data["memberId"],
            name=data["name"],
            email=data.get("email"),
            registered_at=data["registeredAt"],
        )
    )


def _borrowed(state: LibraryState, data: Mapping[str, Any]) -> None:
    book = state.find_book(data["bookId"])
    if book is not None:
        book.status = BookStatus.BORROWED
        book.borrowed_by = data["memberId"]
        book.borrowed_at = data["borrowedAt"]
        book.due_date = data.get("dueDate")
        book.reserved_by = None
    member = state.find_member(data["memberId"])
    if member is not None and data["bookId"] not in member.current_loans:
        member.current_loans.append(data["bookId"])


def _returned(state: LibraryState, data: Mapping[str, Any]) -> None:
    book = state.find_book(data["bookId"])
    member = state.find_member(data["memberId"])
    if book is None or member is None:
        return
    if data["bookId"] in member.current_loans:
        member.current_loans.remove(data["bookId"])
        member.loan_history.append(
            LoanRecord(
                book_id=book.book_id,
                borrowed_at=book.borrowed_at,
                returned_at=data["returnedAt"],
            )
        )
    book.status = BookStatus.RESERVED if book.reserved_by else BookStatus.AVAILABLE
    book.borrowed_by = None
    book.borrowed_at = None
    book.due_date = None


def _reserved(state: LibraryState, data: Mapping[str, Any]) -> None:
    book = state.find_book(data["bookId"])
    if book is not None and book.status is BookStatus.BORROWED:
        book.reserved_by = data["memberId"]


def _reservation_cancelled(state: LibraryState, data: Mapping[str, Any]) -> None:
    book = state.find_book(data["bookId"])
    if book is None or book.reserved_by != data["memberId"]:
        return
    book.reserved_by = None
    if book.status is BookStatus.RESERVED:
        book.status = BookStatus.AVAILABLE


def _totals(state: LibraryState) -> None:
    state.total_books = len(state.books)
    state.available_books = sum(1 for b in state.books if b.status is BookStatus.AVAILABLE)
    state.total_members = len(state.members)


LIBRARY_FOLD: Fold[LibraryState] = Fold(
    initial=lambda library_id: LibraryState(library_id=library_id),
    reducers={
        events.LIBRARY_CREATED: _created,
        events.BOOK_ADDED: _book_added,
        events.MEMBER_REGISTERED: _member_registered,
        events.BOOK_BORROWED: _borrowed,
        events.BOOK_RETURNED: _returned,
        events.BOOK_RESERVED: _reserved,
        events.RESERVATION_CANCELLED: _reservation_cancelled,
    },
    finalize=_totals,
)


def library_projection(store: EventStore, context: EventContext) -> Projection[LibraryState]:
    return Projection(
        store,
        context,
        domain=events.DOMAIN,
        id_field=events.ID_FIELD,
        created_fact=events.LIBRARY_CREATED,
        fold=LIBRARY_FOLD,
    )


__all__ = [
    "Book",
    "BookStatus",
    "LIBRARY_FOLD",
    "LibraryState",
    "LoanRecord",
    "Member",
    "is_book_overdue",
    "library_projection",
    "member_loans",
    "overdue_books",
]
