"""Library – command payloads and handlers."""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Annotated, Any

from pydantic import StringConstraints

from eventfold.application.cqrs import CommandHandler, CommandSchema, Identifier, bounded
from eventfold.application.event_sourcing import EventContext, EventStore
from eventfold.config import AppSettings
from eventfold.domains.library import events

DEFAULT_CATEGORY = "General"

LibraryName = bounded(1, 100)
Address = bounded(1, 300)
Title = bounded(1, 200)
Author = bounded(1, 100)
Category = bounded(1, 100)
Isbn = bounded(1, 20)
MemberName = bounded(1, 100)
Email = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        to_lower=True,
        max_length=254,
        pattern=r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$",
    ),
]


class CreateLibrary(CommandSchema):
    library_id: Identifier
    name: LibraryName
    address: Address | None = None


class AddBook(CommandSchema):
    library_id: Identifier
    book_id: Identifier
    isbn: Isbn | None = None
    title: Title
    author: Author
    category: Category = DEFAULT_CATEGORY


class RegisterMember(CommandSchema):
    library_id: Identifier
    member_id: Identifier
    name: MemberName
    email: Email | None = None


class BorrowBook(CommandSchema):
    library_id: Identifier
    book_id: Identifier
    member_id: Identifier
    due_date: datetime | None = None


class ReturnBook(CommandSchema):
    library_id: Identifier
    book_id: Identifier
    member_id: Identifier


class ReserveBook(CommandSchema):
    library_id: Identifier
    book_id: Identifier
    member_id: Identifier


class CancelReservation(CommandSchema):
    library_id: Identifier
    book_id: Identifier
    member_id: Identifier


class _LibraryHandler(CommandHandler[Any]):
    domain = events.DOMAIN
    id_field = "library_id"

    def log_fields(self, payload: Any) -> dict[str, Any]:
        fields = super().log_fields(payload)
        for name in ("book_id", "member_id"):
            value = getattr(payload, name, None)
            if value is not None:
                fields[name] = value
        return fields


class CreateLibraryHandler(_LibraryHandler):
    command_type = "create-library"
    schema = CreateLibrary
    fact = events.LIBRARY_CREATED
    timestamp_field = "createdAt"
    log_event = "library_created"
    creates = True

    def log_fields(self, payload: CreateLibrary) -> dict[str, Any]:
        return {"library_id": payload.library_id, "name": payload.name}


class AddBookHandler(_LibraryHandler):
    command_type = "add-book"
    schema = AddBook
    fact = events.BOOK_ADDED
    timestamp_field = "addedAt"
    log_event = "book_added"

    def log_fields(self, payload: AddBook) -> dict[str, Any]:
        return {**super().log_fields(payload), "title": payload.title}


class RegisterMemberHandler(_LibraryHandler):
    command_type = "register-member"
    schema = RegisterMember
    fact = events.MEMBER_REGISTERED
    timestamp_field = "registeredAt"
    log_event = "member_registered"


class BorrowBookHandler(_LibraryHandler):
    """Lends a book; without a ``dueDate`` the loan runs for the configured period."""

    command_type = "borrow-book"
    schema = BorrowBook
    fact = events.BOOK_BORROWED
    timestamp_field = "borrowedAt"
    log_event = "book_borrowed"

    def __init__(
        self,
        store: EventStore,
        context: EventContext,
        *,
        loan_period: timedelta = timedelta(days=14),
    ) -> None:
        super().__init__(store, context)
        self._loan_period = loan_period

    def event_data(self, payload: BorrowBook) -> dict[str, Any]:
        data = super().event_data(payload)
        if payload.due_date is None:
            data["dueDate"] = (self._context.clock.now() + self._loan_period).isoformat()
        return data


class ReturnBookHandler(_LibraryHandler):
    command_type = "return-book"
    schema = ReturnBook
    fact = events.BOOK_RETURNED
    timestamp_field = "returnedAt"
    log_event = "book_returned"


class ReserveBookHandler(_LibraryHandler):
    command_type = "reserve-book"
    schema = ReserveBook
    fact = events.BOOK_RESERVED
    timestamp_field = "reservedAt"
    log_event = "book_reserved"


class CancelReservationHandler(_LibraryHandler):
    command_type = "cancel-reservation"
    schema = CancelReservation
    fact = events.RESERVATION_CANCELLED
    timestamp_field = "cancelledAt"
    log_event = "reservation_cancelled"


HANDLERS: tuple[type[_LibraryHandler], ...] = (
    CreateLibraryHandler,
    AddBookHandler,
    RegisterMemberHandler,
    BorrowBookHandler,
    ReturnBookHandler,
    ReserveBookHandler,
    CancelReservationHandler,
)


def command_handlers(
    store: EventStore,
    context: EventContext,
    settings: AppSettings,
) -> list[CommandHandler[Any]]:
    handlers: list[CommandHandler[Any]] = []
    for cls in HANDLERS:
        if cls is BorrowBookHandler:
            handlers.append(
                BorrowBookHandler(
                    store, context, loan_period=timedelta(days=settings.loan_period_days)
                )
            )
        else:
            handlers.append(cls(store, context))
    return handlers


__all__ = [
    "AddBook",
    "BorrowBook",
    "CancelReservation",
    "CreateLibrary",
    "HANDLERS",
    "RegisterMember",
    "ReserveBook",
    "ReturnBook",
    "command_handlers",
]
