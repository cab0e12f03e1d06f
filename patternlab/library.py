"""A small library catalogue: books, users and borrowing."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

_MAX_TEXT = 99


def _clip(text: str) -> str:
    return text[:_MAX_TEXT]


class BorrowError(Exception):
    """Raised when a borrow request cannot be satisfied."""


class UserNotFoundError(BorrowError, LookupError):
    """No user with the requested name exists."""

    def __init__(self, user_name: str) -> None:
        super().__init__(f"User '{user_name}' not found.")
        self.user_name = user_name


class BookNotFoundError(BorrowError, LookupError):
    """No book with the requested ID exists."""

    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book ID {book_id} not found.")
        self.book_id = book_id


class NotEnoughCopiesError(BorrowError):
    """The book has fewer copies available than requested."""

    def __init__(self, book: "Book", requested: int) -> None:
        super().__init__(
            f"Book '{book.title}' does not have enough copies to borrow "
            f"(Available: {book.quantity})."
        )
        self.book = book
        self.requested = requested


@dataclass
class Book:
    """A book with a number of available copies."""

    id: int
    title: str
    author: str
    quantity: int

    def __post_init__(self) -> None:
        self.title = _clip(self.title)
        self.author = _clip(self.author)

    def __str__(self) -> str:
        return (
            f"[ID: {self.id}] '{self.title}' by {self.author} "
            f"(Available: {self.quantity})"
        )


@dataclass
class User:
    """A library user and the copies they hold."""

    id: int
    name: str
    borrowed_books: List[Book] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = _clip(self.name)

    def borrow(self, book: Book) -> Book:
        """Record one borrowed copy of ``book`` and return that copy."""
        copy = replace(book, quantity=1)
        self.borrowed_books.append(copy)
        return copy

    def describe(self) -> str:
        """Return the user's details and borrowed books as text."""
        lines = [f"User ID: {self.id} | Name: {self.name}", "  Borrowed Books: "]
        lines.extend(str(book) for book in self.borrowed_books)
        return "\n".join(lines)


def insert_sorted(items: List[T], item: T, key: Callable[[T], Any]) -> int:
    """Insert ``item`` into ``items`` keeping ascending order of ``key``.

    An item equal to the first element goes after it; otherwise it goes
    before the first later element that is not smaller. Returns the index.
    """
    item_key = key(item)
    if not items or item_key < key(items[0]):
        position = 0
    else:
        position = next(
            (
                index
                for index, existing in enumerate(items[1:], start=1)
                if not key(existing) < item_key
            ),
            len(items),
        )
    items.insert(position, item)
    return position


@dataclass
class Library:
    """Books kept in title order and users in the order they joined."""

    books: List[Book] = field(default_factory=list)
    users: List[User] = field(default_factory=list)

    def add_book(self, book: Book) -> None:
        insert_sorted(self.books, book, key=lambda b: b.title)

    def add_user(self, user: User) -> None:
        self.users.append(user)

    def find_book_by_id(self, book_id: int) -> Optional[Book]:
        return next((b for b in self.books if b.id == book_id), None)

    def find_book_by_title(self, title: str) -> Optional[Book]:
        return next((b for b in self.books if b.title == title), None)

    def find_user(self, name: str) -> Optional[User]:
        return next((u for u in self.users if u.name == name), None)

    def remove_book(self, book_id: int) -> Optional[Book]:
        """Remove the first book with ``book_id``; return it, or None."""
        book = self.find_book_by_id(book_id)
        if book is not None:
            self.books.remove(book)
        return book

    def borrow_book_by_id(self, user_name: str, book_id: int, amount: int) -> None:
        """Lend ``amount`` copies of a book to the named user."""
        user = self.find_user(user_name)
        book = self.find_book_by_id(book_id)
        if user is None:
            raise UserNotFoundError(user_name)
        if book is None:
            raise BookNotFoundError(book_id)
        if book.quantity < amount:
            raise NotEnoughCopiesError(book, amount)
        for _ in range(amount):
            user.borrow(book)
            book.quantity -= 1


def _print_books(books: Sequence[Book]) -> None:
    for book in books:
        print(book)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the library demonstration."""
    del argv
    library = Library()
    library.add_book(Book(1, "Clean Code", "Robert C. Martin", 3))
    library.add_book(Book(2, "Design Patterns", "Erich Gamma", 2))
    library.add_book(Book(3, "C Programming", "Dennis Ritchie", 1))
    library.add_user(User(1001, "Alice"))
    library.add_user(User(1002, "Bob"))

    print("\n Books available in the library:")
    _print_books(library.books)

    for user_name, book_id, amount in (("Alice", 1, 2), ("Bob", 3, 1), ("Alice", 2, 3)):
        try:
            library.borrow_book_by_id(user_name, book_id, amount)
        except BorrowError as error:
            print(error)

    print("\n List of users:")
    for user in library.users:
        print(user.describe())

    print("\n Books after borrow:")
    _print_books(library.books)

    search_title = "Clean Code"
    found = library.find_book_by_title(search_title)
    print(f"\n Search for book '{search_title}':")
    print(found if found is not None else "Book not found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())