import pytest

from patternlab.library import (
    Book,
    BookNotFoundError,
    BorrowError,
    Library,
    NotEnoughCopiesError,
    User,
    UserNotFoundError,
    insert_sorted,
    main,
)


@pytest.fixture
def library():
    lib = Library()
    lib.add_book(Book(1, "Clean Code", "Robert C. Martin", 3))
    lib.add_book(Book(2, "Design Patterns", "Erich Gamma", 2))
    lib.add_book(Book(3, "C Programming", "Dennis Ritchie", 1))
    lib.add_user(User(1001, "Alice"))
    lib.add_user(User(1002, "Bob"))
    return lib


def test_books_kept_in_title_order(library):
    titles = [b.title for b in library.books]
    assert titles == ["C Programming", "Clean Code", "Design Patterns"]


def test_users_kept_in_insertion_order(library):
    assert [u.name for u in library.users] == ["Alice", "Bob"]


def test_book_str_format():
    book = Book(1, "Clean Code", "Robert C. Martin", 3)
    assert str(book) == "[ID: 1] 'Clean Code' by Robert C. Martin (Available: 3)"


def test_long_text_is_clipped():
    book = Book(7, "t" * 150, "a" * 120, 1)
    user = User(5, "n" * 200)
    assert len(book.title) == 99
    assert len(book.author) == 99
    assert len(user.name) == 99


def test_borrow_reduces_quantity_and_records_copies(library):
    library.borrow_book_by_id("Alice", 1, 2)
    book = library.find_book_by_id(1)
    alice = library.find_user("Alice")
    assert book.quantity == 1
    assert len(alice.borrowed_books) == 2
    assert all(copy.quantity == 1 and copy.id == 1 for copy in alice.borrowed_books)
    assert all(copy is not book for copy in alice.borrowed_books)


def test_borrow_not_enough_copies(library):
    with pytest.raises(NotEnoughCopiesError) as info:
        library.borrow_book_by_id("Alice", 2, 3)
    assert str(info.value) == (
        "Book 'Design Patterns' does not have enough copies to borrow (Available: 2)."
    )
    assert library.find_book_by_id(2).quantity == 2
    assert library.find_user("Alice").borrowed_books == []


def test_borrow_unknown_user(library):
    with pytest.raises(UserNotFoundError) as info:
        library.borrow_book_by_id("Carol", 1, 1)
    assert str(info.value) == "User 'Carol' not found."
    assert isinstance(info.value, BorrowError)


def test_unknown_user_reported_before_unknown_book(library):
    with pytest.raises(UserNotFoundError):
        library.borrow_book_by_id("Carol", 99, 1)


def test_borrow_unknown_book(library):
    with pytest.raises(BookNotFoundError) as info:
        library.borrow_book_by_id("Bob", 42, 1)
    assert str(info.value) == "Book ID 42 not found."


def test_borrow_all_copies(library):
    library.borrow_book_by_id("Bob", 3, 1)
    assert library.find_book_by_id(3).quantity == 0
    with pytest.raises(NotEnoughCopiesError):
        library.borrow_book_by_id("Alice", 3, 1)


def test_find_book_by_title(library):
    found = library.find_book_by_title("Clean Code")
    assert found.id == 1
    assert library.find_book_by_title("Missing") is None


def test_find_user_missing(library):
    assert library.find_user("Nobody") is None


def test_remove_book(library):
    removed = library.remove_book(2)
    assert removed.title == "Design Patterns"
    assert library.find_book_by_id(2) is None
    assert len(library.books) == 2
    assert library.remove_book(2) is None
    assert len(library.books) == 2


def test_user_describe(library):
    library.borrow_book_by_id("Bob", 3, 1)
    text = library.find_user("Bob").describe()
    assert text.splitlines() == [
        "User ID: 1002 | Name: Bob",
        "  Borrowed Books: ",
        "[ID: 3] 'C Programming' by Dennis Ritchie (Available: 1)",
    ]


def test_user_borrow_returns_copy():
    user = User(1, "Alice")
    book = Book(9, "Title", "Author", 5)
    copy = user.borrow(book)
    assert copy.quantity == 1
    assert copy.title == book.title
    assert book.quantity == 5
    assert user.borrowed_books == [copy]


def test_insert_sorted_middle():
    items = [1, 3]
    index = insert_sorted(items, 2, key=lambda x: x)
    assert items == [1, 2, 3]
    assert index == 1


def test_insert_sorted_front_and_empty():
    items = []
    assert insert_sorted(items, 5, key=lambda x: x) == 0
    assert insert_sorted(items, 1, key=lambda x: x) == 0
    assert items == [1, 5]


def test_insert_sorted_tie_with_head_goes_after():
    items = [(1, "a")]
    insert_sorted(items, (1, "b"), key=lambda x: x[0])
    assert items == [(1, "a"), (1, "b")]


def test_insert_sorted_keeps_order_invariant():
    items = []
    for value in [7, 2, 9, 2, 4, 0, 11, 4]:
        insert_sorted(items, value, key=lambda x: x)
    assert items == sorted(items)
    assert len(items) == 8


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "[ID: 1] 'Clean Code' by Robert C. Martin (Available: 1)" in out
    assert "User ID: 1001 | Name: Alice" in out
    assert "does not have enough copies to borrow" in out
    assert "Search for book 'Clean Code':" in out