import pytest

from patternlab.bank import (
    AccountExistsError,
    BankAccount,
    create_bank_account,
    current_bank_account,
    destroy_bank_account,
    main,
)


@pytest.fixture(autouse=True)
def _no_account():
    destroy_bank_account()
    yield
    destroy_bank_account()


def test_no_account_initially():
    assert current_bank_account() is None


def test_create_sets_current_account():
    account = create_bank_account("ACC-0001", "Tester", 1000.0)
    assert current_bank_account() is account
    assert account.account_number == "ACC-0001"
    assert account.account_holder == "Tester"
    assert account.balance == 1000.0


def test_second_account_is_refused():
    first = create_bank_account("ACC-0001", "Tester", 1000.0)
    with pytest.raises(AccountExistsError):
        create_bank_account("ACC-0002", "Tester", 2000.0)
    assert current_bank_account() is first
    assert first.balance == 1000.0


def test_destroy_allows_new_account():
    create_bank_account("ACC-0001", "Tester", 1000.0)
    destroy_bank_account()
    assert current_bank_account() is None
    second = create_bank_account("ACC-0002", "Other", 2000.0)
    assert current_bank_account() is second
    assert second.account_number == "ACC-0002"


def test_long_fields_are_truncated():
    number = "N" * 40
    holder = "H" * 800
    account = BankAccount(number, holder, 0.0)
    assert len(account.account_number) == 19
    assert len(account.account_holder) == 499
    assert number.startswith(account.account_number)


def test_main_reports_refusal_and_cleans_up(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "Account 1 created:" in out
    assert "Failed to create Account 2 because an account already exists." in out
    assert out.rstrip().endswith("Bank account destroyed.")
    assert current_bank_account() is None