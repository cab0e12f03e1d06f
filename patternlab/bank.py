"""A bank account of which at most one may exist at a time."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

_ACCOUNT_NUMBER_SIZE = 20
_ACCOUNT_HOLDER_SIZE = 500


class AccountExistsError(RuntimeError):
    """Raised when an account is created while another one exists."""

    def __init__(self) -> None:
        super().__init__("A bank account already exists! Cannot create another one.")


@dataclass
class BankAccount:
    """An account number, its holder and the balance."""

    account_number: str
    account_holder: str
    balance: float

    def __post_init__(self) -> None:
        self.account_number = self.account_number[: _ACCOUNT_NUMBER_SIZE - 1]
        self.account_holder = self.account_holder[: _ACCOUNT_HOLDER_SIZE - 1]

    def describe(self) -> str:
        return (
            f"Account Number: {self.account_number}\n"
            f"Account Holder: {self.account_holder}\n"
            f"Balance: {self.balance:.2f}"
        )


_instance: Optional[BankAccount] = None


def create_bank_account(
    account_number: str, account_holder: str, balance: float
) -> BankAccount:
    """Create the one bank account; raise AccountExistsError if it exists."""
    global _instance
    if _instance is not None:
        raise AccountExistsError()
    _instance = BankAccount(account_number, account_holder, float(balance))
    return _instance


def current_bank_account() -> Optional[BankAccount]:
    """Return the existing account, or None if there is none."""
    return _instance


def destroy_bank_account() -> Optional[BankAccount]:
    """Discard the existing account and return it, or None if there was none."""
    global _instance
    removed, _instance = _instance, None
    return removed


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the single bank account demonstration."""
    del argv
    account = create_bank_account("1234567890", "DevLinux", 1000.0)
    print("Account 1 created:")
    print(account.describe())
    print()

    try:
        create_bank_account("0987654321", "DevLinux", 2000.0)
    except AccountExistsError as error:
        print(f"Error: {error}")
        print("Failed to create Account 2 because an account already exists.\n")

    current = current_bank_account()
    print("Current Bank Account:")
    if current is not None:
        print(current.describe())
    print()

    destroy_bank_account()
    print("Bank account destroyed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())