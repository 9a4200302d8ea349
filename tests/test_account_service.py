"""Tests for AccountService: PINs, deposits, withdrawals and transfers."""

import pytest
from decimal import Decimal

from bankportal.domain.entities import TransactionType
from bankportal.domain.errors import (
    FundTransferError,
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidPinError,
    NotFoundError,
    PinAlreadyExistsError,
    UnauthorizedError,
)

PASSWORD = "s3cret-password"
PIN = "1234"


class TestCreateAccount:
    """Tests for opening accounts."""

    def test_new_account_has_zero_balance_and_no_pin(self, user_service, account_service):
        user = user_service.register_user("Jane", "jane@example.com", PASSWORD)
        account = account_service.create_account(user.id)

        assert len(account.account_number) == 6
        assert account.balance == Decimal("0")
        assert account.pin_digest is None
        assert account.user_id == user.id

    def test_account_numbers_are_unique(self, user_service, account_service):
        user = user_service.register_user("Jane", "jane@example.com", PASSWORD)
        numbers = {account_service.create_account(user.id).account_number for _ in range(5)}
        assert len(numbers) == 5

    def test_unknown_user_rejected(self, account_service):
        with pytest.raises(NotFoundError):
            account_service.create_account(999)


class TestPin:
    """Tests for PIN creation and update."""

    def test_is_pin_created(self, make_account, account_service):
        without_pin = make_account(pin=None)
        with_pin = make_account()

        assert account_service.is_pin_created(without_pin.account_number) is False
        assert account_service.is_pin_created(with_pin.account_number) is True

    def test_is_pin_created_unknown_account(self, account_service):
        with pytest.raises(NotFoundError):
            account_service.is_pin_created("zzzzzz")

    def test_pin_is_stored_as_digest(self, make_account):
        account = make_account()
        assert account.pin_digest is not None
        assert account.pin_digest != PIN

    def test_create_pin_wrong_password(self, make_account, account_service):
        account = make_account(pin=None)
        with pytest.raises(UnauthorizedError, match="Invalid password"):
            account_service.create_pin(account.account_number, "wrong", "1234")
        assert account_service.is_pin_created(account.account_number) is False

    def test_create_pin_empty_password(self, make_account, account_service):
        account = make_account(pin=None)
        with pytest.raises(UnauthorizedError, match="Password cannot be empty"):
            account_service.create_pin(account.account_number, "", "1234")

    def test_create_pin_only_once(self, make_account, account_service):
        account = make_account()
        with pytest.raises(PinAlreadyExistsError):
            account_service.create_pin(account.account_number, PASSWORD, "5678")

    def test_pin_already_exists_is_unauthorized(self):
        assert issubclass(PinAlreadyExistsError, UnauthorizedError)

    @pytest.mark.parametrize("pin", ["", "12", "abcd", "12345"])
    def test_create_pin_bad_format(self, make_account, account_service, pin):
        account = make_account(pin=None)
        with pytest.raises(InvalidPinError):
            account_service.create_pin(account.account_number, PASSWORD, pin)
        assert account_service.is_pin_created(account.account_number) is False

    def test_update_pin(self, make_account, account_service, temp_db):
        account = make_account(balance="1000")
        account_service.update_pin(account.account_number, PIN, PASSWORD, "9999")

        # Old PIN no longer works, new one does
        with pytest.raises(UnauthorizedError):
            account_service.cash_deposit(account.account_number, PIN, Decimal("100"))
        account_service.cash_deposit(account.account_number, "9999", Decimal("100"))
        assert temp_db.get_account(account.account_number).balance == Decimal("1100")

    def test_update_pin_checks_password_before_pin(self, make_account, account_service):
        account = make_account()
        with pytest.raises(UnauthorizedError, match="Invalid password"):
            account_service.update_pin(account.account_number, "0000", "wrong", "9999")

    def test_update_pin_wrong_old_pin(self, make_account, account_service):
        account = make_account()
        with pytest.raises(UnauthorizedError, match="Invalid PIN"):
            account_service.update_pin(account.account_number, "0000", PASSWORD, "9999")

    def test_update_pin_invalid_new_pin(self, make_account, account_service):
        account = make_account()
        with pytest.raises(InvalidPinError):
            account_service.update_pin(account.account_number, PIN, PASSWORD, "99")

    def test_update_pin_unknown_account(self, account_service):
        with pytest.raises(NotFoundError):
            account_service.update_pin("zzzzzz", PIN, PASSWORD, "9999")


class TestCashDeposit:
    """Tests for cash deposits."""

    def test_deposit_increases_balance_and_records_transaction(
        self, funded_account, account_service, transaction_service
    ):
        number = funded_account.account_number
        updated = account_service.cash_deposit(number, PIN, Decimal("500"))

        assert updated.balance == Decimal("1500")
        transactions = transaction_service.list_transactions(number)
        assert len(transactions) == 1
        txn = transactions[0]
        assert txn.transaction_type == TransactionType.CASH_DEPOSIT
        assert txn.amount == Decimal("500")
        assert txn.source_account_number == number
        assert txn.target_account_number is None

    def test_deposit_without_pin_created(self, make_account, account_service):
        account = make_account(pin=None)
        with pytest.raises(UnauthorizedError, match="PIN has not been created"):
            account_service.cash_deposit(account.account_number, "1234", Decimal("100"))

    @pytest.mark.parametrize("pin", ["", None])
    def test_deposit_empty_pin(self, funded_account, account_service, pin):
        with pytest.raises(UnauthorizedError, match="PIN cannot be empty"):
            account_service.cash_deposit(funded_account.account_number, pin, Decimal("100"))

    def test_deposit_wrong_pin(self, funded_account, account_service, transaction_service):
        with pytest.raises(UnauthorizedError):
            account_service.cash_deposit(funded_account.account_number, "0000", Decimal("100"))
        assert transaction_service.list_transactions(funded_account.account_number) == []

    @pytest.mark.parametrize("amount", ["0", "-100", "150", "100100"])
    def test_deposit_invalid_amount(self, funded_account, account_service, temp_db, amount):
        with pytest.raises(InvalidAmountError):
            account_service.cash_deposit(funded_account.account_number, PIN, Decimal(amount))
        assert temp_db.get_account(funded_account.account_number).balance == Decimal("1000")

    def test_deposit_upper_bound(self, funded_account, account_service):
        updated = account_service.cash_deposit(
            funded_account.account_number, PIN, Decimal("100000")
        )
        assert updated.balance == Decimal("101000")

    def test_deposit_unknown_account(self, account_service):
        with pytest.raises(NotFoundError):
            account_service.cash_deposit("zzzzzz", PIN, Decimal("100"))


class TestCashWithdrawal:
    """Tests for cash withdrawals."""

    def test_withdrawal_decreases_balance(
        self, funded_account, account_service, transaction_service
    ):
        number = funded_account.account_number
        updated = account_service.cash_withdrawal(number, PIN, Decimal("400"))

        assert updated.balance == Decimal("600")
        [txn] = transaction_service.list_transactions(number)
        assert txn.transaction_type == TransactionType.CASH_WITHDRAWAL
        assert txn.amount == Decimal("400")
        assert txn.source_account_number == number

    def test_withdraw_entire_balance(self, funded_account, account_service):
        updated = account_service.cash_withdrawal(
            funded_account.account_number, PIN, Decimal("1000")
        )
        assert updated.balance == Decimal("0")

    def test_insufficient_balance_leaves_no_trace(
        self, make_account, account_service, transaction_service, temp_db
    ):
        account = make_account(balance="150")
        with pytest.raises(InsufficientBalanceError):
            account_service.cash_withdrawal(account.account_number, PIN, Decimal("1000"))

        assert temp_db.get_account(account.account_number).balance == Decimal("150")
        assert transaction_service.list_transactions(account.account_number) == []

    def test_amount_validated_before_balance(self, make_account, account_service):
        account = make_account(balance="100")
        with pytest.raises(InvalidAmountError):
            account_service.cash_withdrawal(account.account_number, PIN, Decimal("250"))


class TestFundTransfer:
    """Tests for transfers between accounts."""

    def test_transfer_conserves_money(
        self, make_account, account_service, transaction_service, temp_db
    ):
        source = make_account(balance="1000")
        target = make_account(balance="200")

        account_service.fund_transfer(
            source.account_number, target.account_number, PIN, Decimal("300")
        )

        new_source = temp_db.get_account(source.account_number)
        new_target = temp_db.get_account(target.account_number)
        assert new_source.balance == Decimal("700")
        assert new_target.balance == Decimal("500")
        assert new_source.balance + new_target.balance == Decimal("1200")

        [txn] = transaction_service.list_transactions(source.account_number)
        assert txn.transaction_type == TransactionType.CASH_TRANSFER
        assert txn.amount == Decimal("300")
        assert txn.source_account_number == source.account_number
        assert txn.target_account_number == target.account_number
        assert transaction_service.list_transactions(target.account_number) == [txn]

    def test_transfer_to_account_without_pin(self, make_account, account_service, temp_db):
        source = make_account(balance="1000")
        target = make_account(pin=None)

        account_service.fund_transfer(
            source.account_number, target.account_number, PIN, Decimal("100")
        )
        assert temp_db.get_account(target.account_number).balance == Decimal("100")

    def test_self_transfer_rejected(self, funded_account, account_service):
        number = funded_account.account_number
        with pytest.raises(FundTransferError):
            account_service.fund_transfer(number, number, PIN, Decimal("100"))

    def test_unknown_target(self, funded_account, account_service, temp_db):
        with pytest.raises(NotFoundError):
            account_service.fund_transfer(
                funded_account.account_number, "zzzzzz", PIN, Decimal("100")
            )
        assert temp_db.get_account(funded_account.account_number).balance == Decimal("1000")

    def test_insufficient_balance(self, make_account, account_service, temp_db):
        source = make_account(balance="100")
        target = make_account()

        with pytest.raises(InsufficientBalanceError):
            account_service.fund_transfer(
                source.account_number, target.account_number, PIN, Decimal("200")
            )
        assert temp_db.get_account(source.account_number).balance == Decimal("100")
        assert temp_db.get_account(target.account_number).balance == Decimal("0")

    def test_wrong_source_pin(self, make_account, account_service):
        source = make_account(balance="1000")
        target = make_account()
        with pytest.raises(UnauthorizedError):
            account_service.fund_transfer(
                source.account_number, target.account_number, "0000", Decimal("100")
            )

    def test_pin_checked_before_self_transfer(self, funded_account, account_service):
        number = funded_account.account_number
        with pytest.raises(UnauthorizedError):
            account_service.fund_transfer(number, number, "0000", Decimal("100"))
