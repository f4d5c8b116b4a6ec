"""Unit tests for Transaction domain entity"""

from datetime import datetime
from decimal import Decimal
from src.domain.transaction import Transaction, TransactionType


class TestTransactionCreation:
    """Test Transaction entity creation with both transaction types"""

    def test_create_topup_transaction(self):
        transaction = Transaction(
            card_id=1,
            transaction_type=TransactionType.TOPUP,
            amount=Decimal("50.000000"),
            new_balance=Decimal("150.000000"),
        )

        assert transaction.transaction_type == TransactionType.TOPUP
        assert transaction.amount == Decimal("50.000000")
        assert transaction.new_balance == Decimal("150.000000")
        assert transaction.fuel_price is None
        assert transaction.liters is None

    def test_create_spend_transaction(self):
        transaction = Transaction(
            card_id=1,
            transaction_type=TransactionType.SPEND,
            amount=Decimal("30.000000"),
            new_balance=Decimal("120.000000"),
            fuel_price=Decimal("1.500000"),
            liters=Decimal("20.000000"),
        )

        assert transaction.transaction_type == TransactionType.SPEND
        assert transaction.fuel_price == Decimal("1.500000")
        assert transaction.liters == Decimal("20.000000")

    def test_transaction_date_defaults_to_now(self):
        before = datetime.utcnow()
        transaction = Transaction(
            card_id=1,
            transaction_type=TransactionType.TOPUP,
            amount=Decimal("1"),
            new_balance=Decimal("1"),
        )
        after = datetime.utcnow()

        assert before <= transaction.transaction_date <= after


class TestTransactionType:
    """Test TransactionType values"""

    def test_values_match_stored_strings(self):
        assert TransactionType.TOPUP.value == "topup"
        assert TransactionType.SPEND.value == "spend"

    def test_str_enum_compares_with_raw_strings(self):
        # Rows read back from the String column are plain strings
        assert "spend" == TransactionType.SPEND
        assert "topup" != TransactionType.SPEND
