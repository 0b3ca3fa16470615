from decimal import Decimal

import attrs
import pytest

from src.shared.exception.exceptions import ValidationError
from src.transaction.domain.transaction_entity import Transaction


@pytest.mark.unit
class TestTransactionEntity:
    def test_record_sale_snapshots_price_and_total(self):
        transaction = Transaction.record_sale(
            user_id=1, product_id=3, product_name='Blue Widget', unit_price=Decimal('19.99'), quantity=3
        )

        assert transaction.unit_price == Decimal('19.99')
        assert transaction.total_amount == Decimal('59.97')
        assert transaction.quantity == 3
        assert transaction.id is None

    def test_total_is_rounded_once(self):
        transaction = Transaction.record_sale(
            user_id=1, product_id=3, product_name='Bolt', unit_price=Decimal('0.335'), quantity=3
        )

        # 0.335 -> 0.34 unit price, then 0.34 * 3
        assert transaction.total_amount == Decimal('1.02')

    @pytest.mark.parametrize('quantity', [0, -1, 2.0, False])
    def test_quantity_must_be_a_positive_whole_number(self, quantity):
        with pytest.raises(ValidationError):
            Transaction.record_sale(
                user_id=1, product_id=3, product_name='Bolt', unit_price=Decimal('1'), quantity=quantity
            )

    def test_transactions_are_immutable(self):
        transaction = Transaction.record_sale(
            user_id=1, product_id=3, product_name='Bolt', unit_price=Decimal('1'), quantity=1
        )

        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            transaction.quantity = 5  # type: ignore[misc]

    def test_product_reference_may_be_cleared(self):
        transaction = Transaction(
            user_id=1,
            product_id=None,
            product_name='Deleted Widget',
            quantity=1,
            unit_price=Decimal('1'),
            total_amount=Decimal('1'),
        )
        assert transaction.product_id is None
