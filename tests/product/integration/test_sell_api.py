import pytest

from tests.route_constant import PRODUCT_GET, TRANSACTION_BASE, TRANSACTION_GET
from tests.shared.utils import assert_response_status, create_product, sell_product


@pytest.mark.integration
class TestSellProduct:
    def test_sell_decrements_stock_and_records_transaction(self, client, owner):
        product = create_product(client, name='Blue Widget', price=19.99, stock_quantity=10)

        response = sell_product(client, product['id'], 3)

        assert_response_status(response, 200)
        body = response.json()
        assert body['sold'] == 3
        assert body['totalAmount'] == 59.97
        assert body['product']['stockQuantity'] == 7
        assert body['product']['stockStatus'] == 'in-stock'

        transaction = client.get(TRANSACTION_GET.format(transaction_id=body['transactionId'])).json()
        assert transaction['productId'] == product['id']
        assert transaction['productName'] == 'Blue Widget'
        assert transaction['quantity'] == 3
        assert transaction['unitPrice'] == 19.99
        assert transaction['totalAmount'] == 59.97

    def test_selling_everything_leaves_product_out_of_stock(self, client, owner):
        product = create_product(client, stock_quantity=4)

        body = sell_product(client, product['id'], 4).json()

        assert body['product']['stockQuantity'] == 0
        assert body['product']['stockStatus'] == 'out-of-stock'

    def test_insufficient_stock_changes_nothing(self, client, owner):
        product = create_product(client, stock_quantity=2)

        response = sell_product(client, product['id'], 5)

        assert_response_status(response, 400)
        assert response.json()['detail'] == 'Insufficient stock. Available: 2, Requested: 5'
        assert client.get(PRODUCT_GET.format(product_id=product['id'])).json()['stockQuantity'] == 2
        assert client.get(TRANSACTION_BASE).json()['transactions'] == []

    @pytest.mark.parametrize('quantity', [2**31, 2**63, 10**30])
    def test_quantity_beyond_integer_range_is_insufficient_stock(self, client, owner, quantity):
        product = create_product(client, stock_quantity=5)

        response = sell_product(client, product['id'], quantity)

        assert_response_status(response, 400)
        assert response.json()['detail'] == f'Insufficient stock. Available: 5, Requested: {quantity}'
        assert client.get(PRODUCT_GET.format(product_id=product['id'])).json()['stockQuantity'] == 5
        assert client.get(TRANSACTION_BASE).json()['transactions'] == []

    def test_huge_quantity_on_unknown_product_is_not_found(self, client, owner):
        assert_response_status(sell_product(client, 999, 2**63), 404)

    def test_total_beyond_price_column_is_recorded(self, client, owner):
        product = create_product(client, price=9999999999.99, stock_quantity=1000)

        response = sell_product(client, product['id'], 1000)

        assert_response_status(response, 200)
        assert response.json()['totalAmount'] == 9999999999990.0

    @pytest.mark.parametrize('quantity', [0, -1, 1.5, '2', True, None])
    def test_invalid_quantity_is_rejected(self, client, owner, quantity):
        product = create_product(client, stock_quantity=5)

        response = sell_product(client, product['id'], quantity)

        assert_response_status(response, 400)
        assert client.get(PRODUCT_GET.format(product_id=product['id'])).json()['stockQuantity'] == 5

    def test_unknown_product_is_not_found(self, client, owner):
        response = sell_product(client, 999, 1)

        assert_response_status(response, 404)
        assert response.json()['detail'] == "Product with ID '999' not found"

    def test_cannot_sell_another_owners_product(self, client, owner, login_as_another_owner):
        product = create_product(client, stock_quantity=5)
        login_as_another_owner()

        assert_response_status(sell_product(client, product['id'], 1), 404)

    def test_transaction_keeps_name_snapshot(self, client, owner):
        product = create_product(client, name='Original Name', stock_quantity=5)
        transaction_id = sell_product(client, product['id'], 1).json()['transactionId']

        client.patch(PRODUCT_GET.format(product_id=product['id']), json={'name': 'Renamed'})
        renamed = client.get(TRANSACTION_GET.format(transaction_id=transaction_id)).json()
        assert renamed['productName'] == 'Original Name'

        assert_response_status(client.delete(PRODUCT_GET.format(product_id=product['id'])), 204)
        deleted = client.get(TRANSACTION_GET.format(transaction_id=transaction_id)).json()
        assert deleted['productName'] == 'Original Name'
        assert deleted['productId'] is None

    def test_sales_sum_to_stock_drop(self, client, owner):
        product = create_product(client, stock_quantity=20)

        for quantity in (3, 5, 1):
            assert_response_status(sell_product(client, product['id'], quantity), 200)
        assert_response_status(sell_product(client, product['id'], 12), 400)

        remaining = client.get(PRODUCT_GET.format(product_id=product['id'])).json()['stockQuantity']
        transactions = client.get(TRANSACTION_BASE, params={'product_id': product['id']}).json()[
            'transactions'
        ]
        assert remaining == 11
        assert sum(t['quantity'] for t in transactions) == 20 - remaining
