"""Service layer tests for sellers app."""

import pytest
from decimal import Decimal
from uuid import uuid4

from apps.sellers.models import Seller
from apps.sellers.services import (
    create_seller,
    get_seller_by_id,
    list_sellers,
    update_seller,
    delete_seller,
    credit_seller,
    SellerNotFoundError,
    InvalidSellerDataError,
)


@pytest.mark.django_db
class TestSellerManagement:

    def test_create_seller_starts_with_zero_balance(self):
        seller = create_seller(name='Lea', email='lea@example.com')

        assert seller.id is not None
        assert seller.amount_owed == Decimal('0.00')

    def test_create_seller_requires_name_and_email(self):
        with pytest.raises(InvalidSellerDataError):
            create_seller(name='', email='lea@example.com')

        with pytest.raises(InvalidSellerDataError):
            create_seller(name='Lea', email='')

    def test_get_seller(self, seller):
        assert get_seller_by_id(seller_id=seller.id) == seller

    def test_get_seller_missing(self):
        with pytest.raises(SellerNotFoundError):
            get_seller_by_id(seller_id=uuid4())

    def test_list_sellers_search(self, seller, other_seller):
        results = list(list_sellers(search='paul'))

        assert results == [other_seller]

    def test_update_is_partial_merge(self, seller):
        updated = update_seller(seller_id=seller.id, phone='0700000000')

        assert updated.phone == '0700000000'
        assert updated.name == 'Jeanne Martin'
        assert updated.email == 'jeanne@example.com'

    def test_update_ignores_balance(self, other_seller):
        updated = update_seller(seller_id=other_seller.id, amount_owed=Decimal('0'))

        assert updated.amount_owed == Decimal('42.50')

    def test_update_rejects_blank_name(self, seller):
        with pytest.raises(InvalidSellerDataError):
            update_seller(seller_id=seller.id, name='')

    def test_update_missing(self):
        with pytest.raises(SellerNotFoundError):
            update_seller(seller_id=uuid4(), name='Ghost')

    def test_delete_seller(self, seller):
        delete_seller(seller_id=seller.id)

        assert not Seller.objects.filter(id=seller.id).exists()

    def test_delete_missing(self):
        with pytest.raises(SellerNotFoundError):
            delete_seller(seller_id=uuid4())

    def test_credit_seller_accumulates(self, other_seller):
        credit_seller(seller=other_seller, amount=Decimal('18.00'))
        credit_seller(seller=other_seller, amount=Decimal('1.50'))

        other_seller.refresh_from_db()
        assert other_seller.amount_owed == Decimal('62.00')
