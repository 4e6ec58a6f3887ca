"""Application tests for the wishlist."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from storefront.catalogue.product.lifecycle import DeleteProduct
from storefront.wishlist.management import AddToWishlist, RemoveFromWishlist
from storefront.wishlist.wishlist_item import WishlistItem


def _entries(user_id="user-1"):
    return current_domain.repository_for(WishlistItem).for_user(user_id)


class TestWishlist:
    def test_adding_twice_keeps_one_entry(self, make_product):
        product_id = make_product()
        first = current_domain.process(AddToWishlist(user_id="user-1", product_id=product_id), asynchronous=False)
        second = current_domain.process(AddToWishlist(user_id="user-1", product_id=product_id), asynchronous=False)
        assert first == second
        assert len(_entries()) == 1

    def test_unknown_product(self):
        with pytest.raises(ValidationError) as exc:
            current_domain.process(AddToWishlist(user_id="user-1", product_id="missing"), asynchronous=False)
        assert "Product not found" in str(exc.value)

    def test_remove(self, make_product):
        product_id = make_product()
        current_domain.process(AddToWishlist(user_id="user-1", product_id=product_id), asynchronous=False)
        current_domain.process(RemoveFromWishlist(user_id="user-1", product_id=product_id), asynchronous=False)
        assert _entries() == []

    def test_remove_missing_entry_is_noop(self):
        current_domain.process(RemoveFromWishlist(user_id="user-1", product_id="missing"), asynchronous=False)

    def test_deleted_product_leaves_every_wishlist(self, make_product):
        product_id = make_product()
        keep_id = make_product(name_en="Mug", name_sv="Mugg")
        for user_id in ("user-1", "user-2"):
            current_domain.process(AddToWishlist(user_id=user_id, product_id=product_id), asynchronous=False)
        current_domain.process(AddToWishlist(user_id="user-1", product_id=keep_id), asynchronous=False)

        current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)

        assert [str(i.product_id) for i in _entries("user-1")] == [keep_id]
        assert _entries("user-2") == []
