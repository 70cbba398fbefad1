"""
Tests for cart state models
"""

from decimal import Decimal

from cartstate.cart import CartLineItem, CartState, ProductInfo, initial_state


class TestProductInfo:
    """Tests for ProductInfo."""

    def test_prices_normalized(self):
        """Test that prices become Decimal."""
        info = ProductInfo(name="Widget", prices={"£": 9.99, "$": "12", "€": 3})

        assert info.prices["£"] == Decimal("9.99")
        assert info.prices["$"] == Decimal("12")
        assert info.price_in("€") == Decimal("3")
        assert info.price_in("¥") is None

    def test_unreadable_price_is_nan(self):
        """Test that a None or garbled price is kept as NaN."""
        info = ProductInfo(name="Widget", prices={"£": None, "$": "n/a"})

        assert info.prices["£"].is_nan()
        assert info.prices["$"].is_nan()

    def test_extra_metadata_kept(self):
        """Test that unknown product fields are carried through."""
        info = ProductInfo(name="Widget", prices={}, imageSrc="widget.png")
        assert info.model_dump()["imageSrc"] == "widget.png"


class TestCartLineItem:
    """Tests for CartLineItem."""

    def test_to_dict(self, widget_info):
        """Test serialization to the store shape."""
        item = CartLineItem(id="a1", quantity=2, properties={"size": "XS"}, product_info=widget_info)
        data = item.to_dict()

        assert data["id"] == "a1"
        assert data["properties"] == {"size": "XS"}
        assert data["productInfo"]["name"] == "Widget"
        assert data["productInfo"]["prices"]["£"] == "10"

    def test_from_dict_without_product_info(self):
        """Test deserialization of a partial line."""
        item = CartLineItem.from_dict({"id": "a1", "quantity": 4})

        assert item.quantity == 4
        assert item.properties == {}
        assert item.product_info is None


class TestCartState:
    """Tests for CartState."""

    def test_initial_state(self):
        """Test the empty cart values."""
        state = initial_state()

        assert state.total == 0
        assert state.summary == ""
        assert state.products == {}
        assert state.currency == "£"
        assert state.is_empty

    def test_initial_state_is_fresh(self):
        """Test that each initial state is a new value."""
        assert initial_state().products is not initial_state().products

    def test_aggregates(self, mixed_cart):
        """Test is_empty, total_items and display_total."""
        assert not mixed_cart.is_empty
        assert mixed_cart.total_items == 4
        assert mixed_cart.display_total == "£55.00"

    def test_serialization(self, mixed_cart):
        """Test serialization and deserialization."""
        data = mixed_cart.to_dict()

        assert data["total"] == "55"
        assert list(data["products"]) == ["c7", "a1_XS", "a1"]

        restored = CartState.from_dict(data)
        assert restored == mixed_cart

    def test_from_dict_defaults(self):
        """Test that an empty dict restores the initial state."""
        assert CartState.from_dict({}) == initial_state()

    def test_nan_total_survives_serialization(self):
        """Test that a contaminated total survives a store round trip."""
        state = CartState(total=Decimal("NaN"), currency="€")
        restored = CartState.from_dict(state.to_dict())

        assert restored.total.is_nan()
        assert restored.display_total == "€NaN"
