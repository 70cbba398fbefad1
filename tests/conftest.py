"""Pytest configuration and fixtures"""
import os
import pytest

os.environ.setdefault("LOG_LEVEL", "DEBUG")

from cartstate.cart import CartAdd, ProductInfo, reduce  # noqa: E402


@pytest.fixture
def widget_info():
    """Product sold in pounds and dollars"""
    return ProductInfo(name="Widget", prices={"£": 10, "$": 12})


@pytest.fixture
def case_info():
    """Second product, also priced in both currencies"""
    return ProductInfo(name="MacBook case", prices={"£": 25, "$": 30})


@pytest.fixture
def add_widget(widget_info):
    """Factory for CART_ADD actions of the widget"""
    def _make(quantity=1, properties=None, **kwargs):
        return CartAdd(
            id="a1",
            quantity=quantity,
            properties=properties or {},
            product_info=widget_info,
            **kwargs,
        )
    return _make


@pytest.fixture
def widget_cart(add_widget):
    """Cart holding a single widget"""
    return reduce(None, add_widget(1))


@pytest.fixture
def mixed_cart(add_widget, case_info):
    """Cart holding a widget, an XS widget and a case"""
    state = reduce(None, add_widget(1))
    state = reduce(state, add_widget(2, properties={"size": "XS"}))
    return reduce(state, CartAdd(id="c7", quantity=1, product_info=case_info))
