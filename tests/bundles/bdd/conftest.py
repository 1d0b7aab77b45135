"""Shared BDD fixtures and step definitions for bundle selection."""

import pytest
from pytest_bdd import given, parsers, then

@pytest.fixture()
def shelf():
    """Products and bundles by display name."""
    return {}

@pytest.fixture()
def outcome():
    """Container for the result of the last customer action."""
    return {"result": None}

def _messages(datatable):
    # First row is the header
    return [row[0] for row in datatable[1:]]

# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a bundle "{name}" priced at {price:f} requiring {quantity:d} items from "{category}"'),
)
def bundle_offer(catalog, shelf, make_product, make_configuration, name, price, quantity, category):
    bundle = catalog.add_product(make_product(name=name, category="bundles", price=price, stock=999))
    catalog.add_configuration(make_configuration(str(bundle.id), category, quantity))
    shelf[name] = bundle
    shelf.setdefault("__default_bundle__", bundle)

@given(parsers.cfparse('a product "{name}" in "{category}" priced at {price:f} with {stock:d} in stock'))
def product_on_shelf(catalog, shelf, make_product, name, category, price, stock):
    shelf[name] = catalog.add_product(make_product(name=name, category=category, price=price, stock=stock))

@given(parsers.cfparse('the catalog is unavailable because "{reason}"'))
def catalog_unavailable(catalog, reason):
    catalog.configure(should_fail=True, failure_reason=reason)

# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the selection is valid")
def selection_is_valid(outcome):
    assert outcome["result"].success is True
    assert outcome["result"].data.is_valid is True
    assert outcome["result"].data.errors == []

@then("the selection is invalid")
def selection_is_invalid(outcome):
    assert outcome["result"].success is True
    assert outcome["result"].data.is_valid is False

@then("the errors are:")
def errors_are(outcome, datatable):
    assert outcome["result"].data.errors == _messages(datatable)

@then("the warnings are:")
def warnings_are(outcome, datatable):
    assert outcome["result"].data.warnings == _messages(datatable)

@then("there are no warnings")
def no_warnings(outcome):
    assert outcome["result"].data.warnings == []

@then(parsers.cfparse('the request fails with "{message}"'))
def request_fails(outcome, message):
    assert outcome["result"].success is False
    assert outcome["result"].error.message == message
