"""Shared fixtures for viewbind tests."""

import pytest

from controller import DEFAULT_GUARD
from model import BindingRelation, Control, Observable, ViewModel


@pytest.fixture
def model():
    """Model with one property 'x'."""
    return Observable({"x": "initial"})


@pytest.fixture
def control():
    """Control 'c1' with one property 'val'."""
    return Control("c1", {"val": ""})


@pytest.fixture
def relation():
    """Relation model.x <-> control.val."""
    return BindingRelation(name="x", property="val")


@pytest.fixture
def view_model():
    """ViewModel with control 'c1' registered."""
    vm = ViewModel()
    vm.register_control(Control("c1", {"val": ""}))
    return vm


@pytest.fixture(autouse=True)
def clean_guard():
    """The shared guard must be idle between tests."""
    yield
    assert not DEFAULT_GUARD._active
