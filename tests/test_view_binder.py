"""Tests for the embedded binder (Bindable, ViewBindingMixin, apply_view_binding)."""

from unittest.mock import patch

import pytest

from controller import Bindable, ConfigurationError, ViewBindingMixin, apply_view_binding
from model import Control, ControlNotFoundError, Observable, ViewChange, ViewModel


@apply_view_binding
class FormViewModel(ViewModel):
    """A view-model for a small form."""


@pytest.fixture
def form():
    form = FormViewModel()
    form.register_control(Control("c1", {"val": ""}))
    return form


class TestApplyViewBinding:
    """Tests for the class transform."""

    def test_derived_class_keeps_identity(self):
        assert FormViewModel.__name__ == "FormViewModel"
        assert FormViewModel.__doc__ == "A view-model for a small form."
        assert issubclass(FormViewModel, ViewModel)
        assert issubclass(FormViewModel, ViewBindingMixin)

    def test_bindable_is_per_instance(self):
        a = FormViewModel()
        b = FormViewModel()
        assert a.bindable is a.bindable
        assert a.bindable is not b.bindable


class TestDualBind:
    """Two-way self-binding."""

    def test_control_change_fires_view_change_on_instance(self, form):
        received = []
        form.on("change", received.append)
        form.dual_bind("x", "c1", "val")

        form.get_safely("c1").change("val", "typed")

        assert received[0].change == ViewChange("c1", "val", "typed")
        assert received[0].target is form

    def test_control_change_sets_model_exactly_once(self, form):
        form.dual_bind("x", "c1", "val")

        with patch.object(form.model, "set", wraps=form.model.set) as model_set:
            form.get_safely("c1").change("val", "typed")

        model_set.assert_called_once_with("x", "typed")
        assert form.model.get("x") == "typed"

    def test_model_change_reaches_control(self, form):
        form.dual_bind("x", "c1", "val")

        form.model.set("x", "from model")

        assert form.get_safely("c1").get("val") == "from model"

    def test_filters_by_control_property(self, form):
        control = form.get_safely("c1")
        control.set("title", "t")
        form.dual_bind("x", "c1", "val")
        form.dual_bind("y", "c1", "title")

        control.change("val", "v")

        assert form.model.get("x") == "v"
        assert form.model.get("y") == "t"

    def test_custom_event_type(self, form):
        form.dual_bind("x", "c1", "val", event_type="input")
        control = form.get_safely("c1")

        control.change("val", "ignored")
        assert form.model.get("x") is None

        control.change("val", "seen", event_type="input")
        assert form.model.get("x") == "seen"

    def test_missing_control_propagates_lookup_error(self, form):
        with pytest.raises(ControlNotFoundError):
            form.dual_bind("x", "nope", "val")

    def test_empty_name_rejected(self, form):
        with pytest.raises(ConfigurationError, match="'name'"):
            form.dual_bind("", "c1", "val")


class TestSingleBind:
    """Model to control only."""

    def test_only_model_to_control(self, form):
        form.single_bind("x", "c1", "val")
        control = form.get_safely("c1")

        form.model.set("x", "pushed")
        control.change("val", "typed")

        assert control.get("val") == "typed"
        assert form.model.get("x") == "pushed"

    def test_other_names_are_ignored(self, form):
        form.single_bind("x", "c1", "val")

        form.model.set("other", "value")

        assert form.get_safely("c1").get("val") == ""

    def test_control_resolved_on_each_change(self, form):
        form.single_bind("x", "c1", "val")
        replacement = form.register_control(Control("c1", {"val": ""}))

        form.model.set("x", "new")

        assert replacement.get("val") == "new"


class TestUnbind:
    """Releasing self-bindings."""

    def test_unbind_stops_both_directions(self, form):
        form.dual_bind("x", "c1", "val")
        control = form.get_safely("c1")

        assert form.unbind("c1", "val") == 3
        control.change("val", "typed")
        form.model.set("x", "pushed")

        assert form.model.get("x") == "pushed"
        assert control.get("val") == "typed"
        assert form.unbind("c1", "val") == 0


class TestBindable:
    """Bindable composed onto a plain owner."""

    def test_composition_without_mixin(self, view_model):
        bindable = Bindable(view_model)
        bindable.dual_bind("x", "c1", "val")

        view_model.get_safely("c1").change("val", "typed")

        assert view_model.model.get("x") == "typed"
        assert bindable.is_bound("c1", "val")
        assert bindable.bound_names("c1", "val") == ["x"]
        assert bindable.bound_names("c1", "other") == []

    def test_custom_view_change_event_type(self, view_model):
        bindable = Bindable(view_model, view_change_event_type="viewchange")
        received = []
        view_model.on("viewchange", received.append)
        bindable.dual_bind("x", "c1", "val")

        view_model.get_safely("c1").change("val", "typed")

        assert len(received) == 1
        assert view_model.model.get("x") == "typed"


@apply_view_binding
class PlainModelForm(ViewModel):
    """A view-model whose model fires plain "change" events."""

    model_change_event_type = "change"


class EchoControl(Control):
    """Control that reports programmatic writes as native changes."""

    def set(self, name, value, *, silent=False):
        super().set(name, value, silent=silent)
        self.change(name, value)


class TestOwnerSettings:
    """Class attributes on the decorated class configure its Bindable."""

    def test_defaults(self, form):
        assert form.bindable.model_change_event_type == "viewmodelchange"
        assert form.bindable.view_change_event_type == "change"
        assert form.bindable.guard is not None

    def test_decorated_class_overrides_model_event_type(self):
        form = PlainModelForm(Observable())
        control = form.register_control(Control("c1", {"val": ""}))
        form.single_bind("x", "c1", "val")

        form.model.set("x", "pushed")

        assert form.bindable.model_change_event_type == "change"
        assert control.get("val") == "pushed"

    def test_echoing_control_terminates_with_guard(self):
        form = FormViewModel()
        control = form.register_control(EchoControl("c1", {"val": ""}))
        form.dual_bind("x", "c1", "val")

        form.model.set("x", "v")

        assert form.model.get("x") == "v"
        assert control.get("val") == "v"

    def test_guard_can_be_disabled(self):
        @apply_view_binding
        class UnguardedForm(ViewModel):
            reentrancy_guard = False

        form = UnguardedForm()
        form.register_control(EchoControl("c1", {"val": ""}))
        form.dual_bind("x", "c1", "val")

        assert form.bindable.guard is None
        with pytest.raises(RecursionError):
            form.model.set("x", "v")
