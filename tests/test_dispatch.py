"""
Tests para core/dispatch.py - Asociación tipo de campo -> control.
"""

import pytest

from dynaform.core.dispatch import (
    CONTROL_BY_TYPE,
    DEFAULT_PLACEHOLDER,
    ControlKind,
    build_control,
    control_kind,
    toggle_option,
)
from dynaform.models import FieldType


class TestControlMapping:
    """Tests para la tabla de despacho."""

    @pytest.mark.parametrize("field_type,kind", [
        (FieldType.TEXT, ControlKind.SINGLE_LINE),
        (FieldType.EMAIL, ControlKind.SINGLE_LINE),
        (FieldType.TEL, ControlKind.SINGLE_LINE),
        (FieldType.TEXTAREA, ControlKind.MULTI_LINE),
        (FieldType.RADIO, ControlKind.RADIO_GROUP),
        (FieldType.CHECKBOX, ControlKind.TOGGLE),
        (FieldType.SELECT, ControlKind.DROPDOWN),
        (FieldType.MULTI_CHECKBOX, ControlKind.CHECK_GROUP),
    ])
    def test_mapping(self, field_type, kind):
        assert control_kind(field_type) == kind

    def test_mapping_is_exhaustive(self):
        assert set(CONTROL_BY_TYPE) == set(FieldType)


class TestBuildControl:
    """Tests para build_control."""

    def test_text_control(self, schema, store):
        fld = schema.get_field("firstName")
        control = build_control(fld, store)

        assert control.kind == ControlKind.SINGLE_LINE
        assert control.label == "First Name"
        assert control.show_label
        assert control.required
        assert control.placeholder == "Enter your first name"
        assert control.value == ""
        assert control.error is None
        assert control.is_text and not control.is_choice

    def test_default_placeholder(self, schema, store):
        control = build_control(schema.get_field("email"), store)
        assert control.placeholder == DEFAULT_PLACEHOLDER

    def test_checkbox_suppresses_label(self, schema, store):
        control = build_control(schema.get_field("terms"), store)
        assert control.kind == ControlKind.TOGGLE
        assert not control.show_label
        assert control.value is False

    def test_choice_control_has_options(self, schema, store):
        control = build_control(schema.get_field("gender"), store)
        assert control.is_choice
        assert [o.value for o in control.options] == ["male", "female", "other"]

    def test_reflects_store_state(self, schema, store):
        store.set_value("email", "bad")
        store.set_errors({"email": "Please enter a valid email address"})

        control = build_control(schema.get_field("email"), store)
        assert control.value == "bad"
        assert control.error == "Please enter a valid email address"

    def test_change_writes_through_store(self, schema, store):
        """El control escribe vía set_value (y por tanto limpia el error)."""
        store.set_errors({"email": "Please enter a valid email address"})
        control = build_control(schema.get_field("email"), store)

        control.change("a@b.com")

        assert store.get_value("email") == "a@b.com"
        assert store.get_error("email") is None
        assert control.value == "a@b.com"
        assert control.error is None


class TestToggleOption:
    """Tests para toggle_option (multi-checkbox)."""

    def test_check_appends(self):
        assert toggle_option(["a"], "b", True) == ["a", "b"]

    def test_uncheck_removes(self):
        assert toggle_option(["a", "b", "c"], "b", False) == ["a", "c"]

    def test_check_twice_is_idempotent(self):
        """Marcar dos veces la misma opción la deja presente una sola vez."""
        once = toggle_option([], "a", True)
        twice = toggle_option(once, "a", True)
        assert twice == ["a"]

    def test_uncheck_absent_is_noop(self):
        assert toggle_option(["a"], "z", False) == ["a"]

    def test_preserves_order(self):
        values = []
        for v in ["music", "coding", "sports"]:
            values = toggle_option(values, v, True)
        values = toggle_option(values, "coding", False)
        values = toggle_option(values, "coding", True)
        assert values == ["music", "sports", "coding"]

    def test_does_not_mutate_input(self):
        current = ["a"]
        toggle_option(current, "b", True)
        assert current == ["a"]
