"""Configuración de pytest para tests de dynaform."""

import json
from types import SimpleNamespace

import pytest

from dynaform.core import FormStore, SectionNavigator
from dynaform.models import FormSchema


@pytest.fixture
def schema_dict():
    """Esquema de ejemplo con dos secciones y todos los tipos de campo."""
    return {
        "formTitle": "Student Information Form",
        "formId": "student_info_v1",
        "version": "1.0",
        "sections": [
            {
                "title": "Personal Details",
                "description": "Tell us about yourself",
                "fields": [
                    {
                        "fieldId": "firstName",
                        "type": "text",
                        "label": "First Name",
                        "placeholder": "Enter your first name",
                        "required": True,
                        "minLength": 2,
                        "maxLength": 20,
                        "validation": {"message": "First name is required"},
                    },
                    {"fieldId": "email", "type": "email", "label": "Email", "required": True},
                    {"fieldId": "phone", "type": "tel", "label": "Phone", "required": False},
                    {
                        "fieldId": "gender",
                        "type": "radio",
                        "label": "Gender",
                        "required": True,
                        "options": [
                            {"label": "Male", "value": "male"},
                            {"label": "Female", "value": "female"},
                            {"label": "Other", "value": "other"},
                        ],
                    },
                ],
            },
            {
                "title": "Preferences",
                "description": "Courses and interests",
                "fields": [
                    {
                        "fieldId": "course",
                        "type": "select",
                        "label": "Course",
                        "required": True,
                        "options": [
                            {"label": "Computer Science", "value": "cs"},
                            {"label": "Mathematics", "value": "math"},
                        ],
                    },
                    {
                        "fieldId": "interests",
                        "type": "multi-checkbox",
                        "label": "Interests",
                        "required": True,
                        "options": [
                            {"label": "Coding", "value": "coding"},
                            {"label": "Music", "value": "music"},
                            {"label": "Sports", "value": "sports"},
                        ],
                    },
                    {"fieldId": "bio", "type": "textarea", "label": "About you", "maxLength": 200},
                    {
                        "fieldId": "terms",
                        "type": "checkbox",
                        "label": "I accept the terms",
                        "required": True,
                        "validation": {"message": "You must accept the terms"},
                    },
                ],
            },
        ],
    }


@pytest.fixture
def schema(schema_dict):
    """FormSchema parseado."""
    return FormSchema.model_validate(schema_dict)


@pytest.fixture
def name_schema():
    """Dos secciones; la primera con un campo 'name' requerido (mín. 2)."""
    return FormSchema.model_validate({
        "formTitle": "Two Steps",
        "formId": "two_steps",
        "version": "1",
        "sections": [
            {
                "title": "Name",
                "description": "",
                "fields": [
                    {"fieldId": "name", "type": "text", "label": "Name", "required": True, "minLength": 2},
                ],
            },
            {
                "title": "Extra",
                "description": "",
                "fields": [
                    {"fieldId": "note", "type": "text", "label": "Note", "required": False},
                ],
            },
        ],
    })


@pytest.fixture
def store(schema):
    """FormStore vacío sobre el esquema de ejemplo."""
    return FormStore(schema)


@pytest.fixture
def transitions():
    """Contador de transiciones (callback de 'volver arriba')."""
    calls = []
    return calls


@pytest.fixture
def navigator(schema, transitions):
    """SectionNavigator con sink que guarda los registros enviados."""
    nav = SectionNavigator(schema, on_transition=lambda: transitions.append(1))
    nav.sent = []
    nav.on_submit = nav.sent.append
    return nav


@pytest.fixture
def schema_file(tmp_path, schema_dict):
    """Archivo JSON con el esquema envuelto como respuesta del servicio."""
    path = tmp_path / "form.json"
    path.write_text(json.dumps({"message": "ok", "form": schema_dict}), encoding="utf-8")
    return path


def fill_personal(store):
    """Completa la primera sección con valores válidos."""
    store.set_value("firstName", "Ada")
    store.set_value("email", "ada@example.com")
    store.set_value("phone", "9876543210")
    store.set_value("gender", "female")


def fill_preferences(store):
    """Completa la segunda sección con valores válidos."""
    store.set_value("course", "cs")
    store.set_value("interests", ["music", "coding"])
    store.set_value("bio", "Likes engines")
    store.set_value("terms", True)


@pytest.fixture
def fill():
    """Funciones para completar cada sección del esquema de ejemplo."""
    return SimpleNamespace(personal=fill_personal, preferences=fill_preferences)
