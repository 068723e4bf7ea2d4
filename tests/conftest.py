"""Pytest configuration and fixtures."""

import os

import pytest

from formcraft.core import Settings, create_container, get_settings
from formcraft.models import FormDocument
from formcraft.registry import TypeRegistry
from formcraft.render import Renderer
from formcraft.store import SchemaStore


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['FORMCRAFT_LOG_LEVEL'] = 'DEBUG'
    os.environ['FORMCRAFT_REPAIR_JSON'] = 'false'
    os.environ['FORMCRAFT_READONLY'] = 'false'


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return get_settings()


@pytest.fixture
def strict_settings():
    """Settings with tight limits for malformed-input tests."""
    return Settings(max_document_bytes=512, max_nesting_depth=6)


@pytest.fixture
def di_container():
    """Dependency injection container for testing."""
    return create_container()


@pytest.fixture
def registry():
    """Registry with the built-in field types."""
    return TypeRegistry()


@pytest.fixture
def renderer(registry):
    """Renderer bound to the built-in registry."""
    return Renderer(registry)


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_document_data():
    """Two-step document with nested containers."""
    return {
        "wizardSteps": [
            {
                "id": "s1",
                "title": "Personal",
                "description": "Who are you?",
                "components": [
                    {"id": "text1", "type": "textfield", "key": "name", "label": "Name", "required": True},
                    {
                        "id": "panel1",
                        "type": "panel",
                        "key": "panel",
                        "label": "Contact",
                        "children": [
                            {"id": "email1", "type": "email", "key": "email", "label": "Email"},
                            {
                                "id": "fieldset1",
                                "type": "fieldset",
                                "key": "fs",
                                "label": "Details",
                                "children": [
                                    {"id": "num1", "type": "number", "key": "age", "label": "Age"},
                                ],
                            },
                        ],
                    },
                    {
                        "id": "sel1",
                        "type": "selectboxes",
                        "key": "f1",
                        "label": "Pick",
                        "options": ["A", "B"],
                    },
                ],
            },
            {
                "id": "s2",
                "title": "Preferences",
                "components": [
                    {"id": "well1", "type": "well", "key": "well", "label": "Extras", "children": []},
                    {
                        "id": "radio1",
                        "type": "radio",
                        "key": "color",
                        "label": "Color",
                        "options": ["red", "blue"],
                    },
                ],
            },
        ],
        "formValues": {"name": "Ada"},
        "currentStepIndex": 0,
    }


@pytest.fixture
def sample_document(sample_document_data):
    """Sample document as a model."""
    return FormDocument.model_validate(sample_document_data)


@pytest.fixture
def store(registry, sample_document):
    """Store holding the sample document."""
    return SchemaStore(registry, document=sample_document)


@pytest.fixture
def minimal_data():
    """One empty step titled A."""
    return '{"wizardSteps":[{"id":"s1","title":"A","components":[]}],"formValues":{},"currentStepIndex":0}'
