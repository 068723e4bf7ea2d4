"""Tests for ID generation system."""

import time
from datetime import datetime

import pytest

from formcraft.core.id import (
    Prefix,
    extract_prefix,
    extract_timestamp,
    is_valid,
    new_component_id,
    new_field_key,
    new_step_id,
)


class TestGeneration:
    """Test typed ID generation."""

    def test_component_ids_are_prefixed(self):
        component_id = new_component_id()
        assert component_id.startswith("component_")
        assert len(component_id) == len("component_") + 26

    def test_step_ids_are_prefixed(self):
        assert new_step_id().startswith("step_")

    def test_field_keys_are_lowercase(self):
        key = new_field_key()
        assert key.startswith("field_")
        assert key == key.lower()

    def test_ids_are_unique(self):
        """1000 ids in a tight loop never collide."""
        ids = {new_component_id() for _ in range(1000)}
        assert len(ids) == 1000

    def test_creation_order_visible(self):
        """Later ids carry later timestamps."""
        first = new_component_id()
        time.sleep(0.002)
        second = new_component_id()
        assert extract_timestamp(first) <= extract_timestamp(second)


class TestParsing:
    """Test validation and parsing helpers."""

    def test_is_valid(self):
        assert is_valid(new_component_id())
        assert is_valid(new_field_key())
        assert not is_valid("text1")
        assert not is_valid("component_nope")

    def test_extract_prefix(self):
        assert extract_prefix(new_step_id()) == Prefix.STEP
        assert extract_prefix(new_field_key()) == Prefix.FIELD
        assert extract_prefix("plain") is None

    def test_extract_timestamp(self):
        ts = extract_timestamp(new_component_id())
        assert isinstance(ts, datetime)
        assert abs(ts.timestamp() - time.time()) < 60

    def test_extract_timestamp_foreign_id(self):
        """Hand-written ids carry no timestamp."""
        assert extract_timestamp("text1") is None


@pytest.mark.unit
def test_generated_ids_validate():
    for generate in (new_component_id, new_step_id, new_field_key):
        assert is_valid(generate())
