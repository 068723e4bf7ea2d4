"""Tests for wizard navigation and submit gating."""

import pytest

from formcraft.store import SchemaStore
from formcraft.wizard import NavigationState, WizardController, navigation_state


@pytest.fixture
def wizard(store):
    return WizardController(store)


@pytest.fixture
def three_steps(registry, sample_document):
    store = SchemaStore(registry, document=sample_document)
    store.add_step("Review")
    store.set_step_index(0)
    return WizardController(store)


@pytest.mark.unit
def test_navigation_state_flags():
    state = NavigationState(index=0, count=3)
    assert not state.can_go_back
    assert state.can_go_forward
    assert not state.can_submit

    last = NavigationState(index=2, count=3)
    assert last.can_go_back
    assert not last.can_go_forward
    assert last.can_submit
    assert last.to_dict() == {
        "index": 2,
        "count": 3,
        "can_go_back": True,
        "can_go_forward": False,
        "can_submit": True,
    }


@pytest.mark.unit
def test_single_step_can_submit():
    state = NavigationState(index=0, count=1)
    assert state.can_submit
    assert not state.can_go_back
    assert not state.can_go_forward


@pytest.mark.unit
def test_empty_state():
    state = NavigationState()
    assert state.is_empty
    assert not state.can_submit
    assert state.clamp(5) == 0


@pytest.mark.unit
def test_navigation_state_from_document(sample_document):
    assert navigation_state(sample_document) == NavigationState(index=0, count=2)


@pytest.mark.unit
def test_next_and_previous(three_steps):
    assert three_steps.next() == 1
    assert three_steps.next() == 2
    assert three_steps.next() == 2  # Already last
    assert three_steps.previous() == 1
    assert three_steps.previous() == 0
    assert three_steps.previous() == 0  # Already first


@pytest.mark.unit
def test_jump_to_clamps(three_steps):
    assert three_steps.jump_to(2) == 2
    assert three_steps.jump_to(99) == 2
    assert three_steps.jump_to(-4) == 0


@pytest.mark.unit
def test_jump_ignores_required_fields(wizard):
    """Required fields never gate navigation."""
    assert wizard.store.get_value("name") == "Ada"
    wizard.store.set_value("name", "")
    assert wizard.next() == 1


@pytest.mark.unit
def test_submit_only_on_last_step(wizard):
    assert wizard.submit() is None
    wizard.next()
    assert wizard.submit() == {"name": "Ada"}


@pytest.mark.unit
def test_submit_returns_whole_value_map(wizard):
    wizard.store.set_value("color", "red")
    wizard.jump_to(1)
    assert wizard.submit() == {"name": "Ada", "color": "red"}


@pytest.mark.unit
def test_submit_returns_copy(wizard):
    wizard.jump_to(1)
    values = wizard.submit()
    values["injected"] = True
    assert "injected" not in wizard.store.document.form_values


@pytest.mark.unit
def test_empty_document_navigation(registry):
    wizard = WizardController(SchemaStore(registry))
    assert wizard.next() == 0
    assert wizard.previous() == 0
    assert wizard.jump_to(3) == 0
    assert wizard.submit() is None


@pytest.mark.unit
def test_navigation_does_not_notify(wizard):
    seen = []
    wizard.store.subscribe(seen.append)
    wizard.next()
    wizard.previous()
    assert seen == []
