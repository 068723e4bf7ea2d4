"""Tests for schema models and tree walks."""

import pytest
from pydantic import ValidationError

from formcraft.models import (
    Conditional,
    FormComponent,
    FormDocument,
    WizardStep,
    collect_ids,
    find_component,
    iter_components,
    iter_document,
    locate,
    node_at,
)


@pytest.mark.unit
def test_component_defaults():
    component = FormComponent(id="c1", type="textfield")
    assert component.key == ""
    assert component.label == ""
    assert component.required is False
    assert component.children == []
    assert component.conditional is None


@pytest.mark.unit
def test_component_requires_id_and_type():
    with pytest.raises(ValidationError):
        FormComponent.model_validate({"type": "textfield"})
    with pytest.raises(ValidationError):
        FormComponent.model_validate({"id": "c1"})


@pytest.mark.unit
def test_component_wire_aliases():
    """camelCase on the wire, snake_case on the model."""
    component = FormComponent.model_validate({
        "id": "c1",
        "type": "textfield",
        "minLength": 2,
        "maxLength": 9,
        "hiddenLabel": True,
        "customClass": "wide",
        "defaultValue": "x",
    })
    assert component.min_length == 2
    assert component.max_length == 9
    assert component.hidden_label is True
    assert component.custom_class == "wide"
    assert component.default_value == "x"

    dumped = component.model_dump(by_alias=True, exclude_unset=True)
    assert dumped["minLength"] == 2
    assert "min_length" not in dumped


@pytest.mark.unit
def test_component_populate_by_name():
    component = FormComponent(id="c1", type="textfield", min_length=3)
    assert component.min_length == 3


@pytest.mark.unit
def test_component_keeps_unknown_attributes():
    component = FormComponent.model_validate({"id": "c1", "type": "htmlelement", "content": "<b>hi</b>"})
    assert component.model_extra == {"content": "<b>hi</b>"}
    assert component.model_dump(by_alias=True, exclude_unset=True)["content"] == "<b>hi</b>"


@pytest.mark.unit
def test_conditional_defaults():
    rule = Conditional()
    assert rule.show is False
    assert rule.when == ""


@pytest.mark.unit
def test_document_wire_names(sample_document):
    assert len(sample_document.wizard_steps) == 2
    assert sample_document.form_values == {"name": "Ada"}
    assert sample_document.current_step_index == 0
    assert sample_document.current_step.id == "s1"
    assert sample_document.last_step_index == 1


@pytest.mark.unit
def test_empty_document():
    document = FormDocument()
    assert document.wizard_steps == []
    assert document.form_values == {}
    assert document.current_step is None
    assert document.last_step_index == 0


@pytest.mark.unit
def test_current_step_out_of_range():
    document = FormDocument(wizard_steps=[WizardStep(id="s1")], current_step_index=4)
    assert document.current_step is None


# ============================================================================
# Traversal
# ============================================================================

@pytest.mark.unit
def test_iter_components_preorder(sample_document):
    walked = [(indices, node.id) for indices, node in iter_components(sample_document.wizard_steps[0].components)]
    assert walked == [
        ((0,), "text1"),
        ((1,), "panel1"),
        ((1, 0), "email1"),
        ((1, 1), "fieldset1"),
        ((1, 1, 0), "num1"),
        ((2,), "sel1"),
    ]


@pytest.mark.unit
def test_iter_document_spans_steps(sample_document):
    paths = [path for path, _ in iter_document(sample_document)]
    assert paths[-2:] == [(1, (0,)), (1, (1,))]


@pytest.mark.unit
def test_collect_ids(sample_document):
    assert collect_ids(sample_document) == [
        "text1", "panel1", "email1", "fieldset1", "num1", "sel1", "well1", "radio1",
    ]


@pytest.mark.unit
def test_locate_and_node_at(sample_document):
    path = locate(sample_document, "num1")
    assert path == (0, (1, 1, 0))
    assert node_at(sample_document, path).key == "age"


@pytest.mark.unit
def test_locate_within_step(sample_document):
    assert locate(sample_document, "radio1", step_index=0) is None
    assert locate(sample_document, "radio1", step_index=1) == (1, (1,))
    assert locate(sample_document, "radio1", step_index=5) is None


@pytest.mark.unit
def test_find_component(sample_document):
    assert find_component(sample_document, "email1").type == "email"
    assert find_component(sample_document, "missing") is None
