"""Hypothesis strategies for schema documents."""

import itertools

from hypothesis import strategies as st

from formcraft.models import FormDocument

LEAF_TYPES = ["textfield", "number", "email", "select", "checkbox", "button", "mystery"]
CONTAINER_TYPES = ["panel", "fieldset", "well", "columns"]

json_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**53), max_value=2**53),
    st.text(max_size=6),
)
json_values = st.one_of(json_scalars, st.lists(st.text(max_size=4), max_size=3))


def component_shapes(max_leaves: int = 10):
    """Nested {type, children?} shapes without ids."""
    return st.recursive(
        st.sampled_from(LEAF_TYPES).map(lambda t: {"type": t}),
        lambda children: st.builds(
            lambda t, kids: {"type": t, "children": kids},
            st.sampled_from(CONTAINER_TYPES),
            st.lists(children, max_size=3),
        ),
        max_leaves=max_leaves,
    )


def _assign_ids(shape: dict, counter) -> dict:
    n = next(counter)
    node = {"id": f"c{n}", "type": shape["type"], "key": f"k{n % 4}", "label": f"Label {n}"}
    if "children" in shape:
        node["children"] = [_assign_ids(child, counter) for child in shape["children"]]
    return node


@st.composite
def document_data(draw, min_steps: int = 1, max_steps: int = 3):
    """Raw document JSON object with unique component ids."""
    counter = itertools.count()
    step_shapes = draw(st.lists(st.lists(component_shapes(), max_size=4), min_size=min_steps, max_size=max_steps))
    steps = [
        {
            "id": f"s{index}",
            "title": f"Step {index + 1}",
            "components": [_assign_ids(shape, counter) for shape in shapes],
        }
        for index, shapes in enumerate(step_shapes)
    ]
    values = draw(st.dictionaries(st.text(max_size=5), json_values, max_size=4))
    index = draw(st.integers(min_value=0, max_value=len(steps) - 1)) if steps else 0
    return {"wizardSteps": steps, "formValues": values, "currentStepIndex": index}


def documents(**kwargs):
    return document_data(**kwargs).map(FormDocument.model_validate)
