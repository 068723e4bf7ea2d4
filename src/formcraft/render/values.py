"""Value-map helpers shared by the renderer and the store."""

from typing import Any, Mapping

from ..models import FormComponent
from ..registry import ValueKind


def as_text(value: Any) -> str:
    """Text form used for conditional comparisons."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def is_visible(component: FormComponent, values: Mapping[str, Any]) -> bool:
    """
    Evaluate a component's conditional rule against the value map.

    Only ``show=True`` rules are active. A rule whose ``when`` key is absent
    from the map hides the component.
    """
    rule = component.conditional
    if rule is None or not rule.show:
        return True
    if rule.when not in values:
        return False
    return as_text(values[rule.when]) == as_text(rule.eq)


def read_value(kind: ValueKind, raw: Any, default_value: Any = None) -> Any:
    """Current value of a field, falling back to its kind's default."""
    if kind is ValueKind.BOOLEAN:
        return bool(raw)
    if kind is ValueKind.MULTI:
        return list(raw) if isinstance(raw, list) else []
    if raw is None or raw == "":
        if default_value is not None:
            return default_value
        return kind.default()
    return raw


def toggle_option(current: Any, option: str, checked: bool | None = None) -> list[Any]:
    """
    Add or remove ``option`` from a multiple-selection value.

    Args:
        current: Current value (anything that is not a list counts as empty)
        option: Option string to toggle
        checked: True adds, False removes, None flips membership

    Returns:
        New list; the order of the other selected options is unchanged
    """
    selected = list(current) if isinstance(current, list) else []
    if checked is None:
        checked = option not in selected
    if checked:
        if option not in selected:
            selected.append(option)
        return selected
    return [value for value in selected if value != option]
