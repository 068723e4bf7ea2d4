"""
Nesting Normalizer
Folds the rendering-path nesting names into the single ``children`` sequence.

Documents authored for the renderer nest fields under ``components`` (panels,
fieldsets, wells), ``columns`` (a list of columns, each a list of components
or ``{components, width}``) or ``rows`` (a list of component lists). The
engine only knows ``children``; this runs on raw JSON before validation.
"""

from typing import Any, Dict, List

from ..core import get_logger, ensure_list, ensure_object
from ..core.id import new_component_id

logger = get_logger(__name__)


class NestingNormalizer:
    """Rewrites one decoded document in place of its legacy nesting."""

    def __init__(self):
        self.translated = 0
        self.assigned_ids = 0

    def normalize(self, raw: Dict[str, Any]) -> Dict[str, Any]:
        """
        Normalize a decoded document object.

        Args:
            raw: Top-level JSON object

        Returns:
            New dictionary; ``raw`` is left untouched

        Raises:
            ValidationError: If a top-level field has the wrong JSON type
        """
        result = dict(raw)

        steps = raw.get("wizardSteps")
        if steps is not None:
            result["wizardSteps"] = [self._normalize_step(step) for step in ensure_list(steps, "wizardSteps")]

        values = raw.get("formValues")
        if values is not None:
            ensure_object(values, "formValues")

        if self.translated or self.assigned_ids:
            logger.info("legacy_nesting_normalized", translated=self.translated, assigned_ids=self.assigned_ids)
        return result

    def _normalize_step(self, step: Any) -> Any:
        if not isinstance(step, dict):
            return step  # Rejected by model validation
        step = dict(step)
        components = step.get("components")
        if components is not None:
            step["components"] = self._normalize_components(ensure_list(components, "components"))
        return step

    def _normalize_components(self, components: List[Any]) -> List[Any]:
        return [self._normalize_component(comp) for comp in components]

    def _normalize_component(self, comp: Any) -> Any:
        """
        Normalize a single component.

        - missing ``id`` -> fresh component id
        - missing ``type`` -> empty tag (rendered as a placeholder)
        - ``components`` / ``columns`` / ``rows`` lists -> appended to ``children``
        """
        if not isinstance(comp, dict):
            return comp
        comp = dict(comp)

        if not comp.get("id"):
            comp["id"] = new_component_id()
            self.assigned_ids += 1
        comp.setdefault("type", "")

        children: List[Any] = list(ensure_list(comp["children"], "children")) if comp.get("children") is not None else []
        has_children = "children" in comp

        nested = comp.get("components")
        if isinstance(nested, list):
            children.extend(comp.pop("components"))
            has_children = True
            self.translated += 1

        # ``columns`` may also be a plain column count; only lists are nesting
        columns = comp.get("columns")
        if isinstance(columns, list):
            children.extend(self._column(column) for column in comp.pop("columns"))
            has_children = True
            self.translated += 1

        rows = comp.get("rows")
        if isinstance(rows, list):
            children.extend(self._row(row) for row in comp.pop("rows"))
            has_children = True
            self.translated += 1

        if has_children:
            comp["children"] = self._normalize_components(children)
        return comp

    def _column(self, column: Any) -> Any:
        if isinstance(column, list):
            return {"type": "column", "components": column}
        if isinstance(column, dict) and "type" not in column:
            return {"type": "column", **column}
        return column

    def _row(self, row: Any) -> Any:
        if isinstance(row, list):
            return {"type": "row", "components": row}
        if isinstance(row, dict) and "type" not in row:
            return {"type": "row", **row}
        return row


def normalize_nesting(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convenience function to normalize a decoded document object

    Args:
        raw: Top-level JSON object

    Returns:
        Document object with uniform ``children`` nesting
    """
    return NestingNormalizer().normalize(raw)
