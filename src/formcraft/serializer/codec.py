"""
Document Codec
FormDocument <-> the single JSON text blob exchanged with the host.
"""

from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field
from returns.result import Result, Success, Failure

from ..core import (
    Settings,
    get_settings,
    get_logger,
    parse_json_object,
    safe_json_dumps,
    validate_json_size,
    validate_json_depth,
    JSONParseError,
    ValidationError,
    MalformedInput,
    Recovery,
)
from ..models import FormDocument, WizardStep
from .legacy import normalize_nesting

logger = get_logger(__name__)


class DocumentPatch(BaseModel):
    """Decoded payload; a None field was absent and leaves state unchanged."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    wizard_steps: list[WizardStep] | None = Field(default=None, alias="wizardSteps")
    form_values: dict[str, Any] | None = Field(default=None, alias="formValues")
    current_step_index: int | None = Field(default=None, alias="currentStepIndex")

    @property
    def is_empty(self) -> bool:
        return self.wizard_steps is None and self.form_values is None and self.current_step_index is None


def encode(document: FormDocument, indent: int = 0) -> str:
    """
    Encode a document as the host boundary JSON.

    Components carry only the attributes they were created or decoded with;
    nesting is always written as ``children``.
    """
    payload = {
        "wizardSteps": [
            step.model_dump(by_alias=True, exclude_unset=True) for step in document.wizard_steps
        ],
        "formValues": document.form_values,
        "currentStepIndex": document.current_step_index,
    }
    return safe_json_dumps(payload, indent=indent)


def decode(text: str, settings: Settings | None = None) -> Result[DocumentPatch, MalformedInput]:
    """
    Decode host JSON into a partial update.

    Args:
        text: JSON text from the host
        settings: Limits and repair behaviour (defaults to global settings)

    Returns:
        Success(DocumentPatch) or Failure(MalformedInput); never raises for
        bad input
    """
    settings = settings or get_settings()

    try:
        validate_json_size(text, settings.max_document_bytes, "Document")
        raw = parse_json_object(text, repair=settings.repair_json)
        validate_json_depth(raw, settings.max_nesting_depth)
        patch = DocumentPatch.model_validate(normalize_nesting(raw))
    except JSONParseError as e:
        logger.warning("decode_failed", error=str(e), recovery=Recovery.MALFORMED_INPUT.value)
        return Failure(MalformedInput(str(e)))
    except ValidationError as e:
        logger.warning("decode_failed", error=str(e), recovery=Recovery.MALFORMED_INPUT.value)
        return Failure(MalformedInput(str(e)))
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        logger.warning("decode_failed", error=first["msg"], field=field, recovery=Recovery.MALFORMED_INPUT.value)
        return Failure(MalformedInput(first["msg"], field=field, value=first.get("input")))

    return Success(patch)


def clamp_step_index(document: FormDocument) -> FormDocument:
    """Pull ``current_step_index`` back into ``[0, last]`` (0 for no steps)."""
    index = min(max(document.current_step_index, 0), document.last_step_index)
    if index == document.current_step_index:
        return document
    return document.model_copy(update={"current_step_index": index})


def apply_patch(document: FormDocument, patch: DocumentPatch) -> FormDocument:
    """Apply each present field of ``patch`` independently."""
    update: dict[str, Any] = {}
    if patch.wizard_steps is not None:
        update["wizard_steps"] = patch.wizard_steps
    if patch.form_values is not None:
        update["form_values"] = patch.form_values
    if patch.current_step_index is not None:
        update["current_step_index"] = patch.current_step_index
    if not update:
        return document
    return clamp_step_index(document.model_copy(update=update))


def decode_document(text: str, settings: Settings | None = None) -> Result[FormDocument, MalformedInput]:
    """Decode ``text`` as a complete document (absent fields take defaults)."""
    return decode(text, settings).map(lambda patch: apply_patch(FormDocument(), patch))
