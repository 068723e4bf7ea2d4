"""
FormCraft Engine
Form-schema tree engine: define, edit and fill multi-step forms from one
serialized JSON document.
"""

from .models import Conditional, FormComponent, FormDocument, WizardStep
from .registry import FieldFamily, FieldType, TypeRegistry, ValueKind
from .render import Renderer, RenderedForm, RenderNode, NodeKind, BuilderCanvas
from .serializer import encode, decode, decode_document
from .store import SchemaStore
from .wizard import WizardController, NavigationState
from .handlers import FormHost, HostOptions, create_host

__version__ = "1.0.0"

__all__ = [
    "Conditional",
    "FormComponent",
    "FormDocument",
    "WizardStep",
    "FieldFamily",
    "FieldType",
    "TypeRegistry",
    "ValueKind",
    "Renderer",
    "RenderedForm",
    "RenderNode",
    "NodeKind",
    "BuilderCanvas",
    "encode",
    "decode",
    "decode_document",
    "SchemaStore",
    "WizardController",
    "NavigationState",
    "FormHost",
    "HostOptions",
    "create_host",
]
