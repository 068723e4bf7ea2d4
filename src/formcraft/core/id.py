"""ID Generation System.

ULID-based identifiers for schema nodes, wizard steps and value-map keys.

- Prefixed: `component_*`, `step_*`, `field_*` keep documents readable
- K-sortable: the creation millisecond is encoded in the id itself
- Unique: ids never collide, so tree search-by-id hits at most one node
"""

from datetime import datetime
from typing import NewType
from ulid import ULID

# ============================================================================
# Type-Safe ID Wrappers
# ============================================================================

ComponentID = NewType("ComponentID", str)
"""Schema node identifier"""

StepID = NewType("StepID", str)
"""Wizard step identifier"""

FieldKey = NewType("FieldKey", str)
"""Value-map binding name"""


class Prefix:
    """ID prefix constants."""

    COMPONENT = "component"
    STEP = "step"
    FIELD = "field"


# ============================================================================
# ULID Generator
# ============================================================================


class Generator:
    """ULID generator; ids sort by creation millisecond."""

    def generate(self) -> str:
        """Generate a new ULID."""
        return str(ULID())

    def generate_with_prefix(self, prefix: str) -> str:
        """Generate ULID with type prefix."""
        return f"{prefix}_{self.generate()}"

    def timestamp(self, id_str: str) -> int:
        """Extract timestamp (milliseconds) from ULID."""
        try:
            ulid = ULID.from_str(_strip_prefix(id_str).upper())
            return int(ulid.timestamp * 1000)
        except ValueError:
            return 0


_generator = Generator()


def _strip_prefix(id_str: str) -> str:
    return id_str.rsplit("_", 1)[-1]


# ============================================================================
# Typed ID Generators
# ============================================================================


def new_component_id() -> ComponentID:
    """Generate new component ID."""
    return ComponentID(_generator.generate_with_prefix(Prefix.COMPONENT))


def new_step_id() -> StepID:
    """Generate new step ID."""
    return StepID(_generator.generate_with_prefix(Prefix.STEP))


def new_field_key() -> FieldKey:
    """Generate new value-map key.

    Keys are lowercased so they read like hand-written field names.
    """
    return FieldKey(f"{Prefix.FIELD}_{_generator.generate().lower()}")


# ============================================================================
# Validation and Parsing
# ============================================================================


def is_valid(id_str: str) -> bool:
    """Check if string carries a valid ULID (prefixed or not).

    Args:
        id_str: ID string to validate

    Returns:
        True if valid ULID format
    """
    ulid_part = _strip_prefix(id_str)
    if len(ulid_part) != 26:
        return False
    try:
        ULID.from_str(ulid_part.upper())
        return True
    except ValueError:
        return False


def extract_prefix(id_str: str) -> str | None:
    """Extract prefix from prefixed ID.

    Args:
        id_str: Prefixed ID string

    Returns:
        Prefix string or None if no prefix
    """
    parts = id_str.rsplit("_", 1)
    return parts[0] if len(parts) == 2 else None


def extract_timestamp(id_str: str) -> datetime | None:
    """Extract creation time from an engine-generated ID."""
    timestamp_ms = _generator.timestamp(id_str)
    return datetime.fromtimestamp(timestamp_ms / 1000.0) if timestamp_ms > 0 else None
