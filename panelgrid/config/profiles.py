"""
Grid Configuration Profiles

Defines the grid settings consumed from the host UI: column count, gap and
cell size. Profiles can be picked by name or loaded from a YAML file:

```yaml
columnCount: 12
gap: 8
baseSize: 80
resizeHandles: [se, e, s]
compactOnRemove: true
```
"""

import logging
import math
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

logger = logging.getLogger(__name__)

VALID_RESIZE_HANDLES = ("n", "s", "e", "w", "ne", "nw", "se", "sw")

# YAML/camelCase key -> GridConfig field
_KEY_ALIASES = {
    "columnCount": "column_count",
    "columns": "column_count",
    "baseSize": "base_size",
    "resizeHandles": "resize_handles",
    "resizeHandlePositions": "resize_handles",
    "compactOnRemove": "compact_on_remove",
}


@dataclass
class GridConfig:
    """Grid settings for one panel grid."""

    name: str = "custom"
    description: str = ""

    column_count: int = 12
    gap: float = 8  # px between cells
    base_size: float = 80  # px per cell; usually derived from container width

    resize_handles: List[str] = field(default_factory=lambda: ["se"])
    compact_on_remove: bool = False

    @property
    def pitch(self) -> float:
        """Distance in pixels between neighbouring cell origins."""
        return self.base_size + self.gap

    def validate(self) -> "GridConfig":
        """
        Check the settings.

        Returns:
            Self for chaining

        Raises:
            ValueError: On a non-positive column count or cell size, a
                        negative gap, or an unknown resize handle
        """
        if not isinstance(self.column_count, int) or self.column_count < 1:
            raise ValueError(f"column_count must be a positive integer, got {self.column_count!r}")
        if self.base_size <= 0:
            raise ValueError(f"base_size must be positive, got {self.base_size!r}")
        if self.gap < 0:
            raise ValueError(f"gap must be non-negative, got {self.gap!r}")
        unknown = [h for h in self.resize_handles if h not in VALID_RESIZE_HANDLES]
        if unknown:
            raise ValueError(
                f"Unknown resize handle(s) {', '.join(unknown)}. "
                f"Valid: {', '.join(VALID_RESIZE_HANDLES)}"
            )
        return self

    def with_container_width(self, width: float) -> "GridConfig":
        """
        Derive the cell size from the container width.

        base_size = floor((width - gap * (column_count - 1)) / column_count),
        never below 1.
        """
        base_size = math.floor((width - self.gap * (self.column_count - 1)) / self.column_count)
        return replace(self, base_size=max(1, base_size))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "columnCount": self.column_count,
            "gap": self.gap,
            "baseSize": self.base_size,
            "resizeHandles": list(self.resize_handles),
            "compactOnRemove": self.compact_on_remove,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GridConfig":
        """
        Build a config from a mapping with camelCase or snake_case keys.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f for f in cls.__dataclass_fields__}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown grid config key '{key}'")
            kwargs[name] = value
        if "resize_handles" in kwargs:
            kwargs["resize_handles"] = list(kwargs["resize_handles"])
        return cls(**kwargs).validate()


# Pre-defined profiles

DASHBOARD = GridConfig(
    name="dashboard",
    description="12-column dashboard grid",
    column_count=12,
    gap=8,
    base_size=80,
)

COMPACT = GridConfig(
    name="compact",
    description="6-column grid for narrow containers",
    column_count=6,
    gap=8,
    base_size=80,
)

WIDE = GridConfig(
    name="wide",
    description="24-column grid with small cells",
    column_count=24,
    gap=4,
    base_size=40,
    resize_handles=["se", "e", "s"],
)

PROFILES: Dict[str, GridConfig] = {
    "dashboard": DASHBOARD,
    "compact": COMPACT,
    "wide": WIDE,
}


def get_profile(name: str) -> GridConfig:
    """
    Get a grid profile by name.

    Args:
        name: Profile identifier (e.g., "dashboard")

    Returns:
        A copy of the GridConfig, safe to modify

    Raises:
        ValueError: If profile name is not found
    """
    if name not in PROFILES:
        available = ", ".join(sorted(PROFILES.keys()))
        raise ValueError(f"Unknown grid profile '{name}'. Available: {available}")
    profile = PROFILES[name]
    return replace(profile, resize_handles=list(profile.resize_handles))


def list_profiles() -> List[str]:
    """Get available profile names."""
    return sorted(PROFILES.keys())


def load_grid_config(path: Union[str, Path]) -> GridConfig:
    """
    Load a grid config from a YAML file.

    A `profile:` key selects a named profile as the base; the remaining keys
    override it.

    Raises:
        ValueError: If the file does not hold a mapping or has invalid values
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Grid config {path} must be a mapping, got {type(data).__name__}")

    base_name = data.pop("profile", None)
    if base_name is not None:
        merged = get_profile(base_name).to_dict()
        merged.update(data)
        data = merged

    config = GridConfig.from_dict(data)
    logger.info("Loaded grid config from %s: columns=%d gap=%s base_size=%s",
                path, config.column_count, config.gap, config.base_size)
    return config
