"""Animation catalog with JSON persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from ..config.settings import PROJECT_ROOT
from .animation import Animation


logger = logging.getLogger(__name__)


class AnimationCatalog:
    """
    Named collection of animations.

    The catalog owns its animations; animators only read the animation they
    are asked to play. Names are unique within a catalog.
    """

    def __init__(self, animations: Optional[List[Animation]] = None):
        self._animations: Dict[str, Animation] = {}
        for animation in animations or []:
            self.add(animation)

    def add(self, animation: Animation, replace: bool = False) -> None:
        """
        Add an animation.

        Args:
            animation: Animation to add
            replace: Overwrite an existing animation with the same name

        Raises:
            ValueError: If the animation has no keyframes, or the name is
                taken and ``replace`` is False
        """
        if animation.is_empty:
            raise ValueError(f"Animation '{animation.name}' has no keyframes")
        if animation.name in self._animations and not replace:
            raise ValueError(f"Animation '{animation.name}' already exists in catalog")
        self._animations[animation.name] = animation

    def remove(self, name: str) -> bool:
        """Remove an animation by name. Returns True if it existed."""
        return self._animations.pop(name, None) is not None

    def find_by_name(self, name: str) -> Optional[Animation]:
        return self._animations.get(name)

    def list(self) -> List[Animation]:
        """All animations in insertion order."""
        return list(self._animations.values())

    def names(self) -> List[str]:
        return list(self._animations.keys())

    def __len__(self) -> int:
        return len(self._animations)

    def __contains__(self, name: object) -> bool:
        return name in self._animations

    def __iter__(self) -> Iterator[Animation]:
        return iter(self._animations.values())

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"animations": [animation.to_dict() for animation in self._animations.values()]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnimationCatalog":
        """
        Create a catalog from JSON data.

        Example JSON:
            {
                "animations": [
                    {"name": "wave", "duration": 1.0, "loop": true, "keyframes": [...]}
                ]
            }
        """
        if not isinstance(data, dict):
            raise ValueError(f"Animation catalog must be an object, got {type(data).__name__}")
        items = data.get("animations", [])
        if not isinstance(items, list):
            raise ValueError(f"Catalog 'animations' must be a list, got {items!r}")

        animations = [Animation.from_dict(item) for item in items]
        return cls(animations)

    def save(self, path: Path | str) -> Path:
        """Write the catalog to a JSON file and return the resolved path."""
        catalog_path = _resolve(path)
        catalog_path.parent.mkdir(parents=True, exist_ok=True)
        with catalog_path.open("w", encoding="utf-8") as handle:
            json.dump(self.to_dict(), handle, indent=2)
        logger.info("Saved %d animations to %s", len(self), catalog_path)
        return catalog_path

    @classmethod
    def load(cls, path: Path | str) -> "AnimationCatalog":
        """Load a catalog from a JSON file."""
        catalog_path = _resolve(path)
        if not catalog_path.exists():
            raise FileNotFoundError(f"Animation catalog not found: {catalog_path}")

        with catalog_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)

        catalog = cls.from_dict(payload)
        logger.info("Loaded %d animations from %s", len(catalog), catalog_path)
        return catalog

    def __repr__(self):
        return f"AnimationCatalog(animations={self.names()})"


def _resolve(path: Path | str) -> Path:
    resolved = Path(path)
    if not resolved.is_absolute():
        resolved = PROJECT_ROOT / resolved
    return resolved.resolve()
