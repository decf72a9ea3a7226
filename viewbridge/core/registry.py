"""
Component Registry
==================

Maps logical component names to Renderables. Names are declared up front;
each definition is imported and constructed the first time it is resolved,
then memoized for the lifetime of the registry.
"""

from typing import Any, Dict, List, Mapping, Optional, Union
import importlib
import threading

from viewbridge.config.logging import get_logger
from viewbridge.core.errors import ComponentLoadError, ComponentNotFound
from viewbridge.core.rendering.engine import Renderable

logger = get_logger(__name__)

# A declared target is either an import path ("package.module:Attribute")
# or an object that already satisfies the Renderable protocol.
Target = Union[str, Renderable]


class ComponentRegistry:
    """Append-only registry of renderable components."""

    def __init__(self, namespace: Optional[Mapping[str, Target]] = None) -> None:
        self.logger: Any = logger.bind(component="registry")
        self._targets: Dict[str, Target] = {}
        self._loaded: Dict[str, Renderable] = {}
        self._lock = threading.Lock()
        self._load_locks: Dict[str, threading.Lock] = {}

        for name, target in (namespace or {}).items():
            self.register(name, target)

    def register(self, name: str, target: Target) -> None:
        """
        Declare a component under ``name``.

        Raises:
            ValueError: If the name is blank or already declared
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Component name must be a non-empty string")

        with self._lock:
            if name in self._targets:
                raise ValueError(f"Component '{name}' is already registered")
            self._targets[name] = target
            self._load_locks[name] = threading.Lock()

    def resolve(self, name: str) -> Renderable:
        """
        Resolve a component name to its Renderable.

        Args:
            name: Declared component name

        Returns:
            The memoized Renderable for ``name``

        Raises:
            ComponentNotFound: If no component is declared under ``name``
            ComponentLoadError: If the declared definition cannot be loaded
        """
        renderable = self._loaded.get(name)
        if renderable is not None:
            return renderable

        load_lock = self._load_locks.get(name)
        if load_lock is None:
            self.logger.info("Component not found", name=name)
            raise ComponentNotFound(name)

        # Single-flight: only one thread loads a given name
        with load_lock:
            renderable = self._loaded.get(name)
            if renderable is None:
                renderable = self._load(name, self._targets[name])
                self._loaded[name] = renderable
        return renderable

    def _load(self, name: str, target: Target) -> Renderable:
        if not isinstance(target, str):
            obj: Any = target
        else:
            module_path, _, attr = target.partition(":")
            try:
                module = importlib.import_module(module_path)
                obj = getattr(module, attr or name)
            except Exception as e:
                self.logger.error("Component load failed", name=name, target=target, error=str(e))
                raise ComponentLoadError(
                    f"Cannot load component '{name}' from '{target}': {e}", name=name
                ) from e

        if isinstance(obj, type):
            try:
                obj = obj()
            except Exception as e:
                self.logger.error("Component construction failed", name=name, error=str(e))
                raise ComponentLoadError(
                    f"Cannot construct component '{name}': {e}", name=name
                ) from e

        if not isinstance(obj, Renderable):
            raise ComponentLoadError(f"Component '{name}' is not renderable", name=name)

        self.logger.debug("Component loaded", name=name)
        return obj

    def is_registered(self, name: str) -> bool:
        return name in self._targets

    def __contains__(self, name: object) -> bool:
        return name in self._targets

    def __len__(self) -> int:
        return len(self._targets)

    def names(self) -> List[str]:
        """Declared component names."""
        return sorted(self._targets)

    def loaded(self) -> List[str]:
        """Names resolved at least once."""
        return sorted(self._loaded)


# Global registry - built from the bundled component namespace when needed
_default_registry: Optional[ComponentRegistry] = None


def default_registry() -> ComponentRegistry:
    """Get the registry for the bundled components."""
    global _default_registry
    if _default_registry is None:
        from viewbridge.components import NAMESPACE

        _default_registry = ComponentRegistry(NAMESPACE)
    return _default_registry
