"""Entity and component storage."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


class Scene:
    """Holds entities as integer ids and one component store per registered type."""

    def __init__(self) -> None:
        self._arrays: dict[type, dict[int, Any]] = {}
        self._free_ids: set[int] = set()
        self._max_entity_id = 0

    def register_component(self, component_type: type) -> None:
        self._arrays.setdefault(component_type, {})

    def _array(self, component_type: type) -> dict[int, Any]:
        try:
            return self._arrays[component_type]
        except KeyError:
            raise KeyError(f"component type {component_type.__name__} is not registered") from None

    def create_entity(self) -> int:
        """Return a new entity id, reusing the smallest freed id if there is one."""
        if self._free_ids:
            entity_id = min(self._free_ids)
            self._free_ids.remove(entity_id)
        else:
            entity_id = self._max_entity_id
            self._max_entity_id += 1
        return entity_id

    def remove_entity(self, entity_id: int) -> None:
        for array in self._arrays.values():
            array.pop(entity_id, None)
        self._free_ids.add(entity_id)

    def assign_component(self, entity_id: int, component: T) -> T:
        self._array(type(component))[entity_id] = component
        return component

    def get_component(self, entity_id: int, component_type: type[T]) -> T:
        try:
            return self._array(component_type)[entity_id]
        except KeyError:
            raise KeyError(f"entity {entity_id} has no {component_type.__name__}") from None

    def has_component(self, entity_id: int, component_type: type) -> bool:
        return entity_id in self._array(component_type)

    def all_entities(self) -> list[int]:
        return [i for i in range(self._max_entity_id) if i not in self._free_ids]