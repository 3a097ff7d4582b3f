"""World - entity and component storage with queries."""

from __future__ import annotations

from typing import Any, Callable, Generator, TypeVar, cast

from tick.types import DeadEntityError, EntityId

T = TypeVar("T")

# Hook callback signature.
HookCallback = Callable[["World", EntityId, Any], None]


class World:
    def __init__(self) -> None:
        self._components: dict[type, dict[int, Any]] = {}
        self._next_id: int = 0
        self._alive: set[int] = set()
        self._on_attach: dict[type, list[HookCallback]] = {}
        self._on_detach: dict[type, list[HookCallback]] = {}

    def spawn(self) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        self._alive.add(eid)
        return eid

    def despawn(self, entity_id: EntityId) -> None:
        """Remove an entity. Detach hooks fire for each component it carried."""
        self._alive.discard(entity_id)
        for ctype, store in self._components.items():
            component = store.pop(entity_id, None)
            if component is not None:
                self._notify(self._on_detach, ctype, entity_id, component)

    def attach(self, entity_id: EntityId, component: Any) -> None:
        ctype = type(component)
        if entity_id not in self._alive:
            raise DeadEntityError(
                entity_id,
                f"Cannot attach {ctype.__name__} to dead entity {entity_id}",
            )
        self._components.setdefault(ctype, {})[entity_id] = component
        self._notify(self._on_attach, ctype, entity_id, component)

    def detach(self, entity_id: EntityId, component_type: type) -> Any:
        """Remove and return a component, or None if it was not attached."""
        store = self._components.get(component_type)
        if store is None:
            return None
        component = store.pop(entity_id, None)
        if component is not None:
            self._notify(self._on_detach, component_type, entity_id, component)
        return component

    def get(self, entity_id: EntityId, component_type: type[T]) -> T:
        if entity_id not in self._alive:
            raise DeadEntityError(entity_id, f"Entity {entity_id} is not alive")
        store = self._components.get(component_type)
        if store is None or entity_id not in store:
            raise KeyError(
                f"Entity {entity_id} has no {component_type.__name__} component"
            )
        return cast(T, store[entity_id])

    def find(self, entity_id: EntityId, component_type: type[T]) -> T | None:
        """Like get(), but returns None instead of raising."""
        if entity_id not in self._alive:
            return None
        store = self._components.get(component_type)
        if store is None:
            return None
        return cast("T | None", store.get(entity_id))

    def has(self, entity_id: EntityId, component_type: type) -> bool:
        if entity_id not in self._alive:
            return False
        store = self._components.get(component_type)
        return store is not None and entity_id in store

    def query(
        self, *ctypes: type
    ) -> Generator[tuple[EntityId, tuple[Any, ...]], None, None]:
        """Yield (eid, components) for entities carrying every given type.

        Iterates over a copy of the first store, so systems may attach and
        detach while consuming the generator.
        """
        if not ctypes:
            return
        base_store = self._components.get(ctypes[0])
        if base_store is None:
            return

        for eid in list(base_store):
            if eid not in self._alive:
                continue
            components: list[Any] = []
            for ctype in ctypes:
                store = self._components.get(ctype)
                if store is None or eid not in store:
                    break
                components.append(store[eid])
            else:
                yield eid, tuple(components)

    def entities(self) -> frozenset[EntityId]:
        return frozenset(self._alive)

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._alive

    # -- Change detection hooks --

    def on_attach(self, ctype: type, callback: HookCallback) -> None:
        self._on_attach.setdefault(ctype, []).append(callback)

    def on_detach(self, ctype: type, callback: HookCallback) -> None:
        self._on_detach.setdefault(ctype, []).append(callback)

    def off_attach(self, ctype: type, callback: HookCallback) -> None:
        self._remove_hook(self._on_attach, ctype, callback)

    def off_detach(self, ctype: type, callback: HookCallback) -> None:
        self._remove_hook(self._on_detach, ctype, callback)

    def _notify(
        self,
        hooks: dict[type, list[HookCallback]],
        ctype: type,
        entity_id: EntityId,
        component: Any,
    ) -> None:
        for cb in list(hooks.get(ctype, ())):
            cb(self, entity_id, component)

    @staticmethod
    def _remove_hook(
        hooks: dict[type, list[HookCallback]], ctype: type, callback: HookCallback
    ) -> None:
        cbs = hooks.get(ctype)
        if cbs:
            try:
                cbs.remove(callback)
            except ValueError:
                pass
