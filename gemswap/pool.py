"""Fixed-size pools of reusable game entities."""

from __future__ import annotations

from typing import Callable, Generic, List, TypeVar

from gemswap.entity import GameEntity

E = TypeVar("E", bound=GameEntity)


class PoolExhaustedError(RuntimeError):
    """Every entity in the pool is already active."""


class EntityPool(Generic[E]):
    """Hands out inactive entities, created once up front."""

    def __init__(self, factory: Callable[[], E], capacity: int = 100) -> None:
        entities: List[E] = [factory() for _ in range(capacity)]
        for entity in entities:
            if not isinstance(entity, GameEntity):
                raise TypeError(f"pooled objects must be GameEntity, got {type(entity).__name__}")
        self._entities = entities

    def create(self) -> E:
        """Reset, activate and return the first inactive entity."""
        entity = next((e for e in self._entities if not e.active), None)
        if entity is None:
            raise PoolExhaustedError(f"all {len(self._entities)} pooled entities are in use")
        entity.reset()
        entity.set_active(True)
        return entity

    def __len__(self) -> int:
        return len(self._entities)