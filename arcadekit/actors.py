"""Actors made of components, box colliders and overlap tracking."""

from __future__ import annotations

import enum

from arcadekit.geometry import CenterRect, rect_in_rect


class ColliderType(enum.Enum):
    NONE = "none"
    BOX = "box"
    CIRCLE = "circle"


class Component:
    """A piece of behaviour attached to an actor."""

    def __init__(self) -> None:
        self.owner: Actor | None = None
        self.initialized = False
        self.frames = 0

    def init(self) -> None:
        """Mark the component as started with its owning actor."""
        self.initialized = True
        self.frames = 0

    def update(self) -> None:
        """Count one frame while the owner is active."""
        self.frames += 1

    def release(self) -> None:
        """Mark the component as stopped with its owning actor."""
        self.initialized = False


class Actor:
    """An object in a scene with a body, a name and a list of components."""

    def __init__(self, name: str = "", body: CenterRect | None = None) -> None:
        self.components: list[Component] = []
        self.body = body if body is not None else CenterRect()
        self.rotation_radian = 0.0
        self.name = name
        self.active = True
        self.touching: set[Actor] = set()

    def on_component_begin_overlap(self, collider: Collider, other: Collider) -> None:
        self.touching.add(other.owner)
        print(f"충돌시작.{collider.owner.name}, {other.owner.name}")

    def on_component_end_overlap(self, collider: Collider, other: Collider) -> None:
        self.touching.discard(other.owner)
        print(f"충돌끝{collider.owner.name}, {other.owner.name}")

    def add_component(self, component: Component | None) -> None:
        if component is None:
            return
        component.owner = self
        self.components.append(component)

    def remove_component(self, component: Component) -> None:
        if component in self.components:
            self.components.remove(component)

    def init(self) -> None:
        self.active = True
        for component in self.components:
            component.init()

    def update(self) -> None:
        if not self.active:
            return
        for component in self.components:
            component.update()

    def release(self) -> None:
        for component in self.components:
            component.release()
        self.components.clear()


class CollisionManager:
    """Tracks colliders and fires begin and end overlap events between them."""

    def __init__(self) -> None:
        self.colliders: list[Collider] = []

    def add_collider(self, collider: Collider) -> None:
        self.colliders.append(collider)

    def remove_collider(self, collider: Collider) -> None:
        if collider in self.colliders:
            self.colliders.remove(collider)

    def update(self) -> None:
        """Compare every pair of active colliders once and report changes."""
        colliders = list(self.colliders)
        for i, first in enumerate(colliders):
            if not first.owner.active:
                continue
            for second in colliders[i + 1 :]:
                if not second.owner.active:
                    continue
                if first.check_collision(second):
                    if second not in first.overlapping:
                        first.owner.on_component_begin_overlap(first, second)
                        second.owner.on_component_begin_overlap(second, first)
                        first.overlapping.add(second)
                        second.overlapping.add(first)
                elif second in first.overlapping:
                    first.owner.on_component_end_overlap(first, second)
                    second.owner.on_component_end_overlap(second, first)
                    first.overlapping.discard(second)
                    second.overlapping.discard(first)


collision_manager = CollisionManager()


class Collider(Component):
    """A component that registers with a collision manager while alive."""

    def __init__(
        self,
        collider_type: ColliderType = ColliderType.NONE,
        manager: CollisionManager | None = None,
    ) -> None:
        super().__init__()
        self.collider_type = collider_type
        self.manager = manager if manager is not None else collision_manager
        self.overlapping: set[Collider] = set()

    def init(self) -> None:
        super().init()
        self.manager.add_collider(self)

    def release(self) -> None:
        super().release()
        self.manager.remove_collider(self)

    def check_collision(self, other: Collider) -> bool:
        return False


class BoxCollider(Collider):
    """An axis-aligned box placed relative to its owner's body."""

    def __init__(
        self,
        collision: CenterRect | None = None,
        manager: CollisionManager | None = None,
    ) -> None:
        super().__init__(ColliderType.BOX, manager)
        self.collision = collision if collision is not None else CenterRect()

    def world_collision(self) -> CenterRect:
        body = self.owner.body
        return CenterRect(
            body.x + self.collision.x,
            body.y + self.collision.y,
            self.collision.width,
            self.collision.height,
        )

    def check_collision(self, other: Collider) -> bool:
        if isinstance(other, BoxCollider) and other.collider_type is ColliderType.BOX:
            return rect_in_rect(self.world_collision(), other.world_collision())
        return False