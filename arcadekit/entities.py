"""Game actors with sprites: bullets, monsters, the player and item boxes."""

from __future__ import annotations

import enum
from collections.abc import Callable

from arcadekit.actors import Actor, BoxCollider, Collider, CollisionManager
from arcadekit.geometry import CenterRect, Vector2
from arcadekit.keys import VK_SPACE, KeyManager, key_manager
from arcadekit.timing import TimeManager, time_manager

BULLET_SPRITE = "../Resources/mjh_fireball.png"
MONSTER_SPRITE = "../Resources/mjh_monster.png"
HP_ITEM_BOX_SPRITE = "../Resources/Items/hp_item_box.png"
MISSILE_ITEM_BOX_SPRITE = "../Resources/Items/missile_item_box.png"

BULLET_SIZE = 50
BULLET_SPEED = 500
BULLET_COLLIDER_SIZE = 40
MONSTER_SIZE = 80
TRACKING_DISTANCE = 200
RETURN_TOLERANCE = 2.0


class ItemBoxType(enum.Enum):
    NONE = "none"
    HP_ITEM_BOX = "hp"
    MISSILE_ITEM_BOX = "missile"


class SpriteActor(Actor):
    """An actor drawn with an image file."""

    def __init__(
        self,
        name: str = "",
        body: CenterRect | None = None,
        clock: TimeManager | None = None,
    ) -> None:
        super().__init__(name, body)
        self.sprite_path: str | None = None
        self.clock = clock if clock is not None else time_manager

    def set_sprite(self, file_path: str, body: CenterRect) -> None:
        self.sprite_path = file_path
        self.body = body

    def _shift(self, direction: Vector2, distance: float) -> None:
        step = direction.normalized() * distance
        self.body = CenterRect(
            self.body.x + step.x, self.body.y + step.y, self.body.width, self.body.height
        )


class Bullet(SpriteActor):
    """A projectile that flies straight and knocks out the first monster it hits."""

    def __init__(self, clock: TimeManager | None = None) -> None:
        super().__init__(clock=clock)
        self.direction = Vector2()
        self.speed = 0.0

    def init(self) -> None:
        super().init()
        self.name = "Bullet"

    def update(self) -> None:
        if not self.active:
            return
        super().update()
        self.move()

    def move(self) -> None:
        self.direction = self.direction.normalized()
        self._shift(self.direction, self.clock.delta_time * self.speed)

    def set_bullet_info(self, direction: Vector2, speed: float, spawn_pos: Vector2) -> None:
        self.direction = direction
        self.speed = speed
        body = CenterRect(spawn_pos.x, spawn_pos.y, BULLET_SIZE, BULLET_SIZE)
        self.set_sprite(BULLET_SPRITE, body)

    def on_component_begin_overlap(self, collider: Collider, other: Collider) -> None:
        self.touching.add(other.owner)
        if other.owner.name == "Monster":
            other.owner.active = False
            self.active = False

    def on_component_end_overlap(self, collider: Collider, other: Collider) -> None:
        self.touching.discard(other.owner)


class Monster(SpriteActor):
    """Chases a target inside its view cone and walks home otherwise."""

    def __init__(self, clock: TimeManager | None = None) -> None:
        super().__init__(clock=clock)
        self.direction = Vector2()
        self.origin_direction = Vector2()
        self.speed = 0.0
        self.tracking_radian = 0.0
        self.origin_pos = Vector2()
        self.target_actor: Actor | None = None

    def init(self) -> None:
        super().init()
        self.name = "Monster"

    def update(self) -> None:
        if not self.active:
            return
        super().update()

        if self.target_actor is not None:
            if self.is_in_tracking_range():
                move_vec = (
                    self.target_actor.body.position() - self.body.position()
                ).normalized()
                self.direction = move_vec
                self.move(move_vec)
            else:
                to_origin = self.origin_pos - self.body.position()
                if to_origin.length() > RETURN_TOLERANCE:
                    move_vec = to_origin.normalized()
                    self.direction = move_vec
                    self.move(move_vec)
                else:
                    self.direction = self.origin_direction

        self.rotation_radian = Vector2.down().signed_angle(self.direction)

    def move(self, direction: Vector2) -> None:
        self._shift(direction, self.speed * self.clock.delta_time)

    def set_monster_info(
        self,
        tracking_radian: float,
        speed: float,
        spawn_pos: Vector2,
        direction: Vector2,
    ) -> None:
        self.tracking_radian = tracking_radian
        self.speed = speed
        self.direction = direction
        self.origin_direction = direction
        self.origin_pos = spawn_pos
        self.set_sprite(
            MONSTER_SPRITE, CenterRect(spawn_pos.x, spawn_pos.y, MONSTER_SIZE, MONSTER_SIZE)
        )

    def is_in_tracking_range(self) -> bool:
        """True when the target is close and inside the tracking angle."""
        if self.target_actor is None:
            return False
        to_target = self.target_actor.body.position() - self.body.position()
        if to_target.length() >= TRACKING_DISTANCE:
            return False
        angle = self.direction.normalized().signed_angle(to_target.normalized())
        return abs(angle) < self.tracking_radian / 2


class Player(SpriteActor):
    """Moves with W, A, S and D and fires bullets toward the mouse with space."""

    def __init__(
        self,
        clock: TimeManager | None = None,
        keys: KeyManager | None = None,
        spawn: Callable[[Actor], None] | None = None,
        collisions: CollisionManager | None = None,
    ) -> None:
        super().__init__(clock=clock)
        self.speed = 0.0
        self.keys = keys if keys is not None else key_manager
        self.spawn = spawn
        self.collisions = collisions
        self.mouse_pos = Vector2()

    def init(self) -> None:
        super().init()
        self.name = "Player"

    def update(self) -> None:
        if not self.active:
            return
        super().update()

        direction = Vector2()
        for key, step in (
            ("W", Vector2(0, -1)),
            ("A", Vector2(-1, 0)),
            ("S", Vector2(0, 1)),
            ("D", Vector2(1, 0)),
        ):
            if self.keys.get_key(key):
                direction = direction + step

        if self.keys.get_key_down(VK_SPACE):
            self._fire()

        self.move(direction.normalized())

    def _fire(self) -> None:
        bullet = Bullet(clock=self.clock)
        aim = self.mouse_pos - self.body.position()
        bullet.set_bullet_info(aim, BULLET_SPEED, self.body.position())
        bullet.add_component(
            BoxCollider(
                CenterRect(0, 0, BULLET_COLLIDER_SIZE, BULLET_COLLIDER_SIZE),
                self.collisions,
            )
        )
        bullet.init()
        if self.spawn is not None:
            self.spawn(bullet)

    def move(self, direction: Vector2) -> None:
        self._shift(direction, self.speed * self.clock.delta_time)

    def set_player_info(self, body: CenterRect, speed: float, sprite_path: str) -> None:
        self.body = body
        self.speed = speed
        self.set_sprite(sprite_path, body)

    def on_component_begin_overlap(self, collider: Collider, other: Collider) -> None:
        self.touching.add(other.owner)
        if other.owner.name == "ItemBox":
            print("아이템 박스 먹었다.")
            other.owner.active = False

    def on_component_end_overlap(self, collider: Collider, other: Collider) -> None:
        self.touching.discard(other.owner)
        print("플레이어의 충돌 끝!")


class ItemBox(SpriteActor):
    """A pickup whose picture depends on its kind."""

    def __init__(self, clock: TimeManager | None = None) -> None:
        super().__init__(clock=clock)
        self.item_box_type = ItemBoxType.NONE

    def init(self) -> None:
        super().init()
        self.name = "ItemBox"

    def set_item_box_info(self, item_box_type: ItemBoxType, body: CenterRect) -> None:
        self.item_box_type = item_box_type
        if item_box_type is ItemBoxType.HP_ITEM_BOX:
            self.set_sprite(HP_ITEM_BOX_SPRITE, body)
        elif item_box_type is ItemBoxType.MISSILE_ITEM_BOX:
            self.set_sprite(MISSILE_ITEM_BOX_SPRITE, body)

    def on_component_begin_overlap(self, collider: Collider, other: Collider) -> None:
        self.touching.add(other.owner)

    def on_component_end_overlap(self, collider: Collider, other: Collider) -> None:
        self.touching.discard(other.owner)