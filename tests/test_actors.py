import pytest

from arcadekit.actors import (
    Actor,
    BoxCollider,
    Collider,
    ColliderType,
    CollisionManager,
    Component,
)
from arcadekit.geometry import CenterRect


class RecordingComponent(Component):
    def __init__(self):
        super().__init__()
        self.calls = []

    def init(self):
        self.calls.append("init")

    def update(self):
        self.calls.append("update")

    def release(self):
        self.calls.append("release")


class RecordingActor(Actor):
    def __init__(self, name, body):
        super().__init__(name, body)
        self.events = []

    def on_component_begin_overlap(self, collider, other):
        self.events.append(("begin", other.owner.name))

    def on_component_end_overlap(self, collider, other):
        self.events.append(("end", other.owner.name))


def make_boxed(name, x, y, manager, size=10):
    actor = RecordingActor(name, CenterRect(x, y, size, size))
    actor.add_component(BoxCollider(CenterRect(0, 0, size, size), manager))
    actor.init()
    return actor


def test_add_component_sets_owner():
    actor = Actor("a")
    component = RecordingComponent()
    actor.add_component(component)
    actor.add_component(None)
    assert component.owner is actor
    assert actor.components == [component]


def test_remove_component():
    actor = Actor()
    component = RecordingComponent()
    actor.add_component(component)
    actor.remove_component(component)
    actor.remove_component(component)
    assert actor.components == []


def test_init_activates_and_inits_components():
    actor = Actor()
    component = RecordingComponent()
    actor.add_component(component)
    actor.active = False
    actor.init()
    assert actor.active is True
    assert component.calls == ["init"]


def test_update_skipped_when_inactive():
    actor = Actor()
    component = RecordingComponent()
    actor.add_component(component)
    actor.update()
    actor.active = False
    actor.update()
    assert component.calls == ["update"]


def test_release_clears_components():
    actor = Actor()
    component = RecordingComponent()
    actor.add_component(component)
    actor.release()
    assert component.calls == ["release"]
    assert actor.components == []


def test_collider_registers_and_unregisters():
    manager = CollisionManager()
    actor = Actor()
    collider = Collider(ColliderType.NONE, manager)
    actor.add_component(collider)
    actor.init()
    assert manager.colliders == [collider]
    actor.release()
    assert manager.colliders == []


def test_base_collider_never_collides():
    manager = CollisionManager()
    a, b = Actor(), Actor()
    ca, cb = Collider(manager=manager), Collider(manager=manager)
    a.add_component(ca)
    b.add_component(cb)
    assert ca.check_collision(cb) is False


def test_box_collider_world_collision_follows_owner():
    actor = Actor(body=CenterRect(100, 50, 20, 20))
    collider = BoxCollider(CenterRect(5, -5, 8, 6), CollisionManager())
    actor.add_component(collider)
    world = collider.world_collision()
    assert world == CenterRect(105, 45, 8, 6)
    assert collider.collider_type is ColliderType.BOX


def test_box_collider_ignores_non_box():
    manager = CollisionManager()
    a = Actor()
    box = BoxCollider(CenterRect(0, 0, 10, 10), manager)
    a.add_component(box)
    other = Collider(ColliderType.CIRCLE, manager)
    Actor().add_component(other)
    assert box.check_collision(other) is False


def test_begin_and_end_overlap_fire_once():
    manager = CollisionManager()
    a = make_boxed("A", 0, 0, manager)
    b = make_boxed("B", 5, 5, manager)

    manager.update()
    manager.update()
    assert a.events == [("begin", "B")]
    assert b.events == [("begin", "A")]

    b.body = CenterRect(500, 500, 10, 10)
    manager.update()
    assert a.events == [("begin", "B"), ("end", "B")]
    assert b.events == [("begin", "A"), ("end", "A")]
    assert a.components[0].overlapping == set()


def test_inactive_actors_are_skipped():
    manager = CollisionManager()
    a = make_boxed("A", 0, 0, manager)
    b = make_boxed("B", 5, 5, manager)
    b.active = False
    manager.update()
    assert a.events == []
    assert b.events == []


def test_default_overlap_handlers_print_names(capsys):
    manager = CollisionManager()
    a = Actor("Left", CenterRect(0, 0, 10, 10))
    b = Actor("Right", CenterRect(3, 3, 10, 10))
    a.add_component(BoxCollider(CenterRect(0, 0, 10, 10), manager))
    b.add_component(BoxCollider(CenterRect(0, 0, 10, 10), manager))
    a.init()
    b.init()
    manager.update()
    out = capsys.readouterr().out
    assert "Left, Right" in out
    assert "Right, Left" in out


@pytest.mark.parametrize("offset", [0, 4, 9])
def test_overlap_is_symmetric(offset):
    manager = CollisionManager()
    a = make_boxed("A", 0, 0, manager)
    b = make_boxed("B", offset, offset, manager)
    ca, cb = a.components[0], b.components[0]
    assert ca.check_collision(cb) == cb.check_collision(ca) is True