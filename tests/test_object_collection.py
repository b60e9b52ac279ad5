from tileforge.colliders import BoxCollider, CollisionLayer
from tileforge.components import Component
from tileforge.drawable import Drawable
from tileforge.game_object import GameObject
from tileforge.geometry import Rect
from tileforge.object_collection import ObjectCollection


class Recorder(Component):
    def __init__(self, owner, log, name):
        super().__init__(owner)
        self.log = log
        self.name = name

    def awake(self):
        self.log.append(("awake", self.name))

    def start(self):
        self.log.append(("start", self.name))

    def update(self, delta_time):
        self.log.append(("update", self.name))

    def late_update(self, delta_time):
        self.log.append(("late", self.name))


class Marker(Component, Drawable):
    def __init__(self, owner, name):
        super().__init__(owner)
        self.name = name

    def draw(self, window):
        window.append(self.name)

    def is_queued_for_removal(self):
        return self.owner.is_queued_for_removal()


def recorded(log, name):
    obj = GameObject()
    obj.add_component(Recorder, log, name)
    return obj


def test_new_objects_wake_then_start():
    log = []
    a, b = recorded(log, "a"), recorded(log, "b")
    collection = ObjectCollection()
    collection.add([a, b])
    collection.process_new_objects()
    assert log == [("awake", "a"), ("awake", "b"), ("start", "a"), ("start", "b")]
    assert collection.objects == (a, b)


def test_pending_objects_not_updated():
    log = []
    collection = ObjectCollection()
    collection.add(recorded(log, "a"))
    collection.update(0.1)
    assert log == []
    assert collection.objects == ()


def test_update_and_late_update_reach_components():
    log = []
    collection = ObjectCollection()
    collection.add(recorded(log, "a"))
    collection.process_new_objects()
    log.clear()
    collection.update(0.1)
    collection.late_update(0.1)
    assert log == [("update", "a"), ("late", "a")]


def test_processing_twice_does_not_duplicate():
    log = []
    a = recorded(log, "a")
    collection = ObjectCollection()
    collection.add(a)
    collection.process_new_objects()
    collection.process_new_objects()
    assert collection.objects == (a,)


def test_removals_drop_objects_and_drawables():
    keep, gone = GameObject(), GameObject()
    keep.add_component(Marker, "keep")
    gone.add_component(Marker, "gone")
    collection = ObjectCollection()
    collection.add([keep, gone])
    collection.process_new_objects()
    gone.queue_for_removal()
    collection.process_removals()
    window = []
    collection.draw(window)
    assert collection.objects == (keep,)
    assert window == ["keep"]


def test_update_resolves_collisions():
    player = GameObject()
    player.transform.set_position(560, 500)
    player_box = player.add_component(BoxCollider, Rect(0, 0, 50, 50), CollisionLayer.PLAYER)
    tile = GameObject()
    tile.transform.set_position(500, 500)
    tile.transform.is_static = True
    tile_box = tile.add_component(BoxCollider, Rect(0, 0, 100, 100), CollisionLayer.TILE)
    collection = ObjectCollection()
    collection.add([player, tile])
    collection.process_new_objects()
    collection.update(0.0)
    assert not player_box.collidable.intersects(tile_box.collidable)
    assert len(collection.debug_overlay.pending_rects) == 2