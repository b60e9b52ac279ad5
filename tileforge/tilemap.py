"""Loading of tile maps saved in the Tiled TMX format."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from os import PathLike
from typing import Any

from tileforge.colliders import BoxCollider, CollisionLayer
from tileforge.debug import log_warning
from tileforge.drawable import DrawLayer
from tileforge.game_object import GameObject
from tileforge.geometry import Rect, Vector2
from tileforge.resources import ResourceAllocator, ResourceLoadError
from tileforge.sprite import Sprite

TILE_SCALE = 1.5
COLLISION_LAYER_NAME = "Collisions"


@dataclass
class TileInfo:
    """What a tile id looks like: its texture and the region within it."""

    texture_id: int = -1
    tile_id: int = -1
    texture_rect: Rect = field(default_factory=Rect)


@dataclass
class Tile:
    """A placed tile: shared properties plus its grid cell."""

    properties: TileInfo
    x: int
    y: int


@dataclass
class Layer:
    """The tiles of one map layer."""

    tiles: list[Tile] = field(default_factory=list)
    is_visible: bool = True
    sort_order: int = 0


@dataclass
class TileSetData:
    """Layout of a tile sheet image."""

    texture_id: int
    image_size: Vector2
    columns: int
    rows: int
    tile_size: Vector2


def _int_attr(element: ET.Element, name: str) -> int:
    value = element.get(name)
    if value is None:
        raise ValueError(f"<{element.tag}> is missing the {name!r} attribute")
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(
            f"<{element.tag}> attribute {name!r} is not an integer: {value!r}"
        ) from exc


def _child(element: ET.Element, tag: str) -> ET.Element:
    child = element.find(tag)
    if child is None:
        raise ValueError(f"<{element.tag}> has no <{tag}> element")
    return child


def _parse_tile_id(token: str) -> int:
    cleaned = token.strip()
    try:
        return int(cleaned)
    except ValueError as exc:
        raise ValueError(f"invalid tile id in layer data: {token!r}") from exc


class TileMapParser:
    """Turns a TMX map into game objects, one per non-empty tile."""

    def __init__(self, texture_allocator: ResourceAllocator[Any]) -> None:
        self.texture_allocator = texture_allocator

    def parse(
        self, file: str | PathLike[str], offset: Vector2 | None = None
    ) -> list[GameObject]:
        """Read the map and return its tiles as objects, shifted by offset."""
        shift = Vector2() if offset is None else offset
        root = ET.parse(file).getroot()
        if root.tag != "map":
            raise ValueError(f"expected a <map> root element, found <{root.tag}>")

        layers = self._build_layer_map(root)

        tile_width = _int_attr(root, "tilewidth")
        tile_height = _int_attr(root, "tileheight")
        scaled_width = tile_width * TILE_SCALE
        scaled_height = tile_height * TILE_SCALE

        tile_objects: list[GameObject] = []
        for name, layer in layers.items():
            for tile in layer.tiles:
                info = tile.properties
                tile_object = GameObject()

                if layer.is_visible:
                    sprite = tile_object.add_component(Sprite, self.texture_allocator)
                    sprite.load(info.texture_id)
                    sprite.set_texture_rect(info.texture_rect)
                    sprite.set_scale(TILE_SCALE, TILE_SCALE)
                    sprite.sort_order = layer.sort_order
                    sprite.draw_layer = DrawLayer.BACKGROUND

                x = tile.x * scaled_width + shift.x
                y = tile.y * scaled_height + shift.y
                tile_object.transform.set_position(x, y)

                if name == COLLISION_LAYER_NAME:
                    box = Rect(
                        x - scaled_width * 0.5,
                        y - scaled_height * 0.5,
                        scaled_width,
                        scaled_height,
                    )
                    tile_object.add_component(BoxCollider, box, CollisionLayer.TILE)
                    tile_object.transform.is_static = True

                tile_objects.append(tile_object)

        return tile_objects

    def _load_texture(self, source: str) -> int:
        try:
            return self.texture_allocator.add(source)
        except ResourceLoadError as exc:
            log_warning(str(exc))
            return -1

    def _build_tile_sets(self, root: ET.Element) -> dict[int, TileSetData]:
        tile_sets: dict[int, TileSetData] = {}
        for node in root.iter("tileset"):
            first_gid = _int_attr(node, "firstgid")
            tile_size = Vector2(_int_attr(node, "tilewidth"), _int_attr(node, "tileheight"))
            tile_count = _int_attr(node, "tilecount")
            columns = _int_attr(node, "columns")
            if columns <= 0:
                raise ValueError(f"tileset {first_gid} has {columns} columns")

            image = _child(node, "image")
            source = image.get("source")
            if source is None:
                raise ValueError("<image> is missing the 'source' attribute")

            tile_sets[first_gid] = TileSetData(
                texture_id=self._load_texture(source),
                image_size=Vector2(_int_attr(image, "width"), _int_attr(image, "height")),
                columns=columns,
                rows=tile_count // columns,
                tile_size=tile_size,
            )
        return dict(sorted(tile_sets.items()))

    def _build_layer_map(self, root: ET.Element) -> dict[str, Layer]:
        tile_sets = self._build_tile_sets(root)
        layers: dict[str, Layer] = {}
        for sort_order, node in enumerate(root.findall("layer")):
            name, layer = self._build_layer(node, tile_sets)
            layer.sort_order = sort_order
            layers.setdefault(name, layer)
        return layers

    def _build_layer(
        self, node: ET.Element, tile_sets: dict[int, TileSetData]
    ) -> tuple[str, Layer]:
        width = _int_attr(node, "width")
        _int_attr(node, "height")
        data = _child(node, "data").text or ""

        cache: dict[int, TileInfo] = {}
        layer = Layer()
        count = 0
        for token in data.split(","):
            tile_id = _parse_tile_id(token)
            if tile_id != 0:
                info = cache.get(tile_id)
                if info is None:
                    first_gid = next(
                        (gid for gid in reversed(tile_sets) if tile_id >= gid), None
                    )
                    if first_gid is None:
                        # An id below every tileset is dropped without taking a cell.
                        continue
                    tile_set = tile_sets[first_gid]
                    local = tile_id - first_gid
                    column, row = local % tile_set.columns, local // tile_set.columns
                    info = TileInfo(
                        texture_id=tile_set.texture_id,
                        tile_id=tile_id,
                        texture_rect=Rect(
                            column * tile_set.tile_size.x,
                            row * tile_set.tile_size.y,
                            tile_set.tile_size.x,
                            tile_set.tile_size.y,
                        ),
                    )
                    cache[tile_id] = info
                layer.tiles.append(Tile(info, count % width, count // width))
            count += 1

        visible = node.get("visible")
        layer.is_visible = True if visible is None else int(visible) != 0

        name = node.get("name")
        if name is None:
            raise ValueError("<layer> is missing the 'name' attribute")
        return name, layer