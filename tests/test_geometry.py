import pytest

from tileforge.geometry import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Rect,
    Vector2,
    intersection_rect,
)


def test_vector_add_identity():
    v = Vector2(3.5, -2.0)
    assert v + Vector2(0.0, 0.0) == v


def test_vector_add_commutative_and_associative():
    a, b, c = Vector2(1, 2), Vector2(5, -7), Vector2(-3, 11)
    assert a + b == b + a
    assert (a + b) + c == a + (b + c)


def test_vector_add_does_not_mutate_operands():
    a, b = Vector2(1, 2), Vector2(3, 4)
    a + b
    assert a == Vector2(1, 2)
    assert b == Vector2(3, 4)


def test_vector_unpacks():
    x, y = Vector2(7, 9)
    assert (x, y) == (7, 9)


def test_vector_add_rejects_other_types():
    with pytest.raises(TypeError):
        Vector2(1, 2) + 5


def test_rect_right_and_bottom():
    r = Rect(10, 20, 30, 40)
    assert r.right - r.width == r.left
    assert r.bottom - r.height == r.top


def test_rect_center_is_midway():
    r = Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
    c = r.center
    assert c.x - r.left == r.right - c.x
    assert c.y - r.top == r.bottom - c.y


def test_intersects_overlapping():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_intersects_touching_edges_is_false():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert not a.intersects(b)
    assert not b.intersects(a)


def test_intersects_disjoint():
    assert not Rect(0, 0, 5, 5).intersects(Rect(100, 100, 5, 5))


def test_intersects_negative_width():
    flipped = Rect(10, 0, -10, 10)
    assert flipped.intersects(Rect(5, 0, 1, 10))


def test_intersection_of_rect_with_itself():
    r = Rect(3, 4, 20, 8)
    assert intersection_rect(r, r) == r


def test_intersection_is_symmetric_and_inside_both():
    a = Rect(0, 0, 10, 10)
    b = Rect(4, 6, 10, 10)
    inter = intersection_rect(a, b)
    assert inter == intersection_rect(b, a)
    assert a.left <= inter.left and inter.right <= a.right
    assert b.left <= inter.left and inter.right <= b.right
    assert a.top <= inter.top and inter.bottom <= a.bottom
    assert b.top <= inter.top and inter.bottom <= b.bottom
    assert inter.intersects(a) and inter.intersects(b)


def test_intersection_of_contained_rect_is_inner():
    outer = Rect(0, 0, 100, 100)
    inner = Rect(10, 20, 5, 6)
    assert intersection_rect(outer, inner) == inner