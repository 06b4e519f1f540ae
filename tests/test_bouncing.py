import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pixelplay.bouncing import (
    BOX_BACKGROUND,
    BOX_COLOR,
    BOX_SIZE,
    CIRCLE_BACKGROUND,
    CIRCLE_COLOR,
    CIRCLE_RADIUS,
    BouncingBox,
    BouncingCircle,
    ResizableBouncingBox,
)


def pixel(frame, width, x, y):
    i = (x + y * width) * 4
    return bytes(frame[i : i + 4])


def test_box_draw_initial_colours():
    world = BouncingBox()
    frame = bytearray(world.width * world.height * 4)
    world.draw(frame)
    assert pixel(frame, world.width, 0, 0) == BOX_BACKGROUND
    assert pixel(frame, world.width, 24, 16) == BOX_COLOR
    assert pixel(frame, world.width, 24 + BOX_SIZE - 1, 16 + BOX_SIZE - 1) == BOX_COLOR
    assert pixel(frame, world.width, 24 + BOX_SIZE, 16) == BOX_BACKGROUND
    assert pixel(frame, world.width, 23, 16) == BOX_BACKGROUND


def test_box_draw_counts_box_pixels():
    world = BouncingBox()
    frame = bytearray(world.width * world.height * 4)
    world.draw(frame)
    pixels = [bytes(frame[i : i + 4]) for i in range(0, len(frame), 4)]
    assert pixels.count(BOX_COLOR) == BOX_SIZE * BOX_SIZE
    assert pixels.count(BOX_COLOR) + pixels.count(BOX_BACKGROUND) == len(pixels)


def test_box_moves_by_velocity():
    world = BouncingBox()
    world.update()
    assert (world.box_x, world.box_y) == (25, 17)


def test_box_reverses_at_right_edge():
    world = BouncingBox(box_x=320 - BOX_SIZE + 1, box_y=50)
    world.update()
    assert world.velocity_x == -1
    assert world.box_x == 320 - BOX_SIZE


def test_box_reverses_at_zero():
    world = BouncingBox(box_x=0, box_y=50, velocity_x=-1)
    world.update()
    assert world.velocity_x == 1
    assert world.box_x == 1


@settings(max_examples=20)
@given(st.integers(min_value=0, max_value=2000))
def test_box_stays_on_screen(steps):
    world = BouncingBox()
    for _ in range(steps):
        world.update()
    assert 0 <= world.box_x <= world.width - BOX_SIZE + 1
    assert 0 <= world.box_y <= world.height - BOX_SIZE + 1


def test_box_draw_leaves_partial_pixel_alone():
    world = BouncingBox(width=4, height=1, box_x=100, box_y=100)
    frame = bytearray(b"\x01" * 10)
    world.draw(frame)
    assert bytes(frame[:8]) == BOX_BACKGROUND * 2
    assert bytes(frame[8:]) == b"\x01\x01"


def test_resizable_velocity_points_away_from_edges():
    world = ResizableBouncingBox(100, 100)
    world.box_x = 100 - BOX_SIZE + 5
    world.velocity_x = 1
    world.update()
    assert world.velocity_x == -1
    world.box_x = -3
    world.update()
    assert world.velocity_x == 1


def test_resizable_resize_changes_layout():
    world = ResizableBouncingBox(640, 480)
    world.resize(200, 100)
    assert (world.width, world.height) == (200, 100)
    frame = bytearray(200 * 100 * 4)
    world.draw(frame)
    assert pixel(frame, 200, 24, 16) == BOX_COLOR
    assert pixel(frame, 200, 199, 99) == BOX_BACKGROUND


@settings(max_examples=20)
@given(st.integers(min_value=BOX_SIZE + 2, max_value=400), st.integers(min_value=0, max_value=1000))
def test_resizable_keeps_box_within_resized_screen(size, steps):
    world = ResizableBouncingBox(640, 480)
    world.resize(size, size)
    for _ in range(steps + 1000):
        world.update()
    assert world.box_x + BOX_SIZE <= size + 1
    assert world.box_y + BOX_SIZE <= size + 1


def test_resizable_draw_rejects_zero_width():
    world = ResizableBouncingBox(640, 480)
    world.resize(0, 10)
    with pytest.raises(ValueError):
        world.draw(bytearray(16))


def test_circle_draw_initial_colours():
    world = BouncingCircle()
    frame = bytearray(world.width * world.height * 4)
    world.draw(frame)
    assert pixel(frame, world.width, 300, 200) == CIRCLE_COLOR
    assert pixel(frame, world.width, 0, 0) == CIRCLE_BACKGROUND
    assert pixel(frame, world.width, 300 + CIRCLE_RADIUS, 200) == CIRCLE_BACKGROUND
    assert pixel(frame, world.width, 300 + CIRCLE_RADIUS - 1, 200) == CIRCLE_COLOR


def test_circle_is_symmetric():
    world = BouncingCircle()
    frame = bytearray(world.width * world.height * 4)
    world.draw(frame)
    for dx, dy in [(10, 50), (40, 40), (63, 5), (45, 45)]:
        colours = {
            pixel(frame, world.width, 300 + sx * dx, 200 + sy * dy)
            for sx in (-1, 1)
            for sy in (-1, 1)
        }
        assert len(colours) == 1


def test_circle_reverses_at_edge():
    world = BouncingCircle(circle_x=CIRCLE_RADIUS, circle_y=200, velocity_x=-5)
    world.update()
    assert world.velocity_x == 5
    assert world.circle_x == CIRCLE_RADIUS + 5


@settings(max_examples=20)
@given(st.integers(min_value=0, max_value=1000))
def test_circle_stays_on_screen(steps):
    world = BouncingCircle()
    for _ in range(steps):
        world.update()
    assert CIRCLE_RADIUS - 5 <= world.circle_x <= world.width - CIRCLE_RADIUS + 5
    assert CIRCLE_RADIUS - 5 <= world.circle_y <= world.height - CIRCLE_RADIUS + 5