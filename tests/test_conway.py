import pytest
from hypothesis import given
from hypothesis import strategies as st

from pixelplay.conway import BIRTH_RULE, SURVIVE_RULE, Cell, ConwayGrid


def alive_set(grid):
    return {
        (x, y)
        for y in range(grid.height)
        for x in range(grid.width)
        if grid.cells[grid.index(x, y)].alive
    }


def make_grid(width, height, live):
    grid = ConwayGrid(width, height)
    for x, y in live:
        grid.cells[grid.index(x, y)].set_alive(True)
    return grid


def test_next_state_alive_sets_full_heat():
    assert Cell(False, 7).next_state(True) == Cell(True, 255)


def test_next_state_dead_decrements_and_saturates():
    assert Cell(True, 255).next_state(False) == Cell(False, 254)
    assert Cell(False, 0).next_state(False) == Cell(False, 0)


def test_next_state_does_not_mutate():
    cell = Cell(False, 10)
    cell.next_state(True)
    assert cell == Cell(False, 10)


@given(st.integers(min_value=0, max_value=8), st.booleans())
def test_update_neighbours_follows_rules(n, alive):
    cell = Cell(alive, 255 if alive else 0)
    expected = SURVIVE_RULE[n] if alive else BIRTH_RULE[n]
    assert cell.update_neighbours(n).alive is expected


def test_update_neighbours_birth_and_death():
    assert Cell().update_neighbours(3).alive is True
    assert Cell(True, 255).update_neighbours(2).alive is True
    assert Cell(True, 255).update_neighbours(4) == Cell(False, 254)


def test_set_alive_mutates():
    cell = Cell()
    cell.set_alive(True)
    assert cell == Cell(True, 255)


def test_cool_off_dead_cell():
    cell = Cell(False, 255)
    cell.cool_off(0.4)
    assert cell.heat == 102


def test_cool_off_ignores_live_cell():
    cell = Cell(True, 255)
    cell.cool_off(0.0)
    assert cell.heat == 255


def test_cool_off_clamps():
    cell = Cell(False, 200)
    cell.cool_off(10.0)
    assert cell.heat == 255
    cell.cool_off(-1.0)
    assert cell.heat == 0


def test_cool_off_nan_raises():
    with pytest.raises(ValueError):
        Cell(False, 5).cool_off(float("nan"))


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, 3)])
def test_empty_grid_rejected(size):
    with pytest.raises(ValueError):
        ConwayGrid(*size)


def test_new_grid_is_dead():
    grid = ConwayGrid(4, 3)
    assert len(grid.cells) == 12
    assert alive_set(grid) == set()


def test_index():
    grid = ConwayGrid(5, 4)
    assert grid.index(2, 1) == 2 + 1 * 5
    assert grid.index(-1, 0) is None
    assert grid.index(5, 0) is None
    assert grid.index(0, 4) is None


def test_count_neighbours_wraps():
    grid = make_grid(5, 5, [(4, 4), (1, 0), (0, 4)])
    assert grid.count_neighbours(0, 0) == 3
    assert grid.count_neighbours(2, 2) == 0


def test_blinker_oscillates():
    horizontal = {(1, 2), (2, 2), (3, 2)}
    vertical = {(2, 1), (2, 2), (2, 3)}
    grid = make_grid(5, 5, horizontal)
    grid.update()
    assert alive_set(grid) == vertical
    grid.update()
    assert alive_set(grid) == horizontal


def test_block_is_still_life():
    block = {(1, 1), (2, 1), (1, 2), (2, 2)}
    grid = make_grid(6, 6, block)
    for _ in range(3):
        grid.update()
    assert alive_set(grid) == block


def test_dead_cells_cool_after_update():
    grid = make_grid(5, 5, [(2, 2)])
    grid.update()
    assert alive_set(grid) == set()
    assert grid.cells[grid.index(2, 2)].heat == 254


def test_toggle():
    grid = ConwayGrid(3, 3)
    assert grid.toggle(1, 1) is True
    assert grid.cells[grid.index(1, 1)].alive
    assert grid.toggle(1, 1) is False
    assert not grid.cells[grid.index(1, 1)].alive


def test_toggle_off_grid():
    grid = ConwayGrid(3, 3)
    assert grid.toggle(-1, 0) is False
    assert grid.toggle(3, 3) is False
    assert alive_set(grid) == set()


def test_draw_colours():
    grid = ConwayGrid(2, 1)
    grid.cells[0] = Cell(True, 255)
    grid.cells[1] = Cell(False, 42)
    screen = bytearray(8)
    grid.draw(screen)
    assert bytes(screen) == bytes([0, 255, 255, 255, 0, 0, 42, 255])


def test_draw_wrong_size():
    with pytest.raises(ValueError):
        ConwayGrid(2, 2).draw(bytearray(4))


def test_set_line_horizontal():
    grid = ConwayGrid(6, 4)
    assert grid.set_line(1, 2, 4, 2, True) is True
    assert alive_set(grid) == {(1, 2), (2, 2), (3, 2), (4, 2)}
    assert grid.set_line(2, 2, 3, 2, False) is True
    assert alive_set(grid) == {(1, 2), (4, 2)}


def test_set_line_clipped():
    grid = ConwayGrid(4, 4)
    assert grid.set_line(-3, 0, 10, 0, True) is True
    assert alive_set(grid) == {(0, 0), (1, 0), (2, 0), (3, 0)}


def test_set_line_outside():
    grid = ConwayGrid(4, 4)
    assert grid.set_line(-5, -5, -1, -1, True) is False
    assert alive_set(grid) == set()


def test_random_is_deterministic_for_seed():
    a = ConwayGrid.random(20, 15, (12345, 678))
    b = ConwayGrid.random(20, 15, (12345, 678))
    assert a.cells == b.cells


@given(st.integers(min_value=0, max_value=2**64 - 1), st.integers(min_value=0, max_value=2**64 - 1))
def test_random_heat_invariants(state, stream):
    grid = ConwayGrid.random(8, 6, (state, stream))
    for cell in grid.cells:
        if cell.alive:
            assert cell.heat == 255
        else:
            assert 0 <= cell.heat <= 102


def test_randomize_replaces_state():
    grid = ConwayGrid(10, 10)
    grid.randomize((1, 2))
    other = ConwayGrid(10, 10)
    other.set_line(0, 0, 9, 9, True)
    other.randomize((1, 2))
    assert grid.cells == other.cells
    assert len(grid.cells) == 100