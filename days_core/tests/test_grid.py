from days_core.grid import GRID_COLUMNS, MAX_DOT_RADIUS, GridConfig, calculate_grid


def test_calculate_grid_social_preview():
    grid = calculate_grid(1200, 630, 365)
    assert grid == GridConfig(
        columns=15,
        rows=25,
        total_dots=365,
        dot_radius=6,
        dot_spacing=18,
        grid_width=252,
        grid_height=432,
        offset_x=474,
        offset_y=62,
    )


def test_calculate_grid_phone_leap_year():
    grid = calculate_grid(390, 844, 366)
    assert grid.rows == 25
    assert grid.dot_spacing == 20
    assert grid.dot_radius == 7
    assert (grid.grid_width, grid.grid_height) == (280, 480)
    assert (grid.offset_x, grid.offset_y) == (55, 132)


def test_calculate_grid_single_dot():
    grid = calculate_grid(100, 100, 1)
    assert grid.rows == 1
    assert grid.dot_spacing == 5
    assert grid.dot_radius == 1
    assert grid.grid_height == 0
    assert (grid.offset_x, grid.offset_y) == (15, 44)


def test_calculate_grid_large_canvas_caps_radius():
    grid = calculate_grid(4000, 8000, 365)
    assert grid.dot_spacing == 213
    assert grid.dot_radius == MAX_DOT_RADIUS
    assert (grid.grid_width, grid.grid_height) == (2982, 5112)
    assert (grid.offset_x, grid.offset_y) == (509, 964)


def test_calculate_grid_columns_fixed():
    for width, height, days in [(100, 8000, 365), (4000, 100, 366), (640, 480, 1)]:
        assert calculate_grid(width, height, days).columns == GRID_COLUMNS


def test_calculate_grid_zero_days_does_not_raise():
    grid = calculate_grid(1200, 630, 0)
    assert grid.rows == 0
    assert grid.dot_spacing == 64
    assert grid.dot_radius == MAX_DOT_RADIUS
    assert grid.dot_centres() == []


def test_calculate_grid_is_repeatable():
    assert calculate_grid(1179, 2556, 365) == calculate_grid(1179, 2556, 365)


def test_dot_centre_positions():
    grid = calculate_grid(1200, 630, 365)
    assert grid.dot_centre(0) == (474, 62)
    assert grid.dot_centre(14) == (474 + 252, 62)
    assert grid.dot_centre(15) == (474, 80)
    assert grid.dot_centre(364) == (546, 494)


def test_dot_centres_cover_every_day():
    grid = calculate_grid(390, 844, 366)
    centres = grid.dot_centres()
    assert len(centres) == 366
    assert len(set(centres)) == 366


def test_pixel_bounds_add_radius():
    grid = calculate_grid(1200, 630, 365)
    assert grid.pixel_bounds() == (468, 56, 732, 500)


def test_to_dict_has_all_fields():
    data = calculate_grid(1200, 630, 365).to_dict()
    assert set(data) == {
        'columns', 'rows', 'total_dots', 'dot_radius', 'dot_spacing',
        'grid_width', 'grid_height', 'offset_x', 'offset_y',
    }
    assert data['total_dots'] == 365
