import pytest

from raycube.parsing import (
    CubConfig,
    ParseError,
    check_flag_position,
    check_texture_extensions,
    copy_map_lines,
    count_identifiers,
    extract_textures,
    first_map_line,
    flood_fill,
    parse_cub,
    parse_rgb,
    read_lines,
    walkable,
)

HEADER = [
    "NO ./textures/north.xpm",
    "SO ./textures/south.xpm",
    "WE ./textures/west.xpm",
    "EA ./textures/east.xpm",
    "",
    "F 220,100,0",
    "C 225,30,0",
    "",
]

CLOSED = [
    "111111",
    "100001",
    "10N001",
    "100001",
    "111111",
]

OPEN_EDGE = [
    "111111",
    "100001",
    "10N000",
    "111111",
]

OPEN_SPACE = [
    "111111",
    "10 001",
    "10N001",
    "111111",
]


def write_cub(tmp_path, lines, name="map.cub"):
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n")
    return path


def test_read_lines_strips_newlines(tmp_path):
    path = tmp_path / "a.cub"
    path.write_text("abc\ndef\n")
    assert read_lines(path) == ["abc", "def"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(ParseError):
        read_lines(tmp_path / "absent.cub")


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.cub"
    path.write_text("")
    with pytest.raises(ParseError):
        read_lines(path)


def test_first_map_line_after_header():
    assert first_map_line(HEADER + CLOSED) == len(HEADER)


def test_first_map_line_without_map():
    assert first_map_line(HEADER) == -1


def test_count_identifiers_counts_six():
    assert count_identifiers(HEADER + CLOSED, len(HEADER)) == 6


def test_identifier_after_map_rejected():
    lines = HEADER + CLOSED + ["F 1,2,3"]
    with pytest.raises(ParseError, match="Invalid map position"):
        check_flag_position(lines)


def test_check_flag_position_returns_start():
    assert check_flag_position(HEADER + CLOSED) == len(HEADER)


def test_missing_identifier_rejected():
    lines = HEADER[1:] + CLOSED
    with pytest.raises(ParseError, match="Missing textures or colors"):
        check_flag_position(lines)


def test_extract_textures_values():
    values = extract_textures(HEADER + CLOSED)
    assert values["NO"] == "./textures/north.xpm"
    assert values["EA"] == "./textures/east.xpm"
    assert values["F"] == "220,100,0"
    assert values["C"] == "225,30,0"


def test_extract_textures_last_wins():
    lines = HEADER + ["NO ./other.xpm"]
    assert extract_textures(lines)["NO"] == "./other.xpm"


def test_extract_textures_removes_blanks():
    lines = ["NO ./a b\t.xpm"] + HEADER[1:]
    value = extract_textures(lines)["NO"]
    assert " " not in value and "\t" not in value
    assert value.endswith(".xpm")


def test_extract_textures_skips_two_characters():
    lines = HEADER[:5] + ["F220,100,0"] + HEADER[6:]
    assert extract_textures(lines)["F"] == "20,100,0"


def test_duplicate_hides_missing_identifier():
    lines = [HEADER[0], HEADER[0]] + HEADER[2:]
    assert check_flag_position(lines + CLOSED) == len(lines)
    with pytest.raises(ParseError, match="SO"):
        extract_textures(lines + CLOSED)


def test_parse_rgb_valid():
    assert parse_rgb("220,100,0") == (220, 100, 0)


def test_parse_rgb_drops_empty_parts():
    assert parse_rgb("1,,2,3") == (1, 2, 3)


def test_parse_rgb_wrong_count():
    with pytest.raises(ParseError, match="numbers"):
        parse_rgb("1,2")


def test_parse_rgb_non_digit():
    with pytest.raises(ParseError, match="digits"):
        parse_rgb("1,a,3")


def test_parse_rgb_out_of_range():
    with pytest.raises(ParseError, match="0 - 255"):
        parse_rgb("1,256,3")


def test_texture_extension_rejected():
    textures = {"NO": "a.xpm", "SO": "b.xpm", "WE": "c.png", "EA": "d.xpm"}
    with pytest.raises(ParseError, match="c.png"):
        check_texture_extensions(textures)


def test_copy_map_lines_returns_map():
    assert copy_map_lines(HEADER + CLOSED, len(HEADER)) == CLOSED


def test_copy_map_lines_invalid_character():
    with pytest.raises(ParseError, match="Invalid character"):
        copy_map_lines(["1X1"], 0)


def test_copy_map_lines_two_spawns():
    with pytest.raises(ParseError, match="spawn"):
        copy_map_lines(["1N1", "1S1"], 0)


def test_flood_fill_closed_marks_floor():
    grid = [list(row) for row in CLOSED]
    assert flood_fill(grid, CLOSED[2].index("N"), 2) is True
    assert all("0" not in row and "N" not in row for row in grid)


def test_flood_fill_open_edge():
    grid = [list(row) for row in OPEN_EDGE]
    assert flood_fill(grid, OPEN_EDGE[2].index("N"), 2) is False


def test_walkable_cases():
    assert walkable(CLOSED) is True
    assert walkable(OPEN_EDGE) is False
    assert walkable(OPEN_SPACE) is False


def test_walkable_does_not_change_input():
    grid = list(CLOSED)
    walkable(grid)
    assert grid == CLOSED


def test_parse_cub_valid(tmp_path):
    config = parse_cub(write_cub(tmp_path, HEADER + CLOSED))
    assert isinstance(config, CubConfig)
    assert config.north == "./textures/north.xpm"
    assert config.south == "./textures/south.xpm"
    assert config.floor == (220, 100, 0)
    assert config.ceiling == (225, 30, 0)
    assert config.grid == tuple(CLOSED)
    assert config.spawn == (2, CLOSED[2].index("N"))


def test_parse_cub_wrong_extension(tmp_path):
    path = write_cub(tmp_path, HEADER + CLOSED, name="map.txt")
    with pytest.raises(ParseError, match=r"\.cub"):
        parse_cub(path)


def test_parse_cub_open_map(tmp_path):
    with pytest.raises(ParseError, match="void"):
        parse_cub(write_cub(tmp_path, HEADER + OPEN_EDGE))


def test_parse_cub_bad_colour(tmp_path):
    lines = HEADER[:5] + ["F 220,100"] + HEADER[6:] + CLOSED
    with pytest.raises(ParseError, match="numbers"):
        parse_cub(write_cub(tmp_path, lines))