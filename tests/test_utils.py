from raycube.utils import is_empty_line, valid_extension


def test_extension_matches():
    assert valid_extension(".cub", "maps/level.cub") is True


def test_extension_differs():
    assert valid_extension(".cub", "maps/level.xpm") is False


def test_extension_alone():
    assert valid_extension(".cub", ".cub") is True


def test_name_shorter_than_extension():
    assert valid_extension(".cub", "ub") is False


def test_empty_line_variants():
    assert is_empty_line("") is True
    assert is_empty_line("  \t ") is True
    assert is_empty_line("   \n") is True


def test_non_empty_line():
    assert is_empty_line("  1") is False
    assert is_empty_line("\tNO x.xpm") is False