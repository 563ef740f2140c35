import pytest

from grid_options import GridOptions, InvalidOptionError, parse_grid_options, print_usage


def test_defaults():
    assert parse_grid_options(["prog"]) == GridOptions(500, 500, 10, "output.otj_grid")


def test_all_flags():
    go = parse_grid_options(["prog", "-t", "7", "-x", "20", "-y", "30", "-o", "out.bin"])
    assert go == GridOptions(len_x=20, len_y=30, len_t=7, output="out.bin")


@pytest.mark.parametrize("argv", [
    ["prog", "-z", "1"],
    ["prog", "-z"],
    ["prog", "-x"],
    ["prog", "-x", "abc"],
    ["prog", "-t", "0"],
    ["prog", "-y", "-4"],
    ["prog", "-x", "10", "-y", "5"],
])
def test_invalid_options(argv):
    with pytest.raises(InvalidOptionError):
        parse_grid_options(argv)


def test_usage(capsys):
    print_usage("oops")
    out = capsys.readouterr().out
    assert out.startswith("oops\nOptions:")
    assert "-t T" in out
