import pytest

from puzzlebox.xmas import Xmas, main, parse

EXAMPLE = "\n".join(
    str(n)
    for n in [35, 20, 15, 25, 47, 40, 62, 55, 65, 95, 102, 117, 150, 182, 127, 219, 299, 277, 309, 576]
)


def test_parse_example():
    assert parse(EXAMPLE, 5) == Xmas(
        5,
        [35, 20, 15, 25, 47, 40, 62, 55, 65, 95, 102, 117, 150, 182, 127, 219, 299, 277, 309, 576],
    )


def test_first_invalid_example():
    assert parse(EXAMPLE, 5).first_invalid() == 127


@pytest.mark.parametrize(
    "value, index, expected",
    [(102, 10, True), (65, 8, True), (95, 9, True), (127, 14, False)],
)
def test_is_valid_example(value, index, expected):
    assert parse(EXAMPLE, 5).is_valid(value, index) is expected


def test_weakness_example():
    assert parse(EXAMPLE, 5).weakness() == 62


def test_equal_values_at_different_positions_count():
    assert Xmas(2, [5, 5, 10]).is_valid(10, 2) is True


def test_same_position_not_used_twice():
    assert Xmas(2, [5, 1, 10]).is_valid(10, 2) is False


def test_first_invalid_none_when_all_valid():
    assert Xmas(2, [1, 2, 3, 5, 8]).first_invalid() is None


def test_weakness_without_invalid_raises():
    with pytest.raises(ValueError):
        Xmas(2, [1, 2, 3, 5, 8]).weakness()


def test_is_valid_inside_preamble_raises():
    with pytest.raises(ValueError):
        parse(EXAMPLE, 5).is_valid(20, 1)


def test_parse_rejects_non_numbers():
    with pytest.raises(ValueError):
        parse("1\ntwo\n3", 1)


def test_main_with_file(tmp_path, capsys):
    path = tmp_path / "numbers.txt"
    path.write_text(EXAMPLE + "\n")
    assert main([str(path), "--preamble", "5"]) == 0
    assert capsys.readouterr().out == "127\n62\n"