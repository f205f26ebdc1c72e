import json
import math

import pytest

from aphelion.blackbody import BlackBodyTable, Color

START = 600
COUNT = 2001


def make_data():
    return {
        "T": [START + i for i in range(COUNT)],
        "M": [math.exp(i / 100) for i in range(COUNT)],
        "R": [255] * COUNT,
        "G": [i % 256 for i in range(COUNT)],
        "B": [0] * COUNT,
    }


def test_from_file_matches_from_data(tmp_path):
    path = tmp_path / "black_body_data.json"
    path.write_text(json.dumps(make_data()))
    assert BlackBodyTable.from_file(path) == BlackBodyTable.from_data(make_data())


def test_table_size_and_offset():
    table = BlackBodyTable.from_data(make_data())
    assert table.offset == START
    assert len(table.colors) == COUNT


def test_rgb_copied_from_data():
    data = make_data()
    table = BlackBodyTable.from_data(data)
    assert table.colors[300][:3] == (data["R"][300], data["G"][300], data["B"][300])


def test_alpha_range_limits():
    table = BlackBodyTable.from_data(make_data())
    assert table.colors[700 - START].a == 0
    assert table.colors[2500 - START].a == 255
    assert table.colors[0].a == 0
    assert table.colors[-1].a == 255


def test_alpha_is_monotonic_in_power():
    table = BlackBodyTable.from_data(make_data())
    alphas = [color.a for color in table.colors]
    assert alphas == sorted(alphas)


def test_colors_are_color_tuples():
    table = BlackBodyTable.from_data(make_data())
    assert table.colors[0] == Color(255, 0, 0, 0)


def test_data_not_covering_range_raises():
    data = make_data()
    data["T"] = data["T"][:500]
    data["M"] = data["M"][:500]
    with pytest.raises(ValueError):
        BlackBodyTable.from_data(data)