#!/usr/bin/env python3
"""Munsell reference table tests"""
import re
import pytest
from pydantic import ValidationError
from munsell_api.services.munsell_data import MunsellTable

HEX_RE = re.compile(r"^#[0-9A-F]{6}$")


def test_load_table():
    table = MunsellTable()
    table.load()

    assert table.loaded
    assert table.get_count() == 13
    assert table.get_swatch_count() == 104


def test_chart_order_and_ranges():
    table = MunsellTable()
    groups = table.get_all()

    assert [g.hue for g in groups][:3] == ["5R", "10R", "5YR"]
    assert groups[-1].hue == "10P"
    for group in groups:
        assert len(group.colors) == 8
        assert [s.value for s in group.colors] == [9, 8, 7, 6, 5, 4, 3, 2]
        assert [s.chroma for s in group.colors] == [2, 4, 6, 8, 10, 12, 14, 16]
        for swatch in group.colors:
            assert HEX_RE.match(swatch.hex), swatch.hex


def test_get_by_hue():
    table = MunsellTable()

    group = table.get_by_hue("5yr")
    assert group is not None
    assert group.name == "Orange"
    assert group.colors[0].hex == "#FFE6D9"

    assert table.get_by_hue("7.5RP") is None


def test_table_is_immutable():
    table = MunsellTable()
    group = table.get_all()[0]

    with pytest.raises(ValidationError):
        group.name = "Changed"
    with pytest.raises(ValidationError):
        group.colors[0].value = 1


def test_missing_file(tmp_path):
    table = MunsellTable(str(tmp_path / "missing.json"))
    with pytest.raises(FileNotFoundError):
        table.load()


def test_munsell_endpoint(client):
    response = client.get("/api/munsell-data")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 13
    assert set(data[0]) == {"hue", "name", "colors"}
    assert (data[0]["hue"], data[0]["name"]) == ("5R", "Red")
    assert data[0]["colors"][0] == {"hex": "#FFE6E6", "value": 9, "chroma": 2}
    assert data[-1]["colors"][-1] == {"hex": "#FF3399", "value": 2, "chroma": 16}


def test_hue_group_endpoint(client):
    response = client.get("/api/munsell-data/5yr")

    assert response.status_code == 200
    assert response.json()["name"] == "Orange"
    assert len(response.json()["colors"]) == 8


def test_hue_group_not_found(client):
    response = client.get("/api/munsell-data/7.5RP")

    assert response.status_code == 404
    assert response.json() == {"detail": "Hue not found"}
