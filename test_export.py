#!/usr/bin/env python3
"""Color export tests"""
import io
import pytest
from PIL import Image
from munsell_api.services.export import render_png, to_css, to_rgb


def test_css_declarations():
    css = to_css(["#ff0000", "#00ff00", "#0000ff"])
    lines = css.split("\n")

    assert lines[0] == ":root {"
    assert lines[-1] == "}"
    assert lines[1:-1] == [
        "--color-1: #ff0000;",
        "--color-2: #00ff00;",
        "--color-3: #0000ff;",
    ]


def test_to_rgb():
    assert to_rgb("#ff8000") == (255, 128, 0)
    assert to_rgb("white") == (255, 255, 255)
    with pytest.raises(ValueError):
        to_rgb("#xyz123")


def test_render_png_layout():
    colors = [(255, 0, 0), (0, 128, 255), (10, 20, 30)]
    image = Image.open(io.BytesIO(render_png(colors, swatch_size=100)))

    assert image.format == "PNG"
    assert image.size == (300, 100)
    image = image.convert("RGBA")
    for i, (r, g, b) in enumerate(colors):
        for x, y in ((i * 100, 0), (i * 100 + 50, 50), (i * 100 + 99, 99)):
            assert image.getpixel((x, y)) == (r, g, b, 255)


def test_export_json(client):
    colors = ["#FF0000", "rgb(0 0 255)", "teal"]
    response = client.post("/api/export-colors", json={"format": "JSON", "colors": colors})

    assert response.status_code == 200
    assert response.json() == {"colors": colors}


def test_export_css(client):
    response = client.post("/api/export-colors", json={"format": "css", "colors": ["#111111", "#222222"]})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/css")
    assert response.text == ":root {\n--color-1: #111111;\n--color-2: #222222;\n}"


def test_export_png(client):
    response = client.post("/api/export-colors", json={"format": "png", "colors": ["#ff0000", "#00ff00"]})

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.headers["content-disposition"] == "attachment; filename=palette.png"
    image = Image.open(io.BytesIO(response.content)).convert("RGBA")
    assert image.size == (200, 100)
    assert image.getpixel((25, 25)) == (255, 0, 0, 255)
    assert image.getpixel((175, 75)) == (0, 255, 0, 255)


def test_export_png_invalid_color(client):
    response = client.post("/api/export-colors", json={"format": "png", "colors": ["#ff0000", "bogus"]})

    assert response.status_code == 400


def test_export_png_encoder_failure(client, monkeypatch):
    from munsell_api.api.routes import exports

    def boom(*args, **kwargs):
        raise OSError("disk on fire")

    monkeypatch.setattr(exports, "render_png", boom)
    response = client.post("/api/export-colors", json={"format": "png", "colors": ["#ff0000"]})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to export"}


@pytest.mark.parametrize("body", [
    {"format": "json", "colors": []},
    {"format": "json"},
    {"format": "json", "colors": "#ff0000"},
    {"format": "json", "colors": {"first": "#ff0000"}},
])
def test_export_invalid_colors(client, body):
    response = client.post("/api/export-colors", json=body)

    assert response.status_code == 400


@pytest.mark.parametrize("fmt", ["svg", "", None])
def test_export_unknown_format(client, fmt):
    response = client.post("/api/export-colors", json={"format": fmt, "colors": ["#ff0000"]})

    assert response.status_code == 400
    assert response.json()["detail"] == "Unsupported format (json, css, png)"
