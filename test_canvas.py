"""Canvas 래스터화 테스트 — 합성 순서, 중앙 정렬, 클리핑, 소유권."""

import pytest
from PIL import Image

from conftest import BLUE, RED, TRANSPARENT
from renderer.canvas import Canvas
from renderer.errors import OwnershipError
from renderer.layers import Layer
from renderer.position import CENTER, coord


def test_empty_canvas_rasterizes_to_transparent_buffer():
    result = Canvas(12, 7).rasterize()
    assert result.size == (12, 7)
    assert result.image.getextrema() == ((0, 0), (0, 0), (0, 0), (0, 0))


def test_later_layers_paint_on_top(solid):
    canvas = Canvas(10, 10)
    canvas.add_layer(solid(10, 10, RED), coord(0), coord(0))
    canvas.add_layer(solid(4, 4, BLUE), coord(3), coord(3))
    img = canvas.rasterize().image
    assert img.getpixel((4, 4)) == BLUE
    assert img.getpixel((0, 0)) == RED
    assert img.getpixel((7, 7)) == RED


def test_translucent_layer_blends_over_opaque(solid):
    canvas = Canvas(2, 2)
    canvas.add_layer(solid(2, 2, (0, 0, 0, 255)), coord(0), coord(0))
    canvas.add_layer(solid(2, 2, (255, 255, 255, 128)), coord(0), coord(0))
    r, g, b, a = canvas.rasterize().image.getpixel((0, 0))
    assert a == 255
    assert 126 <= r <= 129
    assert r == g == b


@pytest.mark.parametrize("width, anchor", [(10, 45), (11, 44)])
def test_center_is_floor_of_half_difference(solid, width, anchor):
    canvas = Canvas(100, 4)
    canvas.add_layer(solid(width, 4), CENTER, coord(0))
    img = canvas.rasterize().image
    assert img.getpixel((anchor - 1, 0)) == TRANSPARENT
    assert img.getpixel((anchor, 0)) == RED
    assert img.getpixel((anchor + width - 1, 0)) == RED
    assert img.getpixel((anchor + width, 0)) == TRANSPARENT


def test_center_on_both_axes(solid):
    canvas = Canvas(20, 30)
    canvas.add_layer(solid(4, 6), CENTER, CENTER)
    bbox = canvas.rasterize().image.getchannel("A").getbbox()
    assert bbox == (8, 12, 12, 18)


def test_negative_anchor_is_clipped(solid):
    canvas = Canvas(10, 10)
    canvas.add_layer(solid(10, 10), coord(-5), coord(-3))
    bbox = canvas.rasterize().image.getchannel("A").getbbox()
    assert bbox == (0, 0, 5, 7)


def test_layer_beyond_right_edge_is_clipped(solid):
    canvas = Canvas(10, 10)
    canvas.add_layer(solid(10, 10), coord(8), coord(0))
    canvas.add_layer(solid(3, 3, BLUE), coord(50), coord(50))
    bbox = canvas.rasterize().image.getchannel("A").getbbox()
    assert bbox == (8, 0, 10, 10)


def test_centered_layer_larger_than_canvas_covers_it(solid):
    canvas = Canvas(10, 10)
    canvas.add_layer(solid(21, 21), CENTER, CENTER)
    img = canvas.rasterize().image
    assert img.getchannel("A").getextrema() == (255, 255)


def test_rasterized_canvas_can_be_nested(solid):
    inner = Canvas(4, 4)
    inner.add_layer(solid(4, 4, BLUE), coord(0), coord(0))
    outer = Canvas(10, 10)
    outer.add_layer(inner.rasterize(), coord(6), coord(6))
    img = outer.rasterize().image
    assert img.getpixel((6, 6)) == BLUE
    assert img.getpixel((5, 5)) == TRANSPARENT


def test_mask_is_applied_after_compositing(solid):
    canvas = Canvas(4, 4)
    canvas.add_layer(solid(4, 4, RED), coord(0), coord(0))
    mask = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
    mask.putpixel((1, 1), (0, 0, 0, 255))
    canvas.set_mask(mask)
    img = canvas.rasterize().image
    assert img.getpixel((1, 1)) == RED
    assert img.getpixel((0, 0)) == TRANSPARENT


def test_empty_canvas_with_opaque_mask_stays_transparent():
    canvas = Canvas(5, 5)
    canvas.set_mask(Image.new("RGBA", (5, 5), (255, 255, 255, 255)))
    img = canvas.rasterize().image
    assert img.getextrema() == ((0, 0), (0, 0), (0, 0), (0, 0))


def test_dimensions(solid):
    canvas = Canvas(30, 20)
    assert canvas.dimensions() == (30, 20)
    assert (canvas.width, canvas.height) == (30, 20)
    canvas.add_layer(solid(1, 1), coord(0), coord(0))
    assert len(canvas) == 1


def test_layer_cannot_be_added_twice(solid):
    layer = solid(2, 2)
    first = Canvas(4, 4)
    first.add_layer(layer, coord(0), coord(0))
    with pytest.raises(OwnershipError):
        first.add_layer(layer, coord(1), coord(1))
    with pytest.raises(OwnershipError):
        Canvas(4, 4).add_layer(layer, coord(0), coord(0))


def test_rasterize_consumes_canvas(solid):
    canvas = Canvas(4, 4)
    canvas.rasterize()
    with pytest.raises(OwnershipError):
        canvas.rasterize()
    with pytest.raises(OwnershipError):
        canvas.add_layer(solid(1, 1), coord(0), coord(0))
    with pytest.raises(OwnershipError):
        canvas.set_mask(Image.new("RGBA", (4, 4)))


def test_rasterized_layer_is_free_to_reuse():
    layer = Canvas(3, 3).rasterize()
    target = Canvas(3, 3)
    target.add_layer(layer, coord(0), coord(0))
    assert isinstance(target.rasterize(), Layer)


def test_mask_layer_is_owned_by_canvas(solid):
    mask = Layer.solid(4, 4, (0, 0, 0, 255))
    canvas = Canvas(4, 4)
    canvas.set_mask(mask)
    with pytest.raises(OwnershipError):
        canvas.add_layer(mask, coord(0), coord(0))
    with pytest.raises(OwnershipError):
        Canvas(4, 4).set_mask(mask)
    canvas.add_layer(solid(4, 4, BLUE), coord(0), coord(0))
    assert canvas.rasterize().image.getpixel((3, 3)) == BLUE
