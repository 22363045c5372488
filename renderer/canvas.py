"""캔버스 모듈 — 고정 크기 Canvas와 크기가 유동적인 DynamicCanvas."""

import logging

from PIL import Image

from .errors import OwnershipError
from .layers import Layer, PositionedLayer
from .mask import apply_mask
from .position import Position, trunc_div

logger = logging.getLogger(__name__)


class DynamicCanvas:
    """고정 크기 없이 자식 레이어들로부터 크기가 정해지는 레이어 그룹.

    Canvas에 흡수될 때 그룹 전체를 하나의 단위로 배치할 수 있다.
    """

    def __init__(self):
        self._layers: list[PositionedLayer] = []
        self._consumed = False

    def add_layer(self, layer: Layer, pos_x: Position, pos_y: Position) -> None:
        self._check_alive()
        layer._attach(self)
        self._layers.append(PositionedLayer(layer, pos_x, pos_y))

    def width(self) -> int:
        return _extent(self._layers, "x")

    def height(self) -> int:
        return _extent(self._layers, "y")

    def dimensions(self) -> tuple[int, int]:
        return self.width(), self.height()

    @property
    def layers(self) -> list[PositionedLayer]:
        return list(self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def _take_layers(self) -> list[PositionedLayer]:
        self._check_alive()
        self._consumed = True
        layers, self._layers = self._layers, []
        return layers

    def _check_alive(self) -> None:
        if self._consumed:
            raise OwnershipError("이미 Canvas에 흡수된 DynamicCanvas입니다.")


def _extent(layers: list[PositionedLayer], axis: str) -> int:
    """자식들의 최대 바깥 경계. Center 자식은 0에 놓인 것으로 계산한다."""
    extent = 0
    for pl in layers:
        if axis == "x":
            pos, size = pl.pos_x, pl.layer.width
        else:
            pos, size = pl.pos_y, pl.layer.height
        edge = size if pos.is_center else pos.value + size
        if edge > extent:
            extent = edge
    return max(extent, 0)


class Canvas:
    """고정 크기 RGBA 캔버스. 추가된 순서대로 레이어를 합성한다."""

    def __init__(self, width: int, height: int):
        self._base = Layer.blank(width, height)
        self._base._attach(self)
        self._layers: list[PositionedLayer] = []
        self._mask: Image.Image | None = None
        self._consumed = False

    @property
    def width(self) -> int:
        return self._base.width

    @property
    def height(self) -> int:
        return self._base.height

    def dimensions(self) -> tuple[int, int]:
        return self._base.size

    @property
    def layers(self) -> list[PositionedLayer]:
        return list(self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def add_layer(self, layer: Layer, pos_x: Position, pos_y: Position) -> None:
        self._check_alive()
        layer._attach(self)
        self._layers.append(PositionedLayer(layer, pos_x, pos_y))
        logger.debug("레이어 추가: %r at (%r, %r)", layer, pos_x, pos_y)

    def set_mask(self, mask) -> None:
        """래스터화 결과에 적용할 마스크를 지정한다 (알파 채널만 사용)."""
        self._check_alive()
        if isinstance(mask, Layer):
            mask._attach(self)
            mask = mask.image
        if mask.mode != "RGBA":
            mask = mask.convert("RGBA")
        self._mask = mask

    def add_dynamic_canvas(self, canvas: DynamicCanvas, pos_x: Position, pos_y: Position) -> None:
        """DynamicCanvas의 자식들을 이 캔버스 좌표계로 옮겨 온다.

        그룹 자체의 위치와 그룹 안 자식의 위치를 각각 풀어서 더한다.
        두 단계 모두 to_coord에는 (부모 - 자식) 크기 차이의 절반이 전달된다.
        """
        self._check_alive()
        width, height = canvas.dimensions()

        abs_x = pos_x.to_coord(trunc_div(self.width - width, 2))
        abs_y = pos_y.to_coord(trunc_div(self.height - height, 2))

        layers = canvas._take_layers()
        logger.debug(
            "DynamicCanvas 흡수: %d개 레이어, %dx%d at (%d, %d)",
            len(layers), width, height, abs_x, abs_y,
        )
        for pl in layers:
            layer = pl.layer
            inner_x = pl.pos_x.to_coord(trunc_div(width - layer.width, 2))
            inner_y = pl.pos_y.to_coord(trunc_div(height - layer.height, 2))
            layer._release()
            self.add_layer(
                layer,
                Position.coord(abs_x + inner_x),
                Position.coord(abs_y + inner_y),
            )

    def rasterize(self) -> Layer:
        """모든 레이어를 합성한 최종 레이어를 반환한다. 이후 캔버스는 사용할 수 없다."""
        self._check_alive()
        self._consumed = True

        result = self._base.image
        for pl in self._layers:
            layer = pl.layer
            x = pl.pos_x.value
            if pl.pos_x.is_center:
                x = trunc_div(self.width - layer.width, 2)
            y = pl.pos_y.value
            if pl.pos_y.is_center:
                y = trunc_div(self.height - layer.height, 2)
            result = Image.alpha_composite(result, _place(layer.image, result.size, (x, y)))
        logger.debug("래스터화 완료: %d개 레이어, %dx%d", len(self._layers), *result.size)

        mask = self._mask
        self._layers = []
        self._mask = None

        flat = Layer(result)
        if mask is not None:
            return apply_mask(flat, mask)
        return flat

    def _check_alive(self) -> None:
        if self._consumed:
            raise OwnershipError("이미 래스터화된 Canvas입니다.")


def _place(layer: Image.Image, size: tuple[int, int], position: tuple[int, int]) -> Image.Image:
    """레이어를 캔버스 크기의 투명 이미지 위 지정 위치에 배치한다 (범위 밖은 잘림)."""
    if layer.size == size and position == (0, 0):
        return layer
    result = Image.new("RGBA", size, (0, 0, 0, 0))
    result.paste(layer, position)
    return result
