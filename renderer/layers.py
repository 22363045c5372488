"""레이어 모듈."""

import logging

from PIL import Image, UnidentifiedImageError

from .errors import ConfigError, DecodeError, EncodeError, InvalidDimension, OwnershipError
from .position import Position

logger = logging.getLogger(__name__)

# 리사이즈 필터 이름 → Pillow 리샘플링 필터
RESAMPLE_FILTERS = {
    "nearest": Image.Resampling.NEAREST,
    "box": Image.Resampling.BOX,
    "bilinear": Image.Resampling.BILINEAR,
    "hamming": Image.Resampling.HAMMING,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}
DEFAULT_FILTER = "bicubic"


class Layer:
    """RGBA 이미지 한 장. 컨테이너에 추가되면 그 컨테이너가 단독 소유한다."""

    def __init__(self, image: Image.Image):
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self._image = image
        self._owner = None

    @classmethod
    def from_file(cls, path) -> "Layer":
        """이미지 파일을 디코딩하여 RGBA 레이어로 만든다."""
        try:
            with Image.open(path) as img:
                image = img.convert("RGBA")
        except (OSError, UnidentifiedImageError, ValueError) as e:
            raise DecodeError(f"이미지 디코딩 실패: {path} ({e})") from e
        logger.debug("레이어 로드: %s (%dx%d)", path, image.width, image.height)
        return cls(image)

    @classmethod
    def from_buffer(cls, image: Image.Image) -> "Layer":
        return cls(image)

    @classmethod
    def blank(cls, width: int, height: int) -> "Layer":
        """완전 투명한 레이어."""
        return cls(Image.new("RGBA", (width, height), (0, 0, 0, 0)))

    @classmethod
    def solid(cls, width: int, height: int, color: tuple) -> "Layer":
        """단색으로 채운 레이어 (구분선 등)."""
        return cls(Image.new("RGBA", (width, height), color))

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> tuple[int, int]:
        return self._image.size

    def resize(self, target_width: int, resample: str = DEFAULT_FILTER) -> None:
        """가로 폭을 target_width로 맞추고 세로는 비율대로 (정수 버림) 조정한다."""
        if self.width == 0:
            raise InvalidDimension("폭이 0인 레이어는 리사이즈할 수 없습니다.")
        if target_width <= 0:
            raise InvalidDimension(f"잘못된 목표 폭: {target_width}")
        target_height = self.height * target_width // self.width
        if target_height == 0:
            raise InvalidDimension(
                f"리사이즈 결과 높이가 0입니다 ({self.width}x{self.height} → 폭 {target_width})"
            )
        try:
            f = RESAMPLE_FILTERS[resample]
        except KeyError:
            raise ConfigError(f"알 수 없는 리사이즈 필터: {resample}") from None
        self._image = self._image.resize((target_width, target_height), f)

    def save(self, path) -> None:
        """레이어를 이미지 파일로 저장한다. 형식은 확장자로 결정된다."""
        try:
            self._image.save(path)
        except (OSError, ValueError, KeyError) as e:
            raise EncodeError(f"이미지 저장 실패: {path} ({e})") from e
        logger.info("저장 완료: %s (%dx%d)", path, self.width, self.height)

    def _attach(self, owner) -> None:
        if self._owner is not None:
            raise OwnershipError("레이어가 이미 다른 캔버스에 추가되었습니다.")
        self._owner = owner

    def _release(self) -> None:
        self._owner = None

    def __repr__(self) -> str:
        return f"Layer({self.width}x{self.height})"


class PositionedLayer:
    """레이어와 (x, y) 배치 정책 묶음."""

    def __init__(self, layer: Layer, pos_x: Position, pos_y: Position):
        self.layer = layer
        self.pos_x = pos_x
        self.pos_y = pos_y

    def __repr__(self) -> str:
        return f"PositionedLayer({self.layer!r}, {self.pos_x!r}, {self.pos_y!r})"
