"""공용 테스트 픽스처."""

import pytest
from PIL import Image

from renderer.layers import Layer

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
TRANSPARENT = (0, 0, 0, 0)


@pytest.fixture
def solid():
    """단색 레이어 생성 함수."""
    def make(width, height, color=RED):
        return Layer.solid(width, height, color)
    return make


@pytest.fixture
def write_image(tmp_path):
    """tmp_path에 단색 이미지 파일을 만들고 경로를 반환한다."""
    def make(name, size=(8, 8), color=(10, 200, 30, 255), mode="RGBA"):
        path = tmp_path / name
        if mode == "RGB":
            color = color[:3]
        Image.new(mode, size, color).save(path)
        return path
    return make
