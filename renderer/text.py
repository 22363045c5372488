"""텍스트 렌더링 모듈 — 문자열을 딱 맞는 크기의 투명 RGBA 레이어로 만든다."""

import logging
import os
import sys as _sys
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from .layers import Layer

logger = logging.getLogger(__name__)


def _find_fallback(bold: bool = False) -> str:
    """OS에 맞는 폴백 폰트 경로를 반환한다."""
    candidates = []
    if _sys.platform == "win32":
        candidates = ["C:/Windows/Fonts/arialbd.ttf" if bold else "C:/Windows/Fonts/arial.ttf"]
    elif _sys.platform == "darwin":
        candidates = ["/System/Library/Fonts/Helvetica.ttc"]
    else:
        candidates = [
            "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf" if bold else "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf" if bold else "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
        ]
    for path in candidates:
        if os.path.exists(path):
            return path
    return ""


_FALLBACK_FONT = _find_fallback(bold=False)
_FALLBACK_BOLD = _find_fallback(bold=True)

# 폰트 캐시
_font_cache: dict[tuple[str, float], ImageFont.FreeTypeFont] = {}


def get_font(path: str | Path | None, size: float, bold: bool = False):
    """폰트를 로드한다 (캐싱). 파일이 없으면 시스템 폰트, 그마저 없으면 기본 폰트."""
    if path and os.path.exists(path):
        resolved = str(path)
    else:
        if path:
            logger.warning("폰트 없음, 폴백 사용: %s", path)
        resolved = _FALLBACK_BOLD if bold else _FALLBACK_FONT

    key = (resolved, size)
    if key not in _font_cache:
        if resolved:
            _font_cache[key] = ImageFont.truetype(resolved, size)
        else:
            _font_cache[key] = ImageFont.load_default(size)
    return _font_cache[key]


class TextLayer:
    """한 줄 텍스트. to_layer()로 글자 영역에 딱 맞는 레이어를 만든다."""

    def __init__(self, text: str, font, size: float, color: tuple = (0, 0, 0, 255), bold: bool = False):
        self.text = text
        self.size = size
        self.color = color
        # font는 경로 또는 이미 로드된 폰트 객체
        if isinstance(font, (str, Path)) or font is None:
            font = get_font(font, size, bold)
        self.font = font

    def to_layer(self) -> Layer:
        bbox = self.font.getbbox(self.text)
        w = max(1, bbox[2] - bbox[0])
        h = max(1, bbox[3] - bbox[1])

        img = Image.new("RGBA", (w, h), (0, 0, 0, 0))
        draw = ImageDraw.Draw(img)
        draw.text((-bbox[0], -bbox[1]), self.text, font=self.font, fill=self.color)
        return Layer(img)

