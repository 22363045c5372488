"""마스크 적용 모듈."""

from PIL import Image, ImageChops

from .layers import Layer

# 마스크 범위 밖(원본 이미지가 없는 곳)의 픽셀
TRANSPARENT_WHITE = (255, 255, 255, 0)


def apply_mask(image: Layer, mask) -> Layer:
    """마스크 알파를 곱한 새 레이어를 반환한다.

    결과 크기는 마스크 크기를 따른다. 원본과 겹치는 영역의 각 채널은
    source * mask_alpha // 255 이고, 원본 범위를 벗어난 곳은 투명한 흰색으로 남는다.
    마스크의 RGB 값은 사용하지 않는다.
    """
    if isinstance(mask, Layer):
        mask = mask.image
    if mask.mode != "RGBA":
        mask = mask.convert("RGBA")

    result = Image.new("RGBA", mask.size, TRANSPARENT_WHITE)

    w = min(image.width, mask.width)
    h = min(image.height, mask.height)
    if w == 0 or h == 0:
        return Layer(result)

    box = (0, 0, w, h)
    alpha = mask.getchannel("A").crop(box)
    bands = [ImageChops.multiply(band, alpha) for band in image.image.crop(box).split()]
    result.paste(Image.merge("RGBA", bands), (0, 0))
    return Layer(result)
