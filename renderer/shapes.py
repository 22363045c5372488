"""마스크용 도형 버퍼."""

from PIL import Image, ImageDraw

BLACK = (0, 0, 0, 255)


def filled_circle(size: int, color: tuple = BLACK) -> Image.Image:
    """size x size 투명 버퍼 중앙에 반지름 size // 2인 원을 채운다."""
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    c = size // 2
    r = size // 2
    draw = ImageDraw.Draw(img)
    draw.ellipse((c - r, c - r, c + r, c + r), fill=color)
    return img

