"""포스터 레이아웃 모듈 — 각 콘텐츠를 캔버스에 배치한다."""

import logging
from pathlib import Path

from .canvas import Canvas, DynamicCanvas
from .layers import Layer
from .position import CENTER, coord
from .shapes import BLACK, filled_circle

logger = logging.getLogger(__name__)

# 텍스트 블록 좌측 여백
LEFT = 200

SPEAKER_NAME_Y = 1050
SPEAKER_TITLE_Y = 1145
TITLE_Y = 1277
TITLE_LINE_STEP = 166

DATE_POS = (200, 1755)
DAY_Y = 55
HOUR_X = 500

VENUE_POS = (850, 1755)
VENUE_LINE_STEP = 85

# 구분선 (폭, 길이)
RULE_SIZE = (5, 145)
RULE_POSITIONS = [(400, 1740), (750, 1745)]

LOGO_Y = 70
AVATAR_CIRCLE_POS = (767, 70)


def _load_optional(path) -> Layer | None:
    """이미지가 없으면 경고만 남기고 건너뛴다. 깨진 파일은 DecodeError."""
    if not path or not Path(path).exists():
        logger.warning("이미지 없음, 건너뜀: %s", path)
        return None
    return Layer.from_file(path)


def build_avatar(photo: Layer, size: int, resize_width: int, offset: tuple[int, int],
                 resample: str = "bicubic") -> Layer:
    """사진을 리사이즈해 size x size 캔버스에 놓고 원형으로 잘라낸다."""
    photo.resize(resize_width, resample)
    canvas = Canvas(size, size)
    canvas.add_layer(photo, coord(offset[0]), coord(offset[1]))
    canvas.set_mask(filled_circle(size, BLACK))
    return canvas.rasterize()


class PosterLayout:
    """발표 포스터 한 장을 구성한다."""

    def __init__(self, config: dict):
        self._config = config

    def build(self, talk, content) -> Canvas:
        """TalkInfo와 TalkContent로 포스터 Canvas를 만든다 (래스터화 전)."""
        cfg = self._config
        canvas = Canvas(cfg["canvas"]["width"], cfg["canvas"]["height"])
        assets = cfg["assets"]

        # 배경 이미지들
        for key, pos_x, pos_y in (
            ("background", coord(0), coord(0)),
            ("gfx", coord(0), coord(0)),
            ("logo", CENTER, coord(LOGO_Y)),
            ("avatar_circle", coord(AVATAR_CIRCLE_POS[0]), coord(AVATAR_CIRCLE_POS[1])),
        ):
            layer = _load_optional(assets.get(key))
            if layer is not None:
                canvas.add_layer(layer, pos_x, pos_y)

        # 연사
        canvas.add_layer(content.render_speaker_name(talk), coord(LEFT), coord(SPEAKER_NAME_Y))
        canvas.add_layer(content.render_speaker_title(talk), coord(LEFT), coord(SPEAKER_TITLE_Y))

        # 제목
        for i, layer in enumerate(content.render_title(talk)):
            canvas.add_layer(layer, coord(LEFT), coord(TITLE_Y + i * TITLE_LINE_STEP))

        # 날짜: 월 아래에 일을 가운데 정렬
        date_group = DynamicCanvas()
        date_group.add_layer(content.render_month(talk), coord(0), coord(0))
        date_group.add_layer(content.render_day(talk), CENTER, coord(DAY_Y))

        hour_y = DATE_POS[1] + date_group.height() // 4
        canvas.add_dynamic_canvas(date_group, coord(DATE_POS[0]), coord(DATE_POS[1]))
        canvas.add_layer(content.render_hour(talk), coord(HOUR_X), coord(hour_y))

        # 장소: 첫 줄 기준으로 나머지 줄 가운데 정렬
        venue_group = DynamicCanvas()
        for i, layer in enumerate(content.render_venue(talk)):
            pos_x = coord(0) if i == 0 else CENTER
            venue_group.add_layer(layer, pos_x, coord(i * VENUE_LINE_STEP))
        canvas.add_dynamic_canvas(venue_group, coord(VENUE_POS[0]), coord(VENUE_POS[1]))

        # 구분선
        for x, y in RULE_POSITIONS:
            canvas.add_layer(Layer.solid(*RULE_SIZE, BLACK), coord(x), coord(y))

        # 원형 아바타
        av = cfg["avatar"]
        photo = Layer.from_file(assets["avatar"])
        avatar = build_avatar(
            photo,
            av["size"],
            av["resize_width"],
            tuple(av["offset"]),
            cfg["render"]["resize_filter"],
        )
        canvas.add_layer(avatar, coord(av["position"][0]), coord(av["position"][1]))

        logger.info("포스터 구성 완료: %d개 레이어", len(canvas))
        return canvas
