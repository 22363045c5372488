"""발표 정보 콘텐츠 모듈 — 연사·제목·일시·장소 텍스트 레이어를 생성한다."""

from dataclasses import dataclass, field

from renderer.layers import Layer
from renderer.text import TextLayer

# 색상
BLACK = (0, 0, 0, 255)
PURPLE = (196, 40, 198, 255)

# 글자 크기 (px)
SPEAKER_NAME_SIZE = 65.0
SPEAKER_TITLE_SIZE = 41.0
TITLE_SIZE = 172.0
MONTH_SIZE = 42.0
DAY_SIZE = 70.0
HOUR_SIZE = 66.0
VENUE_MAIN_SIZE = 67.0
VENUE_SUB_SIZE = 41.0


@dataclass
class TalkInfo:
    """포스터에 들어갈 발표 정보."""
    speaker_name: str
    speaker_title: str
    title_lines: list[str] = field(default_factory=list)
    month: str = ""
    day: str = ""
    hour: str = ""
    venue_lines: list[str] = field(default_factory=list)

    @classmethod
    def from_config(cls, cfg: dict) -> "TalkInfo":
        return cls(
            speaker_name=cfg.get("speaker_name", ""),
            speaker_title=cfg.get("speaker_title", ""),
            title_lines=list(cfg.get("title_lines", [])),
            month=cfg.get("month", ""),
            day=cfg.get("day", ""),
            hour=cfg.get("hour", ""),
            venue_lines=list(cfg.get("venue_lines", [])),
        )


class TalkContent:
    """발표 정보 텍스트 레이어를 생성한다.

    fonts: {"medium": 경로, "bold": 경로, "black": 경로}
    """

    def __init__(self, fonts: dict):
        self._medium = fonts.get("medium")
        self._bold = fonts.get("bold")
        self._black = fonts.get("black")

    def render_speaker_name(self, talk: TalkInfo) -> Layer:
        return TextLayer(talk.speaker_name, self._bold, SPEAKER_NAME_SIZE, BLACK, bold=True).to_layer()

    def render_speaker_title(self, talk: TalkInfo) -> Layer:
        return TextLayer(talk.speaker_title, self._bold, SPEAKER_TITLE_SIZE, BLACK, bold=True).to_layer()

    def render_title(self, talk: TalkInfo) -> list[Layer]:
        """제목 줄마다 보라색 굵은 글씨 레이어 하나."""
        return [
            TextLayer(line, self._black, TITLE_SIZE, PURPLE, bold=True).to_layer()
            for line in talk.title_lines
        ]

    def render_month(self, talk: TalkInfo) -> Layer:
        return TextLayer(talk.month, self._medium, MONTH_SIZE, BLACK).to_layer()

    def render_day(self, talk: TalkInfo) -> Layer:
        return TextLayer(talk.day, self._medium, DAY_SIZE, BLACK).to_layer()

    def render_hour(self, talk: TalkInfo) -> Layer:
        return TextLayer(talk.hour, self._medium, HOUR_SIZE, BLACK).to_layer()

    def render_venue(self, talk: TalkInfo) -> list[Layer]:
        """첫 줄은 크게, 나머지 줄은 작게."""
        layers = []
        for i, line in enumerate(talk.venue_lines):
            size = VENUE_MAIN_SIZE if i == 0 else VENUE_SUB_SIZE
            layers.append(TextLayer(line, self._medium, size, BLACK).to_layer())
        return layers
