"""메인 — 발표 포스터를 합성하여 이미지 파일로 저장한다."""

import logging
import sys

from config import load_config
from content.talk import TalkContent, TalkInfo
from renderer.errors import RenderError
from renderer.layout import PosterLayout

logger = logging.getLogger(__name__)


def main(config_path=None) -> int:
    config = load_config(config_path)

    logging.basicConfig(
        level=config["logging"].get("level", "INFO"),
        format="%(asctime)s [%(name)s] %(message)s",
    )
    logging.getLogger("PIL").setLevel(logging.WARNING)

    talk = TalkInfo.from_config(config["talk"])
    content = TalkContent(config["fonts"])
    layout = PosterLayout(config)

    output = config["output"]["path"]
    try:
        canvas = layout.build(talk, content)
        poster = canvas.rasterize()
        poster.save(output)
    except RenderError as e:
        logger.error("포스터 생성 실패: %s", e)
        return 1

    logger.info("포스터 생성 완료: %s", output)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
