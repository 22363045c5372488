"""위치 정책 모듈 — 절대 좌표 또는 부모 기준 중앙 배치."""

from dataclasses import dataclass


def trunc_div(a: int, b: int) -> int:
    """0 방향으로 자르는 정수 나눗셈 (-7 / 2 == -3)."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass(frozen=True)
class Position:
    """한 축의 배치 정책. value가 None이면 중앙 배치."""
    value: int | None = None

    @classmethod
    def coord(cls, x: int) -> "Position":
        return cls(int(x))

    @classmethod
    def center(cls) -> "Position":
        return cls(None)

    @property
    def is_center(self) -> bool:
        return self.value is None

    def to_coord(self, available_size: int) -> int:
        """절대 좌표로 변환한다.

        Coord는 available_size와 무관하게 그대로 반환하고,
        Center는 available_size의 절반(0 방향 버림)을 반환한다.
        available_size가 음수이면 결과도 음수가 된다 (클리핑은 합성 단계에서).
        """
        if self.value is None:
            return trunc_div(available_size, 2)
        return self.value

    def __repr__(self) -> str:
        if self.value is None:
            return "Center"
        return f"Coord({self.value})"


CENTER = Position.center()


def coord(x: int) -> Position:
    return Position.coord(x)
