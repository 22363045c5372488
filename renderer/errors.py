"""렌더러 예외 정의 모듈."""


class RenderError(Exception):
    """렌더러 기본 예외"""


class DecodeError(RenderError):
    """이미지 파일을 읽거나 디코딩할 수 없음"""


class EncodeError(RenderError):
    """결과 이미지를 저장할 수 없음"""


class InvalidDimension(RenderError):
    """크기가 0이거나 음수인 버퍼 (리사이즈 불가)"""


class OwnershipError(RenderError):
    """이미 다른 컨테이너에 들어간 레이어, 또는 소비된 캔버스를 재사용함"""


class ConfigError(RenderError):
    """설정 값이 잘못됨 (알 수 없는 리사이즈 필터 등)"""
