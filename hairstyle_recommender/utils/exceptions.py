"""커스텀 예외 클래스 정의"""


class HairstyleRecommenderException(Exception):
    """기본 예외 클래스"""
    pass


class AnalysisError(HairstyleRecommenderException):
    """단일 분석 시도를 종료시키는 오류 (재시도 없음)"""
    pass


class InvalidLandmarkSetError(AnalysisError):
    """랜드마크 개수가 68개가 아닌 경우"""
    pass


class DegenerateGeometryError(AnalysisError):
    """기준 거리(얼굴 너비/길이)가 0인 경우"""
    pass


class NoFaceDetectedError(AnalysisError):
    """검출된 얼굴이 없는 경우"""
    pass


class LowConfidenceDetectionError(AnalysisError):
    """첫 번째 검출 결과의 신뢰도가 임계값 미만인 경우"""

    def __init__(self, score: float, threshold: float):
        super().__init__(f"Detection score {score:.2f} is below threshold {threshold:.2f}")
        self.score = score
        self.threshold = threshold


class ProviderNotReadyError(HairstyleRecommenderException):
    """랜드마크 provider가 READY 상태가 아닌 경우"""
    pass


class ProviderLoadError(HairstyleRecommenderException):
    """랜드마크 모델 로드 실패"""
    pass


class InvalidImageError(HairstyleRecommenderException):
    """잘못된 이미지 입력 예외"""
    pass


class CatalogError(HairstyleRecommenderException):
    """헤어스타일 카탈로그 형식 오류"""
    pass


class ConfigurationError(HairstyleRecommenderException):
    """설정 오류 예외"""
    pass
