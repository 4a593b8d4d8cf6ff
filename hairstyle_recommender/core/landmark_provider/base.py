"""Landmark provider 추상화 및 초기화 상태 관리"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import numpy as np

from hairstyle_recommender.models import Detection
from hairstyle_recommender.utils import get_logger
from hairstyle_recommender.utils.exceptions import ProviderLoadError, ProviderNotReadyError
from hairstyle_recommender.utils.validators import validate_image

logger = get_logger(__name__)


class ProviderStatus(Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class ProviderState:
    """
    Provider 초기화 상태 (불변 값 객체)

    상태 전이는 LandmarkProvider.load() / close() 호출로만 일어난다.
        UNINITIALIZED/FAILED --load()--> LOADING --> READY | FAILED(reason)
        any --close()--> UNINITIALIZED
    """

    status: ProviderStatus = ProviderStatus.UNINITIALIZED
    reason: Optional[str] = None

    @classmethod
    def uninitialized(cls) -> "ProviderState":
        return cls(ProviderStatus.UNINITIALIZED)

    @classmethod
    def loading(cls) -> "ProviderState":
        return cls(ProviderStatus.LOADING)

    @classmethod
    def ready(cls) -> "ProviderState":
        return cls(ProviderStatus.READY)

    @classmethod
    def failed(cls, reason: str) -> "ProviderState":
        return cls(ProviderStatus.FAILED, reason)

    @property
    def is_ready(self) -> bool:
        return self.status is ProviderStatus.READY

    def __str__(self):
        if self.reason:
            return f"{self.status.value}({self.reason})"
        return self.status.value


class LandmarkProvider(ABC):
    """
    이미지에서 68점 랜드마크를 검출하는 외부 검출기 인터페이스

    하위 클래스는 _load()와 _detect()를 구현한다.
    모델 로드는 명시적인 load() 호출에서만 일어난다.

    Usage:
        with MediaPipeLandmarkProvider() as provider:
            detections = provider.detect(image)
    """

    name = "base"

    def __init__(self):
        self._state = ProviderState.uninitialized()

    @property
    def state(self) -> ProviderState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state.is_ready

    def load(self) -> ProviderState:
        """
        모델 로드

        Returns:
            READY 상태

        Raises:
            ProviderLoadError: 로드 실패 (상태는 FAILED(reason)로 남음)
        """
        if self._state.is_ready:
            return self._state

        self._state = ProviderState.loading()
        logger.info(f"Loading {self.name} landmark provider...")

        try:
            self._load()
        except Exception as e:
            self._state = ProviderState.failed(str(e))
            logger.error(f"Failed to load {self.name} provider: {e}", exc_info=True)
            raise ProviderLoadError(f"Failed to load {self.name} provider: {e}") from e

        self._state = ProviderState.ready()
        logger.info(f"{self.name} landmark provider ready")
        return self._state

    def detect(self, image: np.ndarray) -> List[Detection]:
        """
        얼굴 검출 + 68점 랜드마크 추출

        Args:
            image: BGR 또는 grayscale 이미지

        Returns:
            검출 순서대로의 Detection 리스트 (얼굴이 없으면 빈 리스트)

        Raises:
            ProviderNotReadyError: load()가 성공하지 않은 상태
        """
        if not self._state.is_ready:
            raise ProviderNotReadyError(f"{self.name} provider is not ready (state: {self._state})")

        validate_image(image)
        detections = list(self._detect(image))
        logger.debug(f"{self.name} provider returned {len(detections)} detection(s)")
        return detections

    def close(self):
        """리소스 정리 후 UNINITIALIZED로 복귀"""
        if self._state.is_ready:
            self._close()
        self._state = ProviderState.uninitialized()

    def __enter__(self):
        self.load()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    @abstractmethod
    def _load(self) -> None:
        """모델 로드 (실패 시 예외 발생)"""

    @abstractmethod
    def _detect(self, image: np.ndarray) -> List[Detection]:
        """실제 검출 수행"""

    def _close(self) -> None:
        pass

    def __repr__(self):
        return f"{self.__class__.__name__}(state={self._state})"
