"""
Rule-based hairstyle recommendation.

Every catalog entry starts from a base score and collects weighted bonuses
for face shape, jawline strength, forehead width, hairline position and
category synergy. Entries are ranked by score with catalog order breaking
ties, and the top N are returned with their reasons.
"""
from typing import Iterable, List, Optional, Tuple

from hairstyle_recommender.catalog import get_catalog
from hairstyle_recommender.models import (
    FaceShape,
    FacialAnalysis,
    ForeheadTolerance,
    HairCategory,
    HairlinePosition,
    HairstyleCatalogEntry,
    HairstyleRecommendation,
    RecommendedStyle,
)
from hairstyle_recommender.utils import get_config, get_logger
from hairstyle_recommender.utils.exceptions import ConfigurationError

from . import constants as C

logger = get_logger(__name__)


def jawline_level(strength: float) -> str:
    """턱선 강도 구간: strong (>60) / moderate (>40) / soft"""
    if strength > 60:
        return 'strong'
    elif strength > 40:
        return 'moderate'
    return 'soft'


def forehead_level(width: float) -> str:
    """이마 너비 구간: wide (>60) / normal (>40) / narrow"""
    if width > 60:
        return 'wide'
    elif width > 40:
        return 'normal'
    return 'narrow'


def score_entry(analysis: FacialAnalysis, entry: HairstyleCatalogEntry) -> Tuple[int, List[str]]:
    """
    카탈로그 항목 하나의 호환 점수 계산

    Args:
        analysis: 얼굴 분석 결과
        entry: 헤어스타일 카탈로그 항목

    Returns:
        (0-100 정수 점수, 매칭 사유 리스트)
    """
    score = C.BASE_SCORE
    reasons: List[str] = []
    shape = analysis.face_shape.value

    # 얼굴형 호환성
    if analysis.face_shape in entry.compatible_shapes:
        score += C.SHAPE_MATCH_BONUS
        reasons.append(f"Ideal for {shape} face shape")
    else:
        score += C.SHAPE_PARTIAL_BONUS
        reasons.append(f"Moderate for {shape} face shape")

    # 턱선 호환성
    threshold = entry.jawline_required_threshold
    if analysis.jawline_strength >= threshold:
        score += C.JAWLINE_MATCH_BONUS
        reasons.append("Complements your jawline strength")
    elif analysis.jawline_strength >= threshold - C.JAWLINE_PARTIAL_MARGIN:
        score += C.JAWLINE_PARTIAL_BONUS
        reasons.append("Somewhat compatible with your jawline")

    # 이마 호환성
    tolerance = entry.forehead_tolerance
    if tolerance is ForeheadTolerance.ALL:
        score += C.FOREHEAD_MATCH_BONUS
        reasons.append("Works for any forehead width")
    elif tolerance is ForeheadTolerance.WIDE:
        if analysis.forehead_width > C.WIDE_FOREHEAD_MIN:
            score += C.FOREHEAD_MATCH_BONUS
            reasons.append("Excellent for your wide forehead")
        else:
            score += C.FOREHEAD_PARTIAL_BONUS
    elif tolerance is ForeheadTolerance.NORMAL:
        low, high = C.NORMAL_FOREHEAD_RANGE
        if low <= analysis.forehead_width <= high:
            score += C.FOREHEAD_MATCH_BONUS
            reasons.append("Perfect for your forehead proportion")

    # 높은 헤어라인 보너스
    if analysis.hairline_position is HairlinePosition.HIGH and entry.style_tags & C.HIGH_HAIRLINE_TAGS:
        score += C.HIGH_HAIRLINE_BONUS
        reasons.append("Adds volume for high hairline")

    # 카테고리 / 얼굴형 시너지 (하나만 적용)
    if entry.category is HairCategory.SHORT and analysis.face_shape is FaceShape.SQUARE:
        score += C.SYNERGY_BONUS
    elif entry.category is HairCategory.LONG and analysis.face_shape is FaceShape.HEART:
        score += C.SYNERGY_BONUS
    elif entry.category is HairCategory.FADE and analysis.jawline_strength > C.STRONG_JAWLINE_MIN:
        score += C.SYNERGY_BONUS

    return int(round(min(C.MAX_SCORE, score))), reasons


def validate_top_n(top_n: int) -> int:
    """추천 개수 검증 (1 미만이면 ValueError, 최대 DEFAULT_TOP_N으로 제한)"""
    if isinstance(top_n, bool) or not isinstance(top_n, int):
        raise ValueError(f"top_n must be an integer, got {top_n!r}")
    if top_n < 1:
        raise ValueError(f"top_n must be at least 1, got {top_n}")
    return min(top_n, C.DEFAULT_TOP_N)


def suggest_color(face_shape: FaceShape) -> str:
    return C.COLOR_RECOMMENDATIONS[face_shape]


def generate_explanation(analysis: FacialAnalysis, top_style: Optional[RecommendedStyle]) -> str:
    """분석 결과와 1순위 스타일로 설명 문단 생성"""
    shape_desc = C.FACE_SHAPE_DESCRIPTIONS[analysis.face_shape]
    jawline_desc = C.JAWLINE_DESCRIPTIONS[jawline_level(analysis.jawline_strength)]
    forehead = forehead_level(analysis.forehead_width)

    explanation = f"Based on deep facial analysis, you have {shape_desc}. {jawline_desc.capitalize()}. "
    explanation += (
        f"Your {forehead} forehead and {analysis.hairline_position.value} hairline position "
        f"suggest styles that work with these proportions."
    )
    if top_style is not None:
        explanation += (
            f' The top recommendation, "{top_style.name}", scores {top_style.match_score}% compatibility '
            f"because it complements your specific facial features."
        )
    if analysis.is_simplified:
        explanation += " This is a simplified estimate made without facial landmarks, so treat it as a rough guide."
    return explanation


def recommend(
    analysis: FacialAnalysis,
    catalog: Iterable[HairstyleCatalogEntry],
    top_n: int = C.DEFAULT_TOP_N,
) -> HairstyleRecommendation:
    """
    분석 결과에 맞는 헤어스타일 상위 N개 추천

    빈 카탈로그면 빈 추천 목록과 얼굴형 컬러를 반환한다 (예외 없음).

    Args:
        analysis: 얼굴 분석 결과 (랜드마크 기반 또는 간이 분석)
        catalog: 카탈로그 항목 시퀀스 (순서가 동점 처리 기준)
        top_n: 반환할 최대 개수 (1 이상, 5를 넘으면 5로 제한)

    Returns:
        HairstyleRecommendation

    Raises:
        ValueError: top_n이 1 미만인 경우
    """
    limit = validate_top_n(top_n)
    color = suggest_color(analysis.face_shape)

    scored = []
    for entry in catalog:
        score, reasons = score_entry(analysis, entry)
        scored.append((entry, score, reasons))
        logger.debug(f"Scored {entry.name}: {score}")

    # sorted()는 stable sort: 동점이면 카탈로그 순서 유지
    ranked = sorted(scored, key=lambda item: item[1], reverse=True)[:limit]

    top_recommendations = tuple(
        RecommendedStyle(
            style_id=entry.id,
            name=entry.name,
            category=entry.category,
            match_score=score,
            reasons_for_match=tuple(reasons),
            suggested_color=color,
        )
        for entry, score, reasons in ranked
    )

    top_style = top_recommendations[0] if top_recommendations else None
    if top_style is None:
        logger.warning("Hairstyle catalog is empty, returning no recommendations")
    else:
        logger.info(f"Top recommendation: {top_style.name} ({top_style.match_score})")

    return HairstyleRecommendation(
        top_recommendations=top_recommendations,
        suggested_color=color,
        explanation=generate_explanation(analysis, top_style),
        analysis_type=analysis.analysis_type.value,
    )


def get_styling_advice(analysis: FacialAnalysis) -> str:
    """개인 맞춤 스타일링 조언 (마크다운 형식)"""
    lines = [
        "**Personalized Styling Advice:**",
        "",
        f"**Face Shape: {analysis.face_shape.value.upper()}**",
        "- This face shape pairs well with styles that emphasize your natural proportions.",
    ]

    if analysis.jawline_strength > C.STRONG_JAWLINE_MIN:
        lines.append("**Strong Jawline:** Consider styles that showcase this feature, like slicked-back or fades.")
    else:
        lines.append("**Softer Jawline:** Styles with texture and volume add definition to your face.")

    if analysis.forehead_width > 60:
        lines.append("**Wide Forehead:** Side parts, quiffs, and pompadours help balance proportions.")

    if analysis.hairline_position is HairlinePosition.HIGH:
        lines.append("**High Hairline:** Styles with volume on top or longer hair help balance the forehead.")
    elif analysis.hairline_position is HairlinePosition.LOW:
        lines.append("**Low Hairline:** Shorter styles work great and keep the look clean.")

    return "\n".join(lines) + "\n"


class HairstyleRecommender:
    """
    카탈로그를 보유한 추천기

    Usage:
        recommender = HairstyleRecommender()
        result = recommender.recommend(analysis)
    """

    def __init__(self, catalog: Optional[Iterable[HairstyleCatalogEntry]] = None, top_n: Optional[int] = None):
        """
        Args:
            catalog: 사용할 카탈로그 (None이면 전역 기본 카탈로그)
            top_n: 추천 개수 (None이면 config의 recommendation.top_n)

        Raises:
            ValueError: top_n이 1 미만인 경우
            ConfigurationError: config의 recommendation.top_n이 잘못된 경우
        """
        if catalog is None:
            catalog = get_catalog()

        self.catalog = tuple(catalog)
        if top_n is None:
            configured = get_config().get('recommendation.top_n', C.DEFAULT_TOP_N)
            try:
                top_n = validate_top_n(configured)
            except ValueError as e:
                raise ConfigurationError(f"recommendation.top_n: {e}") from e
        self.top_n = validate_top_n(top_n)

        logger.info(f"HairstyleRecommender initialized (catalog={len(self.catalog)}, top_n={self.top_n})")

    def recommend(self, analysis: FacialAnalysis) -> HairstyleRecommendation:
        return recommend(analysis, self.catalog, self.top_n)

    def styling_advice(self, analysis: FacialAnalysis) -> str:
        return get_styling_advice(analysis)

    def __repr__(self):
        return f"HairstyleRecommender(catalog={len(self.catalog)}, top_n={self.top_n})"
