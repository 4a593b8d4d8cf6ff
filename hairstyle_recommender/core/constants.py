"""얼굴 랜드마크 인덱스 및 분석 상수 정의 (68점 기준)"""

from typing import Dict, FrozenSet, List

from hairstyle_recommender.models import FaceShape, StyleTag

# 얼굴 비율 계산용 주요 포인트
# 아래 임계값들은 이 인덱스 기준으로 맞춰져 있으므로 변경하면 안 됨
FACE_SHAPE_LANDMARKS: Dict[str, int] = {
    'chin': 8,                 # 턱 끝
    'forehead_reference': 19,  # 눈썹 사이 위 (이마 기준점)
    'cheek_left': 2,           # 왼쪽 얼굴 윤곽
    'cheek_right': 14,         # 오른쪽 얼굴 윤곽
    'jaw_left': 3,             # 왼쪽 턱선
    'jaw_right': 13,           # 오른쪽 턱선
    'nose_tip': 30,            # 코끝
    'left_eye_outer': 36,      # 왼쪽 눈꼬리
    'right_eye_outer': 45,     # 오른쪽 눈꼬리
}

# 시각화 시 번호를 표시할 포인트
KEY_LANDMARK_INDICES: List[int] = [8, 19, 2, 14, 3, 13, 30]

# 68점 영역
FACE_OUTLINE = range(0, 17)
JAWLINE = range(3, 13)

# 얼굴형 분류 임계값 (순서대로 평가, 먼저 일치한 규칙 채택)
LONG_RATIO_MIN = 1.3            # length/width > 1.3 → long
ROUND_RATIO_MAX = 0.9           # length/width < 0.9 → round
SQUARE_JAW_RATIO = 0.85         # |jaw/width - 0.85| < 0.1 → square
SQUARE_JAW_TOLERANCE = 0.1
HEART_FOREHEAD_RATIO_MIN = 0.35  # forehead/length > 0.35 → heart
DIAMOND_JAW_RATIO_MAX = 0.8
DIAMOND_RATIO_MIN = 1.1

# 지표 정규화
JAWLINE_RATIO_OFFSET = 60
JAWLINE_RATIO_GAIN = 5
HAIRLINE_HIGH_MIN = 40
HAIRLINE_LOW_MAX = 25

# 추천 점수
BASE_SCORE = 50
SHAPE_MATCH_BONUS = 35
SHAPE_PARTIAL_BONUS = 10
JAWLINE_MATCH_BONUS = 25
JAWLINE_PARTIAL_BONUS = 15
JAWLINE_PARTIAL_MARGIN = 15
FOREHEAD_MATCH_BONUS = 15
FOREHEAD_PARTIAL_BONUS = 5
WIDE_FOREHEAD_MIN = 50
NORMAL_FOREHEAD_RANGE = (40, 60)
HIGH_HAIRLINE_BONUS = 10
SYNERGY_BONUS = 5
STRONG_JAWLINE_MIN = 60
MAX_SCORE = 100
DEFAULT_TOP_N = 5

# 높은 헤어라인에 볼륨을 주는 스타일
HIGH_HAIRLINE_TAGS: FrozenSet[StyleTag] = frozenset({
    StyleTag.SIDE_PART,
    StyleTag.QUIFF,
    StyleTag.POMPADOUR,
})

# 얼굴형별 추천 헤어 컬러
COLOR_RECOMMENDATIONS: Dict[FaceShape, str] = {
    FaceShape.OVAL: '#6b4423',     # Brown - 균형 잡힌 얼굴
    FaceShape.ROUND: '#3d2817',    # Dark Brown - 윤곽 강조
    FaceShape.SQUARE: '#8b6f47',   # Light Brown - 각진 인상 완화
    FaceShape.HEART: '#a0302f',    # Red - 좁은 턱 보완
    FaceShape.LONG: '#e6c294',     # Blonde - 균형
    FaceShape.DIAMOND: '#3d2817',  # Dark Brown - 광대 강조
}

FACE_SHAPE_DESCRIPTIONS: Dict[FaceShape, str] = {
    FaceShape.OVAL: 'a balanced oval shape, which is considered the most versatile face shape',
    FaceShape.ROUND: 'a round face shape, which benefits from styles that add height and definition',
    FaceShape.SQUARE: 'a square face shape, which benefits from styles that soften angular features',
    FaceShape.HEART: 'a heart-shaped face with a wider forehead, which benefits from styles that add volume at the crown',
    FaceShape.LONG: 'a long face shape, which benefits from styles that add width and balance',
    FaceShape.DIAMOND: 'a diamond face shape, which benefits from styles that balance the cheekbones',
}

JAWLINE_DESCRIPTIONS: Dict[str, str] = {
    'strong': 'your strong jawline can support more angular and minimal styles',
    'moderate': 'your moderate jawline works well with balanced styles',
    'soft': 'your softer jawline benefits from styles that add definition and structure',
}
