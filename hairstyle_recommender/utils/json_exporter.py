"""
분석 + 추천 결과를 UI 레이어용 JSON으로 변환
"""
import json
import os
from datetime import datetime
from typing import Any, Dict, Optional

from .logging_config import get_logger

logger = get_logger(__name__)


def to_result_dict(analysis, recommendation=None, image_path: str = "",
                   include_landmarks: bool = False) -> Dict[str, Any]:
    """
    분석 결과와 추천 결과를 하나의 JSON 직렬화 가능한 딕셔너리로 결합

    Args:
        analysis: FacialAnalysis (또는 SimplifiedFacialAnalysis)
        recommendation: HairstyleRecommendation (선택)
        image_path: 원본 이미지 경로 (선택)
        include_landmarks: 68점 좌표 포함 여부

    Returns:
        dict: {'analysis_type', 'analysis', 'recommendation', 'metadata'}
    """
    output = {
        "analysis_type": analysis.analysis_type.value,
        "analysis": analysis.to_dict(include_landmarks=include_landmarks),
        "recommendation": recommendation.to_dict() if recommendation is not None else None,

        # 메타데이터
        "metadata": {
            "timestamp": datetime.now().isoformat(),
            "image_path": image_path,
        },
    }

    return output


def to_json_string(analysis, recommendation=None, image_path: str = "",
                   include_landmarks: bool = False) -> str:
    """
    결과를 JSON 문자열로 변환 (stdout 출력 / 전송용)

    Returns:
        str: JSON 문자열
    """
    json_data = to_result_dict(analysis, recommendation, image_path, include_landmarks)
    return json.dumps(json_data, indent=2, ensure_ascii=False)


def save_json(analysis, output_path: str, recommendation=None, image_path: str = "",
              include_landmarks: bool = False) -> Dict[str, Any]:
    """
    결과를 JSON 파일로 저장 (상위 폴더가 없으면 생성)

    Args:
        analysis: FacialAnalysis
        output_path: 저장할 JSON 파일 경로
        recommendation: HairstyleRecommendation (선택)
        image_path: 원본 이미지 경로 (선택)

    Returns:
        저장된 딕셔너리
    """
    dir_path: Optional[str] = os.path.dirname(output_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    json_data = to_result_dict(analysis, recommendation, image_path, include_landmarks)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(json_data, f, indent=2, ensure_ascii=False)

    logger.info(f"[JSON] Saved to: {output_path}")
    return json_data
