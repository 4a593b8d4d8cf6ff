"""
Command line entry point

    hairstyle-recommender photo.jpg --top 3 --output result.json --visualize overlay.png
"""

import argparse
import sys
from typing import List, Optional

from hairstyle_recommender.core import (
    FacialAnalyzer,
    HairstyleRecommender,
    MediaPipeLandmarkProvider,
    SimplifiedFaceAnalyzer,
)
from hairstyle_recommender.core.landmark_provider import LandmarkProvider
from hairstyle_recommender.utils import get_logger, set_config_path
from hairstyle_recommender.utils.exceptions import (
    AnalysisError,
    HairstyleRecommenderException,
    ProviderLoadError,
    ProviderNotReadyError,
)
from hairstyle_recommender.utils.image_utils import draw_landmarks, load_image, save_image
from hairstyle_recommender.utils.json_exporter import save_json, to_json_string

logger = get_logger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hairstyle-recommender',
        description='얼굴 사진에서 얼굴형을 분석하고 어울리는 헤어스타일을 추천'
    )
    parser.add_argument('image', help='분석할 얼굴 이미지 경로')
    parser.add_argument('--top', type=_positive_int, default=None,
                        help='추천 개수 1-5 (기본: config의 recommendation.top_n)')
    parser.add_argument('--output', default=None, help='결과 JSON 저장 경로')
    parser.add_argument('--visualize', default=None, help='랜드마크 시각화 이미지 저장 경로')
    parser.add_argument('--fallback', action='store_true',
                        help='랜드마크 분석 실패 시 간이 분석으로 대체')
    parser.add_argument('--seed', type=int, default=None, help='간이 분석 난수 시드')
    parser.add_argument('--config', default=None, help='config.yaml 경로')
    return parser


def run(args: argparse.Namespace, provider: Optional[LandmarkProvider] = None) -> int:
    """
    이미지 한 장 분석 + 추천 실행

    Args:
        args: 파싱된 인자
        provider: 사용할 랜드마크 provider (None이면 MediaPipe)

    Returns:
        종료 코드 (0: 성공, 1: 실패)
    """
    image = load_image(args.image)
    provider = provider if provider is not None else MediaPipeLandmarkProvider()

    try:
        try:
            provider.load()
            analysis = FacialAnalyzer(provider).analyze_image(image)
        except (AnalysisError, ProviderLoadError, ProviderNotReadyError) as e:
            if not args.fallback:
                raise
            logger.warning(f"Landmark analysis failed ({e}), falling back to simplified analysis")
            analysis = SimplifiedFaceAnalyzer(seed=args.seed).analyze(image)
    finally:
        provider.close()

    recommender = HairstyleRecommender(top_n=args.top)
    recommendation = recommender.recommend(analysis)

    print(to_json_string(analysis, recommendation, image_path=args.image))

    if args.output:
        save_json(analysis, args.output, recommendation, image_path=args.image)

    if args.visualize:
        save_image(draw_landmarks(image, analysis), args.visualize)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.config:
            set_config_path(args.config)
        return run(args)
    except HairstyleRecommenderException as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
