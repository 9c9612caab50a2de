"""
favtree: 좋아하는 나무를 묻는 단일 POST 엔드포인트.

레이어:
- domain/ → 상수, 에러, 요청/응답 스키마
- core/ → 요청 파이프라인 (path → method → body)
- render/ → Jinja2 HTML 렌더러
- app/ → FastAPI 어댑터 + 진입점
"""

__version__ = "0.1.0"
