"""
Render layer: HTML 출력 생성.

역할:
- 템플릿 + 데이터 → UTF-8 HTML bytes
- Jinja2 (autoescape)
"""

from .html import HtmlRenderer, format_value

__all__ = [
    "HtmlRenderer",
    "format_value",
]
