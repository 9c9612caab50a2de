"""
HTML 렌더러: Jinja2 기반.

- FileSystemLoader: 요청마다 템플릿 디렉터리에서 로드 (auto_reload)
- autoescape: 보간 값은 항상 HTML escape
- 로드/렌더 실패 → TemplateError (400)
"""

import json
from pathlib import Path
from typing import Any

import jinja2

from favtree.domain.errors import TemplateError


def format_value(value: Any) -> str:
    """
    JSON 값을 표시용 문자열로 변환.

    - string → 그대로
    - boolean → true / false
    - null → 빈 문자열
    - number → 파싱된 값을 json.dumps로 다시 표기 (1e2 → 100.0, 1.50 → 1.5)
    - array / object → compact JSON

    escape는 호출자(autoescape)가 담당.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class HtmlRenderer:
    """
    HTML 템플릿 렌더러.

    Usage:
        renderer = HtmlRenderer(templates_dir)
        content = renderer.render("favorite_tree.html", {"favorite_tree": "Oak"})
    """

    def __init__(self, templates_dir: Path):
        """
        Args:
            templates_dir: *.html 템플릿 디렉터리

        디렉터리가 없어도 생성은 성공하고, render 시점에 TemplateError.
        """
        self.templates_dir = templates_dir
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(templates_dir),
            autoescape=jinja2.select_autoescape(["html"]),
            undefined=jinja2.StrictUndefined,
            auto_reload=True,
        )
        self.env.filters["json_text"] = format_value

    def render(self, template_name: str, data: dict[str, Any]) -> bytes:
        """
        템플릿 렌더링.

        Args:
            template_name: 템플릿 파일명 (예: favorite_tree.html)
            data: 템플릿 컨텍스트

        Returns:
            UTF-8 인코딩된 HTML

        Raises:
            TemplateError: 템플릿 없음, 문법 오류, 렌더 실패
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**data).encode("utf-8")
        except (jinja2.TemplateError, OSError) as e:
            raise TemplateError(
                f"{type(e).__name__}: {e}",
                template=template_name,
            ) from e
