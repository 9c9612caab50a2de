"""
App layer: HTTP 서버 (FastAPI).

역할:
- Starlette Request → IncomingRequest 변환 (body 없음 / 빈 body 구분)
- RenderedResponse → Starlette Response 변환
- ⚠️ 판정 로직 없음 (core에 위임)

주의: 폴더 구분
- favtree/app/templates/ → Jinja2 HTML (favorite_tree.html, no_tree.html)
"""
