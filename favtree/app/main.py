"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn favtree.app.main:app --reload
- 프로덕션: uv run python -m favtree.app.main
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI

from favtree import __version__
from favtree.app.routes import tree
from favtree.core.logging import configure_logging
from favtree.core.pipeline import RequestPipeline
from favtree.domain.constants import (
    DEFAULT_HOST,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
)
from favtree.render.html import HtmlRenderer

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "default.yaml"
PACKAGE_TEMPLATES_DIR = Path(__file__).parent / "templates"

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] | None = yaml.safe_load(f)
        return data or {}


@dataclass(frozen=True)
class Settings:
    """서버 설정 (default.yaml → Settings)."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    templates_dir: Path = PACKAGE_TEMPLATES_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "Settings":
        """
        설정 dict → Settings.

        누락된 키는 기본값. 상대 경로 templates.dir은 프로젝트 루트 기준.
        """
        server = config.get("server") or {}
        templates = config.get("templates") or {}
        logging_conf = config.get("logging") or {}

        templates_dir = PACKAGE_TEMPLATES_DIR
        if templates.get("dir"):
            templates_dir = Path(templates["dir"])
            if not templates_dir.is_absolute():
                templates_dir = PROJECT_ROOT / templates_dir

        return cls(
            host=str(server.get("host", DEFAULT_HOST)),
            port=int(server.get("port", DEFAULT_PORT)),
            templates_dir=templates_dir,
            log_level=str(logging_conf.get("level", DEFAULT_LOG_LEVEL)),
            log_format=str(logging_conf.get("format", DEFAULT_LOG_FORMAT)),
        )


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    파이프라인은 create_app에서 이미 구성됨 → 여기서는 기록만.
    """
    settings: Settings = app.state.settings
    logger.info(f"Serving favorite-tree endpoint (templates: {settings.templates_dir})")

    yield

    logger.info("Shutting down")


# =============================================================================
# App Factory
# =============================================================================


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    FastAPI 앱 생성.

    Args:
        settings: None이면 default.yaml에서 로드

    Returns:
        단일 catch-all 라우트가 등록된 앱
    """
    if settings is None:
        settings = Settings.from_config(load_config())

    app = FastAPI(
        title="Favorite Tree",
        description="POST / {\"favoriteTree\": ...} → HTML",
        version=__version__,
        lifespan=lifespan,
        # 모든 경로를 파이프라인이 판정 (/docs 등도 404)
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings
    app.state.pipeline = RequestPipeline(HtmlRenderer(settings.templates_dir))

    app.include_router(tree.router, tags=["Tree"])

    return app


app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    settings: Settings = app.state.settings
    configure_logging(settings.log_level, settings.log_format)

    # 포트 바인딩 실패 시 uvicorn이 프로세스를 종료
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
