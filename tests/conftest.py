"""
Pytest fixtures for the favtree tests.

테스트 구성:
- 정상 케이스 (favoriteTree 있음/없음)
- 거절 케이스 (404/405/418/412/400)
- 템플릿 설정 오류 케이스
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from favtree.app.main import PACKAGE_TEMPLATES_DIR, Settings, create_app
from favtree.core.pipeline import RequestPipeline
from favtree.render.html import HtmlRenderer

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def templates_dir() -> Path:
    """패키지 내장 템플릿 디렉터리."""
    return PACKAGE_TEMPLATES_DIR


@pytest.fixture
def empty_templates_dir(tmp_path: Path) -> Path:
    """템플릿이 하나도 없는 디렉터리 (설정 오류 재현용)."""
    root = tmp_path / "no_templates"
    root.mkdir()
    return root


# =============================================================================
# Pipeline Fixtures
# =============================================================================

@pytest.fixture
def renderer(templates_dir: Path) -> HtmlRenderer:
    """HtmlRenderer 인스턴스."""
    return HtmlRenderer(templates_dir)


@pytest.fixture
def pipeline(renderer: HtmlRenderer) -> RequestPipeline:
    """RequestPipeline 인스턴스."""
    return RequestPipeline(renderer)


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def settings(templates_dir: Path) -> Settings:
    """테스트용 설정."""
    return Settings(templates_dir=templates_dir)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """테스트용 FastAPI 앱."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """FastAPI TestClient."""
    with TestClient(app) as client:
        yield client
