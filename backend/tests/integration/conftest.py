"""
HTTP client wired to in-memory repositories and the scripted provider.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from cinematic_mirror.api import deps
from cinematic_mirror.infrastructure.local.mock_auth import MockAuthProvider
from cinematic_mirror.main import create_app

AUTH_HEADERS = {"Authorization": "Bearer dev_user"}


@pytest.fixture
def app(llm, interview_sessions, consultation_sessions, session_repo, profile_repo):
    app = create_app()
    app.dependency_overrides[deps.get_llm_provider] = lambda: llm
    app.dependency_overrides[deps.get_interview_sessions] = lambda: interview_sessions
    app.dependency_overrides[deps.get_consultation_sessions] = lambda: consultation_sessions
    app.dependency_overrides[deps.get_interview_session_repository] = lambda: session_repo
    app.dependency_overrides[deps.get_profile_repository] = lambda: profile_repo
    app.dependency_overrides[deps.get_auth_provider] = lambda: MockAuthProvider(enabled=True)
    return app


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test", headers=AUTH_HEADERS) as client:
        yield client


@pytest.fixture
async def anonymous_client(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
