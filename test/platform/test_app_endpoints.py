from fastapi.testclient import TestClient

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import QuotaExceededError


def test_health(client: TestClient):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.json() == {'status': 'healthy', 'service': settings.PROJECT_NAME}


def test_metrics_are_exposed(client: TestClient):
    response = client.get('/metrics')

    assert response.status_code == 200
    assert response.headers['content-type'].startswith('text/plain')


def test_unauthenticated_request_is_rejected(client: TestClient):
    response = client.get('/api/scheduling/events/event-1')

    assert response.status_code == 401
    assert response.json() == {'detail': 'Not authenticated'}


def test_quota_error_carries_max_bookable(app, client: TestClient):
    @app.get('/_quota')
    async def _quota():
        raise QuotaExceededError('Cannot book 3 ticket(s)', max_bookable=2)

    response = client.get('/_quota')

    assert response.status_code == 400
    assert response.json() == {'detail': 'Cannot book 3 ticket(s)', 'max_bookable': 2}


def test_unhandled_error_returns_generic_message(app):
    @app.get('/_boom')
    async def _boom():
        raise RuntimeError('boom')

    response = TestClient(app, raise_server_exceptions=False).get('/_boom')

    assert response.status_code == 500
    assert response.json() == {'detail': settings.GENERIC_ERROR_MESSAGE}
