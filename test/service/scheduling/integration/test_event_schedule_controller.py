"""
HTTP tests for the scheduling routes (FastAPI TestClient, dependency overrides)
"""

from unittest.mock import AsyncMock

from fastapi.testclient import TestClient
import pytest

from src.service.scheduling.app.command.save_event_schedule_use_case import (
    SaveEventScheduleUseCase,
)


SCHEDULING = '/api/scheduling'

SHOW_A = {
    'show_id': 'SHOW-1748772000000-abc123',
    'date': '2025-06-01',
    'start_time': '10:00',
    'end_time': '11:00',
}


class TestShowEditorRoutes:
    @pytest.fixture(autouse=True)
    def _admin(self, login_as, admin_session):
        login_as(admin_session)

    def test_add_show_returns_new_list_and_window(self, client: TestClient):
        response = client.post(
            f'{SCHEDULING}/shows',
            json={
                'shows': [SHOW_A],
                'show': {'date': '2025-06-08', 'start_time': '18:00', 'end_time': '20:00'},
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert len(body['shows']) == 2
        assert body['affected'][0]['date'] == '2025-06-08'
        assert body['start_date'] == '2025-06-01T10:00:00'
        assert body['end_date'] == '2025-06-08T20:00:00'

    def test_add_show_with_missing_date_is_rejected(self, client: TestClient):
        response = client.post(
            f'{SCHEDULING}/shows',
            json={'shows': [], 'show': {'date': '', 'start_time': '10:00', 'end_time': '11:00'}},
        )

        assert response.status_code == 400
        assert response.json() == {'detail': 'Show date is required'}

    def test_remove_without_confirmation_is_428(self, client: TestClient):
        response = client.post(
            f'{SCHEDULING}/shows/{SHOW_A["show_id"]}/remove', json={'shows': [SHOW_A]}
        )

        assert response.status_code == 428

    def test_remove_with_confirmation(self, client: TestClient):
        response = client.post(
            f'{SCHEDULING}/shows/{SHOW_A["show_id"]}/remove',
            json={'shows': [SHOW_A], 'confirmed': True},
        )

        assert response.status_code == 200
        body = response.json()
        assert body['shows'] == []
        assert body['start_date'] is None
        assert body['end_date'] is None

    def test_duplicate_targets_exclude_origin(self, client: TestClient):
        response = client.post(
            f'{SCHEDULING}/shows/{SHOW_A["show_id"]}/duplicate-targets',
            json={'shows': [SHOW_A], 'candidate_dates': ['2025-06-01', '2025-06-02']},
        )

        assert response.status_code == 200
        assert response.json() == {'target_dates': ['2025-06-02']}

    def test_calendar_month(self, client: TestClient):
        response = client.post(
            f'{SCHEDULING}/calendar', json={'shows': [SHOW_A], 'month': 6, 'year': 2025}
        )

        assert response.status_code == 200
        cells = response.json()
        assert len(cells) == 35
        assert cells[0]['shows'][0]['show_id'] == SHOW_A['show_id']

    def test_create_event_uses_save_use_case(self, app, client: TestClient):
        save_use_case = SaveEventScheduleUseCase(event_command_repo=AsyncMock())
        app.dependency_overrides[SaveEventScheduleUseCase.depends] = lambda: save_use_case

        response = client.post(
            f'{SCHEDULING}/events',
            json={'name': 'Science Night', 'capacity': 200, 'price': 100, 'shows': [SHOW_A]},
        )

        assert response.status_code == 201
        body = response.json()
        assert body['start_date'] == '2025-06-01T10:00:00'
        assert body['available_seats'] == 200

    def test_create_event_with_inverted_show_is_rejected_before_upstream(
        self, app, client: TestClient
    ):
        event_command_repo = AsyncMock()
        save_use_case = SaveEventScheduleUseCase(event_command_repo=event_command_repo)
        app.dependency_overrides[SaveEventScheduleUseCase.depends] = lambda: save_use_case
        inverted = {**SHOW_A, 'start_time': '11:00', 'end_time': '09:00'}

        response = client.post(
            f'{SCHEDULING}/events',
            json={'name': 'Science Night', 'capacity': 200, 'price': 100, 'shows': [inverted]},
        )

        assert response.status_code == 400
        assert response.json() == {'detail': 'Show end time must be after its start time'}
        event_command_repo.create_event.assert_not_awaited()

    def test_schedule_with_duplicate_show_ids_is_rejected(self, client: TestClient):
        response = client.post(
            f'{SCHEDULING}/shows/{SHOW_A["show_id"]}/remove',
            json={'shows': [SHOW_A, SHOW_A], 'confirmed': True},
        )

        assert response.status_code == 400
        assert response.json() == {'detail': f'Duplicate show id: {SHOW_A["show_id"]}'}


class TestSchedulingAccess:
    def test_customer_cannot_edit_schedule(self, client: TestClient, login_as, customer_session):
        login_as(customer_session)

        response = client.post(f'{SCHEDULING}/calendar', json={'month': 6, 'year': 2025})

        assert response.status_code == 403

    def test_missing_bearer_token_is_401(self, client: TestClient):
        response = client.post(f'{SCHEDULING}/calendar', json={'month': 6, 'year': 2025})

        assert response.status_code == 401
