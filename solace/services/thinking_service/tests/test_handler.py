"""Tests for Thinking Service HTTP handler.

Tests the info endpoints and the sequential thinking tool endpoint,
including the end-to-end step examples the assistant relies on.
"""
import json
import logging
import pytest
from unittest.mock import patch

from solace.services.thinking_service.errors import ProcessingFailure

TOOLS_URL = '/tools/sequentialthinking_tools'


@pytest.fixture
def client():
    """Create Flask test client."""
    from solace.services.thinking_service.handler import app
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def post_step(client, body):
    response = client.post(TOOLS_URL, json=body, content_type='application/json')
    return response, json.loads(response.data)


class TestInfoEndpoints:
    """Tests for / and /health."""

    def test_root_lists_endpoints(self, client):
        response = client.get('/')
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['status'] == 'Clean Sequential Thinking MCP Server Running'
        assert data['version'] == '1.0.0'
        assert data['service'] == 'AI Coaching Platform'
        assert data['endpoints'] == {'health': '/', 'tools': TOOLS_URL}

    def test_health_returns_200(self, client):
        response = client.get('/health')
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['status'] == 'healthy'
        assert data['service'] == 'sequential-thinking-service'

    def test_cors_header_present(self, client):
        response = client.get('/', headers={'Origin': 'http://coach.example'})
        assert response.headers.get('Access-Control-Allow-Origin') == '*'

    def test_cors_wildcard_on_tool_endpoint(self, client):
        response = client.post(
            TOOLS_URL,
            json={'thought_number': 2},
            headers={'Origin': 'https://another.example'},
        )
        assert response.headers.get('Access-Control-Allow-Origin') == '*'


class TestSequentialThinkingEndpoint:
    """End-to-end tests for the tool endpoint."""

    def test_step_one_crisis(self, client):
        response, data = post_step(client, {
            'thought': 'I feel hopeless',
            'thought_number': 1,
            'total_thoughts': 3,
            'user_message': 'I feel hopeless and want to die',
        })

        assert response.status_code == 200
        assert data['success'] is True
        assert data['next_thought_needed'] is True
        assert 'CRISIS PROTOCOL' in data['analysis']
        assert 'Anger phase of grief identified' not in data['analysis']
        assert data['reasoning_step'] == 'Step 1: Safety Assessment & Crisis Screening'

    def test_step_one_crisis_with_sadness(self, client):
        _, data = post_step(client, {
            'thought': 'I feel hopeless',
            'thought_number': 1,
            'total_thoughts': 3,
            'user_message': 'I feel hopeless and sad and want to die',
        })

        assert 'CRISIS PROTOCOL' in data['analysis']
        assert '- Sadness/depression indicators present' in data['analysis']
        assert 'Anger phase of grief identified' not in data['analysis']

    def test_step_two_catalog_independent_of_thought(self, client):
        _, bare = post_step(client, {'thought_number': 2, 'total_thoughts': 3})
        _, loaded = post_step(client, {
            'thought_number': 2,
            'total_thoughts': 3,
            'thought': 'My brother died suddenly',
            'context': {'loss': 'sibling'},
        })

        assert bare['next_thought_needed'] is True
        assert bare['analysis'] == loaded['analysis']
        assert '4. ACCEPTANCE AND COMMITMENT THERAPY (ACT)' in bare['analysis']

    def test_last_step_needs_no_further_thought(self, client):
        _, data = post_step(client, {'thought_number': 3, 'total_thoughts': 3})
        assert data['next_thought_needed'] is False
        assert data['analysis'].startswith('STEP 3: PERSONALIZED RESPONSE PLANNING')

    def test_step_beyond_total_uses_fallback(self, client):
        _, data = post_step(client, {
            'thought_number': 5,
            'total_thoughts': 3,
            'thought': 'follow-up',
        })

        assert data['next_thought_needed'] is False
        assert 'Continuing analysis: follow-up' in data['analysis']
        assert 'STEP 5' in data['analysis']
        assert data['reasoning_step'] == 'Step 5: Analysis Step 5'

    def test_null_thought_echoed_as_empty(self, client):
        _, data = post_step(client, {'thought': None, 'thought_number': 6})

        assert 'Continuing analysis: \n' in data['analysis']
        assert 'None' not in data['analysis']

    def test_response_fields(self, client):
        _, data = post_step(client, {'thought_number': 2})
        assert set(data) == {
            'success', 'thought_number', 'total_thoughts', 'next_thought_needed',
            'analysis', 'reasoning_step', 'timestamp',
        }
        assert data['timestamp'].endswith('Z')

    def test_missing_body_uses_defaults(self, client):
        response = client.post(TOOLS_URL)
        data = json.loads(response.data)

        assert response.status_code == 200
        assert data['thought_number'] == 1
        assert data['total_thoughts'] == 3
        assert data['analysis'].endswith('STANDARD GRIEF SUPPORT')

    def test_raw_text_not_logged(self, client, caplog):
        caplog.set_level(logging.INFO)
        secret = 'my sister Margaret passed on Tuesday'
        post_step(client, {'thought': secret, 'thought_number': 4})

        received = [r for r in caplog.records if r.getMessage() == 'THINKING_REQUEST_RECEIVED']
        assert len(received) == 1
        assert received[0].thought_length == len(secret)
        for record in caplog.records:
            assert secret not in str(record.__dict__)


class TestErrorHandling:
    """Tests for ProcessingFailure and unexpected error bodies."""

    def test_string_step_number_returns_500(self, client):
        response, data = post_step(client, {'thought_number': '2', 'total_thoughts': 3})

        assert response.status_code == 500
        assert data['success'] is False
        assert data['thought_number'] == '2'
        assert data['error']

    def test_non_object_body_returns_500(self, client):
        response, data = post_step(client, ['not', 'an', 'object'])

        assert response.status_code == 500
        assert data['success'] is False
        assert data['thought_number'] == 1

    def test_truncated_json_returns_generic_500(self, client):
        response = client.post(
            TOOLS_URL,
            data='{"thought_number": 2,',
            content_type='application/json',
        )
        data = json.loads(response.data)

        assert response.status_code == 500
        assert data == {
            'success': False,
            'error': 'Internal server error',
            'message': 'Sequential thinking processing failed',
        }

    def test_truncated_json_logged_without_body(self, client, caplog):
        caplog.set_level(logging.INFO)
        client.post(
            TOOLS_URL,
            data='{"thought": "my private grief",',
            content_type='application/json',
        )

        events = [r for r in caplog.records if r.getMessage() == 'THINKING_BODY_UNPARSEABLE']
        assert len(events) == 1
        assert 'my private grief' not in str(events[0].__dict__)
        assert not [r for r in caplog.records if r.getMessage() == 'THINKING_STEP_DISPATCHED']

    def test_empty_json_body_uses_defaults(self, client):
        response = client.post(TOOLS_URL, data='', content_type='application/json')
        data = json.loads(response.data)

        assert response.status_code == 200
        assert data['thought_number'] == 1

    def test_non_json_content_type_uses_defaults(self, client):
        response = client.post(TOOLS_URL, data='thought_number=2', content_type='text/plain')
        data = json.loads(response.data)

        assert response.status_code == 200
        assert data['thought_number'] == 1

    @patch('solace.services.thinking_service.handler.dispatcher')
    def test_processing_failure_body(self, mock_dispatcher, client):
        mock_dispatcher.dispatch_payload.side_effect = ProcessingFailure(
            "template failed", thought_number=2,
        )

        response, data = post_step(client, {'thought_number': 2})

        assert response.status_code == 500
        assert data == {
            'success': False,
            'error': 'template failed',
            'thought_number': 2,
        }

    @patch('solace.services.thinking_service.handler.dispatcher')
    def test_unexpected_error_returns_generic_500(self, mock_dispatcher, client):
        mock_dispatcher.dispatch_payload.side_effect = RuntimeError("boom")

        response, data = post_step(client, {'thought_number': 1})

        assert response.status_code == 500
        assert data == {
            'success': False,
            'error': 'Internal server error',
            'message': 'Sequential thinking processing failed',
        }

    def test_unknown_route_still_404(self, client):
        response = client.get('/nope')
        assert response.status_code == 404

    def test_wrong_method_still_405(self, client):
        response = client.get(TOOLS_URL)
        assert response.status_code == 405
