import pytest
from django.urls import reverse


@pytest.mark.django_db
class TestHealthCheck:

    def test_ok(self, client):
        response = client.get(reverse('health-check'))

        assert response.status_code == 200
        assert response.json() == {'status': 'ok'}

    def test_unknown_path_returns_json(self, client):
        response = client.get('/api/does-not-exist/')

        assert response.status_code == 404
