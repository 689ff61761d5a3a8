import pytest

from app import app as flask_app


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True)
    yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sp_rio_car():
    """São Paulo to Rio by car for two people."""
    return {
        'origin': 'São Paulo',
        'destination': 'Rio de Janeiro',
        'transport': 'car',
        'people': 2
    }
