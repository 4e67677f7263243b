"""
Portfolio API - Test Configuration and Fixtures
"""
import os

# Set testing environment before the app modules read it
os.environ['ENVIRONMENT'] = 'test'
os.environ.pop('DATABASE_URL', None)
os.environ.pop('DATABASE_NAME', None)
os.environ.pop('ADMIN_PASSWORD_HASH', None)
os.environ['ADMIN_EMAIL'] = 'admin@example.com'
os.environ['ADMIN_PASSWORD'] = 'correct-horse-battery'
os.environ['JWT_SECRET'] = 'test-jwt-secret-for-testing-only'
os.environ['SEED_ON_STARTUP'] = 'false'

import mongomock
import pytest
from faker import Faker
from fastapi.testclient import TestClient

from auth import create_access_token
from database import get_db
from main import app

fake = Faker()

ADMIN_EMAIL = os.environ['ADMIN_EMAIL']
ADMIN_PASSWORD = os.environ['ADMIN_PASSWORD']


@pytest.fixture
def mongo_db():
    """A fresh in-memory database for each test"""
    return mongomock.MongoClient()['portfolio_test']


@pytest.fixture
def client(mongo_db):
    """Test client wired to the in-memory database"""
    app.dependency_overrides[get_db] = lambda: mongo_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_token() -> str:
    return create_access_token({'sub': ADMIN_EMAIL, 'email': ADMIN_EMAIL, 'role': 'admin'})


@pytest.fixture
def auth_headers(admin_token) -> dict:
    return {'Authorization': f'Bearer {admin_token}'}


@pytest.fixture
def project_data() -> dict:
    return {
        'title': fake.catch_phrase(),
        'subtitle': fake.bs(),
        'description': fake.paragraph(),
        'tech': ['Python', 'FastAPI'],
        'highlights': [],
    }


@pytest.fixture
def make_blog(client, auth_headers):
    """Create a blog post through the API and return it"""
    def _make_blog(**overrides) -> dict:
        data = {
            'title': fake.sentence(nb_words=5),
            'excerpt': fake.sentence(),
            'content': fake.paragraph(),
            'category': 'Python',
            'tags': [],
            'published': True,
        }
        data.update(overrides)
        response = client.post('/api/portfolio/blogs', json=data, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _make_blog
