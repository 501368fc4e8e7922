import pytest
from fastapi.testclient import TestClient

from main import make_app
from quiz_admin.core.auth_provider import ACCOUNTS, DocumentAuthProvider
from quiz_admin.core.database import USERS
from quiz_admin.core.dependencies import get_auth_provider, get_store
from quiz_admin.helpers.jwt_handler import JWT
from quiz_admin.helpers.password import PasswordHandler
from quiz_admin.services.auth import AuthService
from quiz_admin.services.migration import UserMigrationService
from quiz_admin.services.quiz import QuizService
from quiz_admin.services.result import ResultService
from tests.fakes import InMemoryDocumentStore

ADMIN_UID = "admin-uid"
ADMIN_EMAIL = "admin@school.com"
STUDENT_UID = "student-uid"
STUDENT_EMAIL = "student@school.com"
PASSWORD = "secret123"


def seed_user(store, uid, email, name, role, password=PASSWORD):
    store.seed(ACCOUNTS, email.lower(), {
        "uid": uid,
        "email": email.lower(),
        "passwordHash": PasswordHandler.hash(password),
        "createdAt": 0,
    })
    store.seed(USERS, uid, {"uid": uid, "email": email, "name": name, "role": role})


@pytest.fixture
def store():
    store = InMemoryDocumentStore()
    seed_user(store, ADMIN_UID, ADMIN_EMAIL, "Ada Admin", "admin")
    seed_user(store, STUDENT_UID, STUDENT_EMAIL, "Sam Student", "student")
    return store


@pytest.fixture
def jwt_handler():
    return JWT("test-secret", "HS256", 60)


@pytest.fixture
def provider(store, jwt_handler):
    return DocumentAuthProvider(store, jwt_handler)


@pytest.fixture
def auth_service(store, provider):
    return AuthService(store, provider)


@pytest.fixture
def migration_service(store):
    return UserMigrationService(store)


@pytest.fixture
def quiz_service(store):
    return QuizService(store)


@pytest.fixture
def result_service(store):
    return ResultService(store)


@pytest.fixture
def app(store, provider):
    app = make_app()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_auth_provider] = lambda: provider
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


def login(client, email, password=PASSWORD):
    res = client.post("/api/v1/auth/mobile-login", json={"email": email, "password": password})
    assert res.json()["success"] is True
    return {"Authorization": f"Bearer {res.json()['accessToken']}"}


@pytest.fixture
def admin_headers(client):
    return login(client, ADMIN_EMAIL)


@pytest.fixture
def student_headers(client):
    return login(client, STUDENT_EMAIL)
