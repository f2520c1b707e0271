"""
Shared fixtures: in-memory database, repositories, a mocked blob store and
an application wired to them.
"""

from datetime import datetime, timedelta
from typing import Optional
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.domain.models.profile import PROFILE_CLASSES
from app.domain.models.user import User, ProfileType
from app.domain.services.blob_store import BlobStore
from app.infrastructure.auth import JWTHandler
from app.infrastructure.db.database import (
    create_db_engine, create_session_factory, create_all_tables, drop_all_tables
)
from app.infrastructure.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyProfileRepository,
    SQLAlchemySharedProfileRepository,
)
from app.main import create_application


TEST_JWT_SECRET = "test-secret"
STORAGE_BASE_URL = "https://project.supabase.co/storage/v1/object/public/audio-tracks"


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    create_all_tables(engine)
    yield engine
    drop_all_tables(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def user_repository(session):
    return SQLAlchemyUserRepository(session)


@pytest.fixture
def profile_repository(session):
    return SQLAlchemyProfileRepository(session)


@pytest.fixture
def shared_profile_repository(session):
    return SQLAlchemySharedProfileRepository(session)


@pytest.fixture
def blob_store():
    """Blob store mock whose download URLs look like Supabase public URLs."""
    store = Mock(spec=BlobStore)
    store.get_download_url.side_effect = lambda path: f"{STORAGE_BASE_URL}/{path}"
    store.path_from_url.side_effect = lambda url: (
        url.split("&", 1)[0][len(STORAGE_BASE_URL) + 1:] if url.startswith(STORAGE_BASE_URL) else None
    )
    return store


@pytest.fixture
def jwt_handler():
    return JWTHandler(TEST_JWT_SECRET)


@pytest.fixture
def settings():
    return Settings(
        environment="testing",
        database_url="sqlite://",
        supabase_jwt_secret=TEST_JWT_SECRET,
        supabase_service_key="test-key",
        sentry_dsn=None,
    )


@pytest.fixture
def app(settings, session_factory, blob_store, jwt_handler):
    return create_application(
        settings=settings,
        session_factory=session_factory,
        blob_store=blob_store,
        jwt_handler=jwt_handler,
    )


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(jwt_handler):
    """Build an Authorization header for an external identity."""
    def _headers(external_id: str, email: str = "test@example.com"):
        return {"Authorization": f"Bearer {jwt_handler.generate_test_token(external_id, email)}"}
    return _headers


@pytest.fixture
def make_user(user_repository, profile_repository, session):
    """Persist a user, and a profile of the user's type when one is given."""
    counter = {"n": 0}

    def _make_user(
        external_id: str,
        profile_type: Optional[ProfileType] = None,
        name: str = "Someone",
        created_at: Optional[datetime] = None,
        **profile_fields
    ) -> User:
        counter["n"] += 1
        user = User(external_auth_id=external_id, email=f"{external_id}@example.com")
        if profile_type is not None:
            user.adopt_profile(profile_type, name, "https://img.example.com/a.png")
        user = user_repository.save(user)

        if profile_type is not None:
            profile = PROFILE_CLASSES[profile_type](
                user_id=user.id,
                name=name,
                image_url="https://img.example.com/a.png",
                location=profile_fields.pop("location", "Madrid"),
                created_at=created_at or datetime(2024, 1, 1) + timedelta(minutes=counter["n"]),
                **profile_fields
            )
            profile_repository.save(profile)

        session.commit()
        return user

    return _make_user


@pytest.fixture
def band_user(make_user):
    return make_user("ext-band", ProfileType.BAND, name="The Strokes", genre="Rock")


@pytest.fixture
def gig_user(make_user):
    return make_user("ext-gig", ProfileType.GIG_PROVIDER, name="Blue Note", services="Live jazz venue")

