"""
Shared fixtures: in-memory database, locale settings, events
"""
import pytest

from translatable.core.config import settings
from translatable.core.events import dispatcher

from translatable_models import Base, TestingSessionLocal, TestModel, engine


@pytest.fixture(autouse=True)
def locale_settings(monkeypatch):
    """Reset locale configuration for every test"""
    monkeypatch.setattr(settings, "APP_LOCALE", "en")
    monkeypatch.setattr(settings, "APP_FALLBACK_LOCALE", "en")
    monkeypatch.setattr(settings, "TRANSLATABLE_PREFIX", "trans_")
    monkeypatch.setattr(settings, "TRANSLATABLE_STRICT_SHORTCUTS", False)
    return settings


@pytest.fixture(scope="function")
def db_session():
    """Create test database session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_model():
    return TestModel()


@pytest.fixture
def events():
    """Translation events emitted during the test"""
    with dispatcher.listen() as captured:
        yield captured
