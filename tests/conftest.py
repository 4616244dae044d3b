import os
import shutil
import tempfile
from pathlib import Path

import pytest
from sqlalchemy.orm import sessionmaker

# main initialise la base à l'import: la diriger vers un fichier temporaire
_TMP_DIR = tempfile.mkdtemp(prefix="budget_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_TMP_DIR) / 'import.db'}"

from database.database import init_db, make_engine, session_scope
from database.crud import create_author
from services.budget_service import BudgetService


@pytest.fixture(scope="session", autouse=True)
def _cleanup_import_db():
    yield
    import database.database
    database.database.engine.dispose()
    shutil.rmtree(_TMP_DIR, ignore_errors=True)


@pytest.fixture()
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'budget_test.db'}")
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def service(session_factory):
    return BudgetService(session_factory=session_factory)


@pytest.fixture()
def author_id(session_factory):
    with session_scope(session_factory) as db:
        author = create_author(db, "Jean Dupont")
        return author.id


@pytest.fixture()
def client(service, monkeypatch):
    import main
    from fastapi.testclient import TestClient
    monkeypatch.setattr(main, "budget_service", service)
    return TestClient(main.app)
