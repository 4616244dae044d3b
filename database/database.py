from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from dotenv import load_dotenv
import logging
import os

logger = logging.getLogger(__name__)

load_dotenv()

# URL de la base de données (sqlite local par défaut)
SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./budget.db")


def make_engine(url: str):
    """Crée un moteur SQLAlchemy, sqlite accepte les connexions multi-threads"""
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args)


engine = make_engine(SQLALCHEMY_DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def init_db(bind=None):
    """Initialise la base de données"""
    from database.models import AuthorModel, BudgetModel
    Base.metadata.create_all(bind=bind or engine)

@contextmanager
def session_scope(session_factory=SessionLocal):
    """
    Unité de travail transactionnelle.

    Commit si le bloc se termine normalement, rollback puis propagation
    de l'exception sinon. La session est toujours fermée.
    """
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        logger.debug("Rollback de la transaction en cours")
        db.rollback()
        raise
    finally:
        db.close()
