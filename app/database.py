from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.engine.url import make_url
from sqlalchemy.pool import StaticPool

from app.config import DATABASE_URL

url = make_url(DATABASE_URL)
engine_kwargs = {"pool_pre_ping": True}

if url.get_backend_name() == "sqlite":
    # SQLite connections are handed across threads by the TestClient/threadpool
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    if url.database in (None, "", ":memory:"):
        # in-memory DB lives only as long as its one connection
        engine_kwargs["poolclass"] = StaticPool
else:
    engine_kwargs["pool_size"] = 5
    engine_kwargs["max_overflow"] = 10

engine = create_engine(url, **engine_kwargs)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
