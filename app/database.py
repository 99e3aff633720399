from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from fastapi import Request


Base = declarative_base()


def normalize_database_url(url: str) -> str:
    # Ensure we use the async drivers
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


def _enable_sqlite_savepoints(engine: AsyncEngine):
    # The sqlite3 driver defers BEGIN on its own, which breaks SAVEPOINT;
    # turn that off and let SQLAlchemy emit BEGIN itself
    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")


class Database:
    """
    Storage handle owned by the application: one async engine and the
    session factory bound to it. Built once at startup and passed around
    explicitly.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = normalize_database_url(url)
        self.engine: AsyncEngine = create_async_engine(self.url, echo=echo)
        if self.engine.dialect.name == "sqlite":
            _enable_sqlite_savepoints(self.engine)

        # Async session factory
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False
        )

    async def create_all(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self):
        await self.engine.dispose()


async def get_db(request: Request):
    database: Database = request.app.state.database
    async with database.session_factory() as db:
        try:
            yield db
        finally:
            await db.close()
