from contextlib import contextmanager

import sqlalchemy as sa
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


class Database:
    def __init__(self, connection_string, **engine_options):
        self.engine = sa.create_engine(connection_string, **engine_options)
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine)

    @contextmanager
    def session(self):
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def ping(self):
        """
        Runs a trivial query. Raises the driver error if the database can't be reached.
        """
        with self.engine.connect() as conn:
            return conn.execute(sa.text('SELECT 1')).scalar() == 1
