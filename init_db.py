"""
Create all tables on a fresh database.
"""

from sqlalchemy import inspect

from db import engine
from models import Base


def init_db(bind=engine):
    Base.metadata.create_all(bind=bind)
    return inspect(bind).get_table_names()


if __name__ == "__main__":
    tables = init_db()
    print(f"Tables ready: {', '.join(sorted(tables))}")
