"""Tests for the database handle."""

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import inspect, text
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from investor_portal.database import Database, get_db
from investor_portal.init_db import create_tables

EXPECTED_TABLES = {"users", "admin_users", "otps", "security_audit_logs"}


def test_create_all_creates_auth_tables(database):
    assert EXPECTED_TABLES <= set(inspect(database.engine).get_table_names())


def test_no_connection_on_construction():
    """Building the handle does not touch the database."""
    database = Database("postgresql://nobody@invalid.invalid:1/none")

    assert database.url.startswith("postgresql")
    database.dispose()


def test_session_closes(database):
    sessions = database.session()
    session = next(sessions)
    assert session.execute(text("SELECT 1")).scalar() == 1

    sessions.close()


def test_get_db_uses_app_database(database):
    app = FastAPI()
    app.state.database = database

    @app.get("/tables")
    def tables(db: Session = Depends(get_db)):
        return {"bound": db.get_bind() is database.engine}

    response = TestClient(app).get("/tables")

    assert response.json() == {"bound": True}


def test_init_db_create_tables():
    database = Database("sqlite://", poolclass=StaticPool)

    create_tables(database)

    assert EXPECTED_TABLES <= set(inspect(database.engine).get_table_names())
    database.dispose()
