"""Shared fixtures: an in-memory SQLite local storage and a store on top of it."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.database import create_tables
from app.schemas.visitor import VisitorFormData
from app.services.local_storage import LocalStorage
from app.services.visitor_store import VisitorStore

STORAGE_KEY = "church-visitors"


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def storage(session_factory):
    return LocalStorage(session_factory)


@pytest.fixture
def store(storage):
    s = VisitorStore(storage, STORAGE_KEY)
    s.load()
    return s


def make_form(full_name="Maria Silva", phone="(11) 98765-4321", city="São Paulo",
              service_date="10/03/2024", service_time="19:00", observations=None):
    return VisitorFormData(
        full_name=full_name,
        phone=phone,
        city=city,
        service_date=service_date,
        service_time=service_time,
        observations=observations,
    )
