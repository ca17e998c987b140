import os

os.environ.setdefault("DB_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from coverforge.form.storage import LocalStore
from coverforge.form.state import FormData


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield eng
    eng.dispose()


@pytest.fixture
def store(engine):
    return LocalStore(engine)


@pytest.fixture
def filled_form():
    return FormData(
        job_title="Junior Python Developer",
        company_name="Acme Robotics",
        job_description="Build automation tooling in Python and maintain our data pipelines.",
        extra_notes="Available from March",
    )
