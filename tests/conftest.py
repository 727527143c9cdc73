"""Shared fixtures for vitae tests."""

import pytest
from loguru import logger

from vitae.contexts.layout.document import HELVETICA
from vitae.contexts.layout.records import Degree, Project, ResumeContent, Skill, WorkExperience


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep the caller's CV_* variables out of settings resolution."""
    for key in ("CV_NAME", "CV_API_KEY", "CV_CONTACT", "CV_LOGS_PATH"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers a command installed, so later tests never write to a closed stream."""
    yield
    logger.remove()


@pytest.fixture
def fonts():
    """Built-in font family, so tests never depend on bundled TTF files."""
    return HELVETICA


@pytest.fixture
def acme_job():
    return WorkExperience(
        position="Engineer",
        company="Acme",
        location="Remote",
        start_date="Jan 2020",
        end_date="Present",
        highlights=("Did X", "Did Y"),
    )


@pytest.fixture
def small_resume(acme_job):
    return ResumeContent(
        skills=(Skill("Languages", ("Python", "Rust")),),
        employment=(acme_job,),
        education=(
            Degree(
                university="State University",
                location="Springfield",
                degree="BSc Computer Science",
                year="2019",
                description="Thesis on compilers",
            ),
        ),
        projects=(
            Project(title="Widget", organization="Acme", year="2021", nickname="W1"),
            Project(title="Gadget", organization="Acme", year="2022"),
        ),
        summary="Builds **reliable** software.",
    )
