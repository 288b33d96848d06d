"""Shared candidate and job records, shaped like the storage layer returns them."""

import pytest


@pytest.fixture
def frontend_candidate():
    return {
        "id_user": 1,
        "skills": ["javascript", "react"],
        "job_title": "Développeur Frontend",
        "experience_level": "senior",
    }


@pytest.fixture
def react_job():
    return {
        "id_job_offer": 10,
        "title": "Développeur React Senior",
        "description": "Nous recherchons un développeur javascript react",
        "industry": "Tech",
        "remote": "Hybride",
        "experience": "senior",
    }


@pytest.fixture
def complete_candidate():
    return {
        "id_user": 2,
        "skills": ["javascript", "react", "node.js"],
        "job_title": "Développeur React Senior",
        "bio_pro": "Developer web et software, coding en javascript et node.js",
        "city": "Lyon",
        "country": "France",
        "experience_level": "senior",
        "availability": True,
    }


@pytest.fixture
def complete_job():
    return {
        "id_job_offer": 11,
        "title": "Développeur React Senior",
        "description": "Application web en javascript, react et node.js",
        "industry": "Tech",
        "location": "Paris",
        "experience": "expert",
        "contract_type": "CDI",
        "salary_max": 70000,
        "company": {"name": "Acme", "industry": "Logiciel"},
    }


@pytest.fixture
def medical_candidate():
    return {
        "id_user": 3,
        "job_title": "Médecin généraliste",
        "bio_pro": "clinique hospital patient",
    }


@pytest.fixture
def software_job():
    return {
        "id_job_offer": 12,
        "title": "Ingénieur logiciel",
        "description": "javascript developer software",
    }
