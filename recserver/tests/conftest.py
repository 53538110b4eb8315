"""Server fixtures: JSON data files under tmp_path and a TestClient over them."""

import json
from datetime import date

import pytest
from fastapi.testclient import TestClient

import recserver.state as state_module
from recengine.tests.sample_data import CATALOG, LEARNING_PATHS, LESSONS
from recserver.app import create_app
from recserver.config import ServerConfig
from recserver.state import AppState


def write_json(path, data):
    with open(path, "w") as f:
        json.dump(data, f, indent=2)


def catalog_payload():
    lessons = [dict(l, course_id=course_id) for course_id, items in LESSONS.items() for l in items]
    return {"courses": CATALOG, "lessons": lessons}


def learners_payload(today: date):
    return {
        "learners": {
            "veteran": {
                "enrolled_course_ids": ["solar-201", "solar-101"],
                "progress": {
                    "solar-101": {"completed": True, "progress_percentage": 100, "completed_lesson_ids": ["s1-l1", "s1-l2", "s1-l3"], "time_spent": 90},
                    "solar-201": {"completed": False, "progress_percentage": 50, "completed_lesson_ids": ["s2-l1"], "time_spent": 45},
                },
                "streak": {"current_streak_days": 12, "last_activity_date": today.isoformat()},
            },
            "juggler": {
                "enrolled_course_ids": ["climate-101", "recycling-101"],
                "progress": {
                    "climate-101": {"completed": False, "progress_percentage": 80, "completed_lesson_ids": ["c1-l1"], "time_spent": 30},
                },
                "streak": {"current_streak_days": 9, "last_activity_date": "2020-01-01"},
            },
            "newcomer": {},
        }
    }


@pytest.fixture
def data_dir(tmp_path):
    write_json(tmp_path / "catalog.json", catalog_payload())
    write_json(tmp_path / "learners.json", learners_payload(date.today()))
    write_json(tmp_path / "learning_paths.json", {"paths": LEARNING_PATHS})
    return tmp_path


@pytest.fixture
def server_config(data_dir):
    return ServerConfig(data_dir=data_dir)


@pytest.fixture
def app_state(server_config, monkeypatch):
    state = AppState(server_config)
    monkeypatch.setattr(state_module, "_state", state)
    return state


@pytest.fixture
def client(app_state):
    return TestClient(create_app())
