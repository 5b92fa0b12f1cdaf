import json

from talent_sift.models import NO_EMAIL, NO_PHONE
from talent_sift.results import (
    ORG_ID_KEY,
    RESULTS_KEY,
    SKILLS_KEY,
    ResultStore,
    map_candidates,
)

PAYLOAD = {
    "id": "case-881",
    "exe_name": "Python, SQL",
    "result": [
        {"name": "Priya Nair", "score": 8, "justification": "Led ETL migration.",
         "experience": 7, "email": "priya@example.com", "phone": "+91 98450 00000"},
        {"score": "6", "experience": "5", "email": "xxx", "phone": ""},
        {"name": "Tom Reed", "score": None, "experience": True},
        {"name": "Ana Lima", "score": "n/a", "experience": 2.5, "email": None, "phone": "xxx"},
    ],
}


def test_map_candidates_full_item():
    result = map_candidates(PAYLOAD)
    assert result.case_id == "case-881"
    assert result.exe_name == "Python, SQL"
    first = result.candidates[0]
    assert first.candidate_id == 1
    assert first.name == "Priya Nair"
    assert first.score == 8
    assert first.justification == "Led ETL migration."
    assert first.experience == 7
    assert first.email == "priya@example.com"
    assert first.phone == "+91 98450 00000"
    assert first.case_id == "case-881"


def test_map_candidates_defaults_missing_fields():
    second, third, fourth = map_candidates(PAYLOAD).candidates[1:]

    assert second.candidate_id == 2
    assert second.name == "Candidate 2"
    assert second.score == 6
    assert second.experience == 0  # strings are not years
    assert second.email == NO_EMAIL
    assert second.phone == NO_PHONE
    assert second.justification == ""

    assert third.score == 0
    assert third.experience == 0

    assert fourth.score == 0
    assert fourth.experience == 2.5
    assert fourth.email == NO_EMAIL
    assert fourth.phone == NO_PHONE


def test_map_candidates_accepts_bare_list():
    result = map_candidates([{"name": "Solo", "score": 5}])
    assert result.case_id is None
    assert [c.name for c in result.candidates] == ["Solo"]


def test_map_candidates_without_list_is_empty():
    for payload in (None, {}, {"id": 1, "result": "pending"}, "text"):
        result = map_candidates(payload)
        assert result.candidates == []
        assert result.case_id is None


def test_store_round_trip():
    storage = {}
    store = ResultStore(storage)
    store.save(PAYLOAD, "Python, SQL ,,Airflow")

    assert isinstance(storage[RESULTS_KEY], str)
    assert json.loads(storage[SKILLS_KEY]) == ["Python", "SQL", "Airflow"]

    result = store.load_result()
    assert result.case_id == "case-881"
    assert len(result.candidates) == 4
    assert store.load_skills() == ["Python", "SQL", "Airflow"]


def test_store_empty():
    store = ResultStore({})
    assert store.load_result() is None
    assert store.load_skills() == []


def test_store_tolerates_corrupt_data():
    store = ResultStore({RESULTS_KEY: "{not json", SKILLS_KEY: '{"a": 1}'})
    assert store.load_result() is None
    assert store.load_skills() == []


def test_store_rejects_result_without_candidate_list():
    store = ResultStore({RESULTS_KEY: json.dumps({"id": 3})})
    assert store.load_result() is None


def test_store_org_id():
    storage = {}
    store = ResultStore(storage)
    assert store.org_id(1) == 1
    store.set_org_id(25)
    assert storage[ORG_ID_KEY] == "25"
    assert store.org_id(1) == 25
    storage[ORG_ID_KEY] = "abc"
    assert store.org_id(4) == 4


def test_store_clear_keeps_org_id():
    storage = {}
    store = ResultStore(storage)
    store.set_org_id(9)
    store.save(PAYLOAD, "Python")
    store.clear()
    assert RESULTS_KEY not in storage
    assert SKILLS_KEY not in storage
    assert store.org_id(1) == 9
    store.clear()


def test_store_empty_ranking_is_an_empty_result_not_missing():
    for payload in ([], {}, None):
        store = ResultStore({})
        store.save(payload, "Python")
        result = store.load_result()
        assert result is not None
        assert result.candidates == []
        assert result.case_id is None
