from talent_sift.models import (
    NO_EMAIL,
    NO_PHONE,
    FilterState,
    JobSubmission,
    JobType,
    RankedCandidate,
    SortKey,
)


def test_job_type_from_label():
    assert JobType.from_label("Full time") is JobType.FULLTIME
    assert JobType.from_label("  Internship ") is JobType.INTERNSHIP
    assert JobType.from_label("full time") is None
    assert JobType.from_label("Remote") is None
    assert JobType.from_label(None) is None


def test_job_type_labels_round_trip_every_member():
    for member in JobType:
        assert JobType.from_label(member.label) is member


def test_key_skills_trims_and_drops_empty():
    job = JobSubmission(required_skills=" Python, ,SQL ,, Airflow ")
    assert job.key_skills() == ["Python", "SQL", "Airflow"]
    assert JobSubmission().key_skills() == []


def test_contact_presence():
    c = RankedCandidate(candidate_id=1, name="A")
    assert c.email == NO_EMAIL and c.phone == NO_PHONE
    assert not c.has_email
    assert not c.has_phone

    c = RankedCandidate(candidate_id=2, name="B", email="b@example.com", phone="+1 555 0100")
    assert c.has_email
    assert c.has_phone


def test_filter_state_defaults():
    state = FilterState()
    assert state.score_range == (1, 10)
    assert state.experience_range == (0, 35)
    assert state.query == ""
    assert state.require_email is False
    assert state.require_phone is False
    assert state.sort is SortKey.UPSTREAM
