"""Streamlit UI for Talent Sift — Resume Screening Lite."""
from __future__ import annotations

import html
import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from talent_sift import config
from talent_sift.client import RankerClient
from talent_sift.errors import SubmissionError, ValidationError
from talent_sift.filters import apply_filters, to_dataframe
from talent_sift.form import defaults_from_query, query_values
from talent_sift.log import get_logger
from talent_sift.models import (
    EXPERIENCE_BOUNDS,
    SCORE_BOUNDS,
    FilterState,
    JobSubmission,
    JobType,
    RankedCandidate,
    ResumeFile,
    SortKey,
)
from talent_sift.results import ResultStore

log = get_logger(__name__)

st.set_page_config(page_title="Talent Sift - Resume Screening Lite", page_icon="📄", layout="wide")

# ── Constants ────────────────────────────────────────────────────────────

RESUME_TYPES: list[str] = ["pdf", "doc", "docx", "txt"]

SORT_LABELS: dict[SortKey, str] = {
    SortKey.UPSTREAM: "Ranking order",
    SortKey.SCORE: "Score (high → low)",
    SortKey.EXPERIENCE: "Experience (high → low)",
    SortKey.NAME: "Name (A → Z)",
}

_FORM_FIELDS = (
    "job_title", "years_of_experience", "job_type",
    "industry", "required_skills", "job_description", "source",
)

_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: #f3f4f6;
}
[data-testid="stSidebar"] {
    background: #374151;
}
[data-testid="stSidebar"] * {
    color: #ffffff;
}
[data-testid="stForm"] {
    background: #ffffff;
    border-radius: 12px;
    box-shadow: 0 4px 20px rgba(0,0,0,0.06);
}
.brand {
    font-family: serif; font-weight: 700; font-size: 1.6rem; color: #1f2937;
}
.brand-tag {
    font-family: serif; color: #6b7280; margin-left: 0.5rem;
}
.skill-chip {
    display: inline-block; margin: 0 0.3rem 0.3rem 0;
    padding: 0.15rem 0.7rem; border-radius: 999px;
    background: #fb923c; color: #ffffff; font-size: 0.85rem; font-weight: 500;
}
.case-badge {
    display: inline-block; padding: 0.4rem 0.9rem; border-radius: 8px;
    background: #fb923c; color: #ffffff; font-size: 0.85rem;
}
.stats { color: #ea580c; font-weight: 500; }
</style>
"""

# ── Helpers ──────────────────────────────────────────────────────────────


def _store() -> ResultStore:
    return ResultStore(st.session_state)


def _prefill_form() -> None:
    """Seed form widgets from the URL once per session."""
    if st.session_state.get("_form_prefilled"):
        return
    defaults = defaults_from_query(query_values(st.query_params))
    for name in _FORM_FIELDS:
        st.session_state[name] = getattr(defaults, name)
    st.session_state["_form_prefilled"] = True
    if any(getattr(defaults, name) for name in _FORM_FIELDS):
        log.info("Prefilled job form from URL parameters")


def _resume_files(uploaded: list | None) -> list[ResumeFile]:
    return [
        ResumeFile(
            filename=f.name,
            content=f.getvalue(),
            mime_type=f.type or "application/octet-stream",
        )
        for f in (uploaded or [])
    ]


def _experience_label(candidate: RankedCandidate) -> str:
    return f"{candidate.experience:g} yrs" if candidate.experience else "—"


def _score_label(score: float) -> str:
    return f"{score:g}"


# ── Page: Post Job ───────────────────────────────────────────────────────


def page_post_job() -> None:
    _prefill_form()
    store = _store()

    st.subheader("Post a Job")
    st.caption("Describe the role and upload resumes; candidates come back ranked by fit.")

    with st.form("job_form"):
        c1, c2 = st.columns(2)
        with c1:
            st.text_input("Job title *", key="job_title", placeholder="e.g. Senior Data Engineer")
            st.selectbox(
                "Job type *",
                options=[None, *JobType],
                format_func=lambda t: "Select job type" if t is None else t.label,
                key="job_type",
            )
        with c2:
            st.text_input("Years of experience", key="years_of_experience", placeholder="e.g. 5")
            st.text_input("Industry", key="industry", placeholder="e.g. Fintech")

        st.text_input(
            "Required skills",
            key="required_skills",
            placeholder="Python, SQL, Airflow",
            help="Comma-separated; shown as key skills next to the results.",
        )
        st.text_area(
            "Job description *",
            key="job_description",
            height=220,
            help="Plain text or HTML. Markup is stripped before sending.",
        )
        uploaded = st.file_uploader(
            "Resumes *",
            type=RESUME_TYPES,
            accept_multiple_files=True,
        )

        with st.expander("Advanced"):
            org = st.number_input(
                "Organisation ID",
                min_value=1,
                value=max(1, store.org_id(config.org_id())),
                step=1,
            )

        submitted = st.form_submit_button("Find Candidates", type="primary", use_container_width=True)

    if not submitted:
        return

    store.set_org_id(int(org))
    submission = JobSubmission(
        job_title=st.session_state["job_title"].strip(),
        years_of_experience=st.session_state["years_of_experience"].strip(),
        job_type=st.session_state["job_type"],
        industry=st.session_state["industry"].strip(),
        required_skills=st.session_state["required_skills"],
        job_description=st.session_state["job_description"],
        resume_files=_resume_files(uploaded),
        source=st.session_state.get("source", ""),
    )

    try:
        with st.spinner("Ranking resumes… this can take a minute."):
            result = RankerClient.from_env().submit(submission, org_id=store.org_id(config.org_id()))
    except (ValidationError, SubmissionError) as exc:
        st.error(f"**{exc.title}**: {exc.description}")
        return

    store.save(result, submission.required_skills)
    st.session_state["_flash"] = "Job submitted and resumes processed successfully."
    st.switch_page(CANDIDATES_PAGE)


# ── Page: Candidates ─────────────────────────────────────────────────────


def _filter_sidebar(skills: list[str]) -> FilterState:
    with st.sidebar:
        st.markdown("### 🔍 Filter Options")

        st.markdown("**🛠️ Key Skills**")
        if skills:
            chips = "".join(f'<span class="skill-chip">{html.escape(s)}</span>' for s in skills)
            st.markdown(chips, unsafe_allow_html=True)
        else:
            st.caption("No key skills available")

        query = st.text_input("Search", placeholder="Name, email or justification")
        score_range = st.slider("Score Range", *SCORE_BOUNDS, value=SCORE_BOUNDS, step=1)
        experience_range = st.slider(
            "Experience (years)", *EXPERIENCE_BOUNDS, value=EXPERIENCE_BOUNDS, step=1
        )
        e1, e2 = st.columns(2)
        with e1:
            require_email = st.checkbox("Email")
        with e2:
            require_phone = st.checkbox("Phone")
        sort = st.selectbox("Sort by", list(SortKey), format_func=SORT_LABELS.get)

    return FilterState(
        score_range=score_range,
        experience_range=experience_range,
        query=query,
        require_email=require_email,
        require_phone=require_phone,
        sort=sort,
    )


def _candidate_card(candidate: RankedCandidate) -> None:
    with st.container(border=True):
        c1, c2, c3, c4, c5 = st.columns([3, 2, 2, 2, 3])
        c1.markdown(f"#### {candidate.name}")
        c2.markdown(f"**Score:** {_score_label(candidate.score)}")
        c3.markdown(f"**Experience:** {_experience_label(candidate)}")
        c4.markdown(f"**{candidate.phone}**")
        c5.markdown(f"**{candidate.email}**")
        if candidate.justification:
            st.markdown(candidate.justification)


def page_candidates() -> None:
    store = _store()

    flash = st.session_state.pop("_flash", None)
    if flash:
        st.toast(flash, icon="✅")

    result = store.load_result()
    skills = store.load_skills()
    state = _filter_sidebar(skills)

    h1, h2, h3 = st.columns([4, 1, 2])
    with h1:
        st.markdown("## 📄 Talent Sift")
    with h2:
        if st.button("Home", type="primary"):
            st.switch_page(POST_JOB_PAGE)
    with h3:
        if result and result.case_id is not None:
            st.markdown(f'<span class="case-badge">Case ID: {html.escape(str(result.case_id))}</span>', unsafe_allow_html=True)

    if result is None:
        st.info("No ranking results yet. Submit a job on **Post Job** first.")
        return

    candidates = result.candidates
    filtered = apply_filters(candidates, state)

    s1, s2 = st.columns([3, 1])
    s1.markdown(
        f'<p class="stats">Showing <b>{len(filtered)}</b> of <b>{len(candidates)}</b> resumes</p>',
        unsafe_allow_html=True,
    )
    s2.markdown("Score Range 1 - 10")

    tab_cards, tab_table = st.tabs(["Candidates", "Table"])

    with tab_cards:
        if not filtered:
            st.markdown("*No resumes found.*")
        for candidate in filtered:
            _candidate_card(candidate)

    with tab_table:
        df = to_dataframe(filtered)
        st.dataframe(
            df,
            use_container_width=True,
            column_config={
                "candidate_id": st.column_config.NumberColumn("#"),
                "score": st.column_config.ProgressColumn(
                    "Score", min_value=0, max_value=SCORE_BOUNDS[1], format="%.1f"
                ),
                "experience": st.column_config.NumberColumn("Experience (yrs)"),
            },
            hide_index=True,
        )
        st.download_button(
            "Download CSV",
            df.to_csv(index=False).encode("utf-8"),
            file_name=f"candidates_{result.case_id or 'latest'}.csv",
            mime="text/csv",
            disabled=df.empty,
        )


# ── Main ─────────────────────────────────────────────────────────────────


def _inject_css() -> None:
    st.markdown(_CSS, unsafe_allow_html=True)


def _header() -> None:
    st.markdown(
        '<span class="brand">Talent Sift</span><span class="brand-tag">Lite Version</span>',
        unsafe_allow_html=True,
    )


def _sidebar_status() -> None:
    with st.sidebar:
        st.divider()
        store = _store()
        result = store.load_result()
        st.markdown("**Status**")
        if result is None:
            st.markdown("⬜  No results cached")
        else:
            st.markdown(f"✅  {len(result.candidates)} candidate(s) cached")
        st.caption(f"Endpoint: {config.api_url()}")
        if result is not None and st.button("🗑️ New Search", use_container_width=True):
            store.clear()
            st.session_state.pop("_form_prefilled", None)
            st.switch_page(POST_JOB_PAGE)


def _wrap_post_job():
    _inject_css()
    _header()
    _sidebar_status()
    page_post_job()


def _wrap_candidates():
    _inject_css()
    _header()
    page_candidates()
    _sidebar_status()


POST_JOB_PAGE = st.Page(_wrap_post_job, title="Post Job", icon="📝", url_path="post-job", default=True)
CANDIDATES_PAGE = st.Page(_wrap_candidates, title="Candidates", icon="🏆", url_path="resumes")

nav = st.navigation([POST_JOB_PAGE, CANDIDATES_PAGE])
nav.run()
