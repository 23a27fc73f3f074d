import sys
from pathlib import Path

import matplotlib.pyplot as plt
import streamlit as st

# -------------------------------------------------
# PATH FIX (REQUIRED FOR STREAMLIT)
# -------------------------------------------------
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sme_insights.dashboard import (
    form_progress,
    impact_chart,
    impact_frame,
    parse_kpis,
    stakeholder_chart,
    stakeholder_frame,
)
from sme_insights.feedback import feedback_summary
from sme_insights.forms import COMMON_PROBLEMS, INDUSTRIES
from sme_insights.llm import LLMConfigurationError
from sme_insights.session import ViewState

from ui.backend import build_services, new_session
from ui.config import (
    APP_NAME,
    APP_TAGLINE,
    CONTEXT_PLACEHOLDER,
    LOADING_TEXT,
    PROBLEM_PLACEHOLDER,
)


# -------------------------------------------------
# SERVICES (ONE PER PROCESS)
# -------------------------------------------------
@st.cache_resource
def get_services():
    return build_services()


st.set_page_config(
    page_title=APP_NAME,
    page_icon="💡",
    layout="wide",
)

try:
    services = get_services()
except LLMConfigurationError as e:
    st.error(f"AI backend is not configured: {e}")
    st.stop()

if "session" not in st.session_state:
    st.session_state["session"] = new_session(services)

session = st.session_state["session"]


# -------------------------------------------------
# SIDEBAR
# -------------------------------------------------
with st.sidebar:
    summary = feedback_summary(services.store.retrieve_all())
    st.subheader("Feedback so far")
    st.metric("Plans rated", summary["total"])
    if summary["helpful_ratio"] is not None:
        st.metric("Rated helpful", f"{summary['helpful_ratio']:.0%}")


# -------------------------------------------------
# FORM
# -------------------------------------------------
def render_form():
    st.title(APP_NAME)
    st.caption(APP_TAGLINE)

    industry = st.selectbox(
        "🏭 Industry",
        options=[""] + list(INDUSTRIES),
        format_func=lambda k: INDUSTRIES.get(k, "Select your industry"),
    )

    business_context = st.text_area(
        "💼 Business Context (optional)",
        placeholder=CONTEXT_PLACEHOLDER,
        height=100,
    )

    st.markdown("**💡 Common Problems**")
    columns = st.columns(3)
    selected = [
        problem_id
        for i, (problem_id, label) in enumerate(COMMON_PROBLEMS.items())
        if columns[i % 3].checkbox(label, key=f"problem_{problem_id}")
    ]

    custom_problem = st.text_area(
        "📝 Describe Your Main Problem",
        placeholder=PROBLEM_PLACEHOLDER,
        height=130,
    )

    data = {
        "industry": industry,
        "businessContext": business_context,
        "commonProblems": selected,
        "customProblem": custom_problem,
    }

    progress = form_progress(data, session.min_problem_length)
    st.progress(progress / 100, text=f"Form {progress}% complete")

    # Outcome of the previous run's submission
    outcome = st.session_state.pop("submit_outcome", None)
    if outcome is not None:
        for message in outcome.field_errors.values():
            st.error(message)

        if outcome.notification:
            st.toast(outcome.notification, icon="⚠️")
            st.error(outcome.notification)

    # The callback runs before the next script run, so the button
    # is already drawn disabled while generation is in flight
    st.button(
        "🚀 Generate Solutions",
        type="primary",
        disabled=session.controls_locked,
        on_click=session.request_submit,
    )

    if session.submit_requested:
        with st.spinner(LOADING_TEXT):
            st.session_state["submit_outcome"] = session.run_requested_submit(data)
        st.rerun()


# -------------------------------------------------
# DASHBOARD
# -------------------------------------------------
def render_dashboard():
    result = session.result

    header, action = st.columns([4, 1])
    header.title("Your Action Plan")
    if action.button("⬅️ New Plan"):
        session.reset()
        st.rerun()

    st.info(result.data_narrative)

    left, right = st.columns(2)

    with left:
        st.subheader("✅ Recommended Solutions")
        for solution in result.solutions:
            with st.expander(solution.heading, expanded=True):
                for point in solution.description:
                    st.markdown(f"- {point}")
                st.caption(
                    f"Cost: {solution.implementation_cost.value} · "
                    f"Time to value: {solution.time_to_value.value}"
                )
                if solution.required_resources:
                    st.caption("Resources: " + ", ".join(solution.required_resources))

    with right:
        st.subheader("🎯 Key Performance Indicators")
        for card in parse_kpis(result.kpis):
            target = f" · target {card.target:g}%" if card.target is not None else ""
            st.markdown(f"**{card.title}**  \n{card.description}")
            st.caption(f"{card.category}{target}")

    st.subheader("📊 Impact Analysis")
    chart_left, chart_right = st.columns(2)

    fig = impact_chart(impact_frame(result))
    chart_left.pyplot(fig)
    plt.close(fig)

    fig = stakeholder_chart(stakeholder_frame(result))
    chart_right.pyplot(fig)
    plt.close(fig)

    # ---- Feedback ----
    st.subheader("Was this plan helpful?")
    if session.feedback_given is not None:
        st.success("Thanks! Your feedback will shape future plans.")
    else:
        yes, no, _ = st.columns([1, 1, 4])
        if yes.button("👍 Helpful"):
            session.give_feedback("helpful")
            st.rerun()
        if no.button("👎 Not helpful"):
            session.give_feedback("not_helpful")
            st.rerun()

    # ---- Follow-up chat ----
    st.subheader("💬 Ask about this plan")
    for message in session.chat_history:
        with st.chat_message("assistant" if message.role == "model" else "user"):
            st.write(message.content)

    query = st.chat_input("Ask a follow-up question")
    if query:
        session.ask(query)
        st.rerun()


# -------------------------------------------------
# RUN
# -------------------------------------------------
if session.state == ViewState.DASHBOARD and session.result is not None:
    render_dashboard()
else:
    render_form()
