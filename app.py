"""
SDLC Explorer - Interactive Software Development Life Cycle Lessons

Streamlit application. Each topic page owns one LessonController; the page
renders the controller's snapshot and sends it the learner's commands.
The Practice view runs the track's arrangement quiz, case studies and
decision simulations.

Usage:
    streamlit run app.py
"""

import logging

import streamlit as st

from sdlcexplorer.classroom import ContentLoader, TopicNavigator
from sdlcexplorer.config import load_settings
from sdlcexplorer.engine import (
    ArrangementEngine,
    CaseStudyEngine,
    LessonController,
    Scheduler,
    SimulationEngine,
    monotonic_ms,
)
from sdlcexplorer.schemas import Section, SECTION_ORDER
from sdlcexplorer.viewer import (
    NEXT_SECTION_LABELS,
    SECTION_LABELS,
    format_countdown,
    get_lesson_css,
    get_practice_css,
    get_quiz_css,
    render_arrange_question,
    render_arrange_results,
    render_case_feedback,
    render_case_intro,
    render_case_stage,
    render_case_summary,
    render_decision_history,
    render_drawback,
    render_intro,
    render_joke_break,
    render_metrics,
    render_quiz_question,
    render_quiz_score,
    render_section_tabs,
    render_simulation_outcome,
    render_step_cards,
    render_story_modal,
    render_type_card,
    render_visualization,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

SETTINGS = load_settings()

logging.basicConfig(
    level=SETTINGS.log_level,
    format="%(asctime)s - %(levelname)s - %(message)s"
)

st.set_page_config(
    page_title="SDLC Explorer",
    page_icon="🧭",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "loader" not in st.session_state:
        st.session_state.loader = ContentLoader(SETTINGS.content_dir)

    if "navigator" not in st.session_state:
        st.session_state.navigator = TopicNavigator(st.session_state.loader)

    if "current_topic" not in st.session_state:
        nav = st.session_state.navigator
        if st.session_state.loader.get_topic(SETTINGS.default_topic):
            st.session_state.current_topic = SETTINGS.default_topic
        else:
            st.session_state.current_topic = nav.get_first_topic_id()

    if "controller" not in st.session_state:
        st.session_state.controller = new_controller(st.session_state.current_topic)

    if "view_mode" not in st.session_state:
        st.session_state.view_mode = "lesson"  # lesson, practice

    if "practice_track" not in st.session_state:
        st.session_state.practice_track = st.session_state.controller.content.track
        mount_practice(st.session_state.practice_track)


def new_controller(topic):
    """Mount a lesson page: a fresh controller on a wall-clock scheduler."""
    content = st.session_state.loader.get_lesson(topic) if topic else None
    return LessonController(
        content,
        scheduler=Scheduler(clock=monotonic_ms),
        period_ms=SETTINGS.tick_period_ms,
    )


def select_topic(topic_id: str):
    """Unmount the current lesson page and mount topic_id."""
    st.session_state.controller.close()
    st.session_state.current_topic = topic_id
    st.session_state.controller = new_controller(topic_id)
    st.rerun()


def mount_practice(track: str):
    """Load a track's activities into fresh engines, dropping any running countdown."""
    old = st.session_state.get("arrangement")
    if old is not None:
        old.destroy()

    activities = st.session_state.loader.get_activities(track)
    st.session_state.practice_track = track
    st.session_state.activities = activities
    st.session_state.arrangement = ArrangementEngine(
        activities.ordering,
        scheduler=Scheduler(clock=monotonic_ms),
        time_limit_ms=SETTINGS.arrange_time_limit_ms,
    )
    st.session_state.case_study = CaseStudyEngine(
        activities.case_studies[0] if activities.case_studies else None
    )
    st.session_state.simulation = SimulationEngine(
        activities.simulations[0] if activities.simulations else None
    )


# -----------------------------------------------------------------------------
# Sidebar: Topic Tree
# -----------------------------------------------------------------------------

def render_sidebar():
    st.sidebar.title("🧭 SDLC Explorer")

    nav = st.session_state.navigator
    if nav.total_topics == 0:
        st.sidebar.error("No lesson content found.")
        return

    st.sidebar.subheader("View Mode")
    view_mode = st.sidebar.radio(
        "Select view",
        ["Lessons", "Practice"],
        index=["lesson", "practice"].index(st.session_state.view_mode),
        horizontal=True,
        label_visibility="collapsed",
    )
    st.session_state.view_mode = "lesson" if view_mode == "Lessons" else "practice"

    if st.session_state.view_mode == "practice":
        render_practice_menu()
        return

    for track in nav.get_tracks():
        st.sidebar.subheader(track_label(track.name))
        for entry in track.topics:
            is_current = entry.id == st.session_state.current_topic
            if st.sidebar.button(
                f"→ {entry.title}" if is_current else entry.title,
                key=f"topic_{entry.id}",
                disabled=is_current,
                use_container_width=True,
            ):
                select_topic(entry.id)


# -----------------------------------------------------------------------------
# Main Content: Lesson Page
# -----------------------------------------------------------------------------

def render_lesson_page():
    controller: LessonController = st.session_state.controller
    content = controller.content
    snapshot = controller.snapshot()

    st.markdown(get_lesson_css(), unsafe_allow_html=True)
    st.markdown(render_section_tabs(snapshot.active_section), unsafe_allow_html=True)

    cols = st.columns(len(SECTION_ORDER))
    for col, section in zip(cols, SECTION_ORDER):
        with col:
            if st.button(SECTION_LABELS[section], key=f"section_{section.value}", use_container_width=True):
                controller.go_to_section(section)
                st.rerun()

    st.divider()

    section = snapshot.active_section
    if section == Section.INTRO:
        st.markdown(render_intro(content), unsafe_allow_html=True)
    elif section == Section.VISUALIZATION:
        render_visualization_section()
    elif section == Section.STEPS:
        st.markdown(render_step_cards(content.steps), unsafe_allow_html=True)
    elif section == Section.TYPES:
        render_types_section()
    elif section == Section.DRAWBACKS:
        render_drawbacks_section()
    elif section == Section.JOKE:
        st.markdown(render_joke_break(content.jokes, content.quote), unsafe_allow_html=True)
    elif section == Section.QUIZ:
        render_quiz_section()

    render_section_footer(section)


@st.fragment(run_every=1.0)
def render_visualization_section():
    """Process flow; reruns every second so autoplay ticks show up."""
    controller: LessonController = st.session_state.controller
    controller.poll()
    state = controller.visualizer.state
    steps = controller.content.steps

    st.markdown(render_visualization(steps, state), unsafe_allow_html=True)

    if steps:
        cols = st.columns(len(steps) + 1)
        for idx, step in enumerate(steps):
            with cols[idx]:
                if st.button(f"{step.id}", key=f"step_{step.id}", help=step.title):
                    controller.select_step(idx)
                    st.rerun(scope="fragment")
        with cols[-1]:
            if st.button("⏸ Pause" if state.is_playing else "▶ Play", key="autoplay"):
                controller.toggle_autoplay()
                st.rerun(scope="fragment")


def render_types_section():
    controller: LessonController = st.session_state.controller

    st.markdown(render_story_modal(controller.disclosure.modal), unsafe_allow_html=True)
    if controller.disclosure.modal_open:
        if st.button("× Close", key="close_modal"):
            controller.close_modal()
            st.rerun()

    for story in controller.content.type_stories:
        st.markdown(render_type_card(story), unsafe_allow_html=True)
        if st.button("🔍 What Went Wrong?", key=f"story_{story.id}"):
            controller.open_story(story.id)
            st.rerun()


def render_drawbacks_section():
    controller: LessonController = st.session_state.controller
    st.markdown("Even the best teams hit these pitfalls. Here's how to overcome them:")

    for drawback in controller.content.drawbacks:
        expanded = controller.disclosure.is_expanded(drawback.id)
        st.markdown(render_drawback(drawback, expanded), unsafe_allow_html=True)
        if st.button("Hide Solution" if expanded else "💡 Show Solution", key=f"drawback_{drawback.id}"):
            controller.toggle_drawback(drawback.id)
            st.rerun()


def render_quiz_section():
    controller: LessonController = st.session_state.controller
    quiz = controller.quiz

    if quiz.question_count == 0:
        st.info("No quiz questions available.")
        return

    st.markdown(get_quiz_css(), unsafe_allow_html=True)
    for q_idx, question in enumerate(quiz.questions):
        answer = quiz.answer(q_idx)
        st.markdown(
            render_quiz_question(question, q_idx, answer, quiz.feedback(q_idx)),
            unsafe_allow_html=True,
        )
        if answer is None:
            cols = st.columns(len(question.options))
            for o_idx, option in enumerate(question.options):
                with cols[o_idx]:
                    if st.button(option.text, key=f"quiz_{controller.topic}_{q_idx}_{o_idx}"):
                        controller.answer_question(q_idx, o_idx)
                        st.rerun()

    st.markdown(render_quiz_score(quiz.score()), unsafe_allow_html=True)


def render_section_footer(section: Section):
    controller: LessonController = st.session_state.controller
    nav = st.session_state.navigator
    topic = controller.topic

    st.divider()
    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if section != Section.INTRO and st.button("🏠 Back to Start", use_container_width=True):
            controller.go_to_section(Section.INTRO)
            st.rerun()

    with col2:
        pos, total = nav.get_topic_position(topic)
        st.markdown(f"<center>Lesson {pos} of {total}</center>", unsafe_allow_html=True)

    with col3:
        if section in NEXT_SECTION_LABELS:
            if st.button(NEXT_SECTION_LABELS[section], use_container_width=True):
                controller.next_section()
                st.rerun()
        else:
            next_id = nav.get_next_topic_id(topic)
            if next_id and st.button("Next Lesson →", use_container_width=True):
                select_topic(next_id)


# -----------------------------------------------------------------------------
# Practice: Phase Order, Case Study, Simulation
# -----------------------------------------------------------------------------

PRACTICE_ACTIVITIES = ["Phase Order", "Case Study", "Simulation"]


def track_label(track: str) -> str:
    return "AI-Augmented SDLC" if track == "ai-sdlc" else "Traditional SDLC"


def render_practice_menu():
    tracks = [track.name for track in st.session_state.navigator.get_tracks()]
    current = st.session_state.practice_track
    track = st.sidebar.radio(
        "Track",
        tracks,
        index=tracks.index(current) if current in tracks else 0,
        format_func=track_label,
    )
    if track != current:
        mount_practice(track)
        st.rerun()

    st.sidebar.radio("Activity", PRACTICE_ACTIVITIES, key="practice_activity")


def render_practice_page():
    st.markdown(get_quiz_css(), unsafe_allow_html=True)
    st.markdown(get_practice_css(), unsafe_allow_html=True)
    st.header(f"🧩 Practice: {track_label(st.session_state.practice_track)}")

    activity = st.session_state.get("practice_activity", PRACTICE_ACTIVITIES[0])
    if activity == "Phase Order":
        render_arrangement_section()
    elif activity == "Case Study":
        render_case_study_section()
    else:
        render_simulation_section()


@st.fragment(run_every=1.0)
def render_arrangement_section():
    """Arrangement quiz; reruns every second so the countdown shows up."""
    engine: ArrangementEngine = st.session_state.arrangement
    engine.scheduler.poll()

    if engine.question_count == 0:
        st.info("No arrangement questions for this track.")
        return

    if not engine.started:
        st.markdown(
            f"{engine.question_count} questions · {format_countdown(engine.time_limit_ms)} per question · "
            f"pass at {round(engine.passing_score * 100)}%"
        )
        if st.button("▶ Start Quiz", key="arrange_start"):
            engine.start()
            st.rerun(scope="fragment")
        return

    if engine.is_complete:
        st.markdown(
            render_arrange_results(engine.questions, engine.results, engine.score()),
            unsafe_allow_html=True,
        )
        if st.button("🔄 Try Again", key="arrange_retry"):
            engine.reset()
            st.rerun(scope="fragment")
        return

    question = engine.current_question
    st.markdown(
        render_arrange_question(
            question,
            engine.current_index,
            engine.question_count,
            engine.order,
            engine.matches,
            engine.time_remaining_ms if engine.has_timer else None,
        ),
        unsafe_allow_html=True,
    )

    if question.kind == "order":
        for position, item_id in enumerate(engine.order):
            item = question.find_item(item_id)
            col1, col2, col3 = st.columns([6, 1, 1])
            col1.write(f"{position + 1}. {item.text}")
            if col2.button("↑", key=f"up_{question.id}_{item_id}", disabled=position == 0):
                engine.move_item(item_id, position - 1)
                st.rerun(scope="fragment")
            if col3.button("↓", key=f"down_{question.id}_{item_id}", disabled=position == len(engine.order) - 1):
                engine.move_item(item_id, position + 1)
                st.rerun(scope="fragment")
    else:
        labels = {item.id: item.text for item in question.items}
        for target in question.targets:
            current = engine.matches.get(target.id)
            choices = [""] + [item.id for item in question.items]
            choice = st.selectbox(
                target.text,
                choices,
                index=choices.index(current) if current else 0,
                format_func=lambda item_id: labels.get(item_id, "Choose…"),
                key=f"match_{question.id}_{target.id}_{current}",
            )
            if choice != (current or ""):
                if choice:
                    engine.place_item(target.id, choice)
                else:
                    engine.clear_target(target.id)
                st.rerun(scope="fragment")

    is_last = engine.current_index == engine.question_count - 1
    if st.button("Finish Quiz" if is_last else "Next Question →", key=f"arrange_submit_{question.id}"):
        engine.submit()
        st.rerun(scope="fragment")


def render_case_study_section():
    engine: CaseStudyEngine = st.session_state.case_study
    activities = st.session_state.activities

    if not activities.case_studies:
        st.info("No case studies for this track.")
        return

    titles = {study.id: study.title for study in activities.case_studies}
    study_id = st.selectbox("Case study", list(titles), format_func=titles.get, key="case_study_id")
    if engine.study is None or engine.study.id != study_id:
        engine.load(activities.find_case_study(study_id))

    st.markdown(render_case_intro(engine.study), unsafe_allow_html=True)

    if engine.completed:
        st.markdown(render_case_summary(engine.score()), unsafe_allow_html=True)
        if st.button("🔄 Retry Case Study", key="case_retry"):
            engine.reset()
            st.rerun()
        return

    stage = engine.current_stage
    if stage is None:
        st.info("This case study has no stages.")
        return

    st.markdown(
        render_case_stage(stage, engine.stage_index, engine.stage_count, engine.selected_option_id),
        unsafe_allow_html=True,
    )

    if engine.revealed:
        st.markdown(render_case_feedback(stage, engine.feedback), unsafe_allow_html=True)
        label = "See Results" if engine.is_last_stage else "Next Stage →"
        if st.button(label, key=f"case_next_{stage.id}"):
            engine.next_stage()
            st.rerun()
        return

    cols = st.columns(len(stage.options))
    for col, option in zip(cols, stage.options):
        with col:
            if st.button(option.id.upper(), key=f"case_{stage.id}_{option.id}", help=option.text):
                engine.select_option(option.id)
                st.rerun()
    if st.button("Submit Answer", key=f"case_submit_{stage.id}", disabled=engine.selected_option_id is None):
        engine.submit()
        st.rerun()


def render_simulation_section():
    engine: SimulationEngine = st.session_state.simulation
    activities = st.session_state.activities

    if not activities.simulations:
        st.info("No simulations for this track.")
        return

    titles = {simulation.id: simulation.title for simulation in activities.simulations}
    simulation_id = st.selectbox("Scenario", list(titles), format_func=titles.get, key="simulation_id")
    if engine.simulation is None or engine.simulation.id != simulation_id:
        engine.load(activities.find_simulation(simulation_id))

    simulation = engine.simulation
    st.subheader(f"{simulation.icon} {simulation.title}")
    st.markdown(simulation.description)

    if engine.is_complete:
        st.markdown(render_simulation_outcome(engine.outcome), unsafe_allow_html=True)
        st.markdown(render_decision_history(engine.history), unsafe_allow_html=True)
        if st.button("🔄 Restart Simulation", key="simulation_restart"):
            engine.restart()
            st.rerun()
        return

    st.markdown(render_metrics(engine.context), unsafe_allow_html=True)

    phase = engine.current_phase
    if phase is None:
        st.info("This simulation has no phases.")
        return

    st.markdown(f"#### Phase {engine.phase_index + 1} of {len(engine.phases)}: {phase.title}")
    st.markdown(phase.scenario)
    if phase.status:
        st.caption(phase.status)

    for decision in phase.decisions:
        with st.container(border=True):
            st.markdown(f"**{decision.title}**")
            st.markdown(decision.description)
            if st.button("Choose", key=f"decision_{phase.id}_{decision.id}"):
                engine.choose(decision.id)
                st.rerun()

    if engine.history:
        st.markdown("##### Decisions so far")
        st.markdown(render_decision_history(engine.history), unsafe_allow_html=True)


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()

    if st.session_state.view_mode == "practice":
        render_practice_page()
    else:
        render_lesson_page()


if __name__ == "__main__":
    main()
