"""
Session Statistics UI

Renders progress metrics and controls.
"""

import streamlit as st

from core.review import DAILY_SESSION_GOAL, daily_progress, today_string


def render_session_stats(streak_state) -> bool:
    """
    Render session progress metrics and exit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    if not st.session_state.study_queue:
        return False

    col1, col2, col3, col4 = st.columns([2, 2, 2, 1])

    with col1:
        total = len(st.session_state.study_queue)
        current = st.session_state.study_position
        st.metric("Progress", f"{current}/{total}")

    with col2:
        st.metric("Reviewed", st.session_state.session_count)

    with col3:
        done = daily_progress(streak_state, today_string())
        st.metric("Today", f"{done}/{DAILY_SESSION_GOAL}", help=f"Streak: {streak_state.streak} days")

    with col4:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Quit session", use_container_width=True):
            return True

    st.divider()
    return False


def render_session_complete():
    """Render session completion message."""
    if st.session_state.session_count > 0:
        ratings = st.session_state.session_ratings
        st.success(f"🎉 Session complete! You reviewed {st.session_state.session_count} cards.")
        st.info(
            f"Easy: {ratings['easy']} · Medium: {ratings['medium']} · Hard: {ratings['hard']}"
        )
