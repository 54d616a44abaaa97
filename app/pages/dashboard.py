"""
Dashboard page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.state import get_library
from core.analytics import build_deck_dashboard


def render_dashboard_page() -> None:
    library = get_library()
    dashboard = build_deck_dashboard(library)

    st.subheader(f"Deck: {dashboard.label}")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Cards", f"{dashboard.total_cards:,}")
    with col2:
        st.metric("Due Now", f"{dashboard.due_now:,}")
    with col3:
        st.metric("Streak", f"{dashboard.streak} days")

    st.progress(
        dashboard.daily_progress / dashboard.daily_goal,
        text=f"Today's goal: {dashboard.daily_progress}/{dashboard.daily_goal} reviews",
    )

    if dashboard.total_cards == 0:
        st.info("No cards in this category yet.")
        return

    st.markdown("### Due Forecast")
    st.bar_chart(dashboard.due_forecast.rename("cards_due").to_frame())

    col_left, col_right = st.columns(2)
    with col_left:
        st.caption("Ratings given")
        if dashboard.rating_distribution.sum() == 0:
            st.info("No ratings yet.")
        else:
            st.bar_chart(dashboard.rating_distribution.rename("ratings").to_frame())
    with col_right:
        st.caption(f"Review intervals (mean ease {dashboard.mean_ease:.2f})")
        st.bar_chart(dashboard.interval_buckets.rename("cards").to_frame())
