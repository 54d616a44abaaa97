"""
Simple page router for Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.create import render_create_page
from app.pages.dashboard import render_dashboard_page
from app.pages.library import render_library_page
from app.pages.settings import render_settings_page
from app.pages.study import render_study_page


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[], None]


PAGES = [
    AppPage(title="Study", render=render_study_page),
    AppPage(title="Create", render=render_create_page),
    AppPage(title="Library", render=render_library_page),
    AppPage(title="Dashboard", render=render_dashboard_page),
    AppPage(title="Settings", render=render_settings_page),
]
