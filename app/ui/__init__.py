"""UI Components for Notes to Flashcards"""

from app.ui.category_picker import render_category_picker
from app.ui.flashcard import render_answer, render_flashcard, render_question
from app.ui.session_stats import render_session_stats, render_session_complete
from app.ui.feedback_buttons import render_feedback_buttons

__all__ = [
    "render_category_picker",
    "render_flashcard",
    "render_question",
    "render_answer",
    "render_session_stats",
    "render_session_complete",
    "render_feedback_buttons",
]
