"""
app.py
======
Streamlit web UI for Detective Quest: The Mansion of Clues.

Responsibilities:
  - Configure and render the Streamlit page (layout, theme).
  - Manage session state initialisation and reset.
  - Render sidebar components (collected clues, known suspects, progress).
  - Render main-panel components (current room, direction buttons, visit log,
    accusation form, verdict).

This file contains only UI logic. All game logic lives in game_engine.py and
the modules it drives, seed data in case_data.py, and shared wording in
ui_helpers.py.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import html
import logging

import streamlit as st
from dotenv import load_dotenv

# Load .env before any game code runs so DETECTIVE_QUEST_* settings apply.
load_dotenv()

from case_data import load_seed_file
from config import load_game_config
from game_engine import DetectiveQuestGame
from models import SeedDataError
from ui_helpers import format_navigation, format_verdict, build_css, lines_to_html

CONFIG = load_game_config()

# ---------------------------------------------------------------------------
# Logging configuration
#
# basicConfig is called here, at the Streamlit entry point, so it runs once per
# process regardless of how many times Streamlit reruns the script. Every
# detective_quest.* logger emits through this handler.
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=CONFIG.level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("detective_quest.app")


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title="Detective Quest",
    page_icon="🔍",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)


# ============================================================
# SESSION STATE
# ============================================================

def new_game() -> DetectiveQuestGame:
    """Build a game from the configured seed file, or the reference mansion."""
    if CONFIG.seed_file:
        try:
            return DetectiveQuestGame(load_seed_file(CONFIG.seed_file))
        except SeedDataError as exc:
            logger.error("Cannot load mansion from %s: %s", CONFIG.seed_file, exc)
            st.error(f"Could not load {CONFIG.seed_file}; playing the reference mansion.")
    return DetectiveQuestGame()


def init_session_state() -> None:
    """
    Initialise all Streamlit session state variables on first run.

    ``log`` holds the display lines of every navigation result so the visit
    history survives Streamlit reruns.
    """
    if "game" not in st.session_state:
        game = new_game()
        st.session_state.game = game
        st.session_state.log  = format_navigation(game.session.opening)


def reset_game() -> None:
    """Start a new exploration of the same mansion."""
    game: DetectiveQuestGame = st.session_state.game
    game.reset()
    st.session_state.log = format_navigation(game.session.opening)


def _send(token: str) -> None:
    game: DetectiveQuestGame = st.session_state.game
    st.session_state.log.extend(format_navigation(game.command(token)))


# ============================================================
# SIDEBAR COMPONENTS
# ============================================================

def render_sidebar() -> None:
    """Render collected clues, known suspects and progress counters."""
    game: DetectiveQuestGame = st.session_state.game
    state = game.state

    st.sidebar.markdown("### 🧾 Collected clues")
    clues = game.collected_clues()
    if clues:
        for clue in clues:
            suspect = game.ledger.lookup(clue)
            suffix  = f" — *{suspect}*" if suspect else ""
            st.sidebar.markdown(f"- {clue}{suffix}")
    else:
        st.sidebar.markdown("*No clues collected yet.*")

    st.sidebar.markdown("---")
    st.sidebar.markdown("### 👥 Known suspects")
    for name in game.known_suspects():
        st.sidebar.markdown(f"- {name}")

    st.sidebar.markdown("---")
    total_rooms = len(game.seed.rooms)
    st.sidebar.progress(len(state.rooms_visited) / max(1, total_rooms))
    st.sidebar.markdown(f"**Rooms visited:** {len(state.rooms_visited)} / {total_rooms}")
    st.sidebar.markdown(f"**Moves:** {state.moves}  ·  **Invalid:** {state.invalid_moves}")

    if st.sidebar.button("🔄 New exploration", use_container_width=True):
        reset_game()
        st.rerun()


# ============================================================
# MAIN-PANEL COMPONENTS
# ============================================================

def render_room() -> None:
    """Render the card for the room the player is standing in."""
    game: DetectiveQuestGame = st.session_state.game
    visit = game.last_visit
    room  = game.current_room

    if not visit.has_clue:
        clue_html = "<p class='clue-none'>No clue in this room.</p>"
    else:
        css = "clue-new" if visit.newly_discovered else "clue-known"
        tag = "New clue" if visit.newly_discovered else "Already collected"
        clue_html = f"<p class='{css}'>{tag}: {html.escape(visit.clue)}</p>"
        if visit.suspect:
            clue_html += f"<p class='suspect-tag'>Points to: {html.escape(visit.suspect)}</p>"

    path = html.escape(" → ".join(game.session.path_names()))
    st.markdown(
        f"<div class='room-card'><h3>🚪 {html.escape(room.name)}</h3>{clue_html}"
        f"<p style='color:#555;font-size:12px;'>{path}</p></div>",
        unsafe_allow_html=True,
    )


def render_controls() -> None:
    """Render the direction buttons; unavailable directions are disabled."""
    game: DetectiveQuestGame = st.session_state.game
    available = game.session.available_moves()

    cols = st.columns(4)
    labels = [("left", "⬅️ Left"), ("back", "⬆️ Back"), ("right", "➡️ Right"), ("exit", "🚪 Leave")]
    for col, (token, label) in zip(cols, labels):
        if col.button(label, key=f"nav_{token}", use_container_width=True,
                      disabled=token not in available):
            _send(token)
            st.rerun()


def render_log() -> None:
    with st.expander("📜 Exploration log", expanded=False):
        st.markdown(
            f"<div class='visit-log'>{lines_to_html(st.session_state.log)}</div>",
            unsafe_allow_html=True,
        )


def render_accusation_form() -> None:
    """
    Render the accusation form.

    The accused is picked from the suspects the ledger knows, so the name
    always matches exactly.
    """
    game: DetectiveQuestGame = st.session_state.game

    st.markdown("---")
    st.markdown("### ⚖️ Make your accusation")
    if not game.is_exploring and game.result is None:
        st.info("You have left the mansion. Name the suspect the clues point to.")

    suspects = game.known_suspects()
    if not suspects:
        st.info("No suspects on record for this mansion.")
        return

    suspect = st.selectbox("Who do you accuse?", options=suspects)
    if st.button("🔨 I ACCUSE…", type="primary", use_container_width=True):
        game.make_accusation(suspect)
        st.rerun()


def render_verdict() -> None:
    """Render the verdict screen after an accusation."""
    game: DetectiveQuestGame = st.session_state.game
    result = game.result

    css = "verdict-upheld" if result.valid else "verdict-failed"
    headline = "CASE CLOSED" if result.valid else "INCONCLUSIVE"
    st.markdown(f"<div class='{css}'>{headline}</div>", unsafe_allow_html=True)
    if result.valid:
        st.balloons()

    for line in format_verdict(result):
        st.markdown(line)

    if st.button("🔄 NEW EXPLORATION", type="primary", use_container_width=True):
        reset_game()
        st.rerun()


# ============================================================
# MAIN
# ============================================================

def main() -> None:
    init_session_state()
    game: DetectiveQuestGame = st.session_state.game

    st.markdown(f"<h1 class='quest-title'>🔍 {html.escape(game.seed.title)}</h1>", unsafe_allow_html=True)
    render_sidebar()

    if game.result is not None:
        render_verdict()
        return

    render_room()
    if game.is_exploring:
        render_controls()
    render_log()
    render_accusation_form()


main()
