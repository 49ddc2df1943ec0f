"""
ui_helpers.py
=============
Stateless presentation helpers shared by the CLI and the Streamlit interface.

These functions turn the result objects produced by the game engine into
display text, but carry no game state of their own. Keeping them separate
from cli.py and app.py means both front ends word things identically and the
wording can be tested without a terminal or a live Streamlit session.

Contains:
  - format_visit()        : RoomVisit → lines describing the room
  - format_navigation()   : NavigationResult → lines for the move + visit
  - format_clue_list()    : collected clues → bullet lines
  - format_suspect_list() : known suspects → bullet lines
  - format_verdict()      : AccusationResult → verdict lines
  - lines_to_html()       : display lines → escaped HTML fragment
  - build_css()           : returns the Streamlit theme CSS string
"""

from __future__ import annotations

import html
from typing import List, Sequence

from models import AccusationResult, NavigationResult, NavigationStatus, RoomVisit


NAVIGATION_HELP = (
    "Commands: 'left' (l/e), 'right' (r/d), 'back' (b) to return, "
    "'exit' (q/s) to stop exploring."
)


# ---------------------------------------------------------------------------
# Exploration
# ---------------------------------------------------------------------------

def format_visit(visit: RoomVisit) -> List[str]:
    """
    Describe a room the player just entered.

    Example:
        >>> format_visit(RoomVisit("Hall", "pegadas molhadas", True, "Sr. Verde"))
        ['-- Current room: Hall',
         'You found a clue: pegadas molhadas',
         ' -> This clue points to: Sr. Verde']
    """
    lines = [f"-- Current room: {visit.room_name}"]
    if not visit.has_clue:
        lines.append("No clue in this room.")
        return lines

    if visit.newly_discovered:
        lines.append(f"You found a clue: {visit.clue}")
    else:
        lines.append(f"Clue here: {visit.clue} (already collected)")
    if visit.suspect is not None:
        lines.append(f" -> This clue points to: {visit.suspect}")
    return lines


_STATUS_MESSAGES = {
    NavigationStatus.MOVED:            "Going {token}: {room}",
    NavigationStatus.BACKTRACKED:      "Going back to: {room}",
    NavigationStatus.NO_ROOM:          "There is no room to the {token}.",
    NavigationStatus.AT_ROOT:          "You are at the entrance; there is nowhere to go back to.",
    NavigationStatus.UNRECOGNIZED:     "Invalid command: {token!r}.",
    NavigationStatus.EXITED:           "Leaving the exploration.",
    NavigationStatus.SESSION_FINISHED: "The exploration is already over.",
}


def format_navigation(result: NavigationResult) -> List[str]:
    """Describe the outcome of a navigation token, followed by the room entered (if any)."""
    lines: List[str] = []
    template = _STATUS_MESSAGES.get(result.status)
    if template is not None:
        lines.append(template.format(token=result.token, room=result.room_name))
    if result.visit is not None:
        lines.extend(format_visit(result.visit))
    return lines


# ---------------------------------------------------------------------------
# End of game
# ---------------------------------------------------------------------------

def format_clue_list(clues: Sequence[str]) -> List[str]:
    if not clues:
        return ["No clues collected."]
    return [f" - {clue}" for clue in clues]


def format_suspect_list(suspects: Sequence[str]) -> List[str]:
    if not suspects:
        return ["No suspects on record."]
    return [f" - {name}" for name in suspects]


def format_verdict(result: AccusationResult) -> List[str]:
    """
    Describe the verdict on an accusation.

    A valid accusation lists the clues that back it; an insufficient one says
    how many clues were found.
    """
    lines = [f"Accusation: {result.suspect}"]
    noun = "clue points" if result.count == 1 else "clues point"
    if result.valid:
        lines.append(f"{result.count} {noun} to this suspect:")
        lines.extend(f" - {clue}" for clue in result.corroborating_clues)
        lines.append("Result: ACCUSATION UPHELD. Case closed.")
    else:
        lines.append(f"Only {result.count} {noun} to this suspect.")
        lines.append("Result: INSUFFICIENT EVIDENCE. The investigation is inconclusive.")
    return lines


def lines_to_html(lines: Sequence[str]) -> str:
    """Escape display lines (which may carry seed-file text) and join them with <br>."""
    return "<br>".join(html.escape(line) for line in lines)


# ---------------------------------------------------------------------------
# Streamlit theme
# ---------------------------------------------------------------------------

def build_css() -> str:
    """
    Return the CSS string injected into the Streamlit app.

    Returns:
        A raw CSS string (without <style> tags — the caller wraps it).
    """
    return """
    @import url('https://fonts.googleapis.com/css2?family=Special+Elite&family=Courier+Prime:wght@400;700&display=swap');

    html, body, .stApp, .main, .block-container {
        background: #111111 !important;
        color: #c8c8c8 !important;
    }
    [data-testid="stSidebar"], section[data-testid="stSidebar"] > div {
        background: #0b0b0b !important;
        border-right: 1px solid #262626 !important;
    }

    .quest-title {
        text-align: center; color: #b8860b;
        font-family: 'Special Elite', cursive; letter-spacing: 3px;
    }
    .room-card {
        background: #1c1c1c; border-left: 4px solid #b8860b;
        padding: 18px 22px; border-radius: 4px; margin: 10px 0;
        font-family: 'Courier Prime', monospace;
    }
    .room-card h3 { color: #b8860b; font-family: 'Special Elite', cursive; margin: 0 0 8px 0; }
    .clue-new   { color: #7fbf7f; }
    .clue-known { color: #888888; }
    .clue-none  { color: #555555; font-style: italic; }
    .suspect-tag { color: #cd5c5c; font-size: 13px; }

    .visit-log {
        font-family: 'Courier Prime', monospace; font-size: 13px; color: #999;
        white-space: pre-wrap;
    }

    .verdict-upheld { text-align: center; color: #228b22; font-size: 40px; font-family: 'Special Elite', cursive; }
    .verdict-failed { text-align: center; color: #8b0000; font-size: 40px; font-family: 'Special Elite', cursive; }

    .stButton > button {
        background: #222; color: #c8c8c8; border: 1px solid #444;
        font-family: 'Courier Prime', monospace;
    }
    .stButton > button:hover { border-color: #b8860b; color: #b8860b; }
"""
