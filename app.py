# app.py — Student Roster Dashboard
# Run:
#   streamlit run app.py
# Backend URL comes from ROSTER_API_URL (or a .env file), see roster_config.py.

import logging

import streamlit as st

import roster_config
from roster_actions import (
    EditOpen,
    close,
    confirm_delete,
    open_add,
    open_delete,
    open_edit,
    save_student,
)
from roster_api import RosterClient
from roster_view import escape_markdown, filter_roster, format_stats, marks_badge, roster_frame

logging.basicConfig(level=roster_config.LOG_LEVEL, format=roster_config.LOG_FORMAT)

TOAST_ICONS = {"success": "✅", "error": "❌", "warning": "⚠️", "info": "ℹ️"}
ROW_WIDTHS = [1.2, 2.2, 0.8, 1.2, 1.2, 0.6, 0.6]

# ----------------- Page setup -----------------
st.set_page_config(page_title="Student Roster", page_icon="🎓", layout="wide")
st.title("🎓 Student Roster")
st.caption("Add, edit and remove students. Everything is saved by the roster backend.")


# ----------------- Helpers -----------------
@st.cache_resource(show_spinner=False)
def get_client() -> RosterClient:
    return RosterClient()


def show_toast(notice):
    st.toast(notice.message, icon=TOAST_ICONS.get(notice.kind, TOAST_ICONS["info"]))


def flush_notices():
    """Toasts queued before the last rerun (a closed dialog, a finished delete)."""
    for notice in st.session_state.pop("notices", []):
        show_toast(notice)


def apply_outcome(outcome):
    # refresh -> close the dialog and redraw roster + stats via a full rerun
    if outcome.refresh:
        st.session_state.setdefault("notices", []).extend(outcome.notices)
        st.rerun()
    for notice in outcome.notices:
        show_toast(notice)


def update_stats():
    stats = get_client().load_stats()
    cols = st.columns(4)
    for col, (label, value) in zip(cols, format_stats(stats).items()):
        with col:
            st.metric(label, value)


def render_students(students=None, query=""):
    """Draw the roster table; returns the (kind, position, ...) of a clicked row action."""
    if students is None:
        students = get_client().load_students()

    view = filter_roster(roster_frame(students), query)
    if view.empty:
        st.info("📭 No students found. Add a student or clear the search.")
        return None

    header = st.columns(ROW_WIDTHS)
    for col, title in zip(header, ["Roll No", "Name", "Age", "Branch", "Marks", "Edit", "Del"]):
        col.markdown(f"**{title}**")

    action = None
    # index labels are positions in the fetched roster, filtered or not
    for position, tier in view["tier"].items():
        position = int(position)
        student = students[position]
        c_roll, c_name, c_age, c_branch, c_marks, c_edit, c_del = st.columns(ROW_WIDTHS)
        c_roll.markdown(f"**{escape_markdown(student.get('roll', ''))}**")
        c_name.text(str(student.get("name", "")))
        c_age.text(str(student.get("age", "")))
        c_branch.text(str(student.get("branch", "")))
        c_marks.markdown(marks_badge(student.get("marks", ""), tier))

        if c_edit.button("✏️", key=f"edit_{position}", help="Edit"):
            action = ("edit", position)
        if c_del.button("🗑️", key=f"del_{position}", help="Delete"):
            action = ("delete", position, student.get("name"))
    return action


# ----------------- Dialogs -----------------
def student_form(state):
    editing = isinstance(state, EditOpen)
    student = state.student if editing else {}
    branches = list(roster_config.BRANCHES)
    current_branch = str(student.get("branch") or "")
    if current_branch and current_branch not in branches:
        branches.insert(0, current_branch)

    with st.form("student_form"):
        roll = st.text_input("Roll No", value=str(student.get("roll", "")), disabled=editing)
        name = st.text_input("Name", value=str(student.get("name", "")))
        a1, a2 = st.columns(2)
        with a1:
            age = st.text_input("Age", value=str(student.get("age", "")))
        with a2:
            marks = st.text_input("Marks (%)", value=str(student.get("marks", "")))
        branch = st.selectbox(
            "Branch",
            branches,
            index=branches.index(current_branch) if current_branch in branches else 0,
        )

        save_col, cancel_col = st.columns(2)
        with save_col:
            save_btn = st.form_submit_button("💾 Save")
        with cancel_col:
            cancel_btn = st.form_submit_button("✖ Cancel")

    if cancel_btn:
        apply_outcome(close(state))
    if save_btn:
        form = {"roll": roll, "name": name, "age": age, "branch": branch, "marks": marks}
        apply_outcome(save_student(get_client(), state, form))


@st.dialog("➕ Add Student")
def add_dialog(state):
    student_form(state)


@st.dialog("✏️ Edit Student")
def edit_dialog(state):
    student_form(state)


@st.dialog("🗑️ Delete Student")
def delete_dialog(state):
    st.warning(
        f"⚠️ Are you sure you want to delete **{escape_markdown(state.name)}**? "
        "This cannot be undone."
    )
    dc1, dc2 = st.columns(2)
    with dc1:
        if st.button("🗑️ Yes, Delete", key="confirm_delete"):
            apply_outcome(confirm_delete(get_client(), state))
    with dc2:
        if st.button("✖ Cancel", key="cancel_delete"):
            apply_outcome(close(state))


# ----------------- Page -----------------
flush_notices()
update_stats()
st.divider()

search_col, add_col = st.columns([4, 1])
with search_col:
    query = st.text_input(
        "🔎 Search", key="search", placeholder="Search by name, roll no or branch..."
    )
with add_col:
    st.write("")
    add_clicked = st.button("➕ Add Student", key="add_student")

action = render_students(query=query)

# ----------------- Dispatch -----------------
if add_clicked:
    add_dialog(open_add())
elif action and action[0] == "edit":
    outcome = open_edit(get_client(), action[1])
    if isinstance(outcome.modal, EditOpen):
        edit_dialog(outcome.modal)
    else:
        apply_outcome(outcome)
elif action and action[0] == "delete":
    delete_dialog(open_delete(action[1], action[2]))
