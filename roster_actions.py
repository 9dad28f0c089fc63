# roster_actions.py — modal state and the add / edit / delete flows
# ------------------------------------------------------------------
# No Streamlit in here: each flow takes the current modal state and a client,
# and returns an Outcome the page turns into toasts and reruns.

from dataclasses import dataclass, field
from typing import List, NamedTuple, Union


# ---------- Modal state ----------
@dataclass(frozen=True)
class Closed:
    pass


@dataclass(frozen=True)
class AddOpen:
    pass


@dataclass(frozen=True)
class EditOpen:
    position: int
    student: dict = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class DeleteOpen:
    position: int
    name: str


ModalState = Union[Closed, AddOpen, EditOpen, DeleteOpen]


@dataclass
class Notice:
    message: str
    kind: str = "info"  # success | error | warning | info


class Outcome(NamedTuple):
    modal: ModalState
    notices: List[Notice]
    refresh: bool


FORM_FIELDS = ("roll", "name", "age", "branch", "marks")


# ---------- Opening / closing ----------
def open_add() -> AddOpen:
    return AddOpen()


def open_edit(client, position: int) -> Outcome:
    """Re-fetch the roster and pre-fill from the record at `position`.

    Only reads: opening and then dismissing the dialog leaves the backend untouched.
    """
    students = client.load_students()
    if 0 <= position < len(students):
        return Outcome(EditOpen(position, dict(students[position])), [], False)
    return Outcome(
        Closed(), [Notice("That student is no longer in the roster.", "warning")], False
    )


def open_delete(position: int, name) -> DeleteOpen:
    return DeleteOpen(position, "" if name is None else str(name))


def close(state: ModalState) -> Outcome:
    """Dismiss without submitting: no request is made, the page just redraws."""
    return Outcome(Closed(), [], True)


# ---------- Submitting ----------
def read_form(raw: dict) -> dict:
    """Trim every field; anything else is left for the backend to judge."""
    return {k: str(raw.get(k) or "").strip() for k in FORM_FIELDS}


def save_student(client, state: ModalState, raw: dict) -> Outcome:
    form = read_form(raw)

    if isinstance(state, EditOpen):
        fields = {k: form[k] for k in ("name", "age", "branch", "marks")}
        result = client.update_student(state.position, fields)
        if result.success:
            notice = Notice("Student updated successfully!", "success")
        else:
            notice = Notice(result.message, "error")
        # update closes and refreshes whether or not the backend accepted it
        return Outcome(Closed(), [notice], True)

    result = client.add_student(form)
    if not result.success:
        return Outcome(state, [Notice(result.message, "error")], False)
    return Outcome(Closed(), [Notice("Student added successfully!", "success")], True)


def confirm_delete(client, state: ModalState) -> Outcome:
    if not isinstance(state, DeleteOpen):
        return Outcome(state, [], False)

    result = client.delete_student(state.position)
    if result.success:
        notice = Notice("Student deleted successfully!", "success")
    else:
        notice = Notice(result.message, "error")
    return Outcome(Closed(), [notice], True)
