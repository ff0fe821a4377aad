"""Data models for the terminal to-do application.

Exposes the Task dataclass and the ValidationError raised when a
description is blank. Status is a plain boolean: pending (False) or
done (True).
"""
from __future__ import annotations
from dataclasses import dataclass


class ValidationError(ValueError):
    """Raised when a task description is empty or whitespace-only."""


@dataclass
class Task:
    """A single to-do item.

    Fields:
        id: Positive integer assigned by the store; never reused.
        description: Trimmed, non-empty text.
        done: True once finalized, False while pending.
    """
    id: int
    description: str
    done: bool = False

    @property
    def status_label(self) -> str:
        return "Done" if self.done else "Pending"

    def toggle(self) -> None:
        self.done = not self.done

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(id={self.id}, description={self.description}, done={self.done})"


def clean_description(raw: str) -> str:
    """Return the trimmed description or raise ValidationError if blank."""
    text = (raw or "").strip()
    if not text:
        raise ValidationError("Description cannot be empty.")
    return text
