"""Pydantic schemas for notifications."""

from pydantic import BaseModel


class Notification(BaseModel):
    """A message addressed to a user."""

    recipient: str
    subject: str
    message: str

    model_config = {"frozen": True}
