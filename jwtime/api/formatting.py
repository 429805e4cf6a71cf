"""Collapse structural validation failures into one message."""

from collections.abc import Iterable

from pydantic import ValidationError


def validation_messages(exc: ValidationError) -> list[str]:
    """List field errors in order as ``"<location> <message>"``."""
    messages = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location} {error['msg']}" if location else error["msg"])
    return messages


def humanize(messages: Iterable[str]) -> str:
    """Strip double quotes from each message and join with commas."""
    return ", ".join(message.replace('"', "") for message in messages)
