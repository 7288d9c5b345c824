"""
The access layer wraps the database. Nothing above it
should build a query by hand.
"""

from typing import List

from tortoise.exceptions import IntegrityError


def unique_violations(error: IntegrityError) -> List[str]:
    """Gets the names of the fields whose unique constraint the error reports."""
    fields = []
    for cause in error.args:
        for message in getattr(cause, "args", (cause,)):
            message = str(message)
            if "unique" in message.lower():
                fields.append(message.split('.')[-1].strip())
    return fields
