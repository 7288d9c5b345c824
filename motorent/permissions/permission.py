"""
Permission
----------

Permissions are awaited with the view and the keyword arguments of the
route. They return nothing when they pass, and raise a
:class:`RoutePermissionError` when they fail. They compose with ``&``,
``|`` and ``~``.
"""

from abc import ABC, abstractmethod
from itertools import chain
from typing import List

from aiohttp.web_urldispatcher import View


class RoutePermissionError(Exception):
    """
    Either carries its own messages, or the errors of the
    sub-permissions that failed, joined by a qualifier.
    """

    def __init__(self, *messages, qualifier=None, sub_errors: List['RoutePermissionError'] = None):
        if messages and (qualifier is not None or sub_errors is not None):
            raise ValueError("RoutePermissionError may either have messages or sub errors.")

        super().__init__(*messages)
        self.messages = messages
        self.sub_errors = sub_errors or []
        self.qualifier = qualifier

    def __str__(self):
        if self.messages:
            return ", ".join(message.lower().strip(".") for message in self.messages)

        reasons = [str(error) for error in self.sub_errors]
        if len(reasons) > 1:
            reasons[-1] = f"{self.qualifier} {reasons[-1]}"
        return ", ".join(reasons)

    def serialize(self) -> List[str]:
        """Flattens the messages of the error and its sub errors into one list."""
        return list(self.messages) + list(chain.from_iterable(error.serialize() for error in self.sub_errors))


class Permission(ABC):

    def __and__(self, other):
        return AndPermission(*self._flatten(AndPermission, self, other))

    def __or__(self, other):
        return OrPermission(*self._flatten(OrPermission, self, other))

    def __invert__(self):
        return NotPermission(self)

    @staticmethod
    def _flatten(kind, *permissions):
        """Merges nested permissions of the same kind, so that a & (b & c) has three parts."""
        flat = []
        for permission in permissions:
            if isinstance(permission, kind):
                flat.extend(permission.permissions)
            else:
                flat.append(permission)
        return flat

    @abstractmethod
    async def __call__(self, view: View, **kwargs) -> None:
        """
        Evaluates the permission.

        :raises RoutePermissionError: If the permission failed.
        """


class AndPermission(Permission):
    """Passes when every sub-permission passes. All of them are evaluated to collect every reason."""

    def __init__(self, *permissions: Permission):
        self.permissions = permissions

    async def __call__(self, view, **kwargs):
        errors = []

        for permission in self.permissions:
            try:
                await permission(view, **kwargs)
            except RoutePermissionError as error:
                errors.append(error)

        if errors:
            raise RoutePermissionError(qualifier="and", sub_errors=errors)

    def __len__(self):
        return len(self.permissions)

    def __repr__(self):
        return "(" + " & ".join(repr(p) for p in self.permissions) + ")"


class OrPermission(Permission):
    """Passes as soon as one sub-permission passes."""

    def __init__(self, *permissions: Permission):
        self.permissions = permissions

    async def __call__(self, view, **kwargs):
        errors = []

        for permission in self.permissions:
            try:
                await permission(view, **kwargs)
            except RoutePermissionError as error:
                errors.append(error)
            else:
                return

        raise RoutePermissionError(qualifier="or", sub_errors=errors)

    def __len__(self):
        return len(self.permissions)

    def __repr__(self):
        return "(" + " | ".join(repr(p) for p in self.permissions) + ")"


class NotPermission(Permission):

    def __init__(self, permission: Permission):
        self.permission = permission

    async def __call__(self, view, **kwargs):
        try:
            await self.permission(view, **kwargs)
        except RoutePermissionError:
            return

        raise RoutePermissionError(f"Permission {self.permission!r} passed, but is inverted.")

    def __repr__(self):
        return f"~{self.permission!r}"
