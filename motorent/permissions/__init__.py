"""
This module contains the permission types. A permission is an object
that can be awaited with a view, and raises a RoutePermissionError
if the request may not go ahead.
"""

from motorent.permissions.decorators import requires
from motorent.permissions.deliverers import ValidToken, UserIsAdmin, DelivererMatchesToken, DelivererOwnsRent
from motorent.permissions.permission import Permission, RoutePermissionError
