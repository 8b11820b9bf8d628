"""Exceptions raised by appfolders.

Environmental problems never raise; only caller mistakes do.
"""


class AppFoldersError(Exception):
    """Root of the appfolders exception hierarchy."""

    pass


class ValidationError(AppFoldersError):
    """An argument broke the calling contract, e.g. an empty appname."""

    pass
