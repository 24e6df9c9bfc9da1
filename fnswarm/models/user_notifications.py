"""
User notifications for fnswarm.

The command line interface decides how messages reach the user (colored
terminal output, plain print, ...) by calling :meth:`UserNotifications.setup`.
Library code only calls ``user_notify.success``, ``fail``, ``info`` and ``warning``.

Example:
    .. code-block:: python

        from fnswarm.models.user_notifications import user_notify

        user_notify.setup(success_msg=print, fail_msg=print)
        user_notify.success("Function figlet deployed")
"""

from typing import Callable, Optional


def _silent(msg: str) -> None:
    pass


class UserNotifications:
    """ Dispatches user facing messages to configurable callbacks. """

    def __init__(self) -> None:
        self._success: Callable[[str], None] = _silent
        self._fail: Callable[[str], None] = _silent
        self._info: Callable[[str], None] = _silent
        self._warning: Callable[[str], None] = _silent

    def setup(self,
              success_msg: Optional[Callable[[str], None]] = None,
              fail_msg: Optional[Callable[[str], None]] = None,
              info_msg: Optional[Callable[[str], None]] = None,
              warning_msg: Optional[Callable[[str], None]] = None) -> None:
        """
        Configure the notification callbacks.

        Callbacks left to `None` discard their messages.
        """
        self._success = success_msg or _silent
        self._fail = fail_msg or _silent
        self._info = info_msg or _silent
        self._warning = warning_msg or _silent

    def success(self, msg: str) -> None:
        self._success(msg)

    def fail(self, msg: str) -> None:
        self._fail(msg)

    def info(self, msg: str) -> None:
        self._info(msg)

    def warning(self, msg: str) -> None:
        self._warning(msg)


user_notify = UserNotifications()
