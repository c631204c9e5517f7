"""Stacked force-disabling of enableable objects.

Several features may need to disable the same command or plugin at once.
Each of them registers its own reason; the object becomes enabled again
only when every reason has been removed::

    command.disable_reasons.add_disable_reason("MyFeature")
    command.disable_reasons.add_disable_reason("OtherFeature")
    command.disable_reasons.remove_disable_reason("MyFeature")
    command.is_enabled  # False
    command.disable_reasons.remove_disable_reason("OtherFeature")
    command.is_enabled  # True, or whatever command.refresh() decides

Owners keep the flag down while disabled by passing assigned values
through ``guard``::

    class Command:
        def __init__(self):
            self.disable_reasons = DisableReasons(self)
            self._is_enabled = True

        @property
        def is_enabled(self):
            return self._is_enabled

        @is_enabled.setter
        def is_enabled(self, value):
            self._is_enabled = self.disable_reasons.guard(value)
"""

from typing import Hashable, Protocol, Set, runtime_checkable

from editor_utils.logging import get_module_logger

logger = get_module_logger()


@runtime_checkable
class Enableable(Protocol):
    """Object exposing a writable ``is_enabled`` flag."""

    is_enabled: bool


@runtime_checkable
class Refreshable(Protocol):
    """Object able to recompute its own state."""

    def refresh(self) -> None: ...


class DisableReasons:
    """Set of reasons currently forcing an object to be disabled.

    Attributes:
        owner: The object whose ``is_enabled`` flag is managed.
    """

    def __init__(self, owner: Enableable):
        self.owner = owner
        self._reasons: Set[Hashable] = set()

    @property
    def is_disabled(self) -> bool:
        """True while at least one reason is registered."""
        return bool(self._reasons)

    def add_disable_reason(self, reason_id: Hashable) -> None:
        """Disable the owner for the given reason.

        Adding a reason that is already present is redundant.

        Args:
            reason_id: Unique identifier, e.g. a feature name. The same id
                must be used to remove the reason.
        """
        self._reasons.add(reason_id)

        if len(self._reasons) == 1:
            self.owner.is_enabled = False
            logger.debug(
                "force_disabled",
                owner=type(self.owner).__name__,
                reason=reason_id,
            )

    def remove_disable_reason(self, reason_id: Hashable) -> None:
        """Remove a reason previously added with ``add_disable_reason``.

        When the last reason is removed the owner is refreshed if it can
        be, otherwise it is enabled. Unknown ids are ignored.

        Args:
            reason_id: Identifier passed to ``add_disable_reason``.
        """
        if reason_id not in self._reasons:
            return

        self._reasons.discard(reason_id)
        if self._reasons:
            return

        logger.debug(
            "force_disabled_cleared",
            owner=type(self.owner).__name__,
            reason=reason_id,
        )
        if isinstance(self.owner, Refreshable):
            self.owner.refresh()
        else:
            self.owner.is_enabled = True

    def guard(self, value: bool) -> bool:
        """Filter a value assigned to the owner's ``is_enabled`` flag.

        Args:
            value: Requested flag value.

        Returns:
            False while any reason is registered, otherwise ``value``.
        """
        return bool(value) and not self._reasons

    def __contains__(self, reason_id: object) -> bool:
        return reason_id in self._reasons

    def __len__(self) -> int:
        return len(self._reasons)
