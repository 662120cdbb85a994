"""Privilege checker for platforms without an elevation model."""


class NullPrivilegeChecker:
    """PrivilegeChecker that never reports elevation."""

    def is_elevated(self) -> bool:
        """Always False: the platform has no elevated token state."""
        return False
