"""
Domain errors

Every error raised by the automata carries a stable code, a readable
message and a details dict so callers can log or report it uniformly.
"""

from typing import Optional


class AutomataError(Exception):
    """Base class for automata errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NoTargetError(AutomataError):
    """An animation is registered for the firing transition but no render target is bound"""
    def __init__(self, before: int, after: int):
        super().__init__(
            code="NO_TARGET",
            message=f"No render target bound for animated transition {before} → {after}",
            details={"before": before, "after": after}
        )


class ConfigError(AutomataError):
    """Automata configuration file is missing, malformed or inconsistent"""
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            code="INVALID_CONFIG",
            message=message,
            details=details
        )


class AnimationNotFoundError(AutomataError):
    """Animation name is not registered in the AnimationManager"""
    def __init__(self, name: str):
        super().__init__(
            code="ANIMATION_NOT_FOUND",
            message=f"Animation '{name}' not found",
            details={"animation": name}
        )
