"""State runner contract and reference implementation"""

from .state_runner import StateIO, StateRunner, next_issue_id

__all__ = ["StateIO", "StateRunner", "next_issue_id"]
