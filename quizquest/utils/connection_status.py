# quizquest/utils/connection_status.py

import enum
from typing import Dict, Set


class ConnectionStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# approved and rejected are terminal
ALLOWED_TRANSITIONS: Dict[ConnectionStatus, Set[ConnectionStatus]] = {
    ConnectionStatus.PENDING: {ConnectionStatus.APPROVED, ConnectionStatus.REJECTED},
    ConnectionStatus.APPROVED: set(),
    ConnectionStatus.REJECTED: set(),
}


class InvalidTransition(ValueError):
    def __init__(self, current: ConnectionStatus, target: ConnectionStatus):
        self.current = current
        self.target = target
        super().__init__(f"Cannot change a {current.value} connection to {target.value}")


def transition(current: str, target: str) -> ConnectionStatus:
    """Return the new status, or raise InvalidTransition if `current` cannot move to `target`."""
    current_status = ConnectionStatus(current)
    target_status = ConnectionStatus(target)
    if target_status not in ALLOWED_TRANSITIONS[current_status]:
        raise InvalidTransition(current_status, target_status)
    return target_status


def is_terminal(status: str) -> bool:
    return not ALLOWED_TRANSITIONS[ConnectionStatus(status)]
