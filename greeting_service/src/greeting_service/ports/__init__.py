"""Ports layer - interface definitions following Hexagonal Architecture.

- Inbound ports: APIs offered to clients (SayHelloPort)
- Outbound ports: Dependencies on external systems (UserNameRepository)
"""

from greeting_service.ports.inbound import SayHelloPort
from greeting_service.ports.outbound import UserNameRepository, UserNotFoundError

__all__ = [
    # Inbound ports
    "SayHelloPort",
    # Outbound ports
    "UserNameRepository",
    "UserNotFoundError",
]
