"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import AssignorRepository, PayableRepository
    from src.domain.protocols import PasswordHashingProtocol, TokenGenerationProtocol
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.assignor_repository import AssignorRepository
from src.domain.protocols.payable_repository import PayableRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "AssignorRepository",
    "PayableRepository",
    "UserRepository",
]
