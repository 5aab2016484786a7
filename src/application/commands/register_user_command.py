"""
CQRS Command: RegisterUserCommand
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RegisterUserCommand:
    """Самостоятельная регистрация (investor / mijoz)."""

    email: str
    password: str
    full_name: str
    role: Optional[str] = None
