"""
Мелкие хелперы для входных данных.
"""

from typing import Any, Optional


def blank_to_none(value: Any) -> Optional[Any]:
    """Пустые/ложные значения необязательных ссылок -> None."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
    return value or None


def normalize_email(email: str) -> str:
    """Email в нижнем регистре без пробелов по краям."""
    return (email or "").strip().lower()
