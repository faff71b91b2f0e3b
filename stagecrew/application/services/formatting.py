"""Display helpers for user names and area/duty memberships."""

from typing import Iterable, Optional, Protocol

from stagecrew.domain.schemas.user import AreaMembership


class NamedUser(Protocol):
    name: Optional[str]
    surname: Optional[str]
    code: Optional[str]


def full_name(user: NamedUser) -> str:
    parts = [p.strip() for p in (user.name or "", user.surname or "") if p and p.strip()]
    return " ".join(parts) or user.code or "-"


def _abbreviated(user: NamedUser) -> str:
    name = (user.name or "").strip()
    surname = (user.surname or "").strip()
    if surname:
        initial = name[:1].upper()
        return f"{initial}. {surname}" if initial else surname
    return name or user.code or "-"


def _name_key(user: NamedUser) -> tuple[str, str]:
    return ((user.surname or "").strip().lower(), (user.name or "").strip()[:1].upper())


def format_user_name(user: NamedUser, context: Iterable[NamedUser]) -> str:
    """'L. Rossi', or the full name when the context holds two or more 'L. Rossi'."""
    if not user.name and not user.surname:
        return user.code or "-"

    key = _name_key(user)
    if key[0] and key[1]:
        clashes = sum(1 for other in context if _name_key(other) == key)
        if clashes >= 2:
            return full_name(user)
    return _abbreviated(user)


def format_area_duties(memberships: Iterable[AreaMembership]) -> str:
    chunks = [f"{m.area}: {', '.join(m.duties)}" for m in memberships if m.duties]
    return " | ".join(chunks) if chunks else "-"
