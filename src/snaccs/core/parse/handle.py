"""
Handle parser — canonical форма social handle

Распознаваемые формы ввода:
- "@name", " @ name "             → "name"
- "instagram.com/name/"           → "name"   (хост + путь: последний сегмент)
- "https://instagram.com/@name"   → "name"
- "twitter.com/#!name"            → "name"   (hash-bang fragment)

Всё остальное возвращается как есть после trim: "_legal.", "ferret papa".
Одиночный ведущий "/" без хоста сохраняется: "/name" → "/name".
"""

from typing import Final

from snaccs.core.parse.url import split_scheme

PATH_SEPARATOR: Final[str] = "/"
MENTION_MARKER: Final[str] = "@"
HASHBANG_MARKER: Final[str] = "#!"
QUERY_MARKER: Final[str] = "?"


def _last_path_segment(value: str) -> str:
    """
    Последний сегмент пути, если value похоже на хост/путь.

    "host/a/" → "a", "/a/b" → "b", "/a" → "/a" (нет хоста, один сегмент).
    Query string не входит в путь: "host/a?x=1" → "a".
    """
    if PATH_SEPARATOR not in value:
        return value

    path = value.partition(QUERY_MARKER)[0]
    trimmed = path.rstrip(PATH_SEPARATOR)
    segments = trimmed.split(PATH_SEPARATOR)

    has_host = bool(segments[0])
    if (has_host and len(segments) > 1) or len(segments) > 2:
        return segments[-1]

    return trimmed if has_host else value


def _drop_mention_tokens(value: str) -> str:
    """Удаление отдельно стоящих "@" (" @ name " → "name")."""
    tokens = value.split()
    if MENTION_MARKER not in tokens:
        return value
    return " ".join(token for token in tokens if token != MENTION_MARKER)


def parse_handle(value: str | None) -> str | None:
    """
    Нормализация social handle.

    Args:
        value: Handle, @mention или ссылка на профиль

    Returns:
        Canonical handle, "" для пустого ввода, None для None

    Examples:
        >>> parse_handle("@ferretpapa")
        'ferretpapa'
        >>> parse_handle("instagram.com/ferretpapa/")
        'ferretpapa'
        >>> parse_handle("/ferretpapa")
        '/ferretpapa'
    """
    if value is None:
        return None

    handle = value.strip()

    parts = split_scheme(handle)
    if parts is not None:
        handle = parts[1].partition(QUERY_MARKER)[0]

    handle = _last_path_segment(handle)
    handle = _drop_mention_tokens(handle)

    if handle.startswith(HASHBANG_MARKER):
        handle = handle[len(HASHBANG_MARKER):]
    if handle.startswith(MENTION_MARKER):
        handle = handle[len(MENTION_MARKER):]

    return handle.strip()
