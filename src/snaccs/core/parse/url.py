"""
URL parsers — website normalization & domain extraction

parse_website добавляет схему к "голому" адресу, parse_domain извлекает
хост из абсолютного URL. Обе функции тотальны: некорректный ввод даёт
"" / None, но не исключение.

Типичная связка для проверки домена: parse_domain(parse_website(value)).
"""

from typing import Final
from urllib.parse import urlsplit

SCHEME_SEPARATOR: Final[str] = "://"
DEFAULT_SCHEME: Final[str] = "http"
WWW_LABEL: Final[str] = "www."


def split_scheme(value: str) -> tuple[str, str] | None:
    """
    Разбор "scheme://rest".

    Схема по RFC 3986: буква, затем буквы/цифры/"+"/"-"/".".

    Returns:
        (scheme, rest) или None, если схемы нет
    """
    scheme, sep, rest = value.partition(SCHEME_SEPARATOR)
    if not sep or not scheme:
        return None
    if not (scheme[0].isascii() and scheme[0].isalpha()):
        return None
    if any(not (ch.isascii() and (ch.isalnum() or ch in "+-.")) for ch in scheme):
        return None
    return scheme, rest


def parse_website(website: str | None) -> str | None:
    """
    Нормализация адреса сайта: гарантирует наличие схемы.

    - Уже со схемой (любой, включая ftp://) → без изменений
    - Схема без остатка ("http://") → ""
    - Иначе → "http://" + значение

    Корректность URL не проверяется: "---" → "http://---".

    Examples:
        >>> parse_website(" example.com ")
        'http://example.com'
        >>> parse_website("ftp://example.com")
        'ftp://example.com'
        >>> parse_website("http://")
        ''
    """
    if website is None:
        return None

    website = website.strip()
    if not website:
        return ""

    parts = split_scheme(website)
    if parts is not None:
        _, rest = parts
        return website if rest.strip() else ""

    return f"{DEFAULT_SCHEME}{SCHEME_SEPARATOR}{website}"


def parse_domain(url: str | None) -> str | None:
    """
    Домен (хост) абсолютного URL без ведущего "www.".

    Схемы не угадываются: "google.com" → None. Поддомены кроме "www."
    сохраняются, путь/порт/credentials и завершающая точка отбрасываются.

    Examples:
        >>> parse_domain("http://www.google.com")
        'google.com'
        >>> parse_domain("https://maps.google.com")
        'maps.google.com'
        >>> parse_domain("google.com") is None
        True
    """
    if url is None:
        return None

    url = url.strip()
    if split_scheme(url) is None:
        return None

    try:
        host = urlsplit(url).hostname
    except ValueError:
        # Например, незакрытый IPv6 литерал "http://[::1"
        return None

    # FQDN с завершающей точкой ("example.com.") сводится к обычной форме
    host = (host or "").rstrip(".")
    if not host:
        return None

    if host.startswith(WWW_LABEL) and len(host) > len(WWW_LABEL):
        host = host[len(WWW_LABEL):]

    return host
