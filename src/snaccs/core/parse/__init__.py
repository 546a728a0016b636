"""
Parsers: свободный ввод → canonical форма.

Все парсеры тотальны: None → None, некорректный ввод нормализуется
в "" или возвращается без изменений, исключения не бросаются.
"""

from snaccs.core.parse.handle import parse_handle
from snaccs.core.parse.phone import NANP_NUMBER_LENGTH, NANP_TRUNK_PREFIX, parse_phone
from snaccs.core.parse.url import DEFAULT_SCHEME, parse_domain, parse_website, split_scheme

__all__ = [
    # Phone
    "NANP_NUMBER_LENGTH",
    "NANP_TRUNK_PREFIX",
    "parse_phone",
    # URL
    "DEFAULT_SCHEME",
    "parse_domain",
    "parse_website",
    "split_scheme",
    # Handle
    "parse_handle",
]
