"""
FormattingConfig — Конфигурация форматтеров

Immutable Pydantic модели с параметрами форматирования денег, размеров
и телефонов. Конфигурация разрешается один раз (обычно при старте процесса)
и передаётся в каждый вызов форматтера как read-only параметр.
Core никогда не мутирует конфигурацию и не держит глобального состояния,
кроме неизменяемого DEFAULT_CONFIG.

Источник конфигурации: вложенный mapping

    {
        "money": {"currency_symbol": "€", "negative_prefix": "(", ...},
        "bytes": {"units": ["b", "kb", ...], "separator": " "},
        "phone": {"default_country": "US", "formats": {"DE": {...}}},
    }

Отсутствующие ключи заменяются значениями по умолчанию. Записи
phone.formats сливаются с встроенной таблицей по ключу страны.
"""

import copy
import functools
import json
from enum import Enum
from typing import Any, Dict, Final, Mapping, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from snaccs.core.contracts import validate_formatting_config
from snaccs.infrastructure.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# DEFAULTS
# =============================================================================

# Символ-заполнитель в телефонном шаблоне (одна позиция canonical значения)
PHONE_TEMPLATE_SLOT: Final[str] = "X"

# Страна по умолчанию (North American Numbering Plan)
DEFAULT_COUNTRY: Final[str] = "US"

# Таблица единиц от меньшей к большей, шаг 1024
DEFAULT_BYTE_UNITS: Final[Tuple[str, ...]] = ("b", "kb", "MB", "GB", "TB", "PB")

# Встроенные телефонные форматы по ISO коду страны
DEFAULT_PHONE_FORMATS: Final[Dict[str, Dict[str, str]]] = {
    "US": {"calling_code": "1", "template": "(XXX) XXX-XXXX"},
    "CA": {"calling_code": "1", "template": "(XXX) XXX-XXXX"},
    "DE": {"calling_code": "49", "template": "+49 XXXX XXXX"},
    "GB": {"calling_code": "44", "template": "+44 XXXX XXXXXX"},
    "FR": {"calling_code": "33", "template": "+33 X XX XX XX XX"},
    "MX": {"calling_code": "52", "template": "+52 XX XXXX XXXX"},
}


# =============================================================================
# ENUMS
# =============================================================================


class CurrencyPosition(str, Enum):
    """Положение символа валюты относительно суммы"""

    BEFORE = "before"
    AFTER = "after"


# =============================================================================
# NESTED MODELS
# =============================================================================


class MoneySettings(BaseModel):
    """Параметры format_money."""

    currency_symbol: str = Field("$", description="Символ валюты")
    currency_position: CurrencyPosition = Field(
        CurrencyPosition.BEFORE, description="Символ до или после суммы"
    )
    negative_prefix: str = Field("-", description="Префикс отрицательной суммы")
    negative_suffix: str = Field("", description="Суффикс отрицательной суммы")
    show_zero_cents: bool = Field(True, description="Показывать '.00' для целых сумм")
    decimal_separator: str = Field(".", min_length=1, description="Десятичный разделитель")
    thousands_separator: str = Field(",", description="Разделитель групп разрядов")

    model_config = {"frozen": True}


class ByteSettings(BaseModel):
    """Параметры format_bytes."""

    units: Tuple[str, ...] = Field(
        DEFAULT_BYTE_UNITS, min_length=1, description="Метки единиц от меньшей к большей (шаг 1024)"
    )
    separator: str = Field(" ", description="Разделитель между числом и меткой")

    model_config = {"frozen": True}

    @field_validator("units")
    @classmethod
    def validate_units_not_blank(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Пустая метка единицы недопустима"""
        if any(not label for label in v):
            raise ValueError("byte unit labels must be non-empty")
        return v


class PhoneCountryFormat(BaseModel):
    """
    Формат телефона одной страны.

    template: каждая позиция 'X' заменяется одним символом canonical номера.
    calling_code: международный код; снимается с начала номера,
    если номер ровно на его длину длиннее шаблона.
    """

    calling_code: str = Field(..., pattern=r"^[0-9]{1,3}$", description="Международный код")
    template: str = Field(..., min_length=1, description="Шаблон отображения")

    model_config = {"frozen": True}

    @field_validator("template")
    @classmethod
    def validate_template_has_slots(cls, v: str) -> str:
        if PHONE_TEMPLATE_SLOT not in v:
            raise ValueError(f"phone template {v!r} has no '{PHONE_TEMPLATE_SLOT}' slots")
        return v

    @property
    def slots(self) -> int:
        """Количество позиций в шаблоне"""
        return self.template.count(PHONE_TEMPLATE_SLOT)


class PhoneSettings(BaseModel):
    """Параметры format_phone."""

    default_country: str = Field(DEFAULT_COUNTRY, description="ISO код страны по умолчанию")
    formats: Dict[str, PhoneCountryFormat] = Field(
        default_factory=lambda: {
            code: PhoneCountryFormat(**entry) for code, entry in DEFAULT_PHONE_FORMATS.items()
        },
        description="Телефонные форматы по ISO коду страны",
    )

    model_config = {"frozen": True}

    @field_validator("default_country")
    @classmethod
    def normalize_default_country(cls, v: str) -> str:
        return v.upper()

    @field_validator("formats")
    @classmethod
    def normalize_country_keys(cls, v: Dict[str, PhoneCountryFormat]) -> Dict[str, PhoneCountryFormat]:
        return {code.upper(): fmt for code, fmt in v.items()}

    @model_validator(mode="after")
    def validate_default_country_known(self) -> "PhoneSettings":
        """Страна по умолчанию обязана присутствовать в таблице"""
        if self.default_country not in self.formats:
            raise ValueError(
                f"default_country {self.default_country!r} missing from phone formats"
            )
        return self

    def format_for(self, country: str | None) -> PhoneCountryFormat | None:
        """
        Формат для страны (None → default_country).

        Returns:
            PhoneCountryFormat или None, если страна неизвестна
        """
        code = (country or self.default_country).upper()
        return self.formats.get(code)


# =============================================================================
# FORMATTING CONFIG
# =============================================================================


class FormattingConfig(BaseModel):
    """
    Полная конфигурация форматтеров.

    Immutable модель (frozen=True). Создаётся через resolve_config()
    или напрямую с секциями MoneySettings / ByteSettings / PhoneSettings.
    """

    money: MoneySettings = Field(default_factory=MoneySettings)
    bytes: ByteSettings = Field(default_factory=ByteSettings)
    phone: PhoneSettings = Field(default_factory=PhoneSettings)

    model_config = {"frozen": True}


DEFAULT_CONFIG: Final[FormattingConfig] = FormattingConfig()

# Количество разных raw mapping, для которых кэшируется resolve_config
CONFIG_CACHE_SIZE: Final[int] = 32


# =============================================================================
# RESOLUTION
# =============================================================================


def _plain(value: Any) -> Any:
    """Копия mapping/sequence в dict/list (jsonschema проверяет только dict/list)."""
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _merge_phone_formats(overrides: Mapping[str, Mapping[str, str]]) -> Dict[str, Dict[str, str]]:
    merged = copy.deepcopy(DEFAULT_PHONE_FORMATS)
    for code, entry in overrides.items():
        code = code.upper()
        merged[code] = {**merged.get(code, {}), **entry}
    return merged


def resolve_config(source: Mapping[str, Any] | None = None) -> FormattingConfig:
    """
    Построение FormattingConfig из сырого mapping.

    Args:
        source: Вложенный mapping (money / bytes / phone) или None

    Returns:
        Immutable FormattingConfig (DEFAULT_CONFIG при пустом source)

    Raises:
        jsonschema.ValidationError: Неизвестные ключи или неверные типы
        pydantic.ValidationError: Нарушены инварианты модели
            (шаблон без слотов, default_country вне таблицы и т.п.)
    """
    if not source:
        return DEFAULT_CONFIG

    data = _plain(source)
    validate_formatting_config(data)

    phone = data.get("phone")
    if phone and "formats" in phone:
        phone["formats"] = _merge_phone_formats(phone["formats"])

    config = FormattingConfig.model_validate(data)
    logger.debug("Resolved formatting config sections: %s", sorted(data))
    return config


def ensure_config(config: FormattingConfig | Mapping[str, Any] | None) -> FormattingConfig:
    """
    Приведение параметра config форматтера к FormattingConfig.

    None → DEFAULT_CONFIG, FormattingConfig → как есть, mapping → resolve_config().
    Результат для mapping кэшируется по его JSON представлению.
    """
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, FormattingConfig):
        return config

    data = _plain(config)
    try:
        key = json.dumps(data, sort_keys=True, ensure_ascii=False)
    except TypeError:
        # Не-JSON значения: resolve_config отклонит их по схеме
        return resolve_config(data)
    return _resolve_cached(key)


@functools.lru_cache(maxsize=CONFIG_CACHE_SIZE)
def _resolve_cached(key: str) -> FormattingConfig:
    return resolve_config(json.loads(key))
