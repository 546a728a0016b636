"""
Contract Validation Module

Валидация сырой конфигурации форматирования (mapping) по JSON Schema.
"""

from .validators import (
    ContractValidator,
    FormattingConfigValidator,
    SchemaLoader,
    validate_formatting_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FormattingConfigValidator",
    # Functions
    "validate_formatting_config",
]
