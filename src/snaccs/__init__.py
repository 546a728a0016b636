"""
snaccs — text formatting & normalization helpers.

Чистые функции форматирования (ordinal, money, bytes, phone) и нормализации
пользовательского ввода (phone, domain, handle, website) для фреймворковых
адаптеров: model casts, validation rules, display templates.
"""

__version__ = "0.1.0"
