"""
Исключения для форматтеров.

Парсеры тотальны и никогда не бросают исключений на некорректный ввод.
Форматтеры требуют валидированный ввод и падают сразу (fail fast):
это сигнал ошибки программиста, а не recoverable runtime condition.
"""


class InvalidArgument(ValueError):
    """
    Нарушено предусловие форматтера.

    Примеры: отрицательное количество байт, нецелая сумма в центах,
    длина телефона не совпадает с шаблоном страны.
    """

    pass


class UnsupportedCountry(InvalidArgument):
    """Код страны отсутствует в таблице телефонных форматов."""

    def __init__(self, country: str):
        self.country = country
        super().__init__(f"Unsupported country code for phone formatting: {country!r}")
