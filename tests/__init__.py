"""
Test suite for btc-amount

tests/unit/ : unit тесты парсера, форматирования, маршалинга,
Pydantic поля, JSON Schema контракта и настройки логирования
"""
