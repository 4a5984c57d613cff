"""
Ядро btc-amount.

- math: int64 wrap, деление с усечением, степени десяти
- domain: Amount, парсер, форматирование, маршалинг
- contracts: JSON Schema контракт суммы
"""
