"""
Core: таблица символов, кодек и модель значения римского числа.

Без внешних систем, без состояния, без I/O.
"""
