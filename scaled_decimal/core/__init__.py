"""
Core: численные примитивы и decimal-типы.

Модули не зависят от внешних систем; единственная внешняя зависимость —
pydantic (конфигурация типов и поля моделей).
"""
