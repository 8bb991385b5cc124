"""
Contract Validation Module

Валидация JSON представлений десятичных значений по JSON Schema контрактам.
"""

from .validators import ContractValidator, SchemaLoader, schema_for_json

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "schema_for_json",
]
