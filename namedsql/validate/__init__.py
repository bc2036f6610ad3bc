"""namedsql validation layer: supplied parameters vs. compiled placeholders."""
from namedsql.validate.validator import ParameterValidator, validate_and_order

__all__ = ["ParameterValidator", "validate_and_order"]
