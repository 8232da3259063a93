from nestyle.validation.rules import ALL_RULES
from nestyle.validation.validator import RuleFunc, lint

__all__ = ["ALL_RULES", "RuleFunc", "lint"]
