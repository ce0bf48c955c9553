# Re-export recurrence rules and combinators
from .recur import Recurrence
from .rule import Rule, RuleKind
from .until import Until

__all__ = ["Recurrence", "Rule", "RuleKind", "Until"]
