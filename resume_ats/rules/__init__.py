from .structural import (
    ACTION_VERBS,
    RULES,
    RuleResult,
    evaluate_rule_results,
    evaluate_rules,
    has_action_verb,
)

__all__ = [
    "ACTION_VERBS",
    "RULES",
    "RuleResult",
    "evaluate_rule_results",
    "evaluate_rules",
    "has_action_verb",
]
