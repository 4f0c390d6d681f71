from recyclepro.rules.resolver import (
    SCOPE_PRECEDENCE,
    describe_disposal_method,
    describe_rule_scope,
    get_applicable_rule,
    resolve_disposal,
)

__all__ = [
    "SCOPE_PRECEDENCE",
    "describe_disposal_method",
    "describe_rule_scope",
    "get_applicable_rule",
    "resolve_disposal",
]
