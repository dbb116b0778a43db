"""Comparison operators accepted by value predicates."""

# Builder name -> SQL operator
COMPARISON_OPERATORS: dict[str, str] = {
    "eq": "=",
    "neq": "<>",
    "lt": "<",
    "lte": "<=",
    "gt": ">",
    "gte": ">=",
}

# Every binary operator a caller may pass to value_compare directly
SUPPORTED_OPERATORS: frozenset[str] = frozenset(
    [*COMPARISON_OPERATORS.values(), "!=", "LIKE", "NOT LIKE"]
)
