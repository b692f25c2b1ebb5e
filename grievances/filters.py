"""
Filter query builder for the submissions list.

Criteria are collected as a tagged list of ``Criterion(field, operator, value)``
and compiled into Django ``Q`` objects. The ORM binds every value as a query
parameter, so nothing supplied by the caller ends up in the SQL text.
"""

from collections import namedtuple
from functools import reduce
import operator as op

from django.db.models import Q

EQUALITY_FIELDS = ("type", "status", "category", "department", "taluk", "firka", "village")
SEARCH_FIELDS = ("id", "description")

EXACT = "exact"
CONTAINS_ANY = "contains_any"

Criterion = namedtuple("Criterion", ["field", "operator", "value"])


def build_criteria(params) -> list:
    """
    Turn request-style parameters into a list of criteria.

    Unknown keys are ignored, as are empty values. ``q`` becomes a single
    case-insensitive substring criterion over id and description.
    """
    criteria = []
    for field in EQUALITY_FIELDS:
        value = params.get(field)
        if value:
            criteria.append(Criterion(field, EXACT, value))

    term = params.get("q")
    if term:
        criteria.append(Criterion(SEARCH_FIELDS, CONTAINS_ANY, term))
    return criteria


def _compile_one(criterion: Criterion) -> Q:
    if criterion.operator == EXACT:
        return Q(**{criterion.field: criterion.value})
    if criterion.operator == CONTAINS_ANY:
        clauses = [Q(**{f"{field}__icontains": criterion.value}) for field in criterion.field]
        return reduce(op.or_, clauses)
    raise ValueError(f"Unsupported filter operator: {criterion.operator}")


def compile_criteria(criteria) -> Q:
    """AND all criteria together. An empty list matches everything."""
    return reduce(op.and_, (_compile_one(c) for c in criteria), Q())
