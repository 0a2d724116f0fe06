"""SQL fragment builders for partial updates and filtered searches.

All builders are pure: they turn a sparse mapping of external (camelCase)
field names into SQL fragments with ``$1``-style positional placeholders and a
matching list of values. Placeholders are numbered in the mapping's iteration
order, which for ``dict`` is insertion order.
"""

from __future__ import annotations

from typing import Any, Mapping, NamedTuple

from jobly.errors import BadRequestError


class PartialUpdate(NamedTuple):
    """Assignments for an UPDATE's SET clause plus their bound values."""

    assignments: list[str]
    values: list[Any]

    @property
    def set_cols(self) -> str:
        return ", ".join(self.assignments)


class FilterQuery(NamedTuple):
    """Predicates for a WHERE clause plus their bound values."""

    predicates: list[str]
    values: list[Any]

    @property
    def where(self) -> str:
        return " AND ".join(self.predicates)


def sql_for_partial_update(data: Mapping[str, Any], js_to_sql: Mapping[str, str]) -> PartialUpdate:
    """
    Build the SET clause of a partial UPDATE.

    Args:
        data: Field name -> new value, only the fields being changed
        js_to_sql: Field name -> column name; fields missing here keep their name

    Returns:
        PartialUpdate with one ``"column"=$N`` assignment per field

    Raises:
        BadRequestError: If ``data`` is empty

    Examples:
        >>> update = sql_for_partial_update(
        ...     {"name": "Acme", "numEmployees": 12}, {"numEmployees": "num_employees"}
        ... )
        >>> update.set_cols
        '"name"=$1, "num_employees"=$2'
        >>> update.values
        ['Acme', 12]
    """
    if not data:
        raise BadRequestError("No data")

    assignments = [
        f'"{js_to_sql.get(field, field)}"=${idx}' for idx, field in enumerate(data, start=1)
    ]
    return PartialUpdate(assignments, list(data.values()))


def _as_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise BadRequestError(f"{key} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise BadRequestError(f"{key} must be an integer") from exc


def sql_for_company_filter(search_data: Mapping[str, Any]) -> FilterQuery:
    """
    Build the WHERE predicate for a company search.

    Supported keys: ``nameLike`` (case-insensitive partial match),
    ``minEmployees`` and ``maxEmployees`` (inclusive bounds).

    Raises:
        BadRequestError: On an empty mapping, an unsupported key or a
            non-integer employee bound

    Examples:
        >>> query = sql_for_company_filter({"nameLike": "net", "maxEmployees": 500})
        >>> query.where
        'name ILIKE $1 AND num_employees <= $2'
        >>> query.values
        ['%net%', 500]
    """
    if not search_data:
        raise BadRequestError("No data")

    predicates: list[str] = []
    values: list[Any] = []
    for key, value in search_data.items():
        idx = len(values) + 1
        if key == "nameLike":
            predicates.append(f"name ILIKE ${idx}")
            values.append(f"%{value}%")
        elif key == "minEmployees":
            predicates.append(f"num_employees >= ${idx}")
            values.append(_as_int(key, value))
        elif key == "maxEmployees":
            predicates.append(f"num_employees <= ${idx}")
            values.append(_as_int(key, value))
        else:
            raise BadRequestError(f"Bad Key: {key}")

    return FilterQuery(predicates, values)


def sql_for_job_filter(search_data: Mapping[str, Any]) -> FilterQuery:
    """
    Build the WHERE predicate for a job search.

    Supported keys: ``title`` (case-insensitive partial match), ``minSalary``
    (inclusive bound) and ``hasEquity``. Only ``True`` (or the string
    ``"true"``) for ``hasEquity`` adds ``equity > 0``; any other value adds
    nothing, so "no equity" cannot be requested.

    Raises:
        BadRequestError: On an empty mapping, an unsupported key, a
            non-integer salary, or when no predicate results

    Examples:
        >>> query = sql_for_job_filter({"title": "dev", "hasEquity": True})
        >>> query.where
        'title ILIKE $1 AND equity > $2'
        >>> query.values
        ['%dev%', 0]
    """
    if not search_data:
        raise BadRequestError("No data")

    predicates: list[str] = []
    values: list[Any] = []
    for key, value in search_data.items():
        idx = len(values) + 1
        if key == "title":
            predicates.append(f"title ILIKE ${idx}")
            values.append(f"%{value}%")
        elif key == "minSalary":
            predicates.append(f"salary >= ${idx}")
            values.append(_as_int(key, value))
        elif key == "hasEquity":
            if value is True or value == "true":
                predicates.append(f"equity > ${idx}")
                values.append(0)
        else:
            raise BadRequestError(f"Bad Key: {key}")

    if not predicates:
        raise BadRequestError("No filter criteria to apply")

    return FilterQuery(predicates, values)
