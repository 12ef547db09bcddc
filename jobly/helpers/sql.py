"""
SQL helpers shared by the crud modules.
"""

from typing import Any, List, Mapping, NamedTuple, Optional

from jobly.core.exceptions import BadRequestError


class PartialUpdate(NamedTuple):
    """SET clause plus the values bound to its placeholders."""
    set_cols: str
    values: List[Any]


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Optional[Mapping[str, str]] = None,
) -> PartialUpdate:
    """
    Build the SET clause of a partial UPDATE.

    Field names not present in js_to_sql are used verbatim as column names.
    Placeholders are numbered from $1 in the iteration order of data_to_update,
    so a caller can bind its WHERE value as ${len(values) + 1}.

    {"firstName": "Aliya", "age": 32} with {"firstName": "first_name"}
        => '"first_name"=$1, "age"=$2', ["Aliya", 32]

    Raises:
        BadRequestError: If data_to_update is empty
    """
    keys = list(data_to_update)
    if not keys:
        raise BadRequestError("No data")

    js_to_sql = js_to_sql or {}
    cols = [f'"{js_to_sql.get(key) or key}"=${idx}' for idx, key in enumerate(keys, start=1)]

    return PartialUpdate(
        set_cols=", ".join(cols),
        values=[data_to_update[key] for key in keys],
    )
