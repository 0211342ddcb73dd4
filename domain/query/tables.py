"""Group summary table generation."""

from collections.abc import Mapping, Sequence
from pathlib import Path

import pandas as pd

from domain.taxonomy.models import Item

VALUE_COL = "Value"
COUNT_COL = "Item count"
SHARE_COL = "Share of items (%)"
NAMES_COL = "Items"


def group_summary_table(groups: Mapping[str, Sequence[Item]], dimension: str) -> pd.DataFrame:
    """
    Build a one-row-per-bucket summary of a grouped view.

    Columns in the result:
      - Dimension: the grouped facet dimension
      - Value: bucket key (``UNGROUPED`` for items without the facet)
      - Item count: number of items in the bucket
      - Share of items (%): bucket size relative to the distinct items grouped
      - Items: item names joined with "; "

    Shares can add up to more than 100 because multi-valued items sit in several buckets.

    Args:
        groups: Output of group_by (bucket order is preserved)
        dimension: Name of the grouped dimension

    Returns:
        DataFrame in bucket order
    """
    distinct = {id(item) for members in groups.values() for item in members}
    total = len(distinct)

    rows: list[dict[str, object]] = []
    for value, members in groups.items():
        count = len(members)
        rows.append(
            {
                "Dimension": dimension,
                VALUE_COL: value,
                COUNT_COL: count,
                SHARE_COL: round(count / total * 100.0, 2) if total > 0 else float("nan"),
                NAMES_COL: "; ".join(item.name for item in members),
            }
        )

    return pd.DataFrame(rows, columns=["Dimension", VALUE_COL, COUNT_COL, SHARE_COL, NAMES_COL])


def group_summary_table_and_save(
    groups: Mapping[str, Sequence[Item]],
    dimension: str,
    output_path: Path,
) -> Path:
    """Compute the group summary table and save it as CSV. Returns the written path."""
    table = group_summary_table(groups, dimension)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    table.to_csv(output_path, index=False)
    return output_path

