"""Record types for fuel economy observations."""

from typing import Iterable, NamedTuple

import pandas as pd

PREDICTOR_COLUMN = "DISPL"
CATEGORY_COLUMN = "CYL"
RESPONSE_COLUMN = "HWY"
YEAR_COLUMN = "YEAR"
DERIVED_COLUMN = "DISPL_SQ"

RECORD_COLUMNS = [PREDICTOR_COLUMN, CATEGORY_COLUMN, RESPONSE_COLUMN, YEAR_COLUMN]


class Record(NamedTuple):
    """
    One vehicle observation.

    Attributes:
        predictor: Engine displacement in litres
        category: Number of cylinders (descriptive only)
        response: Highway fuel economy in miles per gallon
        year: Model year, used to partition the data
    """

    predictor: float
    category: int
    response: float
    year: int


def make_record_set(records: Iterable[Record]) -> pd.DataFrame:
    """
    Build a record set from an iterable of `Record`.

    Args:
        records: Iterable of `Record` instances

    Returns:
        `pandas.DataFrame` with columns DISPL, CYL, HWY and YEAR, one row per
        record in input order.
    """
    rows = [tuple(r) for r in records]
    df = pd.DataFrame(rows, columns=RECORD_COLUMNS)
    return df.astype(
        {
            PREDICTOR_COLUMN: float,
            CATEGORY_COLUMN: int,
            RESPONSE_COLUMN: float,
            YEAR_COLUMN: int,
        }
    )


def iter_records(df: pd.DataFrame):
    """Yield the rows of a record set as `Record` instances."""
    for row in df[RECORD_COLUMNS].itertuples(index=False, name=None):
        yield Record(float(row[0]), int(row[1]), float(row[2]), int(row[3]))
