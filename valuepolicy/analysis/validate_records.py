'''
Validate tabular records against value object types.

Each column named in the schema is checked cell by cell with the value
type's try_create(), so one bad cell never stops the rest of the frame from
being checked.

Usage (Python API):
  import pandas as pd
  from valuepolicy.analysis.validate_records import validate_records
  from valuepolicy.domain.values import Email, PostalCode

  df = pd.read_csv('customers.csv', dtype=str)
  violations = validate_records(df, {'email': Email, 'zip': PostalCode})
  violations.to_csv('violations.csv', index=False)
'''

from collections.abc import Mapping
from dataclasses import dataclass
import logging

import pandas as pd

from valuepolicy.domain.values import ValueObject

logger = logging.getLogger(__name__)

VIOLATION_COLUMNS = ['row', 'column', 'value', 'rule']

Schema = Mapping[str, type[ValueObject]]


@dataclass(frozen=True)
class ColumnCheck:
  '''
  Validation summary for one schema column.

  Attributes:
    column: Column name
    value_type: Name of the value type the column was checked against
    total: Number of cells checked
    invalid: Number of cells the value type rejected
    rules: Distinct violated rules, sorted
  '''
  column: str
  value_type: str
  total: int
  invalid: int = 0
  rules: tuple[str, ...] = ()

  @property
  def name(self) -> str:
    return f'{self.column}_valid'

  @property
  def ok(self) -> bool:
    return self.invalid == 0

  @property
  def details(self) -> str:
    if self.ok:
      return f'All {self.total} values valid'
    return f'{self.invalid} of {self.total} invalid: {list(self.rules)}'

  def __str__(self) -> str:
    status = '✓' if self.ok else '✗'
    return f'{status} {self.name} ({self.value_type}): {self.details}'


def _check_columns(df: pd.DataFrame, schema: Schema) -> None:
  missing = [c for c in schema if c not in df.columns]
  if missing:
    raise ValueError(f'Missing columns: {missing}')


def validate_records(df: pd.DataFrame, schema: Schema) -> pd.DataFrame:
  '''
  Find every cell that its value type rejects.

  Args:
    df: Records to validate
    schema: Column name -> value object type (e.g., {'zip': PostalCode})

  Returns:
    DataFrame with one row per violation and columns:
    - row: Index label of the offending record
    - column: Column name
    - value: The rejected raw value
    - rule: The violated rule

  Raises:
    ValueError: If a schema column is missing from df
  '''
  _check_columns(df, schema)

  violations = []
  for column, value_type in schema.items():
    for row, raw in df[column].items():
      result = value_type.try_create(raw)
      if result.ok:
        continue
      violations.append({
          'row': row,
          'column': column,
          'value': raw,
          'rule': result.error.rule,
      })

  logger.debug('Validated %d rows, %d violations', len(df), len(violations))
  return pd.DataFrame(violations, columns=VIOLATION_COLUMNS)


def summarize_checks(df: pd.DataFrame, schema: Schema) -> list[ColumnCheck]:
  '''
  One ColumnCheck per schema column, in schema order.

  Raises:
    ValueError: If a schema column is missing from df
  '''
  violations = validate_records(df, schema)

  results: list[ColumnCheck] = []
  for column, value_type in schema.items():
    rules = violations.loc[violations['column'] == column, 'rule']
    results.append(ColumnCheck(
        column=column,
        value_type=value_type.__name__,
        total=len(df),
        invalid=len(rules),
        rules=tuple(sorted(set(rules))),
    ))
  return results
