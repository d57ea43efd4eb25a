'''
Batch discount computation for many purchases.

This module provides tools to:
1. Compute discounts for a table of purchases in one call
2. Keep going past bad rows, reporting them in an error column
3. Export results to CSV for further analysis

Usage (CLI):
  python -m valuepolicy.analysis.batch_discount \
    --input purchases.csv \
    --output discounts.csv \
    -v

Usage (Python API):
  from valuepolicy.analysis.batch_discount import batch_discounts

  df = batch_discounts([
    {'customer_type': 'regular', 'purchase_amount': 120},
    {'customer_type': 'vip', 'purchase_amount': 600},
  ])
  df.to_csv('discounts.csv', index=False)
'''

import argparse
from collections.abc import Iterable, Mapping
import logging
from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd

from valuepolicy.dispatch.presets import DiscountCalculator
from valuepolicy.domain.errors import PolicyError
from valuepolicy.domain.types import CustomerType

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ['customer_type', 'purchase_amount']
RESULT_COLUMNS = [
    'customer_type', 'purchase_amount', 'discount', 'discount_method', 'error'
]


def _to_frame(
    purchases: Union[pd.DataFrame, Iterable[Mapping[str, Any]]]
) -> pd.DataFrame:
  if isinstance(purchases, pd.DataFrame):
    return purchases
  return pd.DataFrame(list(purchases))


def batch_discounts(
    purchases: Union[pd.DataFrame, Iterable[Mapping[str, Any]]],
    calculator: Optional[DiscountCalculator] = None,
    verbose: bool = False,
) -> pd.DataFrame:
  '''
  Compute the discount for every purchase.

  Args:
    purchases: DataFrame or records with customer_type and purchase_amount
    calculator: DiscountCalculator to use (default: registered policies)
    verbose: Log every row

  Returns:
    DataFrame with columns:
    - customer_type: Customer type as given
    - purchase_amount: Purchase amount as given
    - discount: Discount (None if the row failed)
    - discount_method: Policy that produced the discount
    - error: Reason the row failed (None if it succeeded)

  Raises:
    ValueError: If a required column is missing
  '''
  frame = _to_frame(purchases)
  missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
  if missing:
    raise ValueError(f'Missing required columns: {missing}')

  calculator = calculator or DiscountCalculator()
  rows = []

  for i, record in enumerate(frame[REQUIRED_COLUMNS].to_dict('records'), 1):
    row: dict[str, Any] = {
        'customer_type': record['customer_type'],
        'purchase_amount': record['purchase_amount'],
        'discount': None,
        'discount_method': None,
        'error': None,
    }

    customer_type = record['customer_type']
    try:
      if isinstance(customer_type, str):
        customer_type = CustomerType.from_string(customer_type)
      result = calculator.dispatch(customer_type, record['purchase_amount'])
    except PolicyError as e:
      logger.warning('Row %d failed: %s', i, e)
      row['error'] = str(e)
    else:
      row['discount'] = result.value
      row['discount_method'] = result.diag.get('discount_method')
      if verbose:
        logger.info('[%d/%d] %s %s -> %s', i, len(frame),
                    row['customer_type'], row['purchase_amount'],
                    result.value)

    rows.append(row)

  return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def main() -> None:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(
      description='Compute discounts for a CSV of purchases')
  parser.add_argument('--input',
                      type=Path,
                      required=True,
                      help='CSV with customer_type and purchase_amount')
  parser.add_argument('--output',
                      type=Path,
                      default=None,
                      help='Output CSV (default: print summary only)')
  parser.add_argument('-v', '--verbose', action='store_true')
  args = parser.parse_args()

  purchases = pd.read_csv(args.input, dtype={'purchase_amount': str})
  df = batch_discounts(purchases, verbose=args.verbose)

  failed = df['error'].notna().sum()
  logger.info('Processed %d purchases, %d failed', len(df), failed)

  if args.output:
    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)
    logger.info('Saved to %s', args.output)


if __name__ == '__main__':
  logging.basicConfig(
      level=logging.INFO,
      format='%(message)s',
  )
  main()
