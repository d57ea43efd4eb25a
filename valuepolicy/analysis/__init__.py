'''
Batch analysis utilities.

Note: To avoid RuntimeWarning when using -m flag, import directly:
  from valuepolicy.analysis.batch_discount import batch_discounts
  from valuepolicy.analysis.validate_records import validate_records
'''
