import pandas as pd
import pytest

from valuepolicy.dispatch.presets import DiscountCalculator
from valuepolicy.domain.identifiers import SequentialIdGenerator


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
  """Deterministic identifier source."""
  return SequentialIdGenerator(prefix='cust-')


@pytest.fixture
def calculator() -> DiscountCalculator:
  """DiscountCalculator over the registered discount policies."""
  return DiscountCalculator()


@pytest.fixture
def call_log() -> list[str]:
  """Shared list recording the order behaviors ran in."""
  return []


@pytest.fixture
def sample_purchases() -> pd.DataFrame:
  """Purchases covering both tiers of both customer types plus bad rows."""
  return pd.DataFrame({
      'customer_type': ['regular', 'regular', 'vip', 'vip', 'gold', 'vip'],
      'purchase_amount': ['120', '50', '600', '500', '100', '-0.01'],
  })


@pytest.fixture
def customer_records() -> pd.DataFrame:
  """Customer records with a few invalid cells."""
  return pd.DataFrame({
      'street': ['123 Main St', '', '9 Elm Rd'],
      'postal_code': ['10001', '1234', '90210'],
      'phone': ['1234567890', '12345', '0987654321'],
      'email': ['a@example.com', 'b@example.com', 'not-an-email'],
  })
