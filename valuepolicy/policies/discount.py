"""
Discount policies.

These policies compute the flat discount granted on a purchase. Which policy
applies is decided by the customer category (see dispatch/registry.py).
"""

from abc import ABC
from abc import abstractmethod
from decimal import Decimal
from typing import Union

from valuepolicy.domain.types import PolicyOutput
from valuepolicy.domain.values import Money

Amount = Union[Money, Decimal, int, float, str]


def as_money(amount: Amount) -> Money:
  """Coerce a raw purchase amount to Money (validating it)."""
  if isinstance(amount, Money):
    return amount
  return Money(amount)


class DiscountPolicy(ABC):
  """
  Base class for discount policies.

  Subclasses implement compute() to return the discount for a purchase.
  """

  @abstractmethod
  def compute(self, purchase_amount: Amount) -> PolicyOutput[float]:
    """
    Compute discount for a purchase.

    Args:
      purchase_amount: Purchase total (Money or anything Money accepts)

    Returns:
      PolicyOutput with the discount and diagnostics

    Raises:
      ValidationError: If purchase_amount is not a valid Money amount
    """


class ThresholdDiscount(DiscountPolicy):
  """
  Two-tier flat discount.

  Purchases strictly above the threshold get the upper discount, all others
  get the base discount.
  """

  method = 'threshold'

  def __init__(self, threshold: float, upper: float, base: float):
    """
    Initialize threshold discount policy.

    Args:
      threshold: Purchase amount that must be exceeded for the upper tier
      upper: Discount above the threshold
      base: Discount at or below the threshold
    """
    self.threshold = threshold
    self.upper = upper
    self.base = base

  def compute(self, purchase_amount: Amount) -> PolicyOutput[float]:
    """Return upper discount above the threshold, base otherwise."""
    money = as_money(purchase_amount)
    above = money.amount > Decimal(str(self.threshold))
    discount = self.upper if above else self.base

    return PolicyOutput(
        value=discount,
        diag={
            'discount_method': self.method,
            'threshold': self.threshold,
            'above_threshold': above,
            'purchase_amount': str(money.amount),
        })


class RegularCustomerDiscount(ThresholdDiscount):
  """Regular customers: 10 above 100, otherwise 5."""

  method = 'regular'

  def __init__(self, threshold: float = 100, upper: float = 10.0,
               base: float = 5.0):
    super().__init__(threshold=threshold, upper=upper, base=base)


class VIPCustomerDiscount(ThresholdDiscount):
  """VIP customers: 20 above 500, otherwise 15."""

  method = 'vip'

  def __init__(self, threshold: float = 500, upper: float = 20.0,
               base: float = 15.0):
    super().__init__(threshold=threshold, upper=upper, base=base)
