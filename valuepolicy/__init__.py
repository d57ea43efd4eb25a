'''
Validated value objects composed with policy-based dispatch.

This package provides immutable value types that check their invariant once,
at construction, and a small dispatch layer that picks interchangeable
policies by discriminator (closed dispatch) or runs a list of them in order
(open composition).

Usage:
  from valuepolicy.dispatch.presets import DiscountCalculator
  from valuepolicy.domain.types import CustomerType
  from valuepolicy.domain.values import Money

  calculator = DiscountCalculator()
  discount = calculator.calculate_discount(CustomerType.VIP, Money(600))
'''
