"""
Interchangeable policies.

Every policy implements compute() and returns a PolicyOutput carrying both a
value and diagnostic information. Policies hold configuration only, never
per-call state, so one instance can serve any number of callers.

To add a new policy:
1. Create a new class inheriting from the appropriate base (e.g.,
   DiscountPolicy)
2. Implement the compute() method returning PolicyOutput
3. Register in dispatch/registry.py

Example:
  class StudentDiscount(DiscountPolicy):
    def compute(self, purchase_amount) -> PolicyOutput[float]:
      return PolicyOutput(value=7.5, diag={'discount_method': 'student'})
"""

from valuepolicy.policies.behavior import BarkingBehavior
from valuepolicy.policies.behavior import BehaviorPolicy
from valuepolicy.policies.behavior import MeowingBehavior
from valuepolicy.policies.discount import DiscountPolicy
from valuepolicy.policies.discount import RegularCustomerDiscount
from valuepolicy.policies.discount import ThresholdDiscount
from valuepolicy.policies.discount import VIPCustomerDiscount
from valuepolicy.policies.feature import FeaturePolicy
from valuepolicy.policies.feature import FoldableFeature
from valuepolicy.policies.feature import TouchScreenFeature
from valuepolicy.policies.payment import BankTransferPayment
from valuepolicy.policies.payment import BitcoinPayment
from valuepolicy.policies.payment import CreditCardPayment
from valuepolicy.policies.payment import DebitCardPayment
from valuepolicy.policies.payment import DescribedPayment
from valuepolicy.policies.payment import PaymentPolicy
from valuepolicy.policies.payment import PayPalPayment

__all__ = [
  'DiscountPolicy', 'ThresholdDiscount', 'RegularCustomerDiscount',
  'VIPCustomerDiscount',
  'PaymentPolicy', 'DescribedPayment', 'CreditCardPayment', 'DebitCardPayment',
  'PayPalPayment',
  'BitcoinPayment', 'BankTransferPayment',
  'BehaviorPolicy', 'BarkingBehavior', 'MeowingBehavior',
  'FeaturePolicy', 'TouchScreenFeature', 'FoldableFeature',
]
