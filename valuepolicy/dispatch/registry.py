"""
Policy registry mapping discriminators to policy factories.

Closed families (discount, payment) are keyed by enum members; open families
(behavior, feature) are keyed by tag strings so a caller can list any number
of them. Every key maps to exactly one factory.

To add a new policy:
1. Implement the policy class in the appropriate module
   (e.g., policies/payment.py)
2. Add a discriminator (enum member or tag) and a factory here

Example:
  # In policies/payment.py
  class GiftCardPayment(DescribedPayment):
    method = 'gift_card'
    label = 'gift card'

  # In domain/types.py
  class PaymentKind(_Discriminator):
    ...
    GIFT_CARD = 'gift_card'

  # Here
  PAYMENT_POLICIES[PaymentKind.GIFT_CARD] = GiftCardPayment
"""

from collections.abc import Callable
from typing import Any, cast

from valuepolicy.dispatch.composite import CompositeDispatcher
from valuepolicy.dispatch.config import DispatchConfig
from valuepolicy.domain.types import CustomerType
from valuepolicy.domain.types import PaymentKind
from valuepolicy.policies.behavior import BarkingBehavior
from valuepolicy.policies.behavior import BehaviorPolicy
from valuepolicy.policies.behavior import MeowingBehavior
from valuepolicy.policies.discount import DiscountPolicy
from valuepolicy.policies.discount import RegularCustomerDiscount
from valuepolicy.policies.discount import VIPCustomerDiscount
from valuepolicy.policies.feature import FeaturePolicy
from valuepolicy.policies.feature import FoldableFeature
from valuepolicy.policies.feature import TouchScreenFeature
from valuepolicy.policies.payment import BankTransferPayment
from valuepolicy.policies.payment import BitcoinPayment
from valuepolicy.policies.payment import CreditCardPayment
from valuepolicy.policies.payment import DebitCardPayment
from valuepolicy.policies.payment import PaymentPolicy
from valuepolicy.policies.payment import PayPalPayment

DISCOUNT_POLICIES: dict[CustomerType, Callable[[], DiscountPolicy]] = {
    CustomerType.REGULAR: RegularCustomerDiscount,
    CustomerType.VIP: VIPCustomerDiscount,
}

PAYMENT_POLICIES: dict[PaymentKind, Callable[[], PaymentPolicy]] = {
    PaymentKind.CREDIT_CARD: CreditCardPayment,
    PaymentKind.DEBIT_CARD: DebitCardPayment,
    PaymentKind.PAYPAL: PayPalPayment,
    PaymentKind.BITCOIN: BitcoinPayment,
    PaymentKind.BANK_TRANSFER: BankTransferPayment,
}

BEHAVIOR_POLICIES: dict[str, Callable[[], BehaviorPolicy]] = {
    'barking': BarkingBehavior,
    'meowing': MeowingBehavior,
}

FEATURE_POLICIES: dict[str, Callable[[], FeaturePolicy]] = {
    'touchscreen': TouchScreenFeature,
    'foldable': FoldableFeature,
}

POLICY_REGISTRY = {
    'discount': DISCOUNT_POLICIES,
    'payment': PAYMENT_POLICIES,
    'behavior': BEHAVIOR_POLICIES,
    'feature': FEATURE_POLICIES,
}


def create_policies(config: DispatchConfig) -> dict[str, Any]:
  """
  Create policy instances from a dispatch configuration.

  Args:
    config: DispatchConfig with discriminator names

  Returns:
    Dictionary with:
    - customer_type: CustomerType
    - discount: DiscountPolicy
    - payment_kind: PaymentKind
    - payment: PaymentPolicy
    - behaviors: CompositeDispatcher of BehaviorPolicy
    - features: CompositeDispatcher of FeaturePolicy

  Raises:
    UnknownDiscriminator: If any name is not registered
  """
  customer_type = CustomerType.from_string(config.customer_type)
  payment_kind = PaymentKind.from_string(config.payment)

  return {
      'customer_type': customer_type,
      'discount': DISCOUNT_POLICIES[customer_type](),
      'payment_kind': payment_kind,
      'payment': PAYMENT_POLICIES[payment_kind](),
      'behaviors': CompositeDispatcher.from_tags(config.behaviors,
                                                 BEHAVIOR_POLICIES),
      'features': CompositeDispatcher.from_tags(config.features,
                                                FEATURE_POLICIES),
  }


def list_policies() -> dict[str, list[str]]:
  """
  List all available policies by category.

  Returns:
    Dictionary mapping category names to list of discriminator names
  """
  result: dict[str, list[str]] = {}
  for category, policies_dict in POLICY_REGISTRY.items():
    policy_dict = cast(dict[Any, object], policies_dict)
    result[category] = [getattr(k, 'value', k) for k in policy_dict.keys()]
  return result
