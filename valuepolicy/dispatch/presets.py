'''
Ready-made dispatchers for the registered policy families.

DiscountCalculator and PaymentProcessor are closed dispatchers over the
customer-type and payment-kind enums. Animal and FeatureList wrap an open
composition of behaviors and features.
'''

from collections.abc import Callable, Iterable, Mapping
from typing import Optional, Union

from valuepolicy.dispatch.composite import CompositeDispatcher
from valuepolicy.dispatch.composite import StepOutcome
from valuepolicy.dispatch.dispatcher import Dispatcher
from valuepolicy.dispatch.registry import BEHAVIOR_POLICIES
from valuepolicy.dispatch.registry import DISCOUNT_POLICIES
from valuepolicy.dispatch.registry import FEATURE_POLICIES
from valuepolicy.dispatch.registry import PAYMENT_POLICIES
from valuepolicy.domain.types import CustomerType
from valuepolicy.domain.types import PaymentKind
from valuepolicy.domain.types import PolicyOutput
from valuepolicy.policies.behavior import BehaviorPolicy
from valuepolicy.policies.discount import Amount
from valuepolicy.policies.discount import DiscountPolicy
from valuepolicy.policies.feature import FeaturePolicy
from valuepolicy.policies.payment import PaymentPolicy


class DiscountCalculator(Dispatcher[CustomerType, DiscountPolicy]):
  '''Selects the discount policy by customer type.'''

  def __init__(
      self,
      factories: Optional[Mapping[CustomerType,
                                  Callable[[], DiscountPolicy]]] = None):
    super().__init__(factories if factories is not None else DISCOUNT_POLICIES,
                     name='customer type')

  def calculate_discount(self, customer_type: Union[CustomerType, str],
                         purchase_amount: Amount) -> float:
    '''
    Discount for a purchase.

    Args:
      customer_type: CustomerType or its string value ('regular', 'vip')
      purchase_amount: Purchase total

    Raises:
      UnknownDiscriminator: If customer_type is not registered
      ValidationError: If purchase_amount is not a valid Money amount
    '''
    if isinstance(customer_type, str):
      customer_type = CustomerType.from_string(customer_type)
    return self.dispatch(customer_type, purchase_amount).value


class PaymentProcessor(Dispatcher[PaymentKind, PaymentPolicy]):
  '''Processes payments, either with a given policy or by payment kind.'''

  def __init__(
      self,
      factories: Optional[Mapping[PaymentKind,
                                  Callable[[], PaymentPolicy]]] = None):
    super().__init__(factories if factories is not None else PAYMENT_POLICIES,
                     name='payment kind')

  def process_payment(self,
                      payment: PaymentPolicy,
                      amount: Optional[Amount] = None) -> PolicyOutput[str]:
    '''Process with an explicit policy object.'''
    return self.apply(payment, amount)

  def process(self,
              kind: Union[PaymentKind, str],
              amount: Optional[Amount] = None) -> PolicyOutput[str]:
    '''Process with the policy registered for kind.'''
    if isinstance(kind, str):
      kind = PaymentKind.from_string(kind)
    return self.dispatch(kind, amount)


class Animal:
  '''An animal defined by the behaviors it performs.'''

  def __init__(self, behaviors: Iterable[BehaviorPolicy],
               name: Optional[str] = None):
    self.name = name
    self.behaviors = CompositeDispatcher(behaviors)

  @classmethod
  def from_tags(cls, tags: Iterable[str],
                name: Optional[str] = None) -> 'Animal':
    return cls(CompositeDispatcher.from_tags(tags, BEHAVIOR_POLICIES), name)

  def perform_behaviors(self) -> list[StepOutcome]:
    return self.behaviors.perform_all(self.name)


class FeatureList:
  '''The features of one product, listed in a fixed order.'''

  def __init__(self, features: Iterable[FeaturePolicy],
               product_name: Optional[str] = None):
    self.product_name = product_name
    self.features = CompositeDispatcher(features)

  @classmethod
  def from_tags(cls, tags: Iterable[str],
                product_name: Optional[str] = None) -> 'FeatureList':
    return cls(CompositeDispatcher.from_tags(tags, FEATURE_POLICIES),
               product_name)

  def list_features(self) -> list[StepOutcome]:
    return self.features.perform_all(self.product_name)
