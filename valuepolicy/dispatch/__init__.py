"""Policy dispatch: closed enumeration dispatch and open composition."""

from valuepolicy.dispatch.composite import CompositeDispatcher
from valuepolicy.dispatch.composite import StepOutcome
from valuepolicy.dispatch.config import DispatchConfig
from valuepolicy.dispatch.dispatcher import Dispatcher
from valuepolicy.dispatch.presets import Animal
from valuepolicy.dispatch.presets import DiscountCalculator
from valuepolicy.dispatch.presets import FeatureList
from valuepolicy.dispatch.presets import PaymentProcessor
from valuepolicy.dispatch.registry import create_policies
from valuepolicy.dispatch.registry import list_policies
from valuepolicy.dispatch.registry import POLICY_REGISTRY

__all__ = [
  'Dispatcher',
  'CompositeDispatcher',
  'StepOutcome',
  'DispatchConfig',
  'DiscountCalculator',
  'PaymentProcessor',
  'Animal',
  'FeatureList',
  'POLICY_REGISTRY',
  'create_policies',
  'list_policies',
]
