'''
Demo entrypoint: value objects flowing through the dispatchers.

This module:
1. Builds validated value objects and the aggregates that own them
2. Resolves the configured discount and payment policies
3. Runs the configured behavior and feature compositions
4. Returns a DemoReport and logs it

Usage:
  python -m valuepolicy.run --customer-type vip --amount 600 \
    --payment paypal --behaviors barking meowing

  python -m valuepolicy.run --config configs/vip.json
'''

import argparse
from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from valuepolicy.dispatch.composite import StepOutcome
from valuepolicy.dispatch.config import DispatchConfig
from valuepolicy.dispatch.presets import DiscountCalculator
from valuepolicy.dispatch.presets import PaymentProcessor
from valuepolicy.dispatch.registry import create_policies
from valuepolicy.domain.aggregates import Address
from valuepolicy.domain.aggregates import Contact
from valuepolicy.domain.aggregates import Customer
from valuepolicy.domain.aggregates import Product
from valuepolicy.domain.aggregates import User
from valuepolicy.domain.identifiers import IdGenerator
from valuepolicy.domain.values import CustomerID
from valuepolicy.domain.values import Email
from valuepolicy.domain.values import Money
from valuepolicy.domain.values import PhoneNumber

logger = logging.getLogger(__name__)


@dataclass
class DemoReport:
  '''
  Everything one demo run produced.

  Attributes:
    config_name: Name of the DispatchConfig used
    address: Formatted address line
    phone_number: Contact phone number
    customer_id: Generated customer identifier
    email: User email
    price: Product price
    discount: Discount granted on the purchase
    payment: Payment policy message
    behaviors: Outcome of each configured behavior, in order
    features: Outcome of each configured feature, in order
    diag: Merged diagnostics from the discount and payment policies
  '''
  config_name: str
  address: str
  phone_number: str
  customer_id: str
  email: str
  price: str
  discount: float
  payment: str
  behaviors: List[StepOutcome] = field(default_factory=list)
  features: List[StepOutcome] = field(default_factory=list)
  diag: Dict[str, Any] = field(default_factory=dict)


def run_demo(config: Optional[DispatchConfig] = None,
             id_generator: Optional[IdGenerator] = None) -> DemoReport:
  '''
  Run the demo for one configuration.

  Args:
    config: DispatchConfig (default: DispatchConfig.default())
    id_generator: Source for the customer identifier (default: UUID4)

  Returns:
    DemoReport with every computed value

  Raises:
    UnknownDiscriminator: If the config names an unregistered policy
    ValidationError: If the config's purchase amount is not valid Money
  '''
  if config is None:
    config = DispatchConfig.default()

  address = Address.from_strings('123 Main St', 'New York', '10001')
  contact = Contact(PhoneNumber('1234567890'))
  customer = Customer(CustomerID.generate(id_generator))
  user = User(Email('test@example.com'))
  product = Product(Money('19.99'))

  policies = create_policies(config)
  purchase = Money(config.purchase_amount)

  discount_result = DiscountCalculator().apply(policies['discount'], purchase)
  payment_result = PaymentProcessor().process_payment(policies['payment'],
                                                      purchase)

  all_diag: Dict[str, Any] = {'config': config.name}
  all_diag.update(
      {f'discount_{k}': v for k, v in discount_result.diag.items()})
  all_diag.update({f'payment_{k}': v for k, v in payment_result.diag.items()})

  return DemoReport(
      config_name=config.name,
      address=address.format(),
      phone_number=contact.phone_number.value,
      customer_id=customer.customer_id.value,
      email=user.email.value,
      price=str(product.price),
      discount=discount_result.value,
      payment=payment_result.value,
      behaviors=policies['behaviors'].perform_all('animal'),
      features=policies['features'].perform_all('product'),
      diag=all_diag,
  )


def _log_outcomes(title: str, outcomes: List[StepOutcome]) -> None:
  logger.info('\n%s:', title)
  for outcome in outcomes:
    if outcome.ok:
      logger.info('  %s', outcome.value)
    else:
      logger.info('  %s failed: %s', outcome.policy, outcome.error)


def main() -> None:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(
      description='Run value objects through the policy dispatchers')
  parser.add_argument('--config',
                      type=Path,
                      default=None,
                      help='DispatchConfig JSON file (overrides other flags)')
  parser.add_argument('--customer-type',
                      type=str,
                      default='regular',
                      help='Customer type (regular, vip)')
  parser.add_argument('--amount',
                      type=str,
                      default='120',
                      help='Purchase amount')
  parser.add_argument('--payment',
                      type=str,
                      default='credit_card',
                      help='Payment kind (credit_card, paypal, ...)')
  parser.add_argument('--behaviors',
                      nargs='*',
                      default=['barking'],
                      help='Behavior tags, in order')
  parser.add_argument('--features',
                      nargs='*',
                      default=['touchscreen', 'foldable'],
                      help='Feature tags, in order')
  args = parser.parse_args()

  if args.config:
    config = DispatchConfig.from_file(args.config)
  else:
    config = DispatchConfig(
        name='cli',
        customer_type=args.customer_type,
        purchase_amount=args.amount,
        payment=args.payment,
        behaviors=args.behaviors,
        features=args.features,
    )

  report = run_demo(config)

  separator = '=' * 70
  logger.info('\n%s', separator)
  logger.info('Policy dispatch demo - config: %s', report.config_name)
  logger.info(separator)

  logger.info('\nValue Objects:')
  logger.info('  Address: %s', report.address)
  logger.info('  Contact phone number: %s', report.phone_number)
  logger.info('  Customer ID: %s', report.customer_id)
  logger.info('  User email: %s', report.email)
  logger.info('  Product price: %s', report.price)

  logger.info('\nDispatch:')
  logger.info('  Discount for %s customer: %s', config.customer_type.upper(),
              report.discount)
  logger.info('  %s', report.payment)

  _log_outcomes('Behaviors', report.behaviors)
  _log_outcomes('Features', report.features)

  logger.info('%s\n', separator)


if __name__ == '__main__':
  logging.basicConfig(
      level=logging.INFO,
      format='%(message)s',
  )
  main()
