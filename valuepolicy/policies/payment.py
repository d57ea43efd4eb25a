"""
Payment policies.

Each policy processes a payment of a given Money amount and reports what it
did. Processing here is descriptive only: no external payment system is
contacted.
"""

from abc import ABC
from abc import abstractmethod
from typing import Optional

from valuepolicy.domain.types import PolicyOutput
from valuepolicy.policies.discount import Amount
from valuepolicy.policies.discount import as_money


class PaymentPolicy(ABC):
  """
  Base class for payment policies.

  Subclasses implement compute() to process one payment.
  """

  @abstractmethod
  def compute(self, amount: Optional[Amount] = None) -> PolicyOutput[str]:
    """
    Process a payment.

    Args:
      amount: Amount to charge (None for a dry run without an amount)

    Returns:
      PolicyOutput with the processing message and diagnostics

    Raises:
      ValidationError: If amount is given but is not a valid Money amount
    """


class DescribedPayment(PaymentPolicy):
  """
  Payment that reports 'Processing <label> payment...'.

  Subclasses only set `method` (machine name) and `label` (display name).
  """

  method = 'generic'
  label = 'generic'

  def compute(self, amount: Optional[Amount] = None) -> PolicyOutput[str]:
    diag = {'payment_method': self.method}
    if amount is not None:
      diag['amount'] = str(as_money(amount).amount)
    return PolicyOutput(value=f'Processing {self.label} payment...', diag=diag)


class CreditCardPayment(DescribedPayment):
  method = 'credit_card'
  label = 'credit card'


class DebitCardPayment(DescribedPayment):
  method = 'debit_card'
  label = 'debit card'


class PayPalPayment(DescribedPayment):
  method = 'paypal'
  label = 'PayPal'


class BitcoinPayment(DescribedPayment):
  method = 'bitcoin'
  label = 'Bitcoin'


class BankTransferPayment(DescribedPayment):
  method = 'bank_transfer'
  label = 'bank transfer'
