'''
Shared types for the policy framework.

These dataclasses and enums give policies and dispatchers a typed contract,
so callers never depend on a particular policy's internals.
'''

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from valuepolicy.domain.errors import UnknownDiscriminator
from valuepolicy.domain.errors import ValidationError

T = TypeVar('T')


@dataclass(frozen=True)
class PolicyOutput(Generic[T]):
  '''
  Standard output from any policy.

  Every policy returns both a computed value and diagnostic information
  explaining how the value was computed.

  Attributes:
    value: The computed value (type depends on policy)
    diag: Dictionary of diagnostic information
  '''
  value: T
  diag: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Validated(Generic[T]):
  '''
  Result of a non-raising value object construction.

  Exactly one of value and error is set.

  Attributes:
    value: The constructed value object, if validation passed
    error: The ValidationError describing the violated rule, otherwise
  '''
  value: Optional[T] = None
  error: Optional[ValidationError] = None

  @property
  def ok(self) -> bool:
    '''True when construction succeeded.'''
    return self.error is None

  def unwrap(self) -> T:
    '''Return the value, re-raising the stored error if there is none.'''
    if self.error is not None:
      raise self.error
    if self.value is None:
      raise ValueError('Validated holds neither a value nor an error')
    return self.value


class _Discriminator(Enum):
  '''Enum base whose members can be parsed from their string values.'''

  @classmethod
  def from_string(cls, value: str):
    '''
    Parse a discriminator from its string value (case-insensitive).

    Raises:
      UnknownDiscriminator: If no member has that value
    '''
    try:
      return cls(str(value).strip().lower())
    except ValueError as e:
      raise UnknownDiscriminator(value, list(cls),
                                 kind=cls.__name__) from e


class CustomerType(_Discriminator):
  '''Customer categories that select a discount policy.'''
  REGULAR = 'regular'
  VIP = 'vip'


class PaymentKind(_Discriminator):
  '''Payment methods that select a payment policy.'''
  CREDIT_CARD = 'credit_card'
  DEBIT_CARD = 'debit_card'
  PAYPAL = 'paypal'
  BITCOIN = 'bitcoin'
  BANK_TRANSFER = 'bank_transfer'
