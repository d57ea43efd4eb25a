'''
Validated value objects.

Each type wraps exactly one primitive and checks its invariant once, in
__post_init__. Instances are frozen dataclasses: once construction succeeds
the payload can neither change nor violate its rule.

Usage:
  code = PostalCode('10001')            # raises ValidationError if invalid
  result = PostalCode.try_create('123') # never raises ValidationError
  if not result.ok:
    print(result.error.rule)
'''

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import numbers
import re
from typing import Any, Optional, Type, TypeVar

from valuepolicy.domain.errors import ValidationError
from valuepolicy.domain.identifiers import DEFAULT_ID_GENERATOR
from valuepolicy.domain.identifiers import IdGenerator
from valuepolicy.domain.types import Validated

V = TypeVar('V', bound='ValueObject')

_FIVE_DIGITS = re.compile(r'[0-9]{5}')
_TEN_DIGITS = re.compile(r'[0-9]{10}')


def _require_text(field: str, value: Any) -> None:
  '''Non-empty, non-blank string.'''
  if not isinstance(value, str):
    raise ValidationError(field, 'must be a string', value)
  if not value.strip():
    raise ValidationError(field, 'cannot be empty', value)


def _require_pattern(field: str, value: Any, pattern: re.Pattern,
                     rule: str) -> None:
  if not isinstance(value, str) or pattern.fullmatch(value) is None:
    raise ValidationError(field, rule, value)


class ValueObject:
  '''Mixin adding the non-raising constructor to every value type.'''

  @classmethod
  def try_create(cls: Type[V], *args: Any, **kwargs: Any) -> Validated[V]:
    '''
    Construct an instance, returning the outcome instead of raising.

    Returns:
      Validated holding either the instance or the ValidationError
    '''
    try:
      return Validated(value=cls(*args, **kwargs))
    except ValidationError as e:
      return Validated(error=e)


@dataclass(frozen=True)
class Street(ValueObject):
  '''Street name and number, e.g. '123 Main St'.'''
  name: str

  def __post_init__(self):
    _require_text('street', self.name)

  def __str__(self) -> str:
    return self.name


@dataclass(frozen=True)
class City(ValueObject):
  '''City name.'''
  name: str

  def __post_init__(self):
    _require_text('city', self.name)

  def __str__(self) -> str:
    return self.name


@dataclass(frozen=True)
class PostalCode(ValueObject):
  '''Five ASCII digits.'''
  code: str

  def __post_init__(self):
    _require_pattern('postal_code', self.code, _FIVE_DIGITS,
                     'must be exactly 5 digits')

  def __str__(self) -> str:
    return self.code


@dataclass(frozen=True)
class PhoneNumber(ValueObject):
  '''Ten ASCII digits, no separators.'''
  value: str

  def __post_init__(self):
    _require_pattern('phone_number', self.value, _TEN_DIGITS,
                     'must be exactly 10 digits')

  def __str__(self) -> str:
    return self.value


@dataclass(frozen=True)
class Email(ValueObject):
  '''
  Email address.

  Only checks for an '@'. This is a known, accepted limitation: anything
  stricter belongs to a delivery check, not to this type.
  '''
  value: str

  def __post_init__(self):
    if not isinstance(self.value, str) or '@' not in self.value:
      raise ValidationError('email', "must contain '@'", self.value)

  def __str__(self) -> str:
    return self.value


@dataclass(frozen=True)
class CustomerID(ValueObject):
  '''Opaque, non-empty customer identifier.'''
  value: str

  def __post_init__(self):
    if not isinstance(self.value, str) or not self.value:
      raise ValidationError('customer_id', 'cannot be empty', self.value)

  @classmethod
  def generate(cls, generator: Optional[IdGenerator] = None) -> 'CustomerID':
    '''
    Create a CustomerID from a fresh identifier.

    Args:
      generator: Identifier source (default: random UUID4)
    '''
    generator = generator or DEFAULT_ID_GENERATOR
    return cls(generator.new_id())

  def __str__(self) -> str:
    return self.value


def _to_decimal(value: Any, field: str = 'money') -> Decimal:
  if isinstance(value, bool):
    raise ValidationError(field, 'must be a number', value)
  if isinstance(value, Decimal):
    amount = value
  elif isinstance(value, numbers.Integral):
    amount = Decimal(int(value))
  elif isinstance(value, (float, str)):
    # str() keeps 19.99 as 19.99 instead of its binary expansion.
    try:
      amount = Decimal(str(value).strip())
    except InvalidOperation as e:
      raise ValidationError(field, 'must be a number', value) from e
  else:
    raise ValidationError(field, 'must be a number', value)
  if not amount.is_finite():
    raise ValidationError(field, 'must be finite', value)
  return amount


@dataclass(frozen=True, order=True)
class Money(ValueObject):
  '''
  Non-negative monetary amount, stored as Decimal.

  Accepts Decimal, int, float or numeric strings. Floats go through str() so
  Money(19.99).amount == Decimal('19.99').
  '''
  amount: Decimal

  def __post_init__(self):
    amount = _to_decimal(self.amount)
    if amount < 0:
      raise ValidationError('money', 'amount cannot be negative', self.amount)
    if amount == 0:
      amount = amount.copy_abs()
    object.__setattr__(self, 'amount', amount)

  @classmethod
  def zero(cls) -> 'Money':
    return cls(Decimal(0))

  def __add__(self, other: 'Money') -> 'Money':
    if not isinstance(other, Money):
      return NotImplemented
    return Money(self.amount + other.amount)

  def apply_discount(self, percentage: Any) -> 'Money':
    '''
    Return a new Money reduced by the given percentage.

    Args:
      percentage: Discount in percent, 0 to 100 inclusive

    Raises:
      ValidationError: If percentage is outside 0-100
    '''
    pct = _to_decimal(percentage, 'discount_percentage')
    if pct < 0 or pct > 100:
      raise ValidationError('discount_percentage', 'must be between 0 and 100',
                            percentage)
    return Money(self.amount - self.amount * pct / Decimal(100))

  def __str__(self) -> str:
    return f'${self.amount:,.2f}'
