'''
Aggregates that own value objects.

An aggregate holds already-validated values, so it never re-checks them; it
only checks that each slot really holds the expected value type.
'''

from dataclasses import dataclass, replace
from typing import Any, Union

from valuepolicy.domain.errors import ValidationError
from valuepolicy.domain.values import City
from valuepolicy.domain.values import CustomerID
from valuepolicy.domain.values import Email
from valuepolicy.domain.values import Money
from valuepolicy.domain.values import PhoneNumber
from valuepolicy.domain.values import PostalCode
from valuepolicy.domain.values import Street


def _require_type(field: str, value: Any, expected: type) -> None:
  if not isinstance(value, expected):
    raise ValidationError(
        field, f'must be a {expected.__name__}, got {type(value).__name__}',
        value)


@dataclass(frozen=True)
class Address:
  '''Postal address made of Street, City and PostalCode.'''
  street: Street
  city: City
  postal_code: PostalCode

  def __post_init__(self):
    _require_type('street', self.street, Street)
    _require_type('city', self.city, City)
    _require_type('postal_code', self.postal_code, PostalCode)

  @classmethod
  def from_strings(cls, street: str, city: str, postal_code: str) -> 'Address':
    '''Build an Address from raw strings, validating each part.'''
    return cls(Street(street), City(city), PostalCode(postal_code))

  def format(self) -> str:
    '''Single-line form, e.g. '123 Main St, New York, 10001'.'''
    return f'{self.street.name}, {self.city.name}, {self.postal_code.code}'


@dataclass(frozen=True)
class Contact:
  phone_number: PhoneNumber

  def __post_init__(self):
    _require_type('phone_number', self.phone_number, PhoneNumber)


@dataclass(frozen=True)
class Customer:
  customer_id: CustomerID

  def __post_init__(self):
    _require_type('customer_id', self.customer_id, CustomerID)


@dataclass(frozen=True)
class User:
  email: Email

  def __post_init__(self):
    _require_type('email', self.email, Email)

  def with_email(self, new_email: Union[Email, str]) -> 'User':
    '''
    Return a copy with a different email; the original is unchanged.

    Raises:
      ValidationError: If new_email is a string without '@'
    '''
    if isinstance(new_email, str):
      new_email = Email(new_email)
    return replace(self, email=new_email)


@dataclass(frozen=True)
class Product:
  '''Product priced in Money.'''
  price: Money

  def __post_init__(self):
    _require_type('price', self.price, Money)

  def discounted_price(self, percentage: Any) -> Money:
    '''Price after a percentage discount (0-100).'''
    return self.price.apply_discount(percentage)
