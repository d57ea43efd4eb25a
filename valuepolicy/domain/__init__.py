"""Domain types: value objects, aggregates, discriminators and errors."""

from valuepolicy.domain.aggregates import Address
from valuepolicy.domain.aggregates import Contact
from valuepolicy.domain.aggregates import Customer
from valuepolicy.domain.aggregates import Product
from valuepolicy.domain.aggregates import User
from valuepolicy.domain.errors import PolicyError
from valuepolicy.domain.errors import UnknownDiscriminator
from valuepolicy.domain.errors import ValidationError
from valuepolicy.domain.identifiers import IdGenerator
from valuepolicy.domain.identifiers import SequentialIdGenerator
from valuepolicy.domain.identifiers import Uuid4Generator
from valuepolicy.domain.types import CustomerType
from valuepolicy.domain.types import PaymentKind
from valuepolicy.domain.types import PolicyOutput
from valuepolicy.domain.types import Validated
from valuepolicy.domain.values import City
from valuepolicy.domain.values import CustomerID
from valuepolicy.domain.values import Email
from valuepolicy.domain.values import Money
from valuepolicy.domain.values import PhoneNumber
from valuepolicy.domain.values import PostalCode
from valuepolicy.domain.values import Street

__all__ = [
    'Street', 'City', 'PostalCode', 'PhoneNumber', 'Email', 'CustomerID',
    'Money',
    'Address', 'Contact', 'Customer', 'User', 'Product',
    'CustomerType', 'PaymentKind', 'PolicyOutput', 'Validated',
    'IdGenerator', 'Uuid4Generator', 'SequentialIdGenerator',
    'PolicyError', 'ValidationError', 'UnknownDiscriminator',
]
