import pytest

from valuepolicy.domain.aggregates import Address
from valuepolicy.domain.aggregates import Contact
from valuepolicy.domain.aggregates import Customer
from valuepolicy.domain.aggregates import Product
from valuepolicy.domain.aggregates import User
from valuepolicy.domain.errors import ValidationError
from valuepolicy.domain.values import City
from valuepolicy.domain.values import CustomerID
from valuepolicy.domain.values import Email
from valuepolicy.domain.values import Money
from valuepolicy.domain.values import PhoneNumber
from valuepolicy.domain.values import PostalCode
from valuepolicy.domain.values import Street


class TestAddress:
  """Tests for Address aggregate."""

  def test_from_value_objects(self):
    """Address owns the value objects it was given."""
    street = Street('123 Main St')
    address = Address(street, City('New York'), PostalCode('10001'))

    assert address.street is street
    assert address.format() == '123 Main St, New York, 10001'

  def test_from_strings(self):
    """from_strings validates each part."""
    address = Address.from_strings('123 Main St', 'New York', '10001')

    assert address.postal_code == PostalCode('10001')

  def test_from_strings_invalid_postal_code(self):
    """An invalid part fails the whole Address."""
    with pytest.raises(ValidationError) as exc_info:
      Address.from_strings('123 Main St', 'New York', '1234')

    assert exc_info.value.field == 'postal_code'

  def test_raw_string_slot_rejected(self):
    """Slots must hold value objects, not raw strings."""
    with pytest.raises(ValidationError, match='must be a City'):
      Address(Street('123 Main St'), 'New York', PostalCode('10001'))


class TestOwners:
  """Tests for single-value aggregates."""

  def test_contact(self):
    """Contact exposes its phone number."""
    contact = Contact(PhoneNumber('1234567890'))

    assert contact.phone_number.value == '1234567890'

  def test_customer_with_generated_id(self, id_generator):
    """Customer holds a generated CustomerID."""
    customer = Customer(CustomerID.generate(id_generator))

    assert customer.customer_id.value == 'cust-1'

  def test_product_price(self):
    """Product exposes its price."""
    product = Product(Money(19.99))

    assert str(product.price) == '$19.99'

  def test_product_discounted_price(self):
    """Discounted price goes through Money.apply_discount."""
    product = Product(Money(1000))

    assert product.discounted_price(10) == Money(900)

  def test_product_requires_money(self):
    """Raw numbers are not accepted as a price."""
    with pytest.raises(ValidationError, match='must be a Money'):
      Product(19.99)


class TestUser:
  """Tests for User aggregate."""

  def test_with_email_returns_copy(self):
    """with_email leaves the original unchanged."""
    user = User(Email('john.doe@example.com'))
    updated = user.with_email('new.email@example.com')

    assert updated.email.value == 'new.email@example.com'
    assert user.email.value == 'john.doe@example.com'

  def test_with_email_invalid(self):
    """An invalid new email raises and nothing changes."""
    user = User(Email('john.doe@example.com'))

    with pytest.raises(ValidationError):
      user.with_email('not-an-email')

    assert user.email.value == 'john.doe@example.com'
