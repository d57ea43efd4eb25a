import uuid

from valuepolicy.domain.identifiers import SequentialIdGenerator
from valuepolicy.domain.identifiers import Uuid4Generator


class TestUuid4Generator:
  """Tests for Uuid4Generator."""

  def test_produces_uuid4(self):
    """Identifiers parse as version-4 UUIDs."""
    value = Uuid4Generator().new_id()

    assert uuid.UUID(value).version == 4

  def test_distinct(self):
    """Consecutive identifiers differ."""
    generator = Uuid4Generator()

    assert generator.new_id() != generator.new_id()


class TestSequentialIdGenerator:
  """Tests for SequentialIdGenerator."""

  def test_sequence(self):
    """Counts up from start with the prefix."""
    generator = SequentialIdGenerator(prefix='c', start=7)

    assert [generator.new_id() for _ in range(3)] == ['c7', 'c8', 'c9']

  def test_independent_instances(self):
    """Each generator has its own counter."""
    a = SequentialIdGenerator()
    b = SequentialIdGenerator()
    a.new_id()

    assert b.new_id() == 'id-1'
