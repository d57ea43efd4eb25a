"""
Identifier generation services.

Value objects that need a fresh identifier take a generator explicitly, so
tests can swap the process-wide random source for a deterministic one.
"""

from abc import ABC
from abc import abstractmethod
import itertools
import uuid


class IdGenerator(ABC):
  """Produces new, non-empty identifier strings."""

  @abstractmethod
  def new_id(self) -> str:
    """Return a fresh identifier."""


class Uuid4Generator(IdGenerator):
  """Random identifiers backed by uuid.uuid4()."""

  def new_id(self) -> str:
    return str(uuid.uuid4())


class SequentialIdGenerator(IdGenerator):
  """
  Deterministic identifiers: '<prefix><n>' for n = start, start + 1, ...

  Useful for tests and reproducible demos.
  """

  def __init__(self, prefix: str = 'id-', start: int = 1):
    self.prefix = prefix
    self._counter = itertools.count(start)

  def new_id(self) -> str:
    return f'{self.prefix}{next(self._counter)}'


DEFAULT_ID_GENERATOR: IdGenerator = Uuid4Generator()
