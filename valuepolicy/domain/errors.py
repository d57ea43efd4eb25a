"""
Error hierarchy for value objects and policy dispatch.

ValidationError is raised only while a value object is being constructed.
UnknownDiscriminator signals a configuration defect: a discriminator that no
registered policy answers to. Neither is ever replaced by a silent default.
"""

from typing import Any, Iterable, Optional


class PolicyError(Exception):
  """Base class for all errors raised by this package."""


class ValidationError(PolicyError, ValueError):
  """
  Raised when raw input violates a value object's invariant.

  Attributes:
    field: Name of the value object (or aggregate field) being built
    rule: Human-readable description of the violated rule
    value: The rejected raw input
  """

  def __init__(self, field: str, rule: str, value: Any = None):
    super().__init__(f'{field}: {rule}')
    self.field = field
    self.rule = rule
    self.value = value


class UnknownDiscriminator(PolicyError, KeyError):
  """
  Raised when a discriminator has no registered policy.

  Attributes:
    discriminator: The value that could not be resolved
    available: Known discriminators at the time of the lookup
  """

  def __init__(self,
               discriminator: Any,
               available: Optional[Iterable[Any]] = None,
               kind: str = 'policy'):
    self.discriminator = discriminator
    self.available = list(available) if available is not None else []
    self.kind = kind
    super().__init__(self._message())

  def _message(self) -> str:
    names = [getattr(a, 'value', a) for a in self.available]
    return f"Unknown {self.kind}: '{self.discriminator}'. Available: {names}"

  def __str__(self) -> str:
    # KeyError.__str__ would repr() the message.
    return self._message()
