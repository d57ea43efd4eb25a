'''
Open composition dispatch.

A CompositeDispatcher runs an ordered, fixed sequence of policies. Unlike
closed dispatch it does not fail fast: every policy runs exactly once, front
to back, and a failing policy is recorded on its own StepOutcome while the
rest still run.
'''

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
import logging
from typing import Any, Optional

from valuepolicy.domain.errors import UnknownDiscriminator
from valuepolicy.domain.types import PolicyOutput

logger = logging.getLogger(__name__)


def policy_name(policy: Any) -> str:
  '''Tag of a policy if it has one, else its class name.'''
  return getattr(policy, 'tag', '') or type(policy).__name__


@dataclass(frozen=True)
class StepOutcome:
  '''
  Result of one policy within a composite run.

  Attributes:
    policy: Name of the policy (see policy_name)
    output: PolicyOutput when the policy succeeded
    error: Exception raised by the policy, if it failed
  '''
  policy: str
  output: Optional[PolicyOutput] = None
  error: Optional[Exception] = None

  @property
  def ok(self) -> bool:
    return self.error is None

  @property
  def value(self) -> Any:
    '''The policy's value, or None if it failed.'''
    return self.output.value if self.output is not None else None


class CompositeDispatcher:
  '''Fixed, ordered sequence of policies invoked one after another.'''

  def __init__(self, policies: Iterable[Any] = ()):
    self._policies: tuple[Any, ...] = tuple(policies)

  @classmethod
  def from_tags(
      cls,
      tags: Iterable[str],
      registry: Mapping[str, Callable[[], Any]],
  ) -> 'CompositeDispatcher':
    '''
    Build the sequence from tag names.

    Args:
      tags: Policy tags, in the order they should run
      registry: Tag -> zero-argument policy factory

    Raises:
      UnknownDiscriminator: If a tag is not in the registry
    '''
    policies = []
    for tag in tags:
      try:
        factory = registry[tag]
      except (KeyError, TypeError) as e:
        raise UnknownDiscriminator(tag, registry.keys(), kind='tag') from e
      policies.append(factory())
    return cls(policies)

  @property
  def policies(self) -> tuple[Any, ...]:
    return self._policies

  def names(self) -> list[str]:
    return [policy_name(p) for p in self._policies]

  def perform_all(self, *args: Any, **kwargs: Any) -> list[StepOutcome]:
    '''
    Invoke every policy once, in order, with the same arguments.

    Returns:
      One StepOutcome per policy, in sequence order
    '''
    outcomes: list[StepOutcome] = []
    for policy in self._policies:
      name = policy_name(policy)
      try:
        output = policy.compute(*args, **kwargs)
      except Exception as e:  # pylint: disable=broad-except
        logger.warning('Policy %s failed: %s', name, e)
        outcomes.append(StepOutcome(policy=name, error=e))
        continue
      logger.debug('Policy %s: %s', name, output.value)
      outcomes.append(StepOutcome(policy=name, output=output))
    return outcomes

  def with_policy(self, policy: Any) -> 'CompositeDispatcher':
    '''New dispatcher with policy appended; self is unchanged.'''
    return CompositeDispatcher(self._policies + (policy,))

  def without_policy(self, name: str) -> 'CompositeDispatcher':
    '''
    New dispatcher without the policies named name; self is unchanged.

    Raises:
      UnknownDiscriminator: If no policy has that name
    '''
    remaining = [p for p in self._policies if policy_name(p) != name]
    if len(remaining) == len(self._policies):
      raise UnknownDiscriminator(name, self.names(), kind='policy')
    return CompositeDispatcher(remaining)

  def __iter__(self) -> Iterator[Any]:
    return iter(self._policies)

  def __len__(self) -> int:
    return len(self._policies)
