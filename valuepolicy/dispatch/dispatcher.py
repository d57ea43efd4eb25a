'''
Closed enumeration dispatch.

A Dispatcher maps every known discriminator to exactly one policy instance.
Policies are built once, when the dispatcher is created, and shared by every
call afterwards. The dispatcher holds no business logic: it finds the policy
and hands back whatever the policy returns.

Usage:
  dispatcher = Dispatcher(DISCOUNT_POLICIES, name='customer type')
  policy = dispatcher.resolve(CustomerType.VIP)
  result = dispatcher.apply(policy, 600)   # PolicyOutput(value=20.0, ...)
'''

from collections.abc import Callable, Hashable, Mapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from valuepolicy.domain.errors import UnknownDiscriminator
from valuepolicy.domain.types import PolicyOutput

K = TypeVar('K', bound=Hashable)
P = TypeVar('P')


class Dispatcher(Generic[K, P]):
  '''
  Total mapping from discriminator to policy.

  Attributes:
    name: What the discriminator is called (used in error messages)
  '''

  def __init__(self, factories: Mapping[K, Callable[[], P]],
               name: str = 'policy'):
    '''
    Build every policy up front.

    Args:
      factories: Discriminator -> zero-argument policy factory
      name: Label for the discriminator in error messages
    '''
    self.name = name
    self._policies: Mapping[K, P] = MappingProxyType(
        {key: factory() for key, factory in factories.items()})

  def discriminators(self) -> list[K]:
    '''Known discriminators, in registration order.'''
    return list(self._policies.keys())

  def resolve(self, discriminator: K) -> P:
    '''
    Return the policy registered for discriminator.

    Raises:
      UnknownDiscriminator: If discriminator is not registered
    '''
    try:
      return self._policies[discriminator]
    except (KeyError, TypeError) as e:
      # TypeError: unhashable discriminator.
      raise UnknownDiscriminator(discriminator, self._policies.keys(),
                                 kind=self.name) from e

  def apply(self, policy: P, *args: Any, **kwargs: Any) -> PolicyOutput:
    '''Invoke policy.compute(...) and return its output unchanged.'''
    return policy.compute(*args, **kwargs)  # type: ignore[attr-defined]

  def dispatch(self, discriminator: K, *args: Any,
               **kwargs: Any) -> PolicyOutput:
    '''Resolve the discriminator, then apply the policy.'''
    return self.apply(self.resolve(discriminator), *args, **kwargs)

  def __contains__(self, discriminator: Any) -> bool:
    try:
      return discriminator in self._policies
    except TypeError:
      return False

  def __len__(self) -> int:
    return len(self._policies)
