'''
Behavior policies for animals.

A behavior produces one observable action for a subject. Animals compose a
list of behaviors (see dispatch/presets.py).
'''

from abc import ABC, abstractmethod
from typing import Optional

from valuepolicy.domain.types import PolicyOutput


class BehaviorPolicy(ABC):
  '''Base class for behaviors.'''

  tag: str = ''

  @abstractmethod
  def compute(self, subject: Optional[str] = None) -> PolicyOutput[str]:
    '''
    Perform the behavior.

    Args:
      subject: Name of whoever performs it (diagnostic only)

    Returns:
      PolicyOutput with a description of the action
    '''


class BarkingBehavior(BehaviorPolicy):
  tag = 'barking'

  def compute(self, subject: Optional[str] = None) -> PolicyOutput[str]:
    return PolicyOutput(value='Barking...',
                        diag={'behavior': self.tag, 'subject': subject})


class MeowingBehavior(BehaviorPolicy):
  tag = 'meowing'

  def compute(self, subject: Optional[str] = None) -> PolicyOutput[str]:
    return PolicyOutput(value='Meowing...',
                        diag={'behavior': self.tag, 'subject': subject})
