'''
Product feature policies.

A feature describes one capability of a product.
'''

from abc import ABC, abstractmethod
from typing import Optional

from valuepolicy.domain.types import PolicyOutput


class FeaturePolicy(ABC):
  '''Base class for product features.'''

  tag: str = ''

  @abstractmethod
  def compute(self, product: Optional[str] = None) -> PolicyOutput[str]:
    '''Describe the feature for the given product name.'''


class TouchScreenFeature(FeaturePolicy):
  tag = 'touchscreen'

  def compute(self, product: Optional[str] = None) -> PolicyOutput[str]:
    return PolicyOutput(value='Touchscreen feature',
                        diag={'feature': self.tag, 'product': product})


class FoldableFeature(FeaturePolicy):
  tag = 'foldable'

  def compute(self, product: Optional[str] = None) -> PolicyOutput[str]:
    return PolicyOutput(value='Foldable feature',
                        diag={'feature': self.tag, 'product': product})
