"""
Dispatch configuration.

DispatchConfig is a serializable (JSON-friendly) configuration class that
names which policy to use for each dispatch family. All discriminators are
plain strings so the config round-trips through JSON unchanged; the registry
turns them into enum members and policy instances.
"""

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import field
import json
from pathlib import Path
from typing import Any


@dataclass
class DispatchConfig:
  """
  Configuration for one dispatch run.

  Attributes:
    name: Human-readable configuration name
    customer_type: Discount discriminator (e.g., 'regular', 'vip')
    purchase_amount: Purchase total, as a decimal string (e.g., '120')
    payment: Payment discriminator (e.g., 'credit_card', 'paypal')
    behaviors: Behavior tags, in the order they run (e.g., ['barking'])
    features: Feature tags, in the order they are listed
  """
  name: str = 'default'
  customer_type: str = 'regular'
  purchase_amount: str = '120'
  payment: str = 'credit_card'
  behaviors: list[str] = field(default_factory=lambda: ['barking'])
  features: list[str] = field(
      default_factory=lambda: ['touchscreen', 'foldable'])

  @classmethod
  def default(cls) -> 'DispatchConfig':
    """
    Create default configuration.

    Uses:
      - Regular customer, purchase of 120
      - Credit card payment
      - A barking animal
      - A touchscreen, foldable product
    """
    return cls()

  @classmethod
  def vip(cls) -> 'DispatchConfig':
    """VIP customer with a large purchase paid by PayPal."""
    return cls(
        name='vip',
        customer_type='vip',
        purchase_amount='600',
        payment='paypal',
        behaviors=['barking', 'meowing'],
        features=['touchscreen', 'foldable'],
    )

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'DispatchConfig':
    """Create from dictionary."""
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'DispatchConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))

  @classmethod
  def from_file(cls, path: Path) -> 'DispatchConfig':
    """Load from a JSON file."""
    return cls.from_json(Path(path).read_text(encoding='utf-8'))
