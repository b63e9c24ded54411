"""Generator handle subsystem for randomizer.

Re-exports the ABC, the registry and all built-in handles. Importing this
package registers the three built-in kinds::

    from randomizer.generators import GeneratorRegistry
"""

from randomizer.generators.base import Generator
from randomizer.generators.crypto import CryptographicGenerator
from randomizer.generators.platform import PlatformDefaultGenerator
from randomizer.generators.registry import GeneratorRegistry, register_generator
from randomizer.generators.rejection import RejectionSamplingGenerator

__all__ = [
    "CryptographicGenerator",
    "Generator",
    "GeneratorRegistry",
    "PlatformDefaultGenerator",
    "RejectionSamplingGenerator",
    "register_generator",
]
