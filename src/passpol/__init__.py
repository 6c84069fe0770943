__all__ = (
    "exc",
    "ConfigurationError",
    "LoadError",
    "NormalizationError",
    "PasspolError",
    "PasswordPolicy",
    "PolicyConfig",
    "PolicyStore",
    "WeakPasswordSource",
    "default_policy",
    "normalize",
)
__version__ = "0.1.0"

from . import exc
from .conf import PolicyConfig
from .exc import ConfigurationError, LoadError, NormalizationError, PasspolError
from .policy import PasswordPolicy, default_policy, normalize
from .store import PolicyStore, WeakPasswordSource
