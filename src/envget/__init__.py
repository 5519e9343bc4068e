"""envget — strict, typed access to environment variables."""

__version__ = "0.1.0"

from envget.domain.accessor import VariableAccessor
from envget.domain.types import TargetType, ValueSource
from envget.errors import EnvgetError, MissingVariableError, ParseError
from envget.resolver import Resolver, from_environ, get, get_all

__all__ = [
    "EnvgetError",
    "MissingVariableError",
    "ParseError",
    "Resolver",
    "TargetType",
    "ValueSource",
    "VariableAccessor",
    "__version__",
    "from_environ",
    "get",
    "get_all",
]
