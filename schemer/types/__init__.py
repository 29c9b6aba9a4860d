from schemer.types.environment import Environment
from schemer.types.function import Closure, Function, Primitive, is_function

__all__ = ["Environment", "Closure", "Function", "Primitive", "is_function"]
