# Core type aliases for Stepwise's data model.
# Trees are built from the node classes in stepwise.types.node; evaluated
# values are plain Python numbers, booleans, callables or None.
#
# Naming guidance:
# - Value:     Use in evaluator/runtime code to denote evaluated values.
# - Procedure: Builtins and define-generated closures, called as fn(env, args).

from typing import Any, Callable

# Runtime value alias
Value = Any

# Callable stored in an Environment: (env, evaluated arguments) -> Value
Procedure = Callable[..., Value]

# Evaluator function type: passed to special forms and closures
EvaluatorFn = Callable[..., Value]
