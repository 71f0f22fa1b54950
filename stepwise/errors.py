class StepwiseError(Exception):
    """ Base class for all Stepwise errors"""
    pass

class TokenizationError(StepwiseError):
    """ Raised when a character cannot be classified into a token kind"""
    pass

class MalformedExpressionError(StepwiseError):
    """ Raised when the token stream does not form a single balanced tree"""

class FunctionNotFoundError(StepwiseError):
    """ Raised when the operator position resolves to nothing"""

class CondFallthroughError(StepwiseError):
    """ Raised when no cond clause matches, not even else"""

class ArityError(StepwiseError):
    """ Raised when the number of arguments passed to a builtin is incorrect"""

class RecursionDepthError(StepwiseError):
    """ Raised when evaluation nests deeper than the interpreter's recursion limit"""
