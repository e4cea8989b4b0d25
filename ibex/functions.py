"""ibex/functions.py - 默认环境：常数和内置函数"""
import logging
import math

import numpy as np

from ibex.errors import InvalidArity

logger = logging.getLogger(__name__)


def check_arity(name, args, arity=None, min_args=None):
    """参数个数检查，不满足时抛出 InvalidArity"""
    if arity is not None and len(args) != arity:
        raise InvalidArity(name, arity, len(args))
    if min_args is not None and len(args) < min_args:
        raise InvalidArity(name, f"at least {min_args}", len(args))


def make_function(fn, arity=None, min_args=None, name=None):
    """
    把接收位置参数的普通Python函数包装成 list[float] -> float 的形式。

    Args:
        fn: 例如 lambda x, y: x + y
        arity: 精确参数个数（None表示不检查）
        min_args: 最少参数个数
        name: 错误信息中使用的函数名，默认取 fn.__name__
    """
    name = name or getattr(fn, '__name__', 'function')

    def wrapper(args):
        check_arity(name, args, arity, min_args)
        with np.errstate(all='ignore'):
            return float(fn(*args))

    wrapper.__name__ = name
    return wrapper


def _argmax(*args):
    return np.argmax(np.asarray(args, dtype=np.float64))


def _argmin(*args):
    return np.argmin(np.asarray(args, dtype=np.float64))


def _max(*args):
    return np.max(np.asarray(args, dtype=np.float64))


def _min(*args):
    return np.min(np.asarray(args, dtype=np.float64))


# 名称 -> (实现, 精确参数个数, 最少参数个数)
BUILTIN_FUNCTIONS = {
    'abs': (np.abs, 1, None),
    'sin': (np.sin, 1, None),
    'cos': (np.cos, 1, None),
    'exp': (np.exp, 1, None),
    'log': (np.log, 1, None),
    'log2': (np.log2, 1, None),
    'sqrt': (np.sqrt, 1, None),
    'pow': (np.power, 2, None),
    'min': (_min, None, 1),
    'max': (_max, None, 1),
    'argmax': (_argmax, None, 1),
    'argmin': (_argmin, None, 1),
}

FUNCTION_ALIASES = {
    'ln': 'log',
}

CONSTANTS = {
    'pi': math.pi,
    'e': math.e,
}


def register_commons(variables, functions):
    """向给定的 (variables, functions) 中注册常数和内置函数，调用方之后可以覆盖"""
    variables.update(CONSTANTS)

    for name, (impl, arity, min_args) in BUILTIN_FUNCTIONS.items():
        functions[name] = make_function(impl, arity=arity, min_args=min_args, name=name)
    for alias, target in FUNCTION_ALIASES.items():
        functions[alias] = functions[target]

    logger.debug(f"Registered {len(CONSTANTS)} constants and {len(functions)} functions")
    return variables, functions


def default_environment():
    """返回一组新的 (variables, functions)"""
    return register_commons({}, {})
