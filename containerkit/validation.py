import functools
import inspect
import re
from typing import Any


class NoItem:
    """
    Sentinel returned in place of a value when a container holds nothing to return. Compare with ``is``.
    """

    pass


def cutoff_str(in_str: Any, length: int = 2000, suffix: str = " ..."):
    """
    Converts ``in_str`` to string and cuts off + appends suffix if too long.
    """
    in_str = str(in_str)
    length = max(length, len(suffix))
    length -= len(suffix)
    return in_str[:length] + (in_str[length:] and suffix)


class ParameterChoiceError(ValueError):
    def __init__(self, name, err_value, values):
        super().__init__(f"Parameter {name}={err_value} needs to be one of {values}.")


# Parameter validation.
def choices(name, values, doc=True):
    """
    Will only check the value if it is provided explicitly by the user - default values are not checked.

    :param name: The parameter name.
    :param values: The valid choices as an iterable.
    :param doc: If ``True``, the choices are appended afer the ``:param <param name>:`` string (if any) in the doc string.
    """

    values = list(values)

    def wrapper(fxn):
        if doc and fxn.__doc__:
            fxn.__doc__ = re.sub(
                f"(:\\s*param\\s+){name}(\\s*:)",
                f"\\1{name}\\2 ``{values}``",
                fxn.__doc__,
            )

        signature = inspect.signature(fxn)

        @functools.wraps(fxn)
        def check_and_call(*args, **kwargs):
            params = signature.bind(*args, **kwargs)
            if (
                name in params.arguments
                and (err_value := params.arguments[name]) not in values
            ):
                raise ParameterChoiceError(name, err_value, values)

            return fxn(*args, **kwargs)

        return check_and_call

    return wrapper
