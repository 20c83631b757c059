"""
Ensure (Assertion) Utilities
^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Functions that simplify checking assertions and raising exceptions.
"""

from typing import Callable, Union


def ensure(
    value: bool, exception: Union[Callable[[], BaseException], BaseException]
) -> None:
    """
    Does nothing if `value` is truthy, otherwise raises `exception`.

    Parameters
    ----------

    value :
        Value that should be true.

    exception :
        Exception (or constructor for the exception) to raise.
    """
    if value:
        return
    if isinstance(exception, BaseException):
        raise exception
    raise exception()
