"""
Pluggable kernels for the CSR products.

A kernel is a module providing ``to_handle``, ``release_handle``, ``mult_vec``,
``dot_row`` and ``max_nnz``.  The default is ``numba``; it can be changed with
the ``SPATIAL_CSR_KERNEL`` environment variable.
"""

import os
import logging
import warnings
from contextlib import contextmanager
from importlib import import_module
import threading

_log = logging.getLogger(__name__)

kernels = {}
__all__ = [
    'releasing',
    'set_kernel',
    'use_kernel',
    'get_kernel',
]


class ActiveKernel(threading.local):
    def __init__(self):
        self.__dict__.update({'active_name': None})

    @property
    def active(self):
        kern = getattr(self, '_active', None)
        if kern is None:
            return _default_kernel()
        else:
            return kern

    def set_active(self, name, kern):
        self.active_name = name
        self._active = kern


_cached_default = None
_active = ActiveKernel()


@contextmanager
def releasing(h, k):
    """
    Context manager that releases a kernel handle on exit.

    Args:
        h: the handle.
        k: the kernel that created it.
    """
    try:
        yield h
    finally:
        k.release_handle(h)


def set_kernel(name):
    """
    Set the kernel for the current thread.  Most applications should leave the
    default alone, or configure it with the ``SPATIAL_CSR_KERNEL`` environment
    variable; this is here primarily to let test code switch kernels.

    Args:
        name(str or None):
            The name of the kernel, or ``None`` to go back to the default.
    """

    if name is None:
        _active.set_active(None, None)
    else:
        _active.set_active(name, get_kernel(name))


@contextmanager
def use_kernel(name):
    """
    Context manager to run code with a specified (thread-local) kernel.  It calls
    :py:func:`set_kernel`, and restores the previously-active kernel when the context
    exits.
    """
    old = _active.active_name
    try:
        set_kernel(name)
        yield
    finally:
        set_kernel(old)


def get_kernel(name=None):
    """
    Get a kernel.

    Args:
        name(str or None):
            The name of the kernel.  If ``None``, returns the current default kernel.
    """
    if name is None:
        return _active.active

    kern = kernels.get(name, None)
    if not kern:
        mod_name = f'{__name__}.{name}'
        kern = import_module(mod_name)
        kernels[name] = kern
    return kern


def _initialize(name=None):
    global _cached_default
    if _cached_default:
        warnings.warn('default kernel already initialized')

    if not name:
        name = os.environ.get('SPATIAL_CSR_KERNEL', 'numba')

    _log.debug('initializing default kernel %s', name)
    _cached_default = get_kernel(name)


def _default_kernel():
    if not _cached_default:
        _initialize()

    return _cached_default
