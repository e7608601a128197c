""" Installs ``param``-style methods onto classes.

A class asks for the methods with the ``with_params`` decorator (or by
inheriting ``ParamMixin``)::

    @with_params()
    @with_params(noun='tag')
    class Widget(object):
        pass

    widget = Widget()
    widget.param(flavor='vanilla')
    widget.param('flavor')          # 'vanilla'
    widget.has_tag('flavor')        # False

Each noun gets its own ``ParamAccessor`` and its own store, so values
stored under one noun are never visible under another.
"""
from collections.abc import Mapping
from contextlib import contextmanager
from logging import getLogger

from param_mixin.exceptions import (
    AccessorAlreadyInstalled, InvalidArgument, InvalidReceiver)
from param_mixin.storage import WeakAttributeStore
from param_mixin.utils import ABSENT, get_pairs


log = getLogger(__name__)

DEFAULT_NOUN = 'param'


class ParamAccessor(object):
    """ The operations behind one noun, bound to one store.

    Every call shape of the generated ``<noun>`` method is available here
    as an explicitly named operation taking the receiver as first
    argument.
    """

    def __init__(self, noun=DEFAULT_NOUN, store=None):
        if store is None:
            store = WeakAttributeStore(name=noun)

        self.noun = noun
        self.store = store

    def __repr__(self):
        return '<ParamAccessor {!r} on {!r}>'.format(self.noun, self.store)

    @property
    def method_names(self):
        noun = self.noun
        return noun, 'has_{}'.format(noun), 'delete_{}'.format(noun)

    def names(self, obj):
        return set(self.store.get_bag(obj))

    def get(self, obj, name):
        return self.store.get_bag(obj).get(name, ABSENT)

    def set(self, obj, name, value):
        self.store.get_bag(obj)[name] = value
        return value

    def set_many(self, obj, *args, **kwargs):
        """ Assigns (name, value) pairs in order and returns the list of
        assigned values, in the same order.

        Accepts a single mapping, a flat sequence of alternating names
        and values, keyword arguments, or a mapping/sequence followed by
        keyword arguments. Later pairs overwrite earlier ones.
        """
        return self.set_pairs(obj, get_pairs(self.noun, args, kwargs))

    def set_pairs(self, obj, pairs):
        bag = self.store.get_bag(obj)

        assigned = []
        for name, value in pairs:
            bag[name] = value
            assigned.append(value)
        return assigned

    def assign(self, obj, *args, **kwargs):
        """ Like ``set_many``, but returns only the last assigned value
        (``ABSENT`` if nothing was assigned).
        """
        assigned = self.set_many(obj, *args, **kwargs)
        if not assigned:
            return ABSENT
        return assigned[-1]

    def has(self, obj, name):
        return name in self.store.get_bag(obj)

    def delete_many(self, obj, names):
        bag = self.store.get_bag(obj)
        return [bag.pop(name, ABSENT) for name in names]

    def delete(self, obj, *names):
        """ Removes every name in ``names`` and returns the first removed
        value.
        """
        deleted = self.delete_many(obj, names)
        if not deleted:
            return ABSENT
        return deleted[0]

    def build_methods(self, owner):
        """ Returns ``{method_name: function}`` for the three generated
        methods, checking receivers against ``owner``.
        """
        accessor = self
        param_name, has_name, delete_name = self.method_names

        @contextmanager
        def reporting_as(method_name):
            # stores only know they were asked for a bag
            try:
                yield
            except InvalidReceiver as exc:
                raise InvalidReceiver(
                    method_name, exc.receiver, exc.reason) from exc

        def split_receiver(method_name, args):
            if not args or not isinstance(args[0], owner):
                raise InvalidReceiver(
                    method_name, args[0] if args else None)
            return args[0], args[1:]

        def param(*args, **kwargs):
            obj, args = split_receiver(param_name, args)
            with reporting_as(param_name):
                return dispatch(obj, args, kwargs)

        def dispatch(obj, args, kwargs):
            if kwargs:
                pairs = get_pairs(param_name, args, kwargs)
                return accessor.set_pairs(obj, pairs)
            if not args:
                return accessor.names(obj)
            if len(args) == 1:
                name, = args
                if isinstance(name, Mapping):
                    return accessor.set_many(obj, name)
                return accessor.get(obj, name)
            if len(args) == 2 and not isinstance(args[0], Mapping):
                return accessor.set(obj, *args)
            return accessor.set_many(obj, *args)

        def has_param(*args):
            obj, args = split_receiver(has_name, args)
            if len(args) != 1:
                raise InvalidArgument(
                    has_name, len(args), 'expected exactly one name')
            with reporting_as(has_name):
                return accessor.has(obj, args[0])

        def delete_param(*args):
            obj, names = split_receiver(delete_name, args)
            with reporting_as(delete_name):
                if len(names) == 1:
                    return accessor.delete(obj, *names)
                return accessor.delete_many(obj, names)

        methods = {
            param_name: param,
            has_name: has_param,
            delete_name: delete_param,
        }
        for name, method in methods.items():
            method.__name__ = name
            method.__qualname__ = '{}.{}'.format(owner.__qualname__, name)
            method.accessor = accessor
        return methods

    def install(self, cls):
        for name in self.method_names:
            if name in vars(cls):
                raise AccessorAlreadyInstalled(cls, name)

        for name, method in self.build_methods(cls).items():
            setattr(cls, name, method)

        log.debug('installed %s on %s', ', '.join(self.method_names), cls)
        return cls


def install_accessor(cls, noun=DEFAULT_NOUN, store=None):
    """ Installs ``<noun>``, ``has_<noun>`` and ``delete_<noun>`` on ``cls``.

    Args:
        cls: The class to receive the methods.
        noun: The word the method names are derived from.
        store: An existing store to read and write through. A new
            ``WeakAttributeStore`` is created when omitted.

    Returns:
        The ``ParamAccessor`` backing the new methods.
    """
    accessor = ParamAccessor(noun, store)
    accessor.install(cls)
    return accessor


def with_params(noun=DEFAULT_NOUN, store=None):
    """ Class decorator form of ``install_accessor``.
    """
    def wrapper(cls):
        install_accessor(cls, noun, store)
        return cls

    return wrapper


def get_accessor(cls_or_obj, noun=DEFAULT_NOUN):
    """ Returns the ``ParamAccessor`` installed under ``noun``.

    Raises:
        AttributeError: if no accessor for ``noun`` is installed.
    """
    method = getattr(cls_or_obj, noun)
    method = getattr(method, '__func__', method)
    try:
        return method.accessor
    except AttributeError:
        raise AttributeError(
            "no accessor installed under `{}`".format(noun))


def get_store(cls_or_obj, noun=DEFAULT_NOUN):
    return get_accessor(cls_or_obj, noun).store


@with_params()
class ParamMixin(object):
    """ Base class providing ``param``, ``has_param`` and ``delete_param``.

    All subclasses share one store.
    """
