""" Out-of-band per-object storage.

A store maps each object to its own ``dict`` (its "bag") without adding
anything to the object's class. ``WeakAttributeStore`` keys bags on object
identity and only holds the object through a weak reference, so the bag is
dropped as soon as the object is reclaimed.
"""
from logging import getLogger
import threading
import weakref

from param_mixin.exceptions import InvalidReceiver


log = getLogger(__name__)


class WeakAttributeStore(object):
    """ Identity-keyed side table of per-object bags.

    Objects are compared by identity, never by ``__eq__``/``__hash__``, so
    unhashable objects and objects with custom equality get a bag of
    their own. An object that cannot be weakly referenced raises
    ``InvalidReceiver``.

    Bags are held strongly. A value that refers back to its own object,
    e.g. ``widget.param('parent', widget)``, keeps that object alive
    for as long as the store lives, so its bag is never reclaimed.
    """

    def __init__(self, name=None):
        self.name = name
        # id(obj) -> (weakref to obj, bag)
        self._entries = {}
        self._lock = threading.RLock()
        log.debug('created attribute store %r', self)

    def __repr__(self):
        return '<WeakAttributeStore {!r} ({} live)>'.format(
            self.name, len(self._entries))

    def get_bag(self, obj):
        """ Returns the bag for ``obj``, creating an empty one on first use.
        """
        key = id(obj)
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry[0]() is obj:
                return entry[1]

            try:
                ref = weakref.ref(obj, self._make_reclaimer(key))
            except TypeError:
                raise InvalidReceiver(
                    'get_bag', obj, 'cannot be weakly referenced')

            bag = {}
            self._entries[key] = (ref, bag)
            return bag

    def _make_reclaimer(self, key):
        # the callback must not keep the store alive
        self_ref = weakref.ref(self)

        def reclaim(ref):
            store = self_ref()
            if store is None:
                return
            with store._lock:
                entry = store._entries.get(key)
                # the id may already belong to a newer object
                if entry is not None and entry[0] is ref:
                    del store._entries[key]
                    log.debug('reclaimed bag %s from %r', key, store)

        return reclaim

    def __contains__(self, obj):
        entry = self._entries.get(id(obj))
        return entry is not None and entry[0]() is obj

    def __len__(self):
        return len(self._entries)

    def snapshot(self):
        """ Returns ``{id(obj): bag}`` for every live object.

        For diagnostics and tests only. The bags are the live ones, not
        copies.
        """
        with self._lock:
            entries = self._entries.copy()

        return dict(
            (key, bag) for key, (ref, bag) in entries.items()
            if ref() is not None
        )


class InstanceDictStore(object):
    """ Keeps the bag in the object's own ``__dict__``.

    The bag lives and dies with the object, at the cost of one private
    attribute on every instance that has been accessed. Objects without a
    ``__dict__`` raise ``InvalidReceiver``.
    """

    def __init__(self, attr_name='__params__'):
        self.attr_name = attr_name

    def __repr__(self):
        return '<InstanceDictStore {!r}>'.format(self.attr_name)

    def get_bag(self, obj):
        try:
            guts = vars(obj)
        except TypeError:
            raise InvalidReceiver('get_bag', obj, 'has no __dict__')
        return guts.setdefault(self.attr_name, {})

    def __contains__(self, obj):
        return self.attr_name in getattr(obj, '__dict__', ())
