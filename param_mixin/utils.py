from collections.abc import Mapping

from param_mixin.exceptions import InvalidArgument


class _Absent(object):
    """ Marker for a key that is not present, as opposed to one set to None.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(_Absent, cls).__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'ABSENT'

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


def get_pairs(method_name, args, kwargs):
    """ Returns the (name, value) pairs of a bulk assignment, in order.

    ``args`` is either a single mapping or a flat sequence of alternating
    names and values; ``kwargs`` are appended after them.

    The whole argument list is validated before any pair is returned,
    so no pair is assigned from a malformed call.

    Raises:
        InvalidArgument: for an odd number of positional arguments, or a
            mapping in a name position of a multi-argument call.
    """
    if len(args) == 1 and isinstance(args[0], Mapping):
        pairs = list(args[0].items())
    elif len(args) % 2:
        raise InvalidArgument(method_name, len(args))
    elif any(isinstance(name, Mapping) for name in args[::2]):
        raise InvalidArgument(
            method_name, len(args),
            "a mapping must be the only positional argument")
    else:
        pairs = list(zip(args[::2], args[1::2]))

    pairs.extend(kwargs.items())
    return pairs
