""" Provides all the exceptions that may be raised.
"""


class ParamError(Exception):
    """ Base class for errors raised by generated param methods.
    """


class InvalidReceiver(ParamError, TypeError):
    """ Raised when a generated method is called without an instance,
    e.g. as ``Widget.param()``, or on an object the store cannot track.

    ``reason`` is set in the second case.
    """

    def __init__(self, method_name, receiver=None, reason=None):
        self.method_name = method_name
        self.receiver = receiver
        self.reason = reason
        super(InvalidReceiver, self).__init__(method_name, receiver, reason)

    def __str__(self):
        if self.reason is None:
            return "`{}` is an instance method, called on {!r}".format(
                self.method_name, self.receiver)
        return "`{}` cannot store values for {!r}: {}".format(
            self.method_name, self.receiver, self.reason)


class InvalidArgument(ParamError, ValueError):
    """ Raised when a generated method gets an argument list it cannot
    use, e.g. bulk assignment with an odd, non-one number of positional
    arguments.
    """

    def __init__(self, method_name, arg_count,
                 reason='odd, non-one number of params'):
        self.method_name = method_name
        self.arg_count = arg_count
        self.reason = reason
        super(InvalidArgument, self).__init__(method_name, arg_count, reason)

    def __str__(self):
        return "invalid call to `{}`: {} ({} given)".format(
            self.method_name, self.reason, self.arg_count)


class AccessorAlreadyInstalled(ParamError):
    """ Raised when installing a noun whose generated method name is
    already defined on the class.
    """

    def __init__(self, cls, method_name):
        self.cls = cls
        self.method_name = method_name
        super(AccessorAlreadyInstalled, self).__init__(cls, method_name)

    def __str__(self):
        return "`{}` already defined on {}".format(
            self.method_name, self.cls.__name__)
