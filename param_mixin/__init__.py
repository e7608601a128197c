from param_mixin.accessors import (
    DEFAULT_NOUN, ParamAccessor, ParamMixin, get_accessor, get_store,
    install_accessor, with_params)
from param_mixin.exceptions import (
    AccessorAlreadyInstalled, InvalidArgument, InvalidReceiver, ParamError)
from param_mixin.storage import InstanceDictStore, WeakAttributeStore
from param_mixin.utils import ABSENT
