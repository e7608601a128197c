import pytest


@pytest.fixture
def store(request):
    from param_mixin.storage import WeakAttributeStore
    return WeakAttributeStore(name='test')


@pytest.fixture
def widget_cls(request):
    from param_mixin.accessors import with_params

    @with_params()
    @with_params(noun='tag')
    class Widget(object):
        pass

    return Widget
