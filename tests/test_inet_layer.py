import pytest

from chipcore.errors import EndPointPoolFullError, IncorrectStateError
from chipcore.inet_layer import INET_CONFIG_NUM_TEST_ENDPOINTS, EndPointManager, Loop
from chipcore.system_layer import SystemLayer


class _Point:
    def __init__(self, manager):
        self.manager = manager


@pytest.fixture
def layer():
    sl = SystemLayer()
    sl.init()
    return sl


@pytest.fixture
def manager(layer):
    mgr = EndPointManager(_Point, INET_CONFIG_NUM_TEST_ENDPOINTS)
    mgr.init(layer)
    return mgr


def test_new_a_test_end_point(manager):
    ep = manager.new_end_point()
    assert ep.manager is manager


def test_new_two_test_end_point(manager):
    ep1 = manager.new_end_point()
    ep2 = manager.new_end_point()
    assert ep1 is not ep2
    assert isinstance(ep2, _Point)


def test_new_but_full(manager):
    for _ in range(INET_CONFIG_NUM_TEST_ENDPOINTS):
        manager.new_end_point()
    with pytest.raises(EndPointPoolFullError):
        manager.new_end_point()


def test_release_one(manager):
    points = [manager.new_end_point() for _ in range(INET_CONFIG_NUM_TEST_ENDPOINTS)]
    manager.release_end_point(points[-1])
    last = manager.new_end_point()
    assert last.manager is manager


def test_release_two(manager):
    points = [manager.new_end_point() for _ in range(INET_CONFIG_NUM_TEST_ENDPOINTS)]
    manager.release_end_point(points[0])
    manager.delete_end_point(points[1])
    a = manager.new_end_point()
    b = manager.new_end_point()
    assert a is not b
    with pytest.raises(EndPointPoolFullError):
        manager.new_end_point()


def test_for_each_one(manager):
    seen = []
    manager.new_end_point()
    assert manager.for_each_end_point(lambda p: seen.append(p) or Loop.CONTINUE) is Loop.FINISH
    assert len(seen) == 1


def test_for_each_two(manager):
    seen = []
    manager.new_end_point()
    manager.new_end_point()
    assert manager.for_each_end_point(lambda p: seen.append(p) or Loop.CONTINUE) is Loop.FINISH
    assert len(seen) == 2


def test_for_each_break(manager):
    seen = []
    manager.new_end_point()
    manager.new_end_point()
    assert manager.for_each_end_point(lambda p: seen.append(p) or Loop.BREAK) is Loop.BREAK
    assert len(seen) == 1


def test_new_before_init_raises():
    mgr = EndPointManager(_Point)
    with pytest.raises(IncorrectStateError):
        mgr.new_end_point()


def test_init_requires_initialised_system_layer():
    mgr = EndPointManager(_Point)
    with pytest.raises(IncorrectStateError):
        mgr.init(SystemLayer())


def test_double_init_raises(manager, layer):
    with pytest.raises(IncorrectStateError):
        manager.init(layer)


def test_shut_down(manager, layer):
    assert manager.system_layer() is layer
    manager.shut_down()
    assert manager.system_layer() is None
    with pytest.raises(IncorrectStateError):
        manager.new_end_point()


def test_release_foreign_end_point(manager):
    with pytest.raises(ValueError):
        manager.release_end_point(_Point(manager))