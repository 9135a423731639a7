import pytest

from chipcore.fault_injection import FaultManager, InetFault, get_manager


@pytest.fixture
def manager():
    return FaultManager("Inet", ["bind", "listen", "send"])


def test_num_faults_matches_names(manager):
    assert manager.num_faults() == 3


def test_global_manager_covers_inet_faults():
    mgr = get_manager()
    assert mgr.name == "Inet"
    assert mgr.fault_names == ("bind", "listen", "send")
    assert mgr.num_faults() == len(InetFault)
    assert get_manager() is mgr


def test_unarmed_fault_never_fires(manager):
    results = [manager.check_fault(InetFault.SEND) for _ in range(5)]
    assert not any(results)
    assert manager.times_checked(InetFault.SEND) == 5


def test_skip_then_fail_sequence(manager):
    manager.fail_at_fault(InetFault.BIND, 1, 2)
    results = [manager.check_fault(InetFault.BIND) for _ in range(6)]
    assert results[0] is False
    assert results[1] is True and results[2] is True
    assert sum(results) == 2
    assert not any(results[3:])


def test_faults_are_independent(manager):
    manager.fail_at_fault(InetFault.LISTEN, 0, 1)
    assert manager.check_fault(InetFault.BIND) is False
    assert manager.check_fault(InetFault.LISTEN) is True
    assert manager.check_fault(InetFault.LISTEN) is False


def test_reset_disarms(manager):
    manager.fail_at_fault(InetFault.SEND, 0, 3)
    manager.check_fault(InetFault.SEND)
    manager.reset()
    assert manager.check_fault(InetFault.SEND) is False
    assert manager.times_checked(InetFault.SEND) == 1


def test_unknown_fault_raises(manager):
    with pytest.raises(ValueError):
        manager.check_fault(3)
    with pytest.raises(ValueError):
        manager.fail_at_fault(-1, 0, 1)


def test_negative_counts_rejected(manager):
    with pytest.raises(ValueError):
        manager.fail_at_fault(InetFault.BIND, -1, 1)