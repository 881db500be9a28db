import threading

from subspace_core.auth import Action, new_auth_tag
from subspace_core.causality import (
    CausalityKey,
    SynchronizedSubspaceKey,
    new_causality_key,
    new_subspace,
)


def test_update_counter_on_missing_key_is_noop():
    sk = new_subspace(1)
    sk.update_counter(30300, 5)
    assert sk.get_key(30300) is None
    assert sk.keys == {}


def test_add_key_overwrites_instead_of_merging():
    sk = new_subspace("0xabc")
    sk.add_key(new_causality_key(30300, 10))
    sk.add_key(new_causality_key(30300, 3))
    assert sk.get_key(30300) == CausalityKey(key=30300, counter=3)


def test_update_counter_on_existing_key():
    sk = new_subspace(1)
    sk.add_key(new_causality_key(7, 1))
    sk.update_counter(7, 2)
    assert sk.get_key(7).counter == 2


def test_keys_are_independent():
    sk = new_subspace(1)
    sk.add_key(new_causality_key(1, 1))
    sk.add_key(new_causality_key(2, 50))
    sk.update_counter(1, 9)
    assert sk.get_key(1).counter == 9
    assert sk.get_key(2).counter == 50


def test_permits():
    sk = new_subspace(1)
    sk.add_key(new_causality_key(30300, 5))
    auth = new_auth_tag(Action.READ | Action.WRITE, 30300, 10)

    assert sk.permits(auth, Action.WRITE)
    assert not sk.permits(auth, Action.EXECUTE)

    # the key's clock reaching exp expires the tag
    sk.update_counter(30300, 10)
    assert not sk.permits(auth, Action.WRITE)

    # untracked key
    assert not sk.permits(new_auth_tag(Action.READ, 999, 10), Action.READ)


def test_synchronized_subspace_key_concurrent_writers():
    sk = SynchronizedSubspaceKey(1)

    def writer(base):
        for i in range(100):
            sk.add_key(new_causality_key(base * 1000 + i, i))
            sk.update_counter(base * 1000 + i, i + 1)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    snap = sk.snapshot()
    assert len(snap) == 800
    assert all(ck.counter == ck.key % 1000 + 1 for ck in snap.values())
