import threading

from fastmatch.thread_vector import ThreadVector


def test_push_and_iterate():
    vec = ThreadVector()
    vec.push("a")
    vec.push("b")
    assert list(vec) == ["a", "b"]
    assert len(vec) == 2


def test_initial_items():
    vec = ThreadVector([3, 1, 2])
    assert list(vec) == [3, 1, 2]


def test_remove_removes_all_equal():
    vec = ThreadVector(["x", "y", "x", "z"])
    vec.remove("x")
    assert list(vec) == ["y", "z"]


def test_remove_missing_is_noop():
    vec = ThreadVector(["y"])
    vec.remove("x")
    assert list(vec) == ["y"]


def test_remove_if_returns_count():
    vec = ThreadVector(range(10))
    removed = vec.remove_if(lambda item: item % 2 == 0)
    assert removed == 5
    assert all(item % 2 == 1 for item in vec)
    assert len(vec) == 5


def test_concurrent_pushes():
    vec = ThreadVector()

    def worker(base):
        for i in range(200):
            vec.push(base * 1000 + i)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(vec) == 1000
    assert len(set(vec)) == 1000


def test_context_manager_blocks_other_threads():
    vec = ThreadVector()
    with vec as held:
        assert held is vec
        pusher = threading.Thread(target=vec.push, args=("late",))
        pusher.start()
        pusher.join(timeout=0.1)
        assert pusher.is_alive()
        assert list(vec) == []
    pusher.join(timeout=5)
    assert list(vec) == ["late"]