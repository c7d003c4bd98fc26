from rps_arena.services.arena.matchmaking import MatchmakingQueue


def test_pairs_two_oldest_in_fifo_order():
    queue = MatchmakingQueue()
    for handle in ('h1', 'h2', 'h3'):
        queue.enqueue(handle)
    assert queue.try_pair() == ('h1', 'h2')
    # h3 stays alone
    assert queue.waiting() == ['h3']
    assert queue.try_pair() is None


def test_duplicate_enqueue_is_ignored():
    queue = MatchmakingQueue()
    assert queue.enqueue('h1') is True
    assert queue.enqueue('h1') is False
    assert len(queue) == 1
    assert queue.try_pair() is None


def test_cancel_removes_from_anywhere():
    queue = MatchmakingQueue()
    for handle in ('h1', 'h2', 'h3'):
        queue.enqueue(handle)
    assert queue.cancel('h2') is True
    assert queue.cancel('h2') is False
    assert queue.waiting() == ['h1', 'h3']


def test_dead_waiter_puts_survivor_back_at_front():
    queue = MatchmakingQueue()
    for handle in ('h1', 'h2', 'h3'):
        queue.enqueue(handle)
    live = {'h2', 'h3'}
    assert queue.try_pair(is_live=live.__contains__) is None
    assert queue.waiting() == ['h2', 'h3']
    # Next attempt pairs the survivor with the next waiter
    assert queue.try_pair(is_live=live.__contains__) == ('h2', 'h3')


def test_survivor_keeps_priority_over_later_waiters():
    queue = MatchmakingQueue()
    for handle in ('a', 'b', 'c'):
        queue.enqueue(handle)
    live = {'a', 'c'}
    assert queue.try_pair(is_live=live.__contains__) is None
    assert queue.waiting() == ['a', 'c']
