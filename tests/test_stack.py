from education.stack import Stack


def test_is_empty1_pos():
    stack = Stack()
    stack.push(1)
    stack.pop()
    assert stack.is_empty()


def test_is_empty1_neg():
    stack = Stack()
    stack.push(1)
    assert not stack.is_empty()


def test_pop_order_is_lifo():
    stack = Stack()
    stack.push(23)
    stack.push(34)
    assert stack.pop() == 34
    assert stack.pop() == 23
    assert stack.pop() is None


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty()
    assert stack.pop() is None
    assert len(stack) == 0


def test_from_iterable_iterates_top_down():
    stack = Stack([1, 2, 3])
    assert list(stack) == [3, 2, 1]


def test_extend_pushes_in_order():
    stack = Stack([1])
    stack.extend([2, 3])
    assert stack.pop() == 3
    assert list(stack) == [2, 1]


def test_len_tracks_push_and_pop():
    stack = Stack("abc")
    assert len(stack) == 3
    stack.pop()
    assert len(stack) == 2


def test_iteration_does_not_consume():
    stack = Stack([5, 6])
    assert list(stack) == list(stack)
    assert len(stack) == 2


def test_bool():
    stack = Stack()
    assert not stack
    stack.push(0)
    assert stack