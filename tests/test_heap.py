import pytest

from procmux.heap import Heap, HeapError


def test_first_handle_is_one_and_handles_increase():
    heap = Heap(16)
    first = heap.allocate()
    second = heap.allocate()
    assert first == 1
    assert second == first + 1


def test_fresh_allocation_reads_zero():
    heap = Heap(8)
    handle = heap.allocate_array(3, 2)
    assert [heap.get(handle, i) for i in range(3)] == [0, 0, 0]


@pytest.mark.parametrize("element_size,value", [(1, 200), (2, 4660), (4, 305419896)])
def test_set_get_round_trip(element_size, value):
    heap = Heap(32)
    handle = heap.allocate_array(2, element_size)
    heap.set(handle, 1, value)
    assert heap.get(handle, 1) == value
    assert heap.get(handle, 0) == 0


def test_value_truncated_to_element_width():
    heap = Heap(4)
    handle = heap.allocate(1)
    heap.set(handle, 0, 0x1FF)
    assert heap.get(handle, 0) == 0xFF


def test_allocations_do_not_overlap():
    heap = Heap(8)
    a = heap.allocate_array(2, 2)
    b = heap.allocate_array(2, 2)
    heap.set(a, 1, 111)
    heap.set(b, 0, 222)
    assert heap.get(a, 1) == 111
    assert heap.get(b, 0) == 222


def test_index_out_of_bounds():
    heap = Heap(8)
    handle = heap.allocate_array(2, 2)
    with pytest.raises(HeapError, match="out of bounds"):
        heap.get(handle, 2)
    with pytest.raises(HeapError, match="out of bounds"):
        heap.set(handle, -1, 5)


def test_invalid_handle():
    heap = Heap(8)
    with pytest.raises(HeapError, match="Invalid handle"):
        heap.get(42, 0)
    with pytest.raises(HeapError, match="Invalid handle"):
        heap.free(42)
    with pytest.raises(HeapError, match="Invalid handle"):
        heap.reallocate(42, 1)


def test_out_of_memory():
    heap = Heap(4)
    with pytest.raises(HeapError, match="out of memory"):
        heap.allocate_array(3, 2)


def test_free_allows_reuse_and_invalidates_handle():
    heap = Heap(4)
    handle = heap.allocate_array(2, 2)
    with pytest.raises(HeapError):
        heap.allocate()
    heap.free(handle)
    again = heap.allocate_array(2, 2)
    assert again == handle + 1
    with pytest.raises(HeapError):
        heap.get(handle, 0)


def test_reallocate_shrink_keeps_handle_and_frees_tail():
    heap = Heap(8)
    handle = heap.allocate_array(4, 2)
    heap.set(handle, 0, 7)
    assert heap.reallocate(handle, 2) == handle
    assert heap.get(handle, 0) == 7
    with pytest.raises(HeapError):
        heap.get(handle, 2)
    other = heap.allocate_array(2, 2)
    heap.set(other, 1, 9)
    assert heap.get(other, 1) == 9


def test_reallocate_grow_in_place():
    heap = Heap(8)
    handle = heap.allocate_array(2, 2)
    heap.set(handle, 0, 10)
    heap.set(handle, 1, 20)
    assert heap.reallocate(handle, 4) == handle
    heap.set(handle, 3, 40)
    assert [heap.get(handle, i) for i in range(4)] == [10, 20, 0, 40]


def test_reallocate_grow_by_copy():
    heap = Heap(16)
    handle = heap.allocate_array(2, 2)
    blocker = heap.allocate(2)
    heap.set(handle, 0, 5)
    heap.set(handle, 1, 6)
    moved = heap.reallocate(handle, 3)
    assert moved not in (handle, blocker)
    assert [heap.get(moved, i) for i in range(3)] == [5, 6, 0]
    with pytest.raises(HeapError):
        heap.get(handle, 0)


def test_reallocate_fails_when_no_room():
    heap = Heap(6)
    handle = heap.allocate_array(2, 2)
    heap.allocate(2)
    with pytest.raises(HeapError, match="out of memory"):
        heap.reallocate(handle, 3)
    assert heap.get(handle, 1) == 0


def test_bad_arguments():
    with pytest.raises(ValueError):
        Heap(-1)
    heap = Heap(4)
    with pytest.raises(ValueError):
        heap.allocate(0)