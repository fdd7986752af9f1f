from typing import TypeVar, Generic, List, Iterable, Iterator, Optional

T = TypeVar('T')

ASCENDING = "ascending"
DESCENDING = "descending"


class MaxHeap(Generic[T]):
    ASC = ASCENDING
    DESC = DESCENDING

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._data: List[T] = list(values) if values is not None else []
        self._heap_ordered = False
        self._build_max_heap()

    @staticmethod
    def from_array(arr: Iterable[T]) -> 'MaxHeap[T]':
        """Build a heap from an array.

        Note: Creates a shallow copy of the input array.
        """
        return MaxHeap(arr)

    def insert(self, value: T) -> None:
        self._restore_heap()
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    push = insert

    def remove(self, value: T) -> None:
        """Remove the first element equal to `value` in array order.

        Raises ValueError if no element matches; the heap is left unchanged.
        """
        if self._find(value) is None:
            raise ValueError("value not found in heap")
        self._restore_heap()
        index = self._find(value)
        last = len(self._data) - 1
        if index == last:
            self._data.pop()
            return
        self._swap(index, last)
        self._data.pop()
        # The moved element may belong above or below the hole.
        self._sift_down(index, len(self._data))
        self._sift_up(index)

    def sort(self, order: str = ASCENDING) -> List[T]:
        """Heap-sort the stored elements in place and return them.

        This is destructive: afterwards the storage (as seen by `get`) holds
        the elements in ascending order and is no longer heap-shaped. Each
        call rebuilds the heap first, so repeated calls return the same
        result. The next insert, remove, peek or pop re-heapifies before
        running.
        """
        if order not in (ASCENDING, DESCENDING):
            raise ValueError(f"Unknown sort order: {order}")
        self._build_max_heap()
        for i in range(len(self._data) - 1, 0, -1):
            self._swap(0, i)
            self._sift_down(0, i)
        self._heap_ordered = len(self._data) <= 1
        if order == DESCENDING:
            return self._data[::-1]
        return self._data.copy()

    def get(self) -> List[T]:
        return self._data.copy()

    def peek(self) -> T:
        if not self._data:
            raise IndexError("peek from empty heap")
        self._restore_heap()
        return self._data[0]

    def pop(self) -> T:
        if not self._data:
            raise IndexError("pop from empty heap")
        self._restore_heap()
        if len(self._data) == 1:
            return self._data.pop()
        result = self._data[0]
        self._data[0] = self._data.pop()
        self._sift_down(0, len(self._data))
        return result

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()
        self._heap_ordered = True

    def copy(self) -> 'MaxHeap[T]':
        clone: MaxHeap[T] = MaxHeap()
        clone._data = self._data.copy()
        clone._heap_ordered = self._heap_ordered
        return clone

    def is_valid(self) -> bool:
        size = len(self._data)
        for i in range(size // 2):
            left = 2 * i + 1
            right = 2 * i + 2
            if self._data[left] > self._data[i]:
                return False
            if right < size and self._data[right] > self._data[i]:
                return False
        return True

    def _build_max_heap(self) -> None:
        size = len(self._data)
        for i in range(size // 2 - 1, -1, -1):
            self._sift_down(i, size)
        self._heap_ordered = True

    def _restore_heap(self) -> None:
        # Storage left ascending by sort() is not heap-shaped.
        if not self._heap_ordered:
            self._build_max_heap()

    def _find(self, value: object) -> Optional[int]:
        for i, item in enumerate(self._data):
            if item == value:
                return i
        return None

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._data[index] > self._data[parent]:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sift_down(self, index: int, heap_size: int) -> None:
        while True:
            largest = index
            left = 2 * index + 1
            right = 2 * index + 2
            if left < heap_size and self._data[left] > self._data[largest]:
                largest = left
            if right < heap_size and self._data[right] > self._data[largest]:
                largest = right
            if largest == index:
                break
            self._swap(index, largest)
            index = largest

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __contains__(self, value: object) -> bool:
        return self._find(value) is not None

    def __repr__(self) -> str:
        return f"MaxHeap({self._data})"

    def __str__(self) -> str:
        return f"MaxHeap(size={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.pop()


def heap_sort(values: Iterable[T], order: str = ASCENDING) -> List[T]:
    """Return the elements of `values` sorted with a max-heap.

    The input is copied and left untouched.
    """
    return MaxHeap(values).sort(order)
