from typing import TypeVar, Generic, List, Callable, Iterator, Optional

T = TypeVar('T')

Comparator = Callable[[T, T], bool]


class Heap(Generic[T]):
    """Binary heap ordered by a strict "is better than" comparator.

    comparator(a, b) returns True when a has priority over b. The heap is
    its own iterator: each next() is one pop_top(), so iterating drains it.
    """

    def __init__(self, comparator: Comparator) -> None:
        if not callable(comparator):
            raise TypeError("comparator must be callable")
        self._data: List[T] = []
        self._comparator = comparator

    @classmethod
    def new_min(cls) -> 'Heap[T]':
        return cls(lambda a, b: a < b)

    @classmethod
    def new_max(cls) -> 'Heap[T]':
        return cls(lambda a, b: a > b)

    def add(self, value: T) -> None:
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def pop_top(self) -> Optional[T]:
        if not self._data:
            return None
        last = len(self._data) - 1
        self._swap(0, last)
        result = self._data.pop()
        self._sift_down(0)
        return result

    def peek(self) -> Optional[T]:
        if not self._data:
            return None
        return self._data[0]

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()

    def copy(self) -> 'Heap[T]':
        clone: Heap[T] = Heap(self._comparator)
        clone._data = self._data.copy()
        return clone

    def _better(self, a: T, b: T) -> bool:
        return bool(self._comparator(a, b))

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._better(self._data[parent], self._data[index]):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._data)
        while True:
            left = 2 * index + 1
            right = 2 * index + 2
            if left >= size:
                break
            # Left wins ties: right is taken only when strictly better.
            if right < size and self._better(self._data[right], self._data[left]):
                child = right
            else:
                child = left
            if self._better(self._data[index], self._data[child]):
                break
            self._swap(index, child)
            index = child

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"Heap({self._data})"

    def __str__(self) -> str:
        return f"Heap(size={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._data:
            raise StopIteration
        return self.pop_top()
