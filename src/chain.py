class Chain:
    """Ordered sequence of items backing one hash table bucket.

    Singly linked with a tail pointer so appends are O(1). Positional
    lookups walk from the head. ``get_at`` reports positions past the end
    as ``None`` instead of raising, which lets callers probe a chain until
    it runs out.
    """

    class Node:
        __slots__ = ("value", "next")

        def __init__(self, value):
            self.value = value
            self.next = None

    def __init__(self):
        self._head = None
        self._tail = None
        self._size = 0

    def append(self, item):
        node = self.Node(item)
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def get_at(self, index):
        if not isinstance(index, int):
            raise TypeError("index must be an integer")
        if index < 0 or index >= self._size:
            return None
        current = self._head
        for _ in range(index):
            current = current.next
        return current.value

    def remove_at(self, index):
        if not isinstance(index, int):
            raise TypeError("index must be an integer")
        if index < 0 or index >= self._size:
            raise IndexError("Chain.remove_at: index out of range")
        if index == 0:
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            prev = self._head
            for _ in range(index - 1):
                prev = prev.next
            node = prev.next
            prev.next = node.next
            if node is self._tail:
                self._tail = prev
        self._size -= 1
        return node.value

    def find(self, predicate, probe):
        """Return the position of the first item matching ``probe``, or None.

        ``predicate`` is called as ``predicate(item, probe)``.
        """
        current = self._head
        index = 0
        while current is not None:
            if predicate(current.value, probe):
                return index
            current = current.next
            index += 1
        return None

    def is_empty(self):
        return self._size == 0

    def size(self):
        return self._size

    def destroy(self, cleanup=None):
        while self._head is not None:
            item = self.remove_at(0)
            if cleanup is not None:
                cleanup(item)

    def __iter__(self):
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"Chain({list(self)!r})"
