"""An integer holder that reports its lifetime, and a pointer that copies it."""

from __future__ import annotations

import sys


class TrackedObject:
    """Holds an integer and announces creation, copies, moves and destruction."""

    _next_id = 0

    def __init__(self, value, out=None):
        self.id = TrackedObject._claim_id()
        self.value = value
        self.empty = False
        self.destroyed = False
        self.out = out
        self._say(f"{self} has been created")

    @classmethod
    def _claim_id(cls):
        claimed = cls._next_id
        cls._next_id += 1
        return claimed

    @classmethod
    def _restart_ids(cls):
        cls._next_id = 0

    def _say(self, text):
        print(text, file=self.out if self.out is not None else sys.stdout)

    def _sibling(self):
        clone = object.__new__(TrackedObject)
        clone.id = TrackedObject._claim_id()
        clone.value = self.value
        clone.empty = self.empty
        clone.destroyed = False
        clone.out = self.out
        return clone

    def __str__(self):
        if self.empty:
            return f"Object #{self.id} [[ empty ]]"
        return f"Object #{self.id} [[ {self.value} ]]"

    def __repr__(self):
        return f"TrackedObject(id={self.id}, value={self.value!r}, empty={self.empty})"

    def copy(self):
        """Return a new object holding the same value."""
        clone = self._sibling()
        self._say(f"{self} has been copied into {clone}")
        return clone

    def move(self):
        """Return a new object taking this value; this one is left empty."""
        clone = self._sibling()
        self.empty = True
        self._say(f"{self} has been moved into {clone}")
        return clone

    def destroy(self):
        """Announce the end of this object; later calls do nothing."""
        if not self.destroyed:
            self.destroyed = True
            self._say(f"{self} has been destroyed")


class CopyablePtr:
    """An owning pointer whose copies duplicate the object it points to."""

    __slots__ = ("_target",)

    def __init__(self, target=None):
        if isinstance(target, bool):
            raise TypeError("a pointer target must be an int, a TrackedObject or None")
        if isinstance(target, int):
            target = TrackedObject(target)
        elif target is not None and not isinstance(target, TrackedObject):
            raise TypeError("a pointer target must be an int, a TrackedObject or None")
        self._target = target

    def __repr__(self):
        return f"CopyablePtr({self._target!r})"

    def __bool__(self):
        return self._target is not None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.clear()
        return False

    def is_null(self):
        """True when the pointer owns nothing."""
        return self._target is None

    def get(self):
        """The owned object; raises ValueError on a null pointer."""
        if self._target is None:
            raise ValueError("dereferencing a null pointer")
        return self._target

    def copy(self):
        """A new pointer owning a copy of the object, or a null pointer."""
        if self._target is None:
            return CopyablePtr()
        return CopyablePtr(self._target.copy())

    def take(self):
        """Hand the object over to a new pointer; this one becomes null."""
        target, self._target = self._target, None
        return CopyablePtr(target)

    def assign(self, other):
        """Destroy the current object, then own a copy of ``other``'s.

        Assigning a pointer to itself has no effect.
        """
        if other is self or (
            self._target is not None and other._target is self._target
        ):
            return self
        self.clear()
        if other._target is not None:
            self._target = other._target.copy()
        return self

    def clear(self):
        """Destroy the owned object, if any, and become null."""
        if self._target is not None:
            self._target.destroy()
            self._target = None


def _expect(text):
    print(f"EXPECTED: {text}")
    print("ACTUAL:   ", end="")


def _state(name, pointer):
    print(f"{name} is {'null' if pointer.is_null() else 'not null'}")


def main(argv=None):
    """Walk through the pointer's behaviour, printing expected and actual output."""
    TrackedObject._restart_ids()
    print("Debut des tests")
    print()

    _expect("null_ptr is null")
    null_ptr = CopyablePtr()
    _state("null_ptr", null_ptr)
    print()

    _expect("Object #0 [[ 4 ]] has been created")
    ptr_0 = CopyablePtr(4)
    print()

    _expect("ptr_0 is not null")
    _state("ptr_0", ptr_0)
    print()

    _expect("Object #0 [[ 4 ]]")
    print(ptr_0.get())
    print()

    _expect("Object #0 [[ 4 ]] has been destroyed")
    ptr_0.clear()
    print()

    _expect("ptr_0 is null")
    _state("ptr_0", ptr_0)
    print()

    _expect("Object #1 [[ 5 ]] has been created")
    ptr_1 = CopyablePtr(5)
    print()

    _expect("Object #1 [[ 5 ]] has been copied into Object #2 [[ 5 ]]")
    ptr_1_copy = ptr_1.copy()
    print()

    _expect("null_ptr_copy is null")
    null_ptr_copy = null_ptr.copy()
    _state("null_ptr_copy", null_ptr_copy)
    print()

    _expect("ptr_1 is null")
    ptr_2 = ptr_1.take()
    _state("ptr_1", ptr_1)
    print()

    _expect("ptr_2 is not null")
    _state("ptr_2", ptr_2)
    print()

    _expect("Object #1 [[ 5 ]]")
    print(ptr_2.get())
    print()

    _expect("Object #1 [[ 5 ]] has been copied into Object #3 [[ 5 ]]")
    ptr_0.assign(ptr_2)
    print()

    _expect(
        "Object #1 [[ 5 ]] has been destroyed\n"
        "Object #3 [[ 5 ]] has been copied into Object #4 [[ 5 ]]"
    )
    ptr_2.assign(ptr_0)
    print()

    _expect("Object #4 [[ 5 ]]")
    ptr_2.assign(ptr_2)
    print(ptr_2.get())
    print()

    _expect("Object #3 [[ 5 ]] has been destroyed")
    ptr_0.clear()
    ptr_0 = ptr_2.take()
    print()

    _expect("ptr_2 is null")
    _state("ptr_2", ptr_2)
    print()

    _expect("ptr_0 is not null")
    _state("ptr_0", ptr_0)
    print()

    _expect("Object #4 [[ 5 ]]")
    print(ptr_0.get())
    print()

    _expect("Object #4 [[ 5 ]]")
    ptr_0.assign(ptr_0)
    print(ptr_0.get())
    print()

    _expect("Object #2 [[ 5 ]] has been destroyed\nObject #4 [[ 5 ]] has been destroyed")
    for pointer in (ptr_2, null_ptr_copy, ptr_1_copy, ptr_1, ptr_0, null_ptr):
        pointer.clear()
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())