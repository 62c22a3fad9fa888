"""Sorter capability plus candidate loading.

A sorter is anything that takes one mutable ``list[int]`` and sorts it in
place into non-decreasing order. The harness is written once against
:class:`Sorter` and parameterized with a candidate and a reference.

Candidates are referenced in one of three forms:

- ``path/to/solution.py``            -> attribute ``fast_sort`` in that file
- ``path/to/solution.py:my_sort``    -> attribute ``my_sort`` in that file
- ``package.module:my_sort``         -> attribute of an importable module
"""

from __future__ import annotations

import importlib
import importlib.util
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from sortbench.errors import SorterLoadError

DEFAULT_ATTRIBUTE = "fast_sort"

SortFn = Callable[[list], object]


@dataclass(frozen=True)
class Sorter:
    name: str
    fn: SortFn

    def sort(self, values: list[int]) -> None:
        # Return value is ignored; only in-place effects count.
        self.fn(values)


def _reference_sort(values: list[int]) -> None:
    values.sort()


REFERENCE = Sorter(name="list.sort", fn=_reference_sort)


def as_sorter(obj: Sorter | SortFn, name: str | None = None) -> Sorter:
    if isinstance(obj, Sorter):
        return obj
    if not callable(obj):
        raise SorterLoadError(f"{name or obj!r} is not callable")
    return Sorter(name=name or getattr(obj, "__qualname__", repr(obj)), fn=obj)


def _split_ref(ref: str) -> tuple[str, str | None]:
    # Keep Windows drive letters ("C:\\x.py") intact.
    head, sep, attr = ref.rpartition(":")
    if not sep or not head or "/" in attr or "\\" in attr:
        return ref, None
    return head, attr or None


def _load_module_from_path(path: Path):
    module_name = f"_sortbench_candidate_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise SorterLoadError(f"cannot import candidate file {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise SorterLoadError(f"importing {path} failed: {e}") from e
    return module


def load_sorter(ref: str, default_attribute: str = DEFAULT_ATTRIBUTE) -> Sorter:
    """Resolve a candidate reference to a :class:`Sorter`."""
    target, attr = _split_ref(ref.strip())
    if not target:
        raise SorterLoadError("empty candidate reference")
    attr = attr or default_attribute

    path = Path(target)
    if target.endswith(".py") or path.is_file():
        if not path.is_file():
            raise SorterLoadError(f"candidate file not found: {path}")
        module = _load_module_from_path(path)
        label = f"{path.name}:{attr}"
    else:
        try:
            module = importlib.import_module(target)
        except Exception as e:
            raise SorterLoadError(f"cannot import module {target!r}: {e}") from e
        label = f"{target}:{attr}"

    fn = getattr(module, attr, None)
    if fn is None:
        raise SorterLoadError(f"{label} not found")
    return as_sorter(fn, name=label)
