# bvgraph

Small building blocks for working with compressed web graphs in the
successor-list style. In that style, successor lists are stored as gaps,
intervals and merges of earlier lists.

## What is in the package

- `bvgraph.fast`: `int2nat` and `nat2int` map integers to natural numbers and
  back, one-to-one. A non-negative `x` becomes `2x` and a negative `x`
  becomes `-2x - 1`. The module also has `byte_to_binary`, `int_to_binary`
  and `byte_as_hex`, which render numbers as binary or hexadecimal text.
- `bvgraph.compression_flags`: the `Coding` enumeration of instantaneous
  codes (`DELTA`, `GAMMA`, `UNARY`, `ZETA`, `NIBBLE`) and
  `coding_name(code)`, which gives the name for a numeric code.
- `bvgraph.properties`: `Properties`, a `key=value` properties file.
  - `load` reads lines, skips `#` comments and raises `ValueError` on any
    other line without `=`.
  - `store` writes a title line, a timestamp line and the entries sorted by
    key.
  - `set_property`, `has_property` and `get_property` access single entries.
    `get_property` raises `KeyError` for a missing key.
- `bvgraph.resources`: `ResourceManager`. It creates one resource per key on
  demand from a factory, and `close` (or leaving a `with` block) closes them
  all.
- `bvgraph.logs`: per-module loggers in a hierarchy.
  - A name such as `a::b` is limited by the level of its nearest registered
    ancestor, or by the default `LOG` logger if there is none.
  - The module provides `LogLevel`, `ModuleLogger` (with `log` and
    `get_log_level`), `logger`, `register_logger`, `parent_logger_name` and
    `reset_registry`.
  - Messages go to the file the logger was registered with. The default file
    is `LOG.txt` in the working directory.
- Iterators over integers. Each supports `next`, `has_next`, `skip` and
  `clone`, as well as the ordinary Python iteration protocol.
  - `bvgraph.iterator_base` provides:
    - `IntIterator`, the abstract base.
    - `EmptyIterator`.
    - `SequenceIterator`, which walks a sequence without copying it.
    - `CaptureIterator`, which copies the first values of an iterable.
  - `bvgraph.interval_iterator`: `IntervalSequenceIterator`, which walks the
    integers of a run of intervals. Each interval is given by its left end
    and its length.
  - `bvgraph.merged_iterator`: `MergedIterator`, which merges two increasing
    iterators without duplicates, optionally up to a limit.

## Example

```python
from bvgraph.interval_iterator import IntervalSequenceIterator
from bvgraph.iterator_base import SequenceIterator
from bvgraph.merged_iterator import MergedIterator

intervals = IntervalSequenceIterator([3, 10], [2, 3])
print(list(intervals))       # [3, 4, 10, 11, 12]

merged = MergedIterator(SequenceIterator([1, 3, 5]), SequenceIterator([2, 3, 6]))
print(list(merged))          # [1, 2, 3, 5, 6]
```

## What it does not do

The package is a library only. It does not have:

- a command-line program;
- a random graph generator;
- an iterator that keeps or drops alternating blocks of another iterator;
- any reader or writer for compressed graph files.

## Running the tests

```
pip install -e ".[test]"
pytest
```