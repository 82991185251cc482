# violetkit

A small collection of utility types that bring familiar Rust-style
idioms to Python code.

## Installation

```
pip install violetkit
```

Install the test extra to run the test suite:

```
pip install "violetkit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `violetkit.optional` | `Optional`, `some`, `nothing`, `BadOptionalAccess` |
| `violetkit.numeric` | `Traits`: fixed-width limits and wrapping add, sub, mul and div |
| `violetkit.refcount` | `Ref`/`Weak` and thread-safe `ARef`/`AWeak` reference counting |
| `violetkit.stringref` | `StringRef`: a string view with trimming, prefix and split helpers |
| `violetkit.memory` | `take`: move a value out and leave its type's default behind |
| `violetkit.environment` | `get_environment_variable`, `set_environment_variable` |

## Examples

### Optional values

```python
from violetkit.optional import some, nothing

opt = some(5)
assert opt.map(lambda x: x * 2).value() == 10
assert nothing().value_or(7) == 7

taken = opt.take()
assert taken.has_value() and not opt.has_value()
```

`Optional()` is empty, while `Optional(None)` holds the value `None`.
Calling `value()` on an empty `Optional` raises `BadOptionalAccess`.
`str()` of an empty optional is `«no value»`.

### Wrapping arithmetic

```python
from violetkit.numeric import Traits

u8 = Traits(8, False)
assert u8.wrapping_add(255, 1) == 0
assert u8.max() == 255

i8 = Traits(8, True)
assert i8.wrapping_add(127, 1) == -128
assert i8.wrapping_div(-128, -1) == -128
```

Division truncates toward zero; dividing by zero raises `ZeroDivisionError`.

### Reference counting

```python
from violetkit.refcount import Ref

ref = Ref(42)
other = ref.clone()
assert ref.strong_count() == 2

weak = ref.downgrade()
other.release()
ref.release()
assert not weak.upgrade()
```

`Weak.upgrade()` returns an `Optional` holding a new strong handle, or an
empty one once every strong handle is released. `Ref.take()` moves a
handle into a new one and leaves the original null; `Ref.null()` makes a
handle that refers to nothing. A `Ref` can also be used as a context
manager, releasing itself on exit. `ARef` and `AWeak` offer the same
interface with their counters guarded by a lock, so they can be shared
between threads.

### String references

```python
from violetkit.stringref import StringRef

s = StringRef("  \t\nhello world \r\n")
assert s.trim_start().starts_with("hello")
assert s.trim() == "hello world"
assert [str(part) for part in StringRef("a,b,c").split(",")] == ["a", "b", "c"]
assert StringRef("prefix-rest").strip_prefix("prefix-").value() == "rest"
```

Trimming only strips ASCII whitespace. Indexing out of range raises
`IndexError`.

### Taking values

```python
from violetkit.memory import take

counts = {"hits": 32}
assert take(counts, "hits") == 32
assert counts["hits"] == 0
```

Mappings are accessed by key, other objects by attribute.

### Environment variables

```python
from violetkit.environment import get_environment_variable, set_environment_variable

set_environment_variable("VIOLETKIT_DEMO", "on")
assert get_environment_variable("VIOLETKIT_DEMO").value() == "on"

set_environment_variable("VIOLETKIT_DEMO", "off")           # kept: replace is False
set_environment_variable("VIOLETKIT_DEMO", "off", True)     # overwritten
```

## What the package does not do

This is a library only: it has no command-line interface. It does not
provide a result/error container type, bit-flag sets, identifier
generation or a source of random bytes.