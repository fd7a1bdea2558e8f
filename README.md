# formcodec

`formcodec` turns Python values into `application/x-www-form-urlencoded`
data: strings, integers, floats, booleans, lists, string-keyed mappings and
dataclasses.

## Installation

```
pip install formcodec
```

## Encoding

`formcodec.encode.marshal(value)` returns the encoded form as `bytes`.

```python
from dataclasses import dataclass

from formcodec.encode import marshal
from formcodec.tags import form_field


@dataclass
class BasicForm:
    name: str = form_field("name", default="")
    aliases: list[str] = form_field("aliases", default_factory=list)
    age: int = form_field("age", default=0)


marshal(BasicForm(name="john", aliases=["johnny", "jonny"], age=20))
# b"age=20&aliases=johnny&aliases=jonny&name=john"

marshal("hello & world?")   # b"hello+%26+world%3F"
marshal([1, 2, 3])          # b"1&2&3"
marshal({"a": 1, "b": 2})   # b"a=1&b=2"
marshal(None)               # b""
```

How values are written:

- booleans become `true` / `false`; integers and floats are written in plain
  decimal notation (`3.14`, `-42`);
- dataclass instances and mappings become `key=value` pairs, sorted by key; a
  list value repeats its key once per element;
- a top-level list becomes its escaped elements joined by `&`;
- a nested dataclass or mapping is encoded and stored as a single value;
- mapping entries whose value is empty (see `is_empty_value`) are left out,
  as are fields and entries whose value is `None`.

`formcodec.encode.is_empty_value(value)` tells whether a value counts as
empty: `None`, `False`, zero, and empty strings, bytes, lists, tuples and
mappings.

## Errors

All errors derive from `formcodec.errors.FormError`, itself a `ValueError`.

- A value with no form representation raises
  `formcodec.errors.UnsupportedTypeError` (also a `TypeError`).
- A mapping with a key that is not a string raises `FormError`.

## Field tags

Each dataclass field may carry a tag, given with
`formcodec.tags.form_field(tag, **kwargs)`; other keyword arguments go to
`dataclasses.field`. A tag has the form `"name,flag,flag"`:

- the name is the form key; if empty, the field's own name is used;
- `"-"` skips the field entirely;
- `omitempty` leaves the field out when its value is empty;
- `ignore` skips the field.

Fields whose names begin with an underscore are never written.

`formcodec.tags.parse_tag(text)` reads a tag into a `FieldTag` (with `name`,
`omit` and `ignore`), and `formcodec.tags.field_tags(cls)` returns the tag of
every public field of a dataclass or dataclass instance.

## Custom types

A class controls its own representation by implementing
`formcodec.encode.Marshaler`: a `marshal_form()` method returning `bytes` or
`str`. Such values may be used at the top level, as dataclass fields, as
mapping values and as list elements. At the top level, the returned text is
read as form data and written out again with its keys sorted; malformed
escapes in it raise `FormError`.

## What it does not do

The package only encodes. It does not parse form data back into Python
values, has no reader or writer for streams, and provides no command-line
program.